"""Checks of file and directory names for portability across systems."""

from __future__ import annotations

import os
import string

_WINDOWS_INVALID = frozenset(chr(code) for code in range(0x20)) | frozenset('<>:"/\\|')
_VALID_POSIX = frozenset(string.ascii_uppercase + string.ascii_lowercase + string.digits + "._-")


def native(name: str) -> bool:
    """True if the name is valid for the platform this runs on."""
    if os.name == "nt":
        return windows_name(name)
    return bool(name) and name[0] != " " and "/" not in name


def portable_posix_name(name: str) -> bool:
    """True if the name uses only the POSIX portable filename character set."""
    return bool(name) and all(ch in _VALID_POSIX for ch in name)


def windows_name(name: str) -> bool:
    """True if the name is valid on Windows."""
    return (
        bool(name)
        and name[0] != " "
        and not any(ch in _WINDOWS_INVALID for ch in name)
        and name[-1] != " "
        and (name[-1] != "." or len(name) == 1 or name == "..")
    )


def portable_name(name: str) -> bool:
    """True if the name is valid on both POSIX and Windows."""
    return bool(name) and (
        name in (".", "..")
        or (
            windows_name(name)
            and portable_posix_name(name)
            and name[0] not in ".-"
        )
    )


def portable_directory_name(name: str) -> bool:
    """True if the name is a portable directory name (no dots)."""
    return name in (".", "..") or (portable_name(name) and "." not in name)


def portable_file_name(name: str) -> bool:
    """True if the name is portable with at most one dot and a short extension."""
    if not portable_name(name) or name in (".", ".."):
        return False
    pos = name.find(".")
    return pos == -1 or (name.count(".") == 1 and pos + 5 > len(name))