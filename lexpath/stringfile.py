"""Saving and loading whole files as byte strings."""

from __future__ import annotations

import os


def save_string_file(path, data: bytes) -> None:
    """Write ``data`` to ``path`` in binary mode, replacing any existing content."""
    with open(os.fspath(path), "wb") as stream:
        stream.write(data)


def load_string_file(path) -> bytes:
    """Return the whole content of the file at ``path`` as bytes."""
    with open(os.fspath(path), "rb") as stream:
        return stream.read()