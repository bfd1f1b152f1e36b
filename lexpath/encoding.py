"""Conversion between byte (narrow) and text (wide) path representations."""

from __future__ import annotations

import codecs
import enum
import os
import sys
import threading
from collections.abc import Iterable


class CodecvtResult(enum.IntEnum):
    """Outcome codes of a conversion."""

    OK = 0
    PARTIAL = 1
    ERROR = 2
    NOCONV = 3


_DESCRIPTIONS = {
    CodecvtResult.OK: "conversion successful",
    CodecvtResult.PARTIAL: "incomplete multibyte sequence or target too small",
    CodecvtResult.ERROR: "character could not be converted",
    CodecvtResult.NOCONV: "no conversion performed",
}


class CodecvtError(ValueError):
    """Raised when a conversion does not complete successfully."""

    def __init__(self, result: CodecvtResult | int, what: str = "path conversion") -> None:
        self.result = CodecvtResult(result)
        self.what = what
        super().__init__(f"{what}: {_DESCRIPTIONS[self.result]}")


class Codecvt:
    """Converter between bytes and text using a named codec."""

    def __init__(self, encoding: str | None = None) -> None:
        name = encoding or sys.getfilesystemencoding()
        self.encoding = codecs.lookup(name).name

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.encoding!r})"

    def decode(self, data: bytes) -> str:
        """Convert bytes to text, raising CodecvtError on failure."""
        decoder = codecs.getincrementaldecoder(self.encoding)("strict")
        try:
            text = decoder.decode(bytes(data), final=False)
        except UnicodeDecodeError as exc:
            raise CodecvtError(CodecvtResult.ERROR, "path codecvt to wstring") from exc
        pending, _ = decoder.getstate()
        if pending:
            raise CodecvtError(CodecvtResult.PARTIAL, "path codecvt to wstring")
        return text

    def encode(self, text: str) -> bytes:
        """Convert text to bytes, raising CodecvtError on failure."""
        try:
            return text.encode(self.encoding, "strict")
        except UnicodeEncodeError as exc:
            raise CodecvtError(CodecvtResult.ERROR, "path codecvt to string") from exc


class Utf8Codecvt(Codecvt):
    """Strict UTF-8 converter."""

    def __init__(self) -> None:
        super().__init__("utf-8")

    def decode(self, data: bytes) -> str:
        raw = bytes(data)
        try:
            return raw.decode("utf-8")
        except UnicodeDecodeError as exc:
            truncated = exc.end == len(raw) and exc.reason == "unexpected end of data"
            result = CodecvtResult.PARTIAL if truncated else CodecvtResult.ERROR
            raise CodecvtError(result, "path codecvt to wstring") from exc

    def encode(self, text: str) -> bytes:
        try:
            return text.encode("utf-8")
        except UnicodeEncodeError as exc:
            raise CodecvtError(CodecvtResult.ERROR, "path codecvt to string") from exc


_UTF8_PLATFORMS = ("darwin", "freebsd", "openbsd", "haiku")

_lock = threading.Lock()
_current: Codecvt | None = None


def _default_codecvt() -> Codecvt:
    if sys.platform.startswith(_UTF8_PLATFORMS):
        return Utf8Codecvt()
    return Codecvt()


def _ensure_current() -> Codecvt:
    global _current
    if _current is None:
        _current = _default_codecvt()
    return _current


def codecvt() -> Codecvt:
    """Return the converter used when none is given explicitly."""
    with _lock:
        return _ensure_current()


def imbue(cvt: Codecvt) -> Codecvt:
    """Install a new default converter and return the previous one."""
    global _current
    if not isinstance(cvt, Codecvt):
        raise TypeError(f"expected a Codecvt, got {type(cvt).__name__}")
    with _lock:
        previous = _ensure_current()
        _current = cvt
        return previous


def to_wide(data: bytes, cvt: Codecvt | None = None) -> str:
    """Decode bytes to text; empty input yields an empty string."""
    if not data:
        return ""
    return (cvt or codecvt()).decode(data)


def to_narrow(text: str, cvt: Codecvt | None = None) -> bytes:
    """Encode text to bytes; empty input yields empty bytes."""
    if not text:
        return b""
    return (cvt or codecvt()).encode(text)


def to_text(source, cvt: Codecvt | None = None) -> str:
    """Turn any accepted path source into its text form.

    Accepts str, bytes-like objects, path-like objects and iterables of
    characters (str) or byte values (int).
    """
    if isinstance(source, str):
        return source
    if isinstance(source, (bytes, bytearray, memoryview)):
        return to_wide(bytes(source), cvt)
    if isinstance(source, os.PathLike):
        return to_text(os.fspath(source), cvt)
    if isinstance(source, Iterable):
        items = list(source)
        if not items:
            return ""
        if all(isinstance(item, str) for item in items):
            return "".join(items)
        if all(isinstance(item, int) and not isinstance(item, bool) for item in items):
            return to_wide(bytes(items), cvt)
        raise TypeError("iterable path source must hold only characters or only byte values")
    raise TypeError(f"cannot make a path from {type(source).__name__}")