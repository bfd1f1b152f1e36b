"""A lexical path value with decomposition, comparison and normalization.

Paths use the generic format with ``/`` as the only separator. A ``Path``
is immutable: every modifier returns a new ``Path``.
"""

from __future__ import annotations

import functools
import os
from collections.abc import Iterable, Iterator

from .elements import (
    DOT,
    SEPARATOR,
    elements,
    filename_pos,
    is_root_separator,
    is_separator,
    parent_path_end,
    reversed_elements,
    root_directory_start,
)
from .encoding import Codecvt, to_narrow, to_text

_DOT_DOT = DOT + DOT


def lex_compare(first: Iterable, second: Iterable) -> int:
    """Compare two sequences of path elements; return -1, 0 or 1."""
    left = iter(first)
    right = iter(second)
    while True:
        a = next(left, None)
        b = next(right, None)
        if a is None and b is None:
            return 0
        if a is None:
            return -1
        if b is None:
            return 1
        sa, sb = str(a), str(b)
        if sa < sb:
            return -1
        if sb < sa:
            return 1


_COMPARABLE = (str, bytes, bytearray, memoryview, os.PathLike)


@functools.total_ordering
class Path:
    """An immutable lexical path."""

    __slots__ = ("_text",)

    preferred_separator = SEPARATOR

    def __init__(self, source="", cvt: Codecvt | None = None) -> None:
        if isinstance(source, Path):
            self._text = source._text
        else:
            self._text = to_text(source, cvt)

    # ----------------------------------------------------------- observers

    def native(self) -> str:
        """The path text in native format."""
        return self._text

    def string(self, cvt: Codecvt | None = None) -> str:
        """The path text; with ``cvt``, it must be representable by that converter."""
        if cvt is not None:
            to_narrow(self._text, cvt)
        return self._text

    def wstring(self) -> str:
        """The path text."""
        return self._text

    def generic_string(self, cvt: Codecvt | None = None) -> str:
        """The path text in generic format."""
        return self.generic_path().string(cvt)

    def generic_path(self) -> Path:
        """The path in generic format; the native format is already generic."""
        return Path(self._text)

    def make_preferred(self) -> Path:
        """The path with preferred separators, which here are ``/`` already."""
        return Path(self._text)

    def empty(self) -> bool:
        """True if the path text is empty."""
        return not self._text

    def __str__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        return f"Path({self._text!r})"

    def __fspath__(self) -> str:
        return self._text

    def __len__(self) -> int:
        return len(self._text)

    # ------------------------------------------------------ appends, concats

    def append(self, other) -> Path:
        """Join ``other`` onto this path, adding a separator when needed."""
        rhs = other._text if isinstance(other, Path) else to_text(other)
        if not rhs:
            return Path(self._text)
        text = self._text
        if not is_separator(rhs[0]) and text and not is_separator(text[-1]):
            text += SEPARATOR
        return Path(text + rhs)

    def concat(self, other) -> Path:
        """Join ``other`` onto this path with no separator."""
        rhs = other._text if isinstance(other, Path) else to_text(other)
        return Path(self._text + rhs)

    def __truediv__(self, other) -> Path:
        return self.append(other)

    def __rtruediv__(self, other) -> Path:
        return Path(other).append(self)

    def __add__(self, other) -> Path:
        return self.concat(other)

    # ----------------------------------------------------------- comparison

    def _coerce(self, other) -> Path | None:
        if isinstance(other, Path):
            return other
        if isinstance(other, _COMPARABLE):
            return Path(other)
        return None

    def compare(self, other) -> int:
        """Compare element by element; return -1, 0 or 1."""
        rhs = other if isinstance(other, Path) else Path(other)
        return lex_compare(self, rhs)

    def __eq__(self, other) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self.compare(rhs) == 0

    def __lt__(self, other) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self.compare(rhs) < 0

    def __hash__(self) -> int:
        return hash(tuple(element for _, element in elements(self._text)))

    # ------------------------------------------------------------ iteration

    def __iter__(self) -> Iterator[Path]:
        for _, element in elements(self._text):
            yield Path(element)

    def __reversed__(self) -> Iterator[Path]:
        for _, element in reversed_elements(self._text):
            yield Path(element)

    # ------------------------------------------------------------ modifiers

    def remove_filename(self) -> Path:
        """The path without its last element."""
        return Path(self._text[:parent_path_end(self._text)])

    def remove_trailing_separator(self) -> Path:
        """The path without one trailing separator, if it has one."""
        text = self._text
        if text and is_separator(text[-1]):
            text = text[:-1]
        return Path(text)

    def replace_extension(self, new_extension="") -> Path:
        """The path with its extension replaced by ``new_extension``."""
        text = self._text
        old = len(self.extension()._text)
        if old:
            text = text[:-old]
        ext = to_text(new_extension) if not isinstance(new_extension, Path) else new_extension._text
        if ext:
            if ext[0] != DOT:
                text += DOT
            text += ext
        return Path(text)

    # -------------------------------------------------------- decomposition

    def root_name(self) -> Path:
        """The network root name ("//net"), if any."""
        first = next(elements(self._text), None)
        if first is not None:
            element = first[1]
            if len(element) > 1 and is_separator(element[0]) and is_separator(element[1]):
                return Path(element)
        return Path()

    def root_directory(self) -> Path:
        """The root directory separator, if any."""
        pos = root_directory_start(self._text, len(self._text))
        return Path() if pos is None else Path(self._text[pos])

    def root_path(self) -> Path:
        """Root name followed by root directory."""
        return Path(self.root_name()._text + self.root_directory()._text)

    def relative_path(self) -> Path:
        """The part of the path after the root path."""
        for pos, element in elements(self._text):
            if not is_separator(element[0]):
                return Path(self._text[pos:])
        return Path()

    def parent_path(self) -> Path:
        """The path without its last element."""
        end = parent_path_end(self._text)
        return Path() if end is None else Path(self._text[:end])

    def filename(self) -> Path:
        """The last element; "." for a trailing non-root separator."""
        text = self._text
        pos = filename_pos(text, len(text))
        if text and pos and is_separator(text[pos]) and not is_root_separator(text, pos):
            return Path(DOT)
        return Path(text[pos:])

    def stem(self) -> Path:
        """The filename without its extension."""
        name = self.filename()._text
        if name in (DOT, _DOT_DOT):
            return Path(name)
        pos = name.rfind(DOT)
        return Path(name if pos == -1 else name[:pos])

    def extension(self) -> Path:
        """The filename from its last dot on, or empty."""
        name = self.filename()._text
        if name in (DOT, _DOT_DOT):
            return Path()
        pos = name.rfind(DOT)
        return Path() if pos == -1 else Path(name[pos:])

    # -------------------------------------------------------------- queries

    def has_root_path(self) -> bool:
        return not self.root_path().empty()

    def has_root_name(self) -> bool:
        return not self.root_name().empty()

    def has_root_directory(self) -> bool:
        return not self.root_directory().empty()

    def has_relative_path(self) -> bool:
        return not self.relative_path().empty()

    def has_parent_path(self) -> bool:
        return not self.parent_path().empty()

    def has_filename(self) -> bool:
        return not self.filename().empty()

    def has_stem(self) -> bool:
        return not self.stem().empty()

    def has_extension(self) -> bool:
        return not self.extension().empty()

    def is_absolute(self) -> bool:
        return self.has_root_directory()

    def is_relative(self) -> bool:
        return not self.is_absolute()

    def filename_is_dot(self) -> bool:
        return self.filename()._text == DOT

    def filename_is_dot_dot(self) -> bool:
        return self.filename()._text == _DOT_DOT

    # ------------------------------------------------------ lexical helpers

    def lexically_normal(self) -> Path:
        """The path with "." and "name/.." elements removed where possible."""
        if not self._text:
            return Path()
        parts = [element for _, element in elements(self._text)]
        last = len(parts) - 1
        temp = Path()
        for index, element in enumerate(parts):
            if element == DOT and index not in (0, last):
                continue
            if not temp.empty() and element == _DOT_DOT:
                lf = temp.filename()._text
                if (
                    lf
                    and (len(lf) != 1 or (lf[0] != DOT and lf[0] != SEPARATOR))
                    and (len(lf) != 2 or (lf[0] != DOT and lf[1] != DOT))
                ):
                    temp = temp.remove_filename()
                    if temp.empty() and index + 1 == last and parts[last] == DOT:
                        temp = temp.append(DOT)
                    continue
            temp = temp.append(element)
        if temp.empty():
            temp = Path(DOT)
        return temp

    def lexically_relative(self, base) -> Path:
        """This path expressed relative to ``base``; empty if they share no start."""
        base = base if isinstance(base, Path) else Path(base)
        mine = [element for _, element in elements(self._text)]
        theirs = [element for _, element in elements(base._text)]
        common = 0
        for a, b in zip(mine, theirs):
            if a != b:
                break
            common += 1
        if common == 0:
            return Path()
        if common == len(mine) and common == len(theirs):
            return Path(DOT)
        result = Path()
        for _ in theirs[common:]:
            result = result.append(_DOT_DOT)
        for element in mine[common:]:
            result = result.append(element)
        return result