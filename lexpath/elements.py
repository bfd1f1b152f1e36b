"""Lexical decomposition of path strings into their elements.

Paths use the generic format with ``/`` as the only directory separator.
A path that starts with exactly two separators followed by a name
("//net") carries a network root name. Elements are produced as
``(position, name)`` pairs, where ``position`` is the index in the text at
which the element starts. A root directory is reported as ``"/"`` and a
trailing non-root separator as ``"."``.
"""

from __future__ import annotations

from collections.abc import Iterator

SEPARATOR = "/"
DOT = "."


def is_separator(char: str) -> bool:
    """True if ``char`` is a directory separator."""
    return char == SEPARATOR


def _find_separator(text: str, start: int, stop: int) -> int | None:
    pos = text.find(SEPARATOR, start, stop)
    return None if pos == -1 else pos


def _starts_with_net(text: str, size: int) -> bool:
    """True for "//" followed by something that is not a separator."""
    return (
        size > 2
        and is_separator(text[0])
        and is_separator(text[1])
        and not is_separator(text[2])
    )


def is_root_separator(text: str, pos: int) -> bool:
    """True if the separator at ``pos`` acts as the root directory."""
    if not text or not is_separator(text[pos]):
        raise ValueError("position does not hold a separator")
    # move to the leftmost separator of the run containing pos
    pos = len(text[:pos].rstrip(SEPARATOR))
    if pos == 0:
        return True
    if pos < 3 or not is_separator(text[0]) or not is_separator(text[1]):
        return False
    return text.find(SEPARATOR, 2) == pos


def filename_pos(text: str, end_pos: int) -> int:
    """Start of the last element of ``text[:end_pos]``; 0 if it is all one name."""
    if end_pos == 2 and is_separator(text[0]) and is_separator(text[1]):
        return 0
    if end_pos and is_separator(text[end_pos - 1]):
        return end_pos - 1
    search_end = end_pos if end_pos else len(text)
    pos = text.rfind(SEPARATOR, 0, search_end)
    if pos == -1 or (pos == 1 and is_separator(text[0])):
        return 0
    return pos + 1


def root_directory_start(text: str, size: int) -> int | None:
    """Index of the root directory within ``text[:size]``, or None if absent."""
    if size == 2 and is_separator(text[0]) and is_separator(text[1]):
        return None
    if size > 3 and _starts_with_net(text, size):
        return _find_separator(text, 2, size)
    if size > 0 and is_separator(text[0]):
        return 0
    return None


def first_element(text: str, size: int | None = None) -> tuple[int, int]:
    """Return ``(position, length)`` of the first element, skipping extra separators."""
    if size is None:
        size = len(text)
    if not text:
        return 0, 0

    if (
        size >= 2
        and is_separator(text[0])
        and is_separator(text[1])
        and (size == 2 or not is_separator(text[2]))
    ):
        start, length = 2, 2
    elif is_separator(text[0]):
        head = text[:size]
        run = len(head) - len(head.lstrip(SEPARATOR))
        return run - 1, 1
    else:
        start, length = 0, 0

    end = _find_separator(text, start, size)
    if end is None:
        end = size
    return 0, length + (end - start)


def _skip_separators_back(text: str, end_pos: int, root_dir: int | None) -> int:
    """Move ``end_pos`` left over separators, stopping at the root directory."""
    while end_pos > 0 and end_pos - 1 != root_dir and is_separator(text[end_pos - 1]):
        end_pos -= 1
    return end_pos


def parent_path_end(text: str) -> int | None:
    """Length of the parent path prefix of ``text``, or None if there is none."""
    end_pos = filename_pos(text, len(text))
    filename_was_separator = bool(text) and is_separator(text[end_pos])
    root_dir = root_directory_start(text, end_pos)
    end_pos = _skip_separators_back(text, end_pos, root_dir)
    if end_pos == 1 and root_dir == 0 and filename_was_separator:
        return None
    return end_pos


def elements(text: str) -> Iterator[tuple[int, str]]:
    """Yield ``(position, element)`` pairs of ``text`` from first to last."""
    if not text:
        return
    size = len(text)
    pos, length = first_element(text)
    element = text[pos:pos + length]
    while True:
        yield pos, element
        pos += len(element)
        if pos == size:
            return

        was_net = _starts_with_net(element, len(element))

        if is_separator(text[pos]):
            if was_net:
                element = SEPARATOR
                continue
            pos = size - len(text[pos:].lstrip(SEPARATOR))
            if pos == size:
                if not is_root_separator(text, pos - 1):
                    pos -= 1
                    element = DOT
                    continue
                return

        end = _find_separator(text, pos, size)
        if end is None:
            end = size
        element = text[pos:end]


def reversed_elements(text: str) -> Iterator[tuple[int, str]]:
    """Yield ``(position, element)`` pairs of ``text`` from last to first."""
    if not text:
        return
    size = len(text)
    begin_pos, begin_length = first_element(text)
    pos = size
    while pos > begin_pos:
        if (
            pos == size
            and size > 1
            and is_separator(text[pos - 1])
            and not is_root_separator(text, pos - 1)
        ):
            pos -= 1
            yield pos, DOT
            continue

        root_dir = root_directory_start(text, pos)
        end_pos = _skip_separators_back(text, pos, root_dir)
        pos = filename_pos(text, end_pos)
        if pos <= begin_pos:
            yield begin_pos, text[begin_pos:begin_pos + begin_length]
            return
        yield pos, text[pos:end_pos]