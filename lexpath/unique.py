"""Generation of unique path names from a model with ``%`` placeholders."""

from __future__ import annotations

import os
from collections.abc import Iterator

from .path import Path

_HEX = "0123456789abcdef"
_PLACEHOLDER = "%"
_RANDOM_BYTES = 16
DEFAULT_MODEL = "%%%%-%%%%-%%%%-%%%%"


def _random_nibbles() -> Iterator[int]:
    """Yield random 4-bit values, low nibble of each byte first.

    Random bytes are drawn from the system's cryptographic source in
    blocks, and only when a nibble is actually needed.
    """
    while True:
        for byte in os.urandom(_RANDOM_BYTES):
            yield byte & 0xF
            yield byte >> 4


def unique_path(model=DEFAULT_MODEL) -> Path:
    """Return ``model`` with every ``%`` replaced by a random hex digit.

    Raises OSError if the system random source cannot be read.
    """
    text = Path(model).native()
    nibbles = _random_nibbles()
    return Path(
        "".join(_HEX[next(nibbles)] if ch == _PLACEHOLDER else ch for ch in text)
    )