# Copyright 2025 Roger Cibrian
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Digit/non-digit chunking and chunk-by-chunk comparison.

A string is scanned left to right into chunks, each made of a (possibly
empty) run of non-digit characters followed by a (possibly empty) run of
ASCII digits:

    "gcc-10.8rc2" -> ("gcc-", "10"), (".", "8"), ("rc", "2")

Digit runs are kept as text. They are compared by magnitude (leading zeros
stripped, then length, then digit by digit), so runs of any length order
correctly and never go through ``int()``.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import NamedTuple

from .chars import compare_non_digit

DIGITS = frozenset("0123456789")


class Chunk(NamedTuple):
    """One non-digit run and the digit run that follows it.

    Attributes:
        prefix: Non-digit text; may be empty.
        digits: Digit text; empty means a numeric value of zero.
    """

    prefix: str
    digits: str


_EXHAUSTED = Chunk("", "")


def non_digit_run(s: str, start: int = 0) -> tuple[str, int]:
    """Return the non-digit run starting at ``start`` and the index after it."""
    end = start
    n = len(s)
    while end < n and s[end] not in DIGITS:
        end += 1
    return s[start:end], end


def digit_run(s: str, start: int = 0) -> tuple[str, int]:
    """Return the digit run starting at ``start`` and the index after it."""
    end = start
    n = len(s)
    while end < n and s[end] in DIGITS:
        end += 1
    return s[start:end], end


def iter_chunks(s: str) -> Iterator[Chunk]:
    """Lazily split ``s`` into chunks.

    Each call to the generator advances past one chunk; the generator ends
    when ``s`` is exhausted. Call again to restart from the beginning.

    Example:
        ```python
        list(iter_chunks("file_1.txt"))
        # [Chunk(prefix='file_', digits='1'), Chunk(prefix='.txt', digits='')]
        ```
    """
    pos = 0
    n = len(s)
    while pos < n:
        prefix, pos = non_digit_run(s, pos)
        digits, pos = digit_run(s, pos)
        yield Chunk(prefix, digits)


def compare_digit_runs(a: str, b: str) -> int:
    """Compare two digit runs by numeric magnitude.

    An empty run counts as zero, and leading zeros never matter:
    ``"008" == "8"`` and ``"" == "000"``.

    Returns:
        -1, 0 or 1.
    """
    a = a.lstrip("0")
    b = b.lstrip("0")
    if len(a) != len(b):
        return -1 if len(a) < len(b) else 1
    return (a > b) - (a < b)


def compare_chunked(a: str, b: str) -> int:
    """Compare two strings chunk by chunk.

    Non-digit prefixes are compared with the version-sort character order,
    then digit runs by magnitude. A side that runs out of chunks first keeps
    producing empty chunks, so a trailing ``~`` on the longer side still
    sorts it first (``"1~" < "1"``).

    Args:
        a: First string.
        b: Second string.

    Returns:
        -1, 0 or 1. Zero means the strings tie at chunk level, which does not
        imply ``a == b`` (``"a0001"`` ties with ``"a1"``).
    """
    if a == b:
        return 0
    left = iter_chunks(a)
    right = iter_chunks(b)
    while True:
        ca = next(left, None)
        cb = next(right, None)
        if ca is None and cb is None:
            return 0
        if ca is None:
            ca = _EXHAUSTED
        if cb is None:
            cb = _EXHAUSTED

        result = compare_non_digit(ca.prefix, cb.prefix)
        if result:
            return result
        result = compare_digit_runs(ca.digits, cb.digits)
        if result:
            return result
