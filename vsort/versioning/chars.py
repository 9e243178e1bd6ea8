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

"""Character ordering used when comparing non-digit runs.

GNU version sort does not compare non-digit text by raw code point. It
applies these rules, checked in order:

1. ``~`` (tilde) sorts before everything, even the end of the run.
2. The end of the run sorts before every other character.
3. ASCII letters sort before all other characters. Within the same class
   (letter or non-letter), characters compare by code point.

The end of a run is represented by ``None`` throughout this module.

Example:
    Ordering single characters:
        ```python
        from vsort.versioning.chars import compare_chars

        compare_chars("~", None)  # -1, tilde beats end-of-run
        compare_chars("z", "%")   # -1, letters before punctuation
        ```
"""

from __future__ import annotations

from itertools import zip_longest

ASCII_LETTERS = frozenset("ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz")

# Rank classes (lower sorts first)
_TILDE = 0
_END = 1
_LETTER = 2
_OTHER = 3


def char_order(c: str | None) -> tuple[int, int]:
    """Return a sortable key placing ``c`` in the version-sort character order.

    Args:
        c: A single character, or None for the end of a run.

    Returns:
        A ``(class, code_point)`` tuple. Tuples compare in the same order as
        the characters they were built from.
    """
    if c is None:
        return (_END, 0)
    if c == "~":
        return (_TILDE, 0)
    if c in ASCII_LETTERS:
        return (_LETTER, ord(c))
    return (_OTHER, ord(c))


def compare_chars(a: str | None, b: str | None) -> int:
    """Compare two characters (or end-of-run markers).

    Returns -1 if a sorts first, 0 if equal, 1 if b sorts first.
    """
    ka = char_order(a)
    kb = char_order(b)
    return (ka > kb) - (ka < kb)


def compare_non_digit(a: str, b: str) -> int:
    """Compare two non-digit runs character by character.

    The shorter run is padded with end-of-run markers, so ``"aa~"`` sorts
    before ``"aa"`` while ``"aa&"`` sorts after it.

    Args:
        a: First non-digit run.
        b: Second non-digit run.

    Returns:
        -1, 0 or 1.
    """
    if a == b:
        return 0
    for ca, cb in zip_longest(a, b):
        if ca == cb:
            continue
        return compare_chars(ca, cb)
    return 0
