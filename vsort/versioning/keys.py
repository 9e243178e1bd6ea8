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

"""Core version sort comparator.

This module is format-agnostic: it does NOT read files or log. It only
orders strings the way GNU ``sort -V`` does, and is safe to call from any
number of threads.

Comparison pipeline:

1. ``""``, ``"."`` and ``".."`` sort first, in that order.
2. Hidden names (leading dot) sort before everything else. When both
   strings are hidden, one leading dot is stripped from each.
3. Names are compared chunk by chunk with their extensions removed.
4. Full names are compared chunk by chunk.
5. Remaining ties are broken by raw code point order.
"""

from __future__ import annotations

from collections.abc import Iterable, MutableSequence
from enum import IntEnum
from functools import cmp_to_key

from .chunks import compare_chunked
from .extension import split_extension


class Ordering(IntEnum):
    """Three-way comparison result.

    Members are plain ints (-1, 0, 1), so they can be returned from a
    ``cmp``-style function used with :func:`functools.cmp_to_key`.
    """

    LESS = -1
    EQUAL = 0
    GREATER = 1

    @classmethod
    def of(cls, value: int) -> Ordering:
        """Map any integer to LESS, EQUAL or GREATER by its sign."""
        return cls((value > 0) - (value < 0))


# ----------------------------
# Prefix classification
# ----------------------------

# "", "." and ".." sort before every other string, in this order
_SPECIAL_RANK: dict[str, int] = {"": 0, ".": 1, "..": 2}


def classify_special(a: str, b: str) -> Ordering | None:
    """Order ``a`` and ``b`` if either one is ``""``, ``"."`` or ``".."``.

    Returns:
        The ordering when at least one input is special, otherwise None so
        the caller continues with the generic rules.
    """
    rank_a = _SPECIAL_RANK.get(a)
    rank_b = _SPECIAL_RANK.get(b)
    if rank_a is None and rank_b is None:
        return None
    if rank_a is None:
        return Ordering.GREATER
    if rank_b is None:
        return Ordering.LESS
    return Ordering.of(rank_a - rank_b)


# ----------------------------
# Comparator
# ----------------------------


def compare(a: str, b: str) -> Ordering:
    """Compare two strings using GNU version sort.

    Args:
        a: First string.
        b: Second string.

    Returns:
        Ordering.LESS if a sorts first, Ordering.GREATER if b sorts first,
        Ordering.EQUAL only when both strings are identical.

    Example:
        ```python
        compare("file9", "file10")      # Ordering.LESS
        compare("1.0~rc1", "1.0")       # Ordering.LESS
        compare(".bashrc", "Makefile")  # Ordering.LESS
        ```
    """
    verdict = classify_special(a, b)
    if verdict is not None:
        return verdict

    a_hidden = a.startswith(".")
    b_hidden = b.startswith(".")
    if a_hidden and not b_hidden:
        return Ordering.LESS
    if b_hidden and not a_hidden:
        return Ordering.GREATER
    if a_hidden:
        a = a[1:]
        b = b[1:]

    result = compare_chunked(split_extension(a)[0], split_extension(b)[0])
    if result:
        return Ordering.of(result)

    result = compare_chunked(a, b)
    if result:
        return Ordering.of(result)

    # Chunk-level tie ("a0001" vs "a1"): fall back to code point order
    return Ordering.of((a > b) - (a < b))


version_key = cmp_to_key(compare)
"""Sort key for ``sorted()``/``list.sort()`` built from :func:`compare`."""


# ----------------------------
# Sorting helpers
# ----------------------------


def sort(items: MutableSequence[str], *, reverse: bool = False) -> None:
    """Sort ``items`` in place using version sort.

    Args:
        items: Mutable sequence of strings. Lists are sorted with
            ``list.sort``; other sequences are rewritten via slice assignment.
        reverse: If True, sort in descending order.
    """
    if isinstance(items, list):
        items.sort(key=version_key, reverse=reverse)
    else:
        items[:] = sorted(items, key=version_key, reverse=reverse)


def sorted_versions(items: Iterable[str], *, reverse: bool = False) -> list[str]:
    """Return a new list with ``items`` in version-sort order."""
    return sorted(items, key=version_key, reverse=reverse)


def is_newer(candidate: str, current: str | None) -> bool:
    """Decide if ``candidate`` sorts after ``current``.

    Returns True when there is no current value at all.
    """
    if current is None:
        return True
    return compare(candidate, current) is Ordering.GREATER
