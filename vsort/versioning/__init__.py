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

"""
Version sort comparison for vsort.

This package implements the ordering used by GNU ``sort -V`` and
``filevercmp``: embedded numbers compare by magnitude, extensions are
compared last, hidden names and ``.``/``..`` come first, and ``~`` marks
pre-release suffixes that sort before their release.

Modules
-------
chars : module
    Character ranking for non-digit runs (tilde, end-of-run, letters, rest).
chunks : module
    Lazy digit/non-digit chunking and chunk-by-chunk comparison.
extension : module
    Right-to-left file extension splitting.
keys : module
    The comparator, sort key and sorting helpers.

Public API
----------
Ordering : IntEnum
    Three-way comparison result (LESS, EQUAL, GREATER).
compare : function
    Compare two strings, returning an Ordering.
sort : function
    Sort a mutable sequence of strings in place.
sorted_versions : function
    Return a version-sorted copy of an iterable.
version_key : callable
    Key function for ``sorted()`` and ``list.sort()``.
is_newer : function
    Check if a candidate sorts after the current value.
split_extension : function
    Split a name into (base, extension).

Examples
--------
    >>> from vsort.versioning import compare, sorted_versions
    >>> sorted_versions(["b 10.txt", "b 5.txt", "b 1.txt"])
    ['b 1.txt', 'b 5.txt', 'b 10.txt']
    >>> int(compare("1.0~rc1", "1.0"))
    -1

Notes
-----
- Comparison is locale-independent and works on code points
- Digit runs of any length compare correctly; nothing is parsed to int
"""

from .chunks import Chunk, compare_chunked, compare_digit_runs, iter_chunks
from .extension import split_extension
from .keys import (
    Ordering,
    classify_special,
    compare,
    is_newer,
    sort,
    sorted_versions,
    version_key,
)

__all__ = [
    "Chunk",
    "Ordering",
    "classify_special",
    "compare",
    "compare_chunked",
    "compare_digit_runs",
    "is_newer",
    "iter_chunks",
    "sort",
    "sorted_versions",
    "split_extension",
    "version_key",
]
