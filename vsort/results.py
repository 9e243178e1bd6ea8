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

"""Public API return types for vsort.

All dataclasses are frozen (immutable) to prevent accidental mutation of
return values.

Note:
    Only public API return types belong in this module. Domain types
    (like Ordering and Chunk) remain co-located with their related logic.
"""

from __future__ import annotations

from dataclasses import dataclass

from vsort.versioning import Ordering


@dataclass(frozen=True)
class SortResult:
    """Result from sorting one or more line sources.

    Attributes:
        lines: Sorted lines, without line terminators.
        source_count: Number of sources read (stdin counts as one).
        line_count: Number of lines read before filtering.
        reverse: Whether descending order was used.
        unique: Whether duplicate lines were dropped.
    """

    lines: list[str]
    source_count: int
    line_count: int
    reverse: bool
    unique: bool


@dataclass(frozen=True)
class CompareResult:
    """Result from comparing two strings.

    Attributes:
        a: Left-hand string.
        b: Right-hand string.
        ordering: Ordering of a relative to b.
        symbol: "<", "=" or ">".
    """

    a: str
    b: str
    ordering: Ordering
    symbol: str


@dataclass(frozen=True)
class SplitResult:
    """Result from splitting a name into base and extension.

    Attributes:
        name: The input name.
        base: Everything before the extension.
        extension: Trailing extension, or "" if none.
    """

    name: str
    base: str
    extension: str
