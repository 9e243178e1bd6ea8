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

"""Core orchestration for vsort.

This module provides the high-level functions behind the CLI commands:
reading line sources, applying the effective sort options, and wrapping
comparator results in dataclasses.

Design Principles:

- Functions return structured data (dataclasses) for easy testing
- Error handling uses exceptions; CLI layer formats for user display
- The comparator in vsort.versioning stays free of I/O and logging

Example:
    Programmatic usage:
        ```python
        from pathlib import Path
        from vsort.core import sort_sources

        result = sort_sources([Path("releases.txt")])
        for line in result.lines:
            print(line)
        ```

"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from pathlib import Path
import sys
from typing import TextIO

from vsort.config.loader import SortConfig, load_sort_config
from vsort.exceptions import InputError
from vsort.logging import Logger, get_global_logger
from vsort.results import CompareResult, SortResult, SplitResult
from vsort.versioning import Ordering, compare, sorted_versions, split_extension

STDIN_MARKER = "-"

_SYMBOLS = {
    Ordering.LESS: "<",
    Ordering.EQUAL: "=",
    Ordering.GREATER: ">",
}


def sort_lines(
    lines: Iterable[str],
    *,
    reverse: bool = False,
    unique: bool = False,
    skip_blank: bool = False,
) -> list[str]:
    """Version-sort a collection of lines.

    Args:
        lines: Lines to sort, without line terminators.
        reverse: If True, sort in descending order.
        unique: If True, keep only the first of each run of lines that
            compare equal.
        skip_blank: If True, drop lines that are empty after stripping
            whitespace.

    Returns:
        A new sorted list.
    """
    if skip_blank:
        lines = [line for line in lines if line.strip()]

    ordered = sorted_versions(lines, reverse=reverse)
    if not unique:
        return ordered

    out: list[str] = []
    for line in ordered:
        if out and compare(out[-1], line) is Ordering.EQUAL:
            continue
        out.append(line)
    return out


def _split_lines(text: str) -> list[str]:
    """Split text on line feeds only; a final terminator adds no empty line."""
    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def _read_source(source: Path, stdin: TextIO) -> list[str]:
    """Read one source as UTF-8 text and return its lines.

    Only ``\\n`` (optionally preceded by ``\\r``) ends a line. Form feeds and
    other control characters stay inside the line they appear in.
    """
    if str(source) == STDIN_MARKER:
        # Decode the raw bytes so the locale encoding does not apply
        buffer = getattr(stdin, "buffer", None)
        try:
            if buffer is not None:
                text = buffer.read().decode("utf-8")
            else:
                text = stdin.read()
        except UnicodeDecodeError as err:
            raise InputError(f"stdin is not valid UTF-8: {err}") from err
        return _split_lines(text)

    if not source.is_file():
        raise InputError(f"input file not found: {source}")
    try:
        data = source.read_bytes()
    except OSError as err:
        raise InputError(f"cannot read {source}: {err}") from err
    try:
        return _split_lines(data.decode("utf-8"))
    except UnicodeDecodeError as err:
        raise InputError(f"{source} is not valid UTF-8: {err}") from err


def sort_sources(
    sources: Sequence[Path],
    *,
    config: SortConfig | None = None,
    logger: Logger | None = None,
    stdin: TextIO | None = None,
) -> SortResult:
    """Read every source, merge their lines and version-sort them.

    Args:
        sources: Files to read, in order. ``Path("-")`` reads stdin. An empty
            sequence also reads stdin.
        config: Effective sort options. Loaded with load_sort_config() when
            not given.
        logger: Logger for progress output. Defaults to the global logger.
        stdin: Stream used for ``-``. Defaults to ``sys.stdin``. When the
            stream has a binary ``buffer``, its bytes are decoded as UTF-8.

    Returns:
        SortResult with the sorted lines and counters.

    Raises:
        InputError: If a source is missing or is not valid UTF-8.
        ConfigError: If config is not given and loading it fails.
    """
    if logger is None:
        logger = get_global_logger()
    if config is None:
        config = load_sort_config()
    if not sources:
        sources = [Path(STDIN_MARKER)]
    stdin = stdin or sys.stdin

    lines: list[str] = []
    for source in sources:
        chunk = _read_source(source, stdin)
        logger.verbose("SORT", f"Read {len(chunk)} line(s) from {source}")
        lines.extend(chunk)

    result_lines = sort_lines(
        lines,
        reverse=config.reverse,
        unique=config.unique,
        skip_blank=config.skip_blank,
    )
    dropped = len(lines) - len(result_lines)
    if dropped:
        logger.verbose("SORT", f"Dropped {dropped} line(s)")
    logger.debug("SORT", f"Sorted {len(result_lines)} line(s)")

    return SortResult(
        lines=result_lines,
        source_count=len(sources),
        line_count=len(lines),
        reverse=config.reverse,
        unique=config.unique,
    )


def compare_pair(a: str, b: str) -> CompareResult:
    """Compare two strings and describe the result."""
    ordering = compare(a, b)
    return CompareResult(a=a, b=b, ordering=ordering, symbol=_SYMBOLS[ordering])


def split_name(name: str) -> SplitResult:
    """Split a name into its base and trailing extension."""
    base, extension = split_extension(name)
    return SplitResult(name=name, base=base, extension=extension)
