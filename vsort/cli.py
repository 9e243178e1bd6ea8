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

"""Command-line interface for vsort.

Commands:

    sort: Version-sort lines from files or stdin
    compare: Compare two strings
    split: Split a name into base and extension

Example:
    Sort a file of release names:
        ```bash
        $ vsort sort releases.txt
        ```

    Sort stdin in descending order, dropping duplicates:
        ```bash
        $ ls | vsort sort -r -u
        ```

    Compare two versions:
        ```bash
        $ vsort compare 1.0~rc1 1.0
        1.0~rc1 < 1.0
        ```

Exit Codes:

- 0: Success
- 1: Error (configuration or input failure)

Note:
    Sorted output goes to stdout; log output goes to stderr.
    Verbose mode shows full tracebacks on errors for debugging.
    Debug mode implies verbose mode.

"""

from __future__ import annotations

import argparse
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
import sys

from vsort.config import load_sort_config
from vsort.core import compare_pair, sort_sources, split_name
from vsort.exceptions import ConfigError, InputError, VsortError
from vsort.logging import get_logger, set_global_logger


def _package_version() -> str:
    try:
        return version("vsort")
    except PackageNotFoundError:
        from vsort import __version__

        return __version__


def _report_error(label: str, err: Exception, args: argparse.Namespace) -> int:
    print(f"{label}: {err}", file=sys.stderr)
    if getattr(args, "verbose", False) or getattr(args, "debug", False):
        import traceback

        traceback.print_exc()
    return 1


def cmd_sort(args: argparse.Namespace) -> int:
    """Handler for 'vsort sort' command.

    Args:
        args: Parsed command-line arguments containing the input files,
            option flags and an optional config path.

    Returns:
        Exit code (0 for success, 1 for failure).
    """
    logger = get_logger(verbose=args.verbose, debug=args.debug)
    set_global_logger(logger)

    # Only flags the user actually passed override config files
    overrides = {
        key: True
        for key in ("reverse", "unique", "skip_blank")
        if getattr(args, key)
    }

    try:
        config = load_sort_config(
            Path(args.config) if args.config else None,
            overrides=overrides,
        )
        result = sort_sources([Path(f) for f in args.files], config=config)
    except ConfigError as err:
        return _report_error("Configuration error", err, args)
    except InputError as err:
        return _report_error("Input error", err, args)
    except VsortError as err:
        return _report_error("Error", err, args)

    for line in result.lines:
        print(line)

    logger.verbose(
        "SORT",
        f"{result.line_count} line(s) from {result.source_count} source(s), "
        f"{len(result.lines)} written",
    )
    return 0


def cmd_compare(args: argparse.Namespace) -> int:
    """Handler for 'vsort compare' command.

    Prints ``A <|=|> B``. Comparison cannot fail, so the exit code is 0.
    """
    result = compare_pair(args.a, args.b)
    print(f"{result.a} {result.symbol} {result.b}")
    return 0


def cmd_split(args: argparse.Namespace) -> int:
    """Handler for 'vsort split' command."""
    result = split_name(args.name)
    print(f"Base:      {result.base}")
    print(f"Extension: {result.extension}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with all subcommands registered."""
    parser = argparse.ArgumentParser(
        prog="vsort",
        description="vsort - GNU-compatible version sort",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"vsort {_package_version()}",
    )

    subparsers = parser.add_subparsers(
        dest="command",
        help="Available commands",
        required=True,
    )

    # 'sort' command
    parser_sort = subparsers.add_parser(
        "sort",
        help="Version-sort lines from files or stdin",
        description="Read lines from the given files (or stdin) and print them in version-sort order.",
    )
    parser_sort.add_argument(
        "files",
        nargs="*",
        help="Input files; '-' or no files reads stdin",
    )
    parser_sort.add_argument(
        "-r",
        "--reverse",
        action="store_true",
        help="Sort in descending order",
    )
    parser_sort.add_argument(
        "-u",
        "--unique",
        action="store_true",
        help="Output only the first of lines that compare equal",
    )
    parser_sort.add_argument(
        "-b",
        "--skip-blank",
        action="store_true",
        help="Drop blank lines",
    )
    parser_sort.add_argument(
        "--config",
        default=None,
        help="Path to a YAML config file (default: nearest .vsort.yaml)",
    )
    parser_sort.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show progress and high-level status updates",
    )
    parser_sort.add_argument(
        "-d",
        "--debug",
        action="store_true",
        help="Show detailed debugging output (implies --verbose)",
    )
    parser_sort.set_defaults(func=cmd_sort)

    # 'compare' command
    parser_compare = subparsers.add_parser(
        "compare",
        help="Compare two strings",
        description="Print whether A sorts before, equal to, or after B.",
    )
    parser_compare.add_argument("a", help="First string")
    parser_compare.add_argument("b", help="Second string")
    parser_compare.set_defaults(func=cmd_compare)

    # 'split' command
    parser_split = subparsers.add_parser(
        "split",
        help="Split a name into base and extension",
        description="Show how a name is split before comparison.",
    )
    parser_split.add_argument("name", help="Name to split")
    parser_split.set_defaults(func=cmd_split)

    return parser


def main(argv: list[str] | None = None) -> None:
    """Main entry point for the vsort CLI.

    This function is registered as the 'vsort' console script in pyproject.toml.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    exit_code = args.func(args)
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
