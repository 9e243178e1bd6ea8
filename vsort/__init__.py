"""
vsort - GNU-compatible version sort

A Python library and CLI that orders strings the way GNU ``sort -V`` and
gnulib's ``filevercmp`` do, so that ``file9`` sorts before ``file10`` and
``1.0~rc1`` sorts before ``1.0``.

vsort provides:
  - A total, locale-independent three-way comparator
  - A sort key for sorted() and list.sort()
  - File extension splitting as used by the comparator
  - A line-sorting CLI with YAML-configurable defaults

Quick Start
-----------
Sort a file:

    $ vsort sort releases.txt

Compare two strings:

    $ vsort compare 8.10 8.9

For full CLI documentation:

    $ vsort --help

Package Structure
-----------------
cli : module
    Command-line interface with argparse.
core : module
    Line-sorting orchestration functions.
config : package
    YAML configuration loading and merging.
versioning : package
    The version sort comparator and its primitives.

Public API
----------
    from vsort import compare, sort, sorted_versions, version_key
    from vsort import split_extension, Ordering

Project Information
-------------------
Author: Roger Cibrian
License: Apache-2.0
"""

__version__ = "0.1.0"
__author__ = "Roger Cibrian"
__license__ = "Apache-2.0"
__description__ = "vsort - GNU-compatible version sort"

# Re-export commonly used functions for convenience
from vsort.versioning import (
    Ordering,
    compare,
    is_newer,
    sort,
    sorted_versions,
    split_extension,
    version_key,
)

__all__ = [
    "__version__",
    "__author__",
    "__license__",
    "__description__",
    "Ordering",
    "compare",
    "is_newer",
    "sort",
    "sorted_versions",
    "split_extension",
    "version_key",
]
