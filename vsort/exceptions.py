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

"""Exception hierarchy for vsort.

The comparator itself never raises: every pair of strings has a defined
order. These exceptions cover the layers around it:

- ConfigError: Configuration-related errors (YAML parse, wrong types, bad apiVersion)
- InputError: Input-related errors (missing files, undecodable text)

All exceptions inherit from VsortError, allowing users to catch all vsort
errors with a single except clause if needed.

Example:
    Catching specific error types:
        ```python
        from vsort.core import sort_sources
        from vsort.exceptions import ConfigError, InputError

        try:
            result = sort_sources([Path("versions.txt")])
        except ConfigError as e:
            print(f"Configuration error: {e}")
        except InputError as e:
            print(f"Input error: {e}")
        ```
"""

from __future__ import annotations

__all__ = [
    "VsortError",
    "ConfigError",
    "InputError",
]


class VsortError(Exception):
    """Base exception for all vsort errors."""

    pass


class ConfigError(VsortError):
    """Raised for configuration-related errors.

    This exception is raised when there are problems with:

    - YAML parsing (syntax errors, empty documents, non-mapping documents)
    - Unsupported apiVersion values
    - Option values of the wrong type
    - An explicitly requested config file that does not exist
    """

    pass


class InputError(VsortError):
    """Raised when input to be sorted cannot be read.

    Example:
        Catching input errors:
            ```python
            from vsort.exceptions import InputError

            try:
                sort_sources([Path("missing.txt")])
            except InputError as e:
                print(f"Input error: {e}")
            ```
    """

    pass
