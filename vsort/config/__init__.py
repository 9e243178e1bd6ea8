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

"""Configuration loading for vsort.

Sort options come from built-in defaults, the nearest ``.vsort.yaml``, an
explicit ``--config`` file and CLI flags, merged in that order.

Public API:

- load_sort_config: Load and merge the effective sort options
- SortConfig: Frozen dataclass holding the result

Example:
    Basic usage:

        from vsort.config import load_sort_config

        config = load_sort_config()
        print(config.reverse)

"""

from .loader import SortConfig, load_sort_config

__all__ = ["SortConfig", "load_sort_config"]
