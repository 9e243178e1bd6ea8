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
Configuration loading and merging for vsort.

Sort options are resolved from layers, later layers winning:

Configuration Layers
--------------------
1. **Built-in defaults**
   - reverse, unique and skip_blank all off

2. **Project file** (.vsort.yaml)
   - The nearest .vsort.yaml found walking upward from the start directory
   - Optional

3. **Explicit file** (--config PATH)
   - Must exist when given

4. **Overrides** (CLI flags)
   - Only options the user actually passed

Merge Behavior
--------------
Dicts are merged recursively; lists and scalars are replaced (last wins).

Document Shape
--------------
    apiVersion: vsort/v1
    sort:
      reverse: false
      unique: false
      skip_blank: false

Error Handling
--------------
- ConfigError: YAML parse errors, empty files, non-mapping documents,
  unsupported apiVersion, non-boolean option values, or a missing
  explicit config file
- All errors are chained with "from err" for better debugging
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from vsort.exceptions import ConfigError
from vsort.logging import get_global_logger

API_VERSION = "vsort/v1"
PROJECT_CONFIG_NAME = ".vsort.yaml"

DEFAULT_SORT_OPTIONS: dict[str, bool] = {
    "reverse": False,
    "unique": False,
    "skip_blank": False,
}

# -------------------------------
# Data types
# -------------------------------


@dataclass(frozen=True)
class SortConfig:
    """Effective sort options after all layers are merged.

    Attributes:
        reverse: Sort in descending order.
        unique: Drop lines that compare equal to the previous output line.
        skip_blank: Drop lines that are empty after stripping whitespace.
        sources: Config files that contributed, in merge order.
    """

    reverse: bool = False
    unique: bool = False
    skip_blank: bool = False
    sources: tuple[Path, ...] = field(default_factory=tuple)


# -------------------------------
# YAML helpers
# -------------------------------


def _load_yaml_file(p: Path) -> dict[str, Any]:
    """Loads a YAML config file and returns its top-level mapping.

    Args:
        p: Path to the YAML file to load.

    Returns:
        The parsed mapping.

    Raises:
        ConfigError: When the file does not exist, cannot be parsed, is empty,
            or is not a mapping.
    """
    if not p.exists():
        raise ConfigError(f"file not found: {p}")
    try:
        with p.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as err:
        raise ConfigError(f"Error parsing YAML: {p}: {err}") from err
    except OSError as err:
        raise ConfigError(f"Cannot read config file: {p}: {err}") from err
    if data is None:
        raise ConfigError(f"YAML file is empty: {p}")
    if not isinstance(data, dict):
        raise ConfigError(f"top-level YAML must be a mapping (dict): {p}")

    api_version = data.get("apiVersion", API_VERSION)
    if api_version != API_VERSION:
        raise ConfigError(
            f"unsupported apiVersion {api_version!r} in {p} (expected {API_VERSION!r})"
        )
    return data


# -------------------------------
# Merge logic
# -------------------------------


def _deep_merge_dicts(base: dict[str, Any], overlay: dict[str, Any]) -> dict[str, Any]:
    """
    Deep-merge two dicts with "overlay wins".

    Rules:
      - dict + dict -> deep merge
      - everything else -> overlay overwrites base

    This function does not mutate inputs; returns a new dict.
    """
    result: dict[str, Any] = dict(base)
    for k, v in overlay.items():
        if k in result and isinstance(result[k], dict) and isinstance(v, dict):
            result[k] = _deep_merge_dicts(result[k], v)
        else:
            result[k] = v
    return result


# -------------------------------
# Project file discovery
# -------------------------------


def _find_project_config(start_dir: Path) -> Path | None:
    """
    Walk upward from 'start_dir' looking for a '.vsort.yaml'.
    Returns the file path or None if not found.
    """
    for parent in [start_dir] + list(start_dir.parents):
        candidate = parent / PROJECT_CONFIG_NAME
        if candidate.is_file():
            return candidate
    return None


def _build_sort_config(merged: dict[str, Any], sources: list[Path]) -> SortConfig:
    """Validate the merged ``sort`` section and freeze it into a SortConfig."""
    logger = get_global_logger()
    section = merged.get("sort", {})
    if not isinstance(section, dict):
        raise ConfigError("'sort' must be a mapping (dict)")

    options: dict[str, bool] = {}
    for key, value in section.items():
        if key not in DEFAULT_SORT_OPTIONS:
            logger.warning("CONFIG", f"Ignoring unknown sort option: {key!r}")
            continue
        if not isinstance(value, bool):
            raise ConfigError(
                f"sort.{key} must be true or false, got {type(value).__name__}"
            )
        options[key] = value

    return SortConfig(**options, sources=tuple(sources))


# -------------------------------
# Public API
# -------------------------------


def load_sort_config(
    path: Path | None = None,
    *,
    start_dir: Path | None = None,
    overrides: dict[str, bool] | None = None,
) -> SortConfig:
    """Loads and merges the effective sort options.

    Args:
        path: Optional explicit config file. Must exist when given.
        start_dir: Directory to start the upward .vsort.yaml search from.
            Defaults to the current working directory.
        overrides: Option values that win over every file (CLI flags).

    Returns:
        The effective SortConfig.

    Raises:
        ConfigError: On YAML parse errors, empty files, invalid structure,
            invalid option values, or if an explicit config file is missing.

    Example:
        ```python
        from pathlib import Path
        from vsort.config import load_sort_config

        cfg = load_sort_config(Path("ci/vsort.yaml"), overrides={"reverse": True})
        print(cfg.reverse)  # True
        ```
    """
    logger = get_global_logger()
    start_dir = (start_dir or Path.cwd()).resolve()

    merged: dict[str, Any] = {
        "apiVersion": API_VERSION,
        "sort": dict(DEFAULT_SORT_OPTIONS),
    }
    sources: list[Path] = []

    project_path = _find_project_config(start_dir)
    if project_path is not None:
        logger.verbose("CONFIG", f"Loading project config: {project_path}")
        merged = _deep_merge_dicts(merged, _load_yaml_file(project_path))
        sources.append(project_path)

    if path is not None:
        explicit = path.resolve()
        if project_path is None or explicit != project_path:
            logger.verbose("CONFIG", f"Loading config: {explicit}")
            merged = _deep_merge_dicts(merged, _load_yaml_file(explicit))
            sources.append(explicit)

    if overrides:
        logger.debug("CONFIG", f"Applying overrides: {sorted(overrides)}")
        merged = _deep_merge_dicts(merged, {"sort": dict(overrides)})

    config = _build_sort_config(merged, sources)
    logger.debug(
        "CONFIG",
        (
            f"Effective options: reverse={config.reverse}, "
            f"unique={config.unique}, skip_blank={config.skip_blank}"
        ),
    )
    return config
