"""
Pytest configuration and shared fixtures for vsort tests.

This module provides reusable fixtures and test utilities used across
the test suite.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest
import yaml

from vsort.logging import SilentLogger, set_global_logger

from .corpus import FILEVERCMP_SORTED


@pytest.fixture(autouse=True)
def reset_global_logger():
    """Restore the silent global logger after every test."""
    yield
    set_global_logger(SilentLogger())


@pytest.fixture
def tmp_test_dir(tmp_path: Path) -> Path:
    """
    Provide a temporary directory for test artifacts.

    Automatically cleaned up after test completion.
    """
    return tmp_path


@pytest.fixture
def sample_config_data() -> dict[str, Any]:
    """Provide a complete config document."""
    return {
        "apiVersion": "vsort/v1",
        "sort": {
            "reverse": True,
            "unique": False,
            "skip_blank": True,
        },
    }


@pytest.fixture
def create_yaml_file(tmp_test_dir: Path):
    """
    Factory fixture for creating temporary YAML files.

    Usage:
        yaml_path = create_yaml_file("test.yaml", {"key": "value"})
    """

    def _create(filename: str, data: dict[str, Any]) -> Path:
        path = tmp_test_dir / filename
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8") as f:
            yaml.dump(data, f)
        return path

    return _create


@pytest.fixture
def create_text_file(tmp_test_dir: Path):
    """Factory fixture writing lines to a UTF-8 text file."""

    def _create(filename: str, lines: list[str]) -> Path:
        path = tmp_test_dir / filename
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return path

    return _create


@pytest.fixture
def filevercmp_sorted() -> list[str]:
    """Provide gnulib's filevercmp corpus in its expected order."""
    return list(FILEVERCMP_SORTED)
