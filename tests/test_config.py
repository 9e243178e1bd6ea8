"""
Tests for vsort.config.loader module.

Tests configuration loading and merging including:
- Built-in defaults
- Project file discovery (.vsort.yaml)
- Explicit config files and CLI overrides
- Error handling
"""

from __future__ import annotations

import pytest

from vsort.config import SortConfig, load_sort_config
from vsort.exceptions import ConfigError, VsortError
from vsort.logging import DefaultLogger, set_global_logger


class TestConfigLoading:
    """Tests for basic configuration loading."""

    def test_defaults_without_files(self, tmp_test_dir):
        """Test that all options default to off."""
        config = load_sort_config(start_dir=tmp_test_dir)

        assert config == SortConfig()
        assert config.sources == ()

    def test_explicit_file(self, tmp_test_dir, create_yaml_file, sample_config_data):
        """Test loading an explicit config file."""
        path = create_yaml_file("custom.yaml", sample_config_data)

        config = load_sort_config(path, start_dir=tmp_test_dir)

        assert config.reverse is True
        assert config.unique is False
        assert config.skip_blank is True
        assert config.sources == (path.resolve(),)

    def test_project_file_found_upward(self, tmp_test_dir):
        """Test that .vsort.yaml is found in a parent directory."""
        (tmp_test_dir / ".vsort.yaml").write_text(
            "apiVersion: vsort/v1\nsort:\n  unique: true\n"
        )
        nested = tmp_test_dir / "a" / "b"
        nested.mkdir(parents=True)

        config = load_sort_config(start_dir=nested)

        assert config.unique is True
        assert config.sources == ((tmp_test_dir / ".vsort.yaml").resolve(),)

    def test_api_version_optional(self, tmp_test_dir):
        """Test that apiVersion may be omitted."""
        path = tmp_test_dir / "cfg.yaml"
        path.write_text("sort:\n  reverse: true\n")

        assert load_sort_config(path, start_dir=tmp_test_dir).reverse is True


class TestConfigMerging:
    """Tests for layer precedence."""

    def test_explicit_file_overrides_project_file(self, tmp_test_dir):
        """Test that --config wins over .vsort.yaml."""
        (tmp_test_dir / ".vsort.yaml").write_text(
            "sort:\n  reverse: true\n  unique: true\n"
        )
        explicit = tmp_test_dir / "explicit.yaml"
        explicit.write_text("sort:\n  reverse: false\n")

        config = load_sort_config(explicit, start_dir=tmp_test_dir)

        assert config.reverse is False
        assert config.unique is True  # kept from the project file
        assert len(config.sources) == 2

    def test_overrides_win(self, tmp_test_dir, create_yaml_file, sample_config_data):
        """Test that overrides beat every file."""
        path = create_yaml_file("custom.yaml", sample_config_data)

        config = load_sort_config(
            path, start_dir=tmp_test_dir, overrides={"unique": True}
        )

        assert config.unique is True
        assert config.reverse is True

    def test_same_file_loaded_once(self, tmp_test_dir):
        """Test that passing the project file explicitly does not duplicate it."""
        project = tmp_test_dir / ".vsort.yaml"
        project.write_text("sort:\n  skip_blank: true\n")

        config = load_sort_config(project, start_dir=tmp_test_dir)

        assert config.sources == (project.resolve(),)


class TestConfigErrors:
    """Tests for configuration error handling."""

    def test_missing_explicit_file(self, tmp_test_dir):
        """Test that a missing --config file raises ConfigError."""
        with pytest.raises(ConfigError, match="file not found"):
            load_sort_config(tmp_test_dir / "nope.yaml", start_dir=tmp_test_dir)

    def test_invalid_yaml(self, tmp_test_dir):
        """Test that a parse error raises ConfigError."""
        path = tmp_test_dir / "bad.yaml"
        path.write_text("sort: [unclosed\n")

        with pytest.raises(ConfigError, match="Error parsing YAML"):
            load_sort_config(path, start_dir=tmp_test_dir)

    def test_empty_file(self, tmp_test_dir):
        """Test that an empty file raises ConfigError."""
        path = tmp_test_dir / "empty.yaml"
        path.write_text("")

        with pytest.raises(ConfigError, match="empty"):
            load_sort_config(path, start_dir=tmp_test_dir)

    def test_non_mapping_document(self, tmp_test_dir):
        """Test that a list document raises ConfigError."""
        path = tmp_test_dir / "list.yaml"
        path.write_text("- reverse\n")

        with pytest.raises(ConfigError, match="mapping"):
            load_sort_config(path, start_dir=tmp_test_dir)

    def test_wrong_api_version(self, tmp_test_dir):
        """Test that an unknown apiVersion raises ConfigError."""
        path = tmp_test_dir / "v2.yaml"
        path.write_text("apiVersion: vsort/v2\n")

        with pytest.raises(ConfigError, match="apiVersion"):
            load_sort_config(path, start_dir=tmp_test_dir)

    def test_non_boolean_option(self, tmp_test_dir):
        """Test that option values must be booleans."""
        path = tmp_test_dir / "typo.yaml"
        path.write_text("sort:\n  reverse: sometimes\n")

        with pytest.raises(ConfigError, match="sort.reverse"):
            load_sort_config(path, start_dir=tmp_test_dir)

    def test_sort_section_must_be_mapping(self, tmp_test_dir):
        """Test that 'sort' must be a mapping."""
        path = tmp_test_dir / "flat.yaml"
        path.write_text("sort: true\n")

        with pytest.raises(ConfigError, match="'sort' must be a mapping"):
            load_sort_config(path, start_dir=tmp_test_dir)

    def test_config_error_is_vsort_error(self):
        """Test the exception hierarchy."""
        assert issubclass(ConfigError, VsortError)

    def test_unknown_option_warns(self, tmp_test_dir, capsys):
        """Test that unknown options are ignored with a warning."""
        set_global_logger(DefaultLogger())
        path = tmp_test_dir / "extra.yaml"
        path.write_text("sort:\n  numeric: true\n  reverse: true\n")

        config = load_sort_config(path, start_dir=tmp_test_dir)

        assert config.reverse is True
        assert "Ignoring unknown sort option: 'numeric'" in capsys.readouterr().err
