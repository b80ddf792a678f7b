"""Unit tests for configuration loading."""

from pathlib import Path

import pytest

from syndox.config import (
    DEFAULT_CONFIG,
    get_config_value,
    load_config,
    merge_config,
)
from syndox.core.exceptions import ConfigError


class TestGetConfigValue:
    """Tests for dotted-path lookup."""

    def test_nested_value(self) -> None:
        """Test that dotted keys walk nested tables."""
        config = {"parse": {"options": {"locations": True}}}
        assert get_config_value(config, "parse.options") == {"locations": True}

    def test_missing_returns_default(self) -> None:
        """Test that a missing key returns the default."""
        assert get_config_value({"parse": {}}, "parse.options", "fallback") == "fallback"

    def test_non_table_in_path(self) -> None:
        """Test that walking through a scalar returns the default."""
        assert get_config_value({"parse": 3}, "parse.options") is None

    def test_falsy_values_are_returned(self) -> None:
        """Test that stored falsy values are not mistaken for missing."""
        assert get_config_value({"a": {"b": 0}}, "a.b", 5) == 0


class TestMergeConfig:
    """Tests for deep merging."""

    def test_tables_merge(self) -> None:
        """Test that nested tables merge key by key."""
        merged = merge_config(DEFAULT_CONFIG, {"parse": {"options": {"locations": True}}})

        assert merged["out"] == ".syndox"
        assert merged["parse"]["options"] == {"locations": True}

    def test_base_is_not_mutated(self) -> None:
        """Test that defaults stay untouched."""
        merge_config(DEFAULT_CONFIG, {"out": "elsewhere"})
        assert DEFAULT_CONFIG["out"] == ".syndox"


class TestLoadConfig:
    """Tests for config file discovery."""

    def test_defaults_without_file(self, temp_dir: Path) -> None:
        """Test that defaults apply when no config file exists."""
        config = load_config(temp_dir)

        assert config.source is None
        assert config.values == DEFAULT_CONFIG
        assert config.out_dir == temp_dir.resolve() / ".syndox"

    def test_syndox_toml(self, temp_dir: Path) -> None:
        """Test that syndox.toml values are merged over defaults."""
        (temp_dir / "syndox.toml").write_text(
            'out = "build/cache"\n\n[parse.options]\ntype_comments = true\n'
        )

        config = load_config(temp_dir)

        assert config.source == (temp_dir / "syndox.toml").resolve()
        assert config.out_dir == temp_dir.resolve() / "build" / "cache"
        assert config.get("parse.options") == {"type_comments": True}

    def test_pyproject_tool_table(self, temp_dir: Path) -> None:
        """Test that [tool.syndox] in pyproject.toml is used."""
        (temp_dir / "pyproject.toml").write_text('[tool.syndox]\nout = "cache"\n')

        config = load_config(temp_dir)

        assert config.get("out") == "cache"
        assert config.source == (temp_dir / "pyproject.toml").resolve()

    def test_syndox_toml_wins_over_pyproject(self, temp_dir: Path) -> None:
        """Test that syndox.toml is preferred in the same directory."""
        (temp_dir / "pyproject.toml").write_text('[tool.syndox]\nout = "from-pyproject"\n')
        (temp_dir / "syndox.toml").write_text('out = "from-syndox"\n')

        assert load_config(temp_dir).get("out") == "from-syndox"

    def test_found_in_parent(self, temp_dir: Path) -> None:
        """Test that discovery walks up and anchors out to the file's directory."""
        (temp_dir / ".syndox.toml").write_text('out = "cache"\n')
        child = temp_dir / "a" / "b"
        child.mkdir(parents=True)

        config = load_config(child)

        assert config.out_dir == temp_dir.resolve() / "cache"

    def test_absolute_out(self, temp_dir: Path) -> None:
        """Test that an absolute out directory is used as is."""
        target = (temp_dir / "abs").resolve()
        (temp_dir / "syndox.toml").write_text(f'out = "{target.as_posix()}"\n')

        assert load_config(temp_dir).out_dir == target

    def test_invalid_toml(self, temp_dir: Path) -> None:
        """Test that malformed TOML raises ConfigError."""
        (temp_dir / "syndox.toml").write_text("out = \n")

        with pytest.raises(ConfigError) as exc_info:
            load_config(temp_dir)

        assert "Invalid TOML" in str(exc_info.value)

    def test_out_must_be_string(self, temp_dir: Path) -> None:
        """Test that a non-string out raises ConfigError."""
        (temp_dir / "syndox.toml").write_text("out = 3\n")

        with pytest.raises(ConfigError):
            load_config(temp_dir)

    def test_parse_options_must_be_table(self, temp_dir: Path) -> None:
        """Test that parse.options must be a table."""
        (temp_dir / "syndox.toml").write_text('[parse]\noptions = "babel"\n')

        with pytest.raises(ConfigError):
            load_config(temp_dir)
