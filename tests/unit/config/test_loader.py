"""Unit tests for TOML configuration loader."""

import tomllib
from pathlib import Path

import pytest

from docaudit.config.loader import (
    deep_merge,
    get_config_dir,
    get_environment,
    load_config,
    load_toml,
)


class TestDeepMerge:
    """Tests for deep_merge function."""

    def test_merge_flat_dicts(self) -> None:
        assert deep_merge({"a": 1, "b": 2}, {"b": 3, "c": 4}) == {"a": 1, "b": 3, "c": 4}

    def test_merge_nested_dicts(self) -> None:
        """Nested tables are merged recursively."""
        base = {"audit": {"modes": ["field_diff"], "max_depth": 32}}
        override = {"audit": {"max_depth": 8}}
        assert deep_merge(base, override) == {
            "audit": {"modes": ["field_diff"], "max_depth": 8}
        }

    def test_lists_are_replaced(self) -> None:
        base = {"audit": {"modes": ["field_diff"]}}
        override = {"audit": {"modes": ["snapshot"]}}
        assert deep_merge(base, override)["audit"]["modes"] == ["snapshot"]

    def test_override_replaces_non_dict(self) -> None:
        assert deep_merge({"a": {"x": 1}}, {"a": "replaced"}) == {"a": "replaced"}

    def test_base_unmodified(self) -> None:
        base = {"a": {"x": 1}}
        deep_merge(base, {"a": {"y": 2}})
        assert base == {"a": {"x": 1}}


class TestLoadToml:
    """Tests for load_toml function."""

    def test_load_valid_toml(self, tmp_path: Path) -> None:
        toml_file = tmp_path / "test.toml"
        toml_file.write_text('[audit]\nsnapshot_collection = "history"\nmax_depth = 4')

        assert load_toml(toml_file) == {
            "audit": {"snapshot_collection": "history", "max_depth": 4}
        }

    def test_load_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_toml(tmp_path / "nonexistent.toml")

    def test_load_invalid_toml_raises(self, tmp_path: Path) -> None:
        invalid_file = tmp_path / "invalid.toml"
        invalid_file.write_text("invalid = [unclosed")

        with pytest.raises(tomllib.TOMLDecodeError):
            load_toml(invalid_file)


class TestGetEnvironment:
    """Tests for get_environment function."""

    def test_returns_env_var_value(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DOCAUDIT_ENV", "production")
        assert get_environment() == "production"

    def test_defaults_to_development(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("DOCAUDIT_ENV", raising=False)
        assert get_environment() == "development"


class TestGetConfigDir:
    """Tests for get_config_dir function."""

    def test_uses_env_var_when_set(
        self, test_config_dir: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("DOCAUDIT_CONFIG_DIR", str(test_config_dir))
        assert get_config_dir().resolve() == test_config_dir.resolve()

    def test_raises_for_missing_env_dir(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("DOCAUDIT_CONFIG_DIR", str(tmp_path / "missing"))
        with pytest.raises(FileNotFoundError):
            get_config_dir()

    def test_finds_config_in_parent_directory(
        self, test_config_dir: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        nested = test_config_dir.parent / "src" / "app"
        nested.mkdir(parents=True)
        monkeypatch.delenv("DOCAUDIT_CONFIG_DIR", raising=False)
        monkeypatch.chdir(nested)

        assert get_config_dir().resolve() == test_config_dir.resolve()


class TestLoadConfig:
    """Tests for load_config function."""

    def test_loads_default_config(
        self, test_config_dir: Path, mock_toml_files, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        mock_toml_files({"default.toml": "app_name = 'test'\n[audit]\nmax_depth = 4"})
        monkeypatch.setenv("DOCAUDIT_CONFIG_DIR", str(test_config_dir))
        monkeypatch.setenv("DOCAUDIT_ENV", "nonexistent")

        assert load_config() == {"app_name": "test", "audit": {"max_depth": 4}}

    def test_merges_environment_config(
        self, test_config_dir: Path, mock_toml_files, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        mock_toml_files({
            "default.toml": "[audit]\nmodes = ['field_diff']\nmax_depth = 4",
            "production.toml": "[audit]\nmodes = ['field_diff', 'snapshot']",
        })
        monkeypatch.setenv("DOCAUDIT_CONFIG_DIR", str(test_config_dir))
        monkeypatch.setenv("DOCAUDIT_ENV", "production")

        assert load_config() == {
            "audit": {"modes": ["field_diff", "snapshot"], "max_depth": 4}
        }

    def test_missing_default_raises(
        self, test_config_dir: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("DOCAUDIT_CONFIG_DIR", str(test_config_dir))

        with pytest.raises(FileNotFoundError, match="default.toml"):
            load_config()
