"""Tests for config/loader.py module.

Covers:
- _load_yaml() function
- _deep_merge() function
- load_config() function
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest

from typelens.config import loader
from typelens.config.loader import _deep_merge, _load_yaml, load_config
from typelens.core.errors import ConfigError, ErrorCode


@pytest.fixture(autouse=True)
def _no_global_config(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    """Point the global config at an isolated location."""
    global_path = tmp_path / "global" / "config.yaml"
    monkeypatch.setattr(loader, "GLOBAL_CONFIG_PATH", global_path)
    return global_path


class TestLoadYaml:
    """Tests for _load_yaml function."""

    def test_returns_empty_dict_for_missing_file(self, tmp_path: Path) -> None:
        """Returns empty dict when file doesn't exist."""
        assert _load_yaml(tmp_path / "nonexistent.yaml") == {}

    def test_loads_valid_yaml(self, tmp_path: Path) -> None:
        """Loads valid YAML content."""
        yaml_file = tmp_path / "config.yaml"
        yaml_file.write_text("reflection:\n  cache_enabled: false\n")

        assert _load_yaml(yaml_file) == {"reflection": {"cache_enabled": False}}

    def test_returns_empty_for_empty_file(self, tmp_path: Path) -> None:
        """Returns empty dict for empty file."""
        yaml_file = tmp_path / "empty.yaml"
        yaml_file.write_text("")

        assert _load_yaml(yaml_file) == {}

    def test_raises_config_error_for_invalid_yaml(self, tmp_path: Path) -> None:
        """Raises ConfigError for invalid YAML syntax."""
        yaml_file = tmp_path / "invalid.yaml"
        yaml_file.write_text("logging:\n  level:\n    - invalid: [unclosed")

        with pytest.raises(ConfigError):
            _load_yaml(yaml_file)

    def test_raises_config_error_for_non_mapping(self, tmp_path: Path) -> None:
        """A top-level list is not a config."""
        yaml_file = tmp_path / "list.yaml"
        yaml_file.write_text("- a\n- b\n")

        with pytest.raises(ConfigError, match="mapping"):
            _load_yaml(yaml_file)


class TestDeepMerge:
    """Tests for _deep_merge function."""

    def test_override_wins(self) -> None:
        """Override values replace base values."""
        assert _deep_merge({"a": 1, "b": 2}, {"b": 3}) == {"a": 1, "b": 3}

    def test_nested_merge(self) -> None:
        """Nested dicts are merged recursively."""
        base = {"reflection": {"cache_enabled": True, "allow_private_access": False}}
        override = {"reflection": {"cache_enabled": False}}
        assert _deep_merge(base, override) == {
            "reflection": {"cache_enabled": False, "allow_private_access": False}
        }

    def test_does_not_mutate_base(self) -> None:
        """Base dict is not mutated."""
        base: dict[str, Any] = {"a": 1}
        _deep_merge(base, {"b": 2})
        assert base == {"a": 1}


class TestLoadConfig:
    """Tests for load_config function."""

    def test_defaults_without_files(self) -> None:
        """Defaults apply when no config files exist."""
        config = load_config()
        assert config.logging.level == "INFO"
        assert config.reflection.cache_enabled is True

    def test_explicit_file(self, tmp_path: Path) -> None:
        """Explicit config file values are applied."""
        path = tmp_path / "typelens.yaml"
        path.write_text("reflection:\n  allow_private_access: false\n")

        config = load_config(path)
        assert config.reflection.allow_private_access is False

    def test_missing_explicit_file(self, tmp_path: Path) -> None:
        """An explicit path that does not exist is an error."""
        with pytest.raises(ConfigError) as exc_info:
            load_config(tmp_path / "missing.yaml")
        assert exc_info.value.code == ErrorCode.CONFIG_FILE_NOT_FOUND

    def test_explicit_file_overrides_global(self, tmp_path: Path, _no_global_config: Path) -> None:
        """Explicit file beats global config, untouched global keys survive."""
        _no_global_config.parent.mkdir(parents=True)
        _no_global_config.write_text(
            "reflection:\n  cache_enabled: false\n  allow_private_access: false\n"
        )
        path = tmp_path / "typelens.yaml"
        path.write_text("reflection:\n  allow_private_access: true\n")

        config = load_config(path)
        assert config.reflection.cache_enabled is False
        assert config.reflection.allow_private_access is True

    def test_env_overrides_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Environment variables beat YAML."""
        path = tmp_path / "typelens.yaml"
        path.write_text("logging:\n  level: WARNING\n")
        monkeypatch.setenv("TYPELENS__LOGGING__LEVEL", "DEBUG")

        config = load_config(path)
        assert config.logging.level == "DEBUG"

    def test_kwargs_override_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Direct kwargs have the highest precedence."""
        monkeypatch.setenv("TYPELENS__LOGGING__LEVEL", "DEBUG")

        config = load_config(logging={"level": "ERROR"})
        assert config.logging.level == "ERROR"

    def test_invalid_value_raises_config_error(self, tmp_path: Path) -> None:
        """Validation failures surface as ConfigError with the field path."""
        path = tmp_path / "typelens.yaml"
        path.write_text("logging:\n  level: LOUD\n")

        with pytest.raises(ConfigError) as exc_info:
            load_config(path)
        assert exc_info.value.code == ErrorCode.CONFIG_INVALID_VALUE
        assert exc_info.value.details["field"].startswith("logging")
