"""Unit tests for the config module."""

from pathlib import Path

import pytest
import yaml

from safemove.config import (
    ensure_app_config,
    get_app_config_dir,
    get_app_config_path,
    get_log_level,
    get_replace_existing,
    load_app_config,
    save_app_config,
    set_log_level,
    set_replace_existing,
)


class TestGetAppConfigDir:
    """Tests for get_app_config_dir function."""

    def test_env_var_override(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that SAFEMOVE_APP_CONFIG_DIR environment variable overrides default."""
        custom_dir = tmp_path / "custom_config"
        monkeypatch.setenv("SAFEMOVE_APP_CONFIG_DIR", str(custom_dir))

        assert get_app_config_dir() == custom_dir
        assert get_app_config_path() == custom_dir / "config.yaml"

    def test_default_uses_platform_dir(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that without the override the platform config dir is used."""
        monkeypatch.delenv("SAFEMOVE_APP_CONFIG_DIR")

        assert get_app_config_dir().name == "safemove"


class TestEnsureAppConfig:
    """Tests for ensure_app_config function."""

    def test_creates_directory_and_file(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test that the directory and an empty YAML mapping are created."""
        config_dir = tmp_path / "test_safemove"
        monkeypatch.setenv("SAFEMOVE_APP_CONFIG_DIR", str(config_dir))

        ensure_app_config()

        config_file = config_dir / "config.yaml"
        assert config_dir.is_dir()
        assert config_file.is_file()
        assert yaml.safe_load(config_file.read_text()) == {}

    def test_idempotent(self) -> None:
        """Test that calling the function twice keeps existing content."""
        ensure_app_config()
        get_app_config_path().write_text("log_level: INFO\n")

        ensure_app_config()

        assert get_app_config_path().read_text() == "log_level: INFO\n"


class TestLoadSaveAppConfig:
    """Tests for load_app_config and save_app_config."""

    def test_round_trip(self) -> None:
        save_app_config({"log_level": "DEBUG", "replace_existing": True})

        assert load_app_config() == {"log_level": "DEBUG", "replace_existing": True}

    def test_empty_file(self) -> None:
        ensure_app_config()
        get_app_config_path().write_text("   \n")

        assert load_app_config() == {}

    def test_non_mapping_content(self) -> None:
        ensure_app_config()
        get_app_config_path().write_text("- a\n- b\n")

        assert load_app_config() == {}

    def test_invalid_yaml(self) -> None:
        ensure_app_config()
        get_app_config_path().write_text("log_level: [unclosed\n")

        with pytest.raises(yaml.YAMLError):
            load_app_config()


class TestSettings:
    """Tests for the typed setting accessors."""

    def test_defaults(self) -> None:
        assert get_log_level() == "WARNING"
        assert get_replace_existing() is False

    def test_set_log_level_normalizes_case(self) -> None:
        set_log_level("info")

        assert get_log_level() == "INFO"
        assert load_app_config()["log_level"] == "INFO"

    def test_set_log_level_rejects_unknown(self) -> None:
        with pytest.raises(ValueError, match="Invalid log level"):
            set_log_level("LOUD")

    def test_unknown_log_level_in_file_falls_back(self) -> None:
        save_app_config({"log_level": "LOUD"})

        assert get_log_level() == "WARNING"

    def test_set_replace_existing(self) -> None:
        set_replace_existing(True)
        assert get_replace_existing() is True

        set_replace_existing(False)
        assert get_replace_existing() is False

    def test_set_preserves_other_keys(self) -> None:
        save_app_config({"log_level": "ERROR"})

        set_replace_existing(True)

        assert load_app_config() == {"log_level": "ERROR", "replace_existing": True}
