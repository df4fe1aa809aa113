"""Tests for PlugBot.config.manager — ConfigManager."""
from __future__ import annotations

import asyncio
import json
from pathlib import Path

import pytest

from PlugBot.config import ConfigError, ConfigManager, build_default_config


@pytest.fixture()
def config_file(tmp_path: Path) -> Path:
    return tmp_path / "config" / "plugbot.json"


class TestRead:
    def test_missing_file_gives_defaults_without_writing(self, config_file: Path) -> None:
        manager = ConfigManager(build_default_config(), str(config_file))
        manager.read()
        assert not config_file.exists()
        assert manager.get("logging.level") == "WARNING"
        assert manager.disabled_plugins() == []

    def test_existing_values_not_overwritten(self, tmp_path: Path) -> None:
        path = tmp_path / "plugbot.json"
        path.write_text(json.dumps({"logging": {"level": "DEBUG"}}), encoding="utf-8")
        manager = ConfigManager(build_default_config(), str(path))
        manager.read()
        assert manager.get("logging.level") == "DEBUG"
        assert manager.get("logging.file") == "data/logs/plugbot.log"

    def test_read_leaves_file_untouched(self, tmp_path: Path) -> None:
        path = tmp_path / "plugbot.json"
        original = json.dumps({"plugins": {"disabled": ["weather"]}})
        path.write_text(original, encoding="utf-8")
        ConfigManager(build_default_config(), str(path)).read()
        assert path.read_text(encoding="utf-8") == original

    def test_malformed_json_raises_and_keeps_file(self, tmp_path: Path) -> None:
        path = tmp_path / "plugbot.json"
        original = '{"plugins": {"disabled": ["weather"]},}'
        path.write_text(original, encoding="utf-8")
        manager = ConfigManager(build_default_config(), str(path))
        with pytest.raises(ConfigError):
            manager.read()
        assert path.read_text(encoding="utf-8") == original

    def test_non_object_top_level_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "plugbot.json"
        path.write_text("[1, 2]", encoding="utf-8")
        with pytest.raises(ConfigError):
            ConfigManager(build_default_config(), str(path)).read()

    def test_defaults_not_shared_between_managers(self, tmp_path: Path) -> None:
        defaults = build_default_config()
        a = ConfigManager(defaults, str(tmp_path / "a.json"))
        b = ConfigManager(defaults, str(tmp_path / "b.json"))
        a.read()
        b.read()
        a.get("plugins.disabled").append("weather")
        assert b.disabled_plugins() == []
        assert defaults["plugins"]["disabled"] == []


class TestDisabledPlugins:
    def test_returns_names(self, tmp_path: Path) -> None:
        manager = ConfigManager(config_path=str(tmp_path / "c.json"))
        manager.set("plugins.disabled", ["weather", "radar"])
        assert manager.disabled_plugins() == ["weather", "radar"]

    def test_missing_is_empty(self, tmp_path: Path) -> None:
        assert ConfigManager(config_path=str(tmp_path / "c.json")).disabled_plugins() == []

    @pytest.mark.parametrize("value", ["weather", {"weather": True}, ["weather", 3]])
    def test_rejects_non_string_list(self, tmp_path: Path, value: object) -> None:
        manager = ConfigManager(config_path=str(tmp_path / "c.json"))
        manager.set("plugins.disabled", value)
        with pytest.raises(ConfigError):
            manager.disabled_plugins()


class TestAccessAndSave:
    def test_get_missing_returns_default(self, tmp_path: Path) -> None:
        manager = ConfigManager(config_path=str(tmp_path / "c.json"))
        assert manager.get("a.b.c", 5) == 5

    def test_set_nested(self, tmp_path: Path) -> None:
        manager = ConfigManager(config_path=str(tmp_path / "c.json"))
        manager.set("plugins.disabled", ["weather"])
        assert manager.as_dict() == {"plugins": {"disabled": ["weather"]}}

    def test_reset_restores_defaults(self, config_file: Path) -> None:
        manager = ConfigManager(build_default_config(), str(config_file))
        manager.set("logging.level", "DEBUG")
        manager.reset()
        assert manager.get("logging.level") == "WARNING"

    def test_save_creates_directory(self, config_file: Path) -> None:
        manager = ConfigManager(build_default_config(), str(config_file))
        manager.set("logging.level", "ERROR")
        asyncio.run(manager.save())
        data = json.loads(config_file.read_text(encoding="utf-8"))
        assert data["logging"]["level"] == "ERROR"
