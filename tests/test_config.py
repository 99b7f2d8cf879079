"""Tests for config system."""

import json
from pathlib import Path

import pytest

from navmenu.config import Config, ConfigMeta
from navmenu.exceptions import ConfigurationError


class TestConfigMeta:
    def test_toggles_defined(self):
        assert "show_legend" in ConfigMeta.TOGGLES
        assert "vi_keys" in ConfigMeta.TOGGLES

    def test_settings_defined(self):
        assert "hover_marker" in ConfigMeta.SETTINGS

    def test_every_default_is_described(self):
        described = set(ConfigMeta.TOGGLES) | set(ConfigMeta.SETTINGS)
        assert described == set(Config.DEFAULTS)


class TestConfigDefaults:
    def test_default_marker(self):
        config = Config(Path("/tmp/navmenu-test-nonexistent"))
        assert config.hover_marker == ">"

    def test_default_toggles(self):
        config = Config(Path("/tmp/navmenu-test-nonexistent"))
        assert config.show_legend is True
        assert config.vi_keys is False

    def test_unknown_attribute(self):
        config = Config(Path("/tmp/navmenu-test-nonexistent"))
        with pytest.raises(AttributeError):
            config.no_such_setting


class TestConfigLoad:
    def test_load_from_file(self, tmp_path: Path):
        config_dir = tmp_path / "navmenu"
        config_dir.mkdir()
        config_file = config_dir / "config.json"
        config_file.write_text(json.dumps({"vi_keys": True, "hover_marker": "→"}))

        config = Config.load(config_dir)

        assert config.vi_keys is True
        assert config.hover_marker == "→"

    def test_load_nonexistent_uses_defaults(self, tmp_path: Path):
        config = Config.load(tmp_path / "nonexistent")
        assert config.accent_style == "cyan"

    def test_corrupted_file_uses_defaults(self, tmp_path: Path):
        (tmp_path / "config.json").write_text("{not json")
        config = Config.load(tmp_path)
        assert config.show_legend is True

    def test_default_dir_from_env(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("NAVMENU_CONFIG_DIR", str(tmp_path / "custom"))
        assert Config.load().config_dir == tmp_path / "custom"

    def test_default_load_is_cached(self):
        assert Config.load() is Config.load()


class TestConfigEnvOverrides:
    def test_env_overrides_bool(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("NAVMENU_SHOW_LEGEND", "false")
        config = Config.load(tmp_path)
        assert config.show_legend is False

    def test_env_overrides_string(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("NAVMENU_HOVER_MARKER", "*")
        config = Config.load(tmp_path)
        assert config.hover_marker == "*"


class TestConfigPersistence:
    def test_set_and_save(self, tmp_path: Path):
        config_dir = tmp_path / "navmenu"
        config = Config.load(config_dir)

        config.set("vi_keys", True)

        config2 = Config.load(config_dir)
        assert config2.vi_keys is True

    def test_set_unknown_key(self, tmp_path: Path):
        config = Config.load(tmp_path)
        with pytest.raises(ConfigurationError):
            config.set("colour", "red")

    def test_set_from_string_coerces_bool(self, tmp_path: Path):
        config = Config.load(tmp_path)
        config.set_from_string("show_explanations", "no")
        assert config.show_explanations is False
        config.set_from_string("show_explanations", "yes")
        assert config.show_explanations is True

    def test_set_from_string_keeps_text(self, tmp_path: Path):
        config = Config.load(tmp_path)
        config.set_from_string("prompt_symbol", ">> ")
        assert config.prompt_symbol == ">> "

    def test_get_toggles(self, tmp_path: Path):
        config = Config.load(tmp_path)
        toggles = config.get_toggles()

        names = [t[0] for t in toggles]
        assert names == list(ConfigMeta.TOGGLES)
        name, desc, value = toggles[0]
        assert isinstance(desc, str)
        assert isinstance(value, bool)

    def test_get_settings(self, tmp_path: Path):
        config = Config.load(tmp_path)
        settings = dict((name, value) for name, _, value in config.get_settings())
        assert settings["prompt_symbol"] == "> "
