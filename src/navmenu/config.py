"""Configuration for the terminal backend, with env overrides."""

import json
import os
from pathlib import Path
from typing import Any

from navmenu.exceptions import ConfigurationError

# Module-level cache for singleton pattern
_config_cache: "Config | None" = None


def clear_config_cache() -> None:
    """Clear the config cache. Useful for testing or config reload."""
    global _config_cache
    _config_cache = None


def get_default_config_dir() -> Path:
    """Get default config directory, respecting NAVMENU_CONFIG_DIR env var.

    This is the single source of truth for config directory resolution.
    """
    config_dir = os.environ.get("NAVMENU_CONFIG_DIR")
    if config_dir:
        return Path(config_dir)
    return Path.home() / ".config" / "navmenu"


class ConfigMeta:
    """Schema definition - separate from runtime state."""

    TOGGLES: dict[str, str] = {
        "show_legend": "Show available keys below the items",
        "show_explanations": "Show item explanations next to names",
        "vi_keys": "Use j/k to move (disables j/k hotkeys)",
        "debug": "Write debug log to <config dir>/debug.log",
    }

    SETTINGS: dict[str, str] = {
        "hover_marker": "Indicator drawn in front of the hovered item",
        "accent_style": "Rich style of the hovered item (e.g. cyan, bold magenta)",
        "prompt_symbol": "Text shown in front of typed input",
    }


class Config:
    """Runtime configuration with env override support."""

    DEFAULTS: dict[str, Any] = {
        # Toggles
        "show_legend": True,
        "show_explanations": True,
        "vi_keys": False,
        "debug": False,
        # Settings
        "hover_marker": ">",
        "accent_style": "cyan",
        "prompt_symbol": "> ",
    }

    def __init__(self, config_dir: Path | None = None):
        self._config_dir = config_dir or get_default_config_dir()
        self._config_file = self._config_dir / "config.json"
        self._data: dict[str, Any] = {}

    @property
    def config_dir(self) -> Path:
        return self._config_dir

    @classmethod
    def load(cls, config_dir: Path | None = None) -> "Config":
        """Factory method - explicit loading with caching."""
        global _config_cache

        if _config_cache is not None and config_dir is None:
            return _config_cache

        config = cls(config_dir)
        config._load_from_file()
        config._apply_env_overrides()

        if config_dir is None:
            _config_cache = config

        return config

    def __getattr__(self, name: str) -> Any:
        """Access config values as attributes."""
        if name.startswith("_"):
            raise AttributeError(name)
        if name in self._data:
            return self._data[name]
        if name in self.DEFAULTS:
            return self.DEFAULTS[name]
        raise AttributeError(f"Config has no attribute '{name}'")

    def get_toggles(self) -> list[tuple[str, str, bool]]:
        """Return (attr, description, enabled) for display."""
        return [
            (name, desc, bool(getattr(self, name))) for name, desc in ConfigMeta.TOGGLES.items()
        ]

    def get_settings(self) -> list[tuple[str, str, Any]]:
        """Return (attr, description, value) for display."""
        return [(name, desc, getattr(self, name)) for name, desc in ConfigMeta.SETTINGS.items()]

    def set(self, key: str, value: Any) -> None:
        """Set value and persist."""
        if key not in self.DEFAULTS:
            raise ConfigurationError(f"Unknown setting '{key}'")
        self._data[key] = value
        self._save()

    def set_from_string(self, key: str, value: str) -> None:
        """Coerce a string (e.g. from the command line) to the setting's type, then set."""
        if key not in self.DEFAULTS:
            raise ConfigurationError(f"Unknown setting '{key}'")
        self.set(key, self._coerce(value, type(self.DEFAULTS[key])))

    def _load_from_file(self) -> None:
        if self._config_file.exists():
            try:
                content = self._config_file.read_text()
                if content.strip():
                    self._data = json.loads(content)
            except json.JSONDecodeError:
                # Corrupted config - use defaults, will be fixed on next save
                self._data = {}

    def _save(self) -> None:
        self._config_dir.mkdir(parents=True, exist_ok=True)
        self._config_file.write_text(json.dumps(self._data, indent=2))

    def _apply_env_overrides(self) -> None:
        """Apply NAVMENU_* env vars (highest priority)."""
        for key, default in self.DEFAULTS.items():
            env_key = f"NAVMENU_{key.upper()}"
            if env_key in os.environ:
                self._data[key] = self._coerce(os.environ[env_key], type(default))

    @staticmethod
    def _coerce(value: str, target_type: type) -> Any:
        """Coerce string env value to target type."""
        if target_type is bool:
            return value.lower() in ("true", "1", "yes")
        return value
