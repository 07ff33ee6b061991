"""Settings for the modal input TUI.

Settings are read from a YAML file and never written back:

    palette:
      bg: black
      fg: white
      bar_bg: blue
    status_hint: "<filled char> <bg char> <x> <y> "

Lookup order for the file: explicit path, MODAL_INPUT_CONFIG, then
~/.modal-input/settings.yaml. A missing file means defaults.
"""

from __future__ import annotations

import logging
import os
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any

import yaml
from rich.errors import StyleSyntaxError
from rich.style import Style

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "MODAL_INPUT_CONFIG"
DEFAULT_STATUS_HINT = "<filled char> <bg char> <x> <y> "


class ConfigError(ValueError):
    """Settings file could not be parsed or has invalid values."""


@dataclass
class Palette:
    """Colours used by the renderer (any colour name Rich understands)."""

    bg: str = "black"
    fg: str = "white"
    bar_bg: str = "blue"

    @property
    def body_style(self) -> Style:
        return Style(color=self.fg, bgcolor=self.bg)

    @property
    def bar_style(self) -> Style:
        return Style(color=self.fg, bgcolor=self.bar_bg)


@dataclass
class Settings:
    """Effective settings for a run."""

    palette: Palette = field(default_factory=Palette)
    status_hint: str = DEFAULT_STATUS_HINT

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Settings:
        """Build settings from a parsed YAML mapping.

        Unknown keys are ignored, missing keys take defaults.

        Raises:
            ConfigError: If a value has the wrong type or is not a valid colour
        """
        palette_data = data.get("palette") or {}
        if not isinstance(palette_data, dict):
            raise ConfigError("'palette' must be a mapping")

        colours: dict[str, str] = {}
        for f in fields(Palette):
            if f.name not in palette_data:
                continue
            value = palette_data[f.name]
            if not isinstance(value, str):
                raise ConfigError(f"palette.{f.name} must be a string")
            try:
                Style.parse(f"on {value}")
            except StyleSyntaxError as e:
                raise ConfigError(f"palette.{f.name}: invalid colour {value!r}") from e
            colours[f.name] = value

        status_hint = data.get("status_hint", DEFAULT_STATUS_HINT)
        if not isinstance(status_hint, str):
            raise ConfigError("'status_hint' must be a string")

        return cls(palette=Palette(**colours), status_hint=status_hint)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def default_settings_path() -> Path:
    """Path of the settings file when none is given explicitly."""
    env_path = os.getenv(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path).expanduser()
    return Path.home() / ".modal-input" / "settings.yaml"


def load_settings(path: str | Path | None = None) -> Settings:
    """Load settings from a YAML file.

    Args:
        path: Settings file; defaults to default_settings_path()

    Returns:
        The parsed settings, or defaults if the file does not exist

    Raises:
        ConfigError: If the file is not valid YAML or has invalid values
    """
    settings_file = Path(path).expanduser() if path else default_settings_path()

    if not settings_file.exists():
        logger.debug(f"No settings file at {settings_file}, using defaults")
        return Settings()

    try:
        with open(settings_file) as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"{settings_file}: {e}") from e

    if data is None:
        return Settings()
    if not isinstance(data, dict):
        raise ConfigError(f"{settings_file}: expected a mapping at top level")

    logger.info(f"Loaded settings from {settings_file}")
    return Settings.from_dict(data)
