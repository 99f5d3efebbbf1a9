"""
Display preferences for the award console.

Only presentation lives here; award definitions are fixed in
state.schema and never read from disk.
"""

import json
import logging
from pathlib import Path

from pydantic import BaseModel, ConfigDict, StrictBool

logger = logging.getLogger(__name__)

CONFIG_FILENAME = ".provider_quality_config.json"


class DisplayConfig(BaseModel):
    """How each simulated day is drawn."""
    model_config = ConfigDict(frozen=True, extra="forbid")

    clear_screen: StrictBool = True  # Clear the console before each day
    table_view: StrictBool = False  # Rich table instead of plain lines


def get_config_path(config_dir: Path | str = ".") -> Path:
    return Path(config_dir) / CONFIG_FILENAME


def _known_settings(saved: object, path: Path) -> dict[str, bool]:
    """Keep the entries of a saved payload that name a setting and hold a bool."""
    if not isinstance(saved, dict):
        logger.warning("Ignoring config %s: expected an object, got %s", path, type(saved).__name__)
        return {}

    settings = {}
    for key, value in saved.items():
        if key in DisplayConfig.model_fields and isinstance(value, bool):
            settings[key] = value
        else:
            logger.warning("Ignoring config entry %s=%r in %s", key, value, path)
    return settings


def load_config(config_dir: Path | str = ".") -> DisplayConfig:
    """
    Read display preferences, falling back to defaults.

    A missing, unreadable or malformed file gives the defaults; entries
    that are unknown or not booleans are dropped one by one.
    """
    path = get_config_path(config_dir)
    if not path.exists():
        return DisplayConfig()

    try:
        saved = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        # ValueError covers both bad JSON and bytes that are not UTF-8
        logger.warning("Could not read config %s: %s", path, e)
        return DisplayConfig()

    return DisplayConfig(**_known_settings(saved, path))


def save_config(config: DisplayConfig, config_dir: Path | str = ".") -> bool:
    """Write display preferences. Returns True on success."""
    path = get_config_path(config_dir)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(config.model_dump_json(indent=2), encoding="utf-8")
    except OSError as e:
        logger.warning("Could not write config %s: %s", path, e)
        return False
    return True


def update_config(config_dir: Path | str = ".", **changes: bool) -> bool:
    """
    Apply changes on top of the saved preferences and write them back.

    Raises:
        pydantic.ValidationError: On an unknown setting or a non-bool value

    Returns:
        True if the file was written
    """
    current = load_config(config_dir)
    updated = DisplayConfig.model_validate({**current.model_dump(), **changes})
    return save_config(updated, config_dir)
