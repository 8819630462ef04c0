"""
User settings for Sound Button Board.

Stored as JSON at ~/.soundbutton/settings.json. Missing categories or keys
are filled from defaults so older files keep working.
"""
import copy
import json
import logging
from pathlib import Path
from typing import Dict, Any, Optional, Union

from core.constants import SETTINGS_FILE, DEFAULT_STORE_FILE

logger = logging.getLogger(__name__)

DEFAULT_SETTINGS: Dict[str, Dict[str, Any]] = {
    "general": {
        "store_path": str(DEFAULT_STORE_FILE),
        "show_edit_options": False,
    },
    "audio": {
        "output_device": "Default",
    },
    "video": {
        "ui_scale": 1.0,  # 0.5x - 2.0x
        "width": 900,
        "height": 700,
    },
    "logging": {
        "level": "INFO",
    },
}


def load_settings(path: Optional[Union[str, Path]] = None) -> Dict[str, Dict[str, Any]]:
    """
    Load settings, merged with defaults.

    Creates the file with defaults when it does not exist. A file that cannot
    be read or parsed is logged and defaults are used.

    Args:
        path: Settings file (default ~/.soundbutton/settings.json)

    Returns:
        Settings dict keyed by category
    """
    config_path = Path(path) if path is not None else SETTINGS_FILE
    settings = copy.deepcopy(DEFAULT_SETTINGS)

    if not config_path.exists():
        save_settings(settings, config_path)
        logger.info("Created new settings file with defaults at %s", config_path)
        return settings

    try:
        with open(config_path, "r") as f:
            loaded = json.load(f)
    except (OSError, ValueError) as e:
        logger.error("Failed to load settings: %s", e)
        return settings

    if not isinstance(loaded, dict):
        logger.error("Ignoring settings file %s: expected an object", config_path)
        return settings

    for category, values in settings.items():
        if isinstance(loaded.get(category), dict):
            values.update(loaded[category])

    return settings


def save_settings(settings: Dict[str, Dict[str, Any]], path: Optional[Union[str, Path]] = None):
    """Write settings to the config file. Failures are logged."""
    config_path = Path(path) if path is not None else SETTINGS_FILE

    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
        with open(config_path, "w") as f:
            json.dump(settings, f, indent=2)
    except OSError as e:
        logger.error("Failed to save settings: %s", e)
