# config_manager.py
"""""
Preferences store.

Settings live in config.json next to main.py, their human-readable
descriptions in ui_strings.json. Both files use the same keys. A missing or
unreadable config.json is not an error: DEFAULT_SETTINGS fill every gap.
"""""

import json
import logging
from pathlib import Path

from . import error as E

logger = logging.getLogger(__name__)

PROJECT_ROOT = Path(__file__).resolve().parent.parent
config_json = PROJECT_ROOT / "config.json"
ui_strings = PROJECT_ROOT / "ui_strings.json"

DEFAULT_SETTINGS = {
    "darkmode": False,
    "show_equation": True,
    "save_history": True,
    "font_size": 20,
    "decimal_places": 10,
}

# Lower bounds for integer settings, enforced by the settings dialog
MINIMUM_VALUES = {
    "font_size": 8,
    "decimal_places": 2,
}


def _read_json(path):
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except FileNotFoundError:
        logger.info("No file at %s, using defaults.", path)
        return {}
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        logger.warning("Could not read %s: %s", path, e)
        return {}

    if not isinstance(data, dict):
        logger.warning("Ignoring %s: expected a JSON object.", path)
        return {}
    return data


def load_setting_value(key_value, path=None):
    """Return one setting, or the whole settings dict for key_value == "all"."""
    settings_dict = dict(DEFAULT_SETTINGS)
    for key, value in _read_json(path or config_json).items():
        # bool is a subclass of int, so compare exact types
        if key in DEFAULT_SETTINGS and type(value) is not type(DEFAULT_SETTINGS[key]):
            logger.warning("Ignoring setting %s=%r: expected %s.",
                           key, value, type(DEFAULT_SETTINGS[key]).__name__)
            continue
        settings_dict[key] = value

    if key_value == "all":
        return settings_dict

    else:
        return settings_dict.get(key_value, 0)


def load_setting_description(key_value, path=None):
    descriptions = _read_json(path or ui_strings)

    if key_value == "all":
        return descriptions

    else:
        return descriptions.get(key_value, "")


def save_setting(settings_dict, path=None):
    target = Path(path or config_json)
    try:
        with open(target, 'w', encoding='utf-8') as f:
            json.dump(settings_dict, f, indent=4)
    except (OSError, TypeError) as e:
        raise E.ConfigurationError(f"{target}: {e}") from e

    logger.debug("Saved settings to %s", target)
    return settings_dict
