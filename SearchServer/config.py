import copy
import json
import logging
import os

logger = logging.getLogger(__name__)

CONFIG_PATH = os.path.join(os.path.dirname(os.path.abspath(__file__)), "config.json")

DEFAULT_CONFIG = {
    "stop_words": "",
    "page_size": 5,
    "logging": {
        "level": "INFO",
        "show_time": False
    }
}


def _merge(defaults, overrides):
    merged = copy.deepcopy(defaults)
    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_config(config_path=None):
    """
    Load configuration from a JSON file.

    Keys missing from the file are taken from DEFAULT_CONFIG. A missing or
    unreadable file gives the defaults.

    Args:
        config_path: Path to the config file (defaults to config.json next to this module)

    Returns:
        Configuration dictionary
    """
    config_path = config_path or CONFIG_PATH

    if not os.path.exists(config_path):
        logger.warning("No config file found at %s, using default settings", config_path)
        return copy.deepcopy(DEFAULT_CONFIG)

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            config = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        logger.warning("Could not load config: %s, using default settings", e)
        return copy.deepcopy(DEFAULT_CONFIG)

    if not isinstance(config, dict):
        logger.warning("Config in %s is not a JSON object, using default settings", config_path)
        return copy.deepcopy(DEFAULT_CONFIG)

    return _merge(DEFAULT_CONFIG, config)
