"""Configuration management for batteryinfo."""

import copy
import json
import logging
import os
from pathlib import Path

log = logging.getLogger(__name__)


# Default configuration values
DEFAULTS = {
    # Force a single provider by name; None picks the best supported one.
    "provider": None,

    # Per-provider enable flags, keyed by provider name.
    # Providers not listed here are enabled.
    "providers": {},
}


def get_config_dir() -> Path:
    """Get the configuration directory."""
    xdg_config = os.environ.get("XDG_CONFIG_HOME", "")
    if xdg_config:
        return Path(xdg_config) / "batteryinfo"
    return Path.home() / ".config" / "batteryinfo"


def get_config_path() -> Path:
    """Get the path to the configuration file."""
    return get_config_dir() / "config.json"


def _deep_merge(base: dict, override: dict) -> dict:
    """Deep merge override into base, returning new dict."""
    result = copy.deepcopy(base)
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def load_config() -> dict:
    """Load configuration from file, merging with defaults."""
    config_path = get_config_path()

    if not config_path.exists():
        return copy.deepcopy(DEFAULTS)

    try:
        with open(config_path, "r") as f:
            user_config = json.load(f)
    except (json.JSONDecodeError, OSError) as e:
        log.warning("Could not load config from %s: %s", config_path, e)
        return copy.deepcopy(DEFAULTS)

    if not isinstance(user_config, dict):
        log.warning("Ignoring config at %s: expected a JSON object", config_path)
        return copy.deepcopy(DEFAULTS)

    return _deep_merge(DEFAULTS, user_config)
