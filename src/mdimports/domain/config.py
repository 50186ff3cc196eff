from __future__ import annotations

"""
Configuration Domain Management.

Handles persistent storage of resolver preferences using JSON. Missing or
corrupted files never abort a run: the defaults are used instead.
"""

import json
import logging
import os
from typing import Any, Dict, Optional

from mdimports.domain.constants import CURRENT_CONFIG_VERSION, DEFAULT_MAX_DEPTH
from mdimports.infra.fs import get_user_data_dir

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = "config.json"

# -----------------------------------------------------------------------------
# Defaults
# -----------------------------------------------------------------------------
def get_default_config_path() -> str:
    """Location of the persistent config file inside the user data directory."""
    return os.path.join(get_user_data_dir(), CONFIG_FILE_NAME)


def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        # Resolution
        "imports_enabled": True,
        "max_depth": DEFAULT_MAX_DEPTH,

        # Diagnostics
        "log_level": "INFO",
        "log_file": "",
    }


# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------
def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load configuration from disk, merged over the defaults.

    Unknown keys are dropped so that stale files cannot pollute the schema.

    Args:
        path: Config file to read. Defaults to the user data directory.

    Returns:
        Dict[str, Any]: The loaded configuration or the defaults on failure.
    """
    config = get_default_config()
    config_path = path or get_default_config_path()

    if not os.path.exists(config_path):
        logger.debug(f"Config file not found at {config_path}. Using defaults.")
        return config

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.error(f"Failed to load config: {e}. Using defaults.")
        return config

    if not isinstance(data, dict):
        logger.warning("Corrupted config file. Using defaults.")
        return config

    for key in config:
        if key in data:
            config[key] = data[key]

    return config


def save_config(config: Dict[str, Any], path: Optional[str] = None) -> None:
    """
    Persist configuration to disk.

    Args:
        config: The configuration dictionary to save.
        path: Destination file. Defaults to the user data directory.
    """
    config_path = path or get_default_config_path()
    payload = dict(config)
    payload["version"] = CURRENT_CONFIG_VERSION

    try:
        os.makedirs(os.path.dirname(os.path.abspath(config_path)), exist_ok=True)
        with open(config_path, "w", encoding="utf-8") as f:
            json.dump(payload, f, ensure_ascii=False, indent=4)
        logger.debug(f"Configuration saved to {config_path}")
    except OSError as e:
        logger.error(f"Failed to save configuration: {e}")
