from __future__ import annotations

"""
Configuration Domain Management.

Holds the builder options (root relativization, tree naming, handler order,
strict metadata checks) and their JSON persistence in the user data
directory, with default fallback on any read failure.
"""

import json
import logging
import os
from typing import Any, Dict, Optional

from statwrap.domain.constants import HANDLER_PRIORITY
from statwrap.infra.fs import get_user_data_dir

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Constants & Defaults
# -----------------------------------------------------------------------------
CONFIG_FILE_NAME = "workflow.json"
CURRENT_CONFIG_VERSION = "1.0.0"


def get_config_path() -> str:
    """Absolute location of the persisted configuration file."""
    return os.path.join(get_user_data_dir(), CONFIG_FILE_NAME)


def get_default_config() -> Dict[str, Any]:
    """
    Generate the default builder configuration.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        # Graph
        "relativize_to_root": False,

        # Tree
        "tree_name_mode": "uri",

        # Metadata
        "handlers": [asset_type for asset_type, _ in HANDLER_PRIORITY],
        "strict_metadata": False,

        # Output
        "json_indent": 2,
    }

# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------
def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load the persisted configuration merged over the defaults.

    Args:
        path: Optional override of the configuration file location.

    Returns:
        Dict[str, Any]: The loaded configuration, or defaults on failure.
    """
    config = get_default_config()
    config_path = path or get_config_path()

    if not os.path.exists(config_path):
        logger.debug("Config file not found. Returning defaults.")
        return config

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        logger.error(f"Failed to load config: {e}. Using defaults.")
        return config

    if not isinstance(data, dict) or not isinstance(data.get("workflow", {}), dict):
        logger.warning("Corrupted config file. Using defaults.")
        return config

    config.update(data.get("workflow", {}))
    return config


def save_config(config: Dict[str, Any], path: Optional[str] = None) -> None:
    """
    Persist the configuration under the current schema version.

    Args:
        config: The configuration dictionary to save.
        path: Optional override of the configuration file location.
    """
    config_path = path or get_config_path()
    state = {"version": CURRENT_CONFIG_VERSION, "workflow": config}
    try:
        os.makedirs(os.path.dirname(os.path.abspath(config_path)), exist_ok=True)
        with open(config_path, "w", encoding="utf-8") as f:
            json.dump(state, f, ensure_ascii=False, indent=4)
        logger.debug(f"Configuration saved to {config_path}")
    except OSError as e:
        logger.error(f"Failed to save configuration: {e}")
