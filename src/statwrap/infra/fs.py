from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Provides the user data directory resolution, path normalization, asset tree
document loading and output persistence used by the CLI. The workflow
builders themselves never touch the filesystem.
"""

import json
import logging
import os
from typing import Optional

from statwrap.domain.asset_models import Asset
from statwrap.domain.errors import AssetTreeLoadError

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# GLOBAL CONSTANTS
# -----------------------------------------------------------------------------

APP_DIR_NAME = "StatWrap"
UNIX_APP_DIR_NAME = ".statwrap"

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def get_user_data_dir() -> str:
    """
    Resolve the OS-specific directory for persistent application data.

    Standards:
    - Windows: %LOCALAPPDATA%/StatWrap
    - Linux/Mac: ~/.statwrap

    The directory is created on demand.

    Returns:
        str: Absolute path to the application data directory.
    """
    path = ""

    if os.name == "nt":
        base = os.environ.get("LOCALAPPDATA") or os.environ.get("APPDATA")
        if base:
            path = os.path.join(base, APP_DIR_NAME)

    if not path:
        path = os.path.join(os.path.expanduser("~"), UNIX_APP_DIR_NAME)

    try:
        os.makedirs(path, exist_ok=True)
    except OSError as e:
        logger.debug(f"Unable to create user data dir '{path}': {e}")

    return os.path.abspath(path)


def normalize_path(path: Optional[str], fallback: str) -> str:
    """
    Normalize a path string into an absolute filesystem path.

    Expands environment variables and the user home shortcut. Reverts to
    fallback if the input is empty.

    Args:
        path: Raw input path string.
        fallback: Default path to use when the input is blank.

    Returns:
        str: Normalized absolute path.
    """
    p = (path or "").strip()
    if not p:
        p = fallback
    return os.path.abspath(os.path.expandvars(os.path.expanduser(p)))

# -----------------------------------------------------------------------------
# ASSET TREE DOCUMENTS
# -----------------------------------------------------------------------------

def load_asset_tree(path: str) -> Asset:
    """
    Read an asset tree JSON document produced by the discovery layer.

    Args:
        path: Location of the JSON file holding the root asset object.

    Returns:
        Asset: The decoded root asset.

    Raises:
        AssetTreeLoadError: If the file is missing, unreadable, not valid
            JSON, or does not describe an asset hierarchy.
    """
    if not os.path.isfile(path):
        raise AssetTreeLoadError(f"Asset tree file not found: {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise AssetTreeLoadError(f"Invalid JSON in '{path}': {e}") from e
    except OSError as e:
        raise AssetTreeLoadError(f"Unable to read '{path}': {e}") from e
    except RecursionError as e:
        raise AssetTreeLoadError(f"Asset tree in '{path}' is nested too deeply.") from e

    try:
        asset = Asset.from_dict(data)
    except TypeError as e:
        raise AssetTreeLoadError(f"Malformed asset tree in '{path}': {e}") from e

    logger.debug(f"Loaded asset tree rooted at '{asset.uri}' from {path}")
    return asset


def save_text(path: str, content: str) -> None:
    """
    Persist rendered output to disk, creating parent directories as needed.

    Raises:
        OSError: If the destination cannot be written.
    """
    out_dir = os.path.dirname(os.path.abspath(path))
    os.makedirs(out_dir, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write(content if content.endswith("\n") else content + "\n")
    logger.info(f"Output saved to file: {path}")
