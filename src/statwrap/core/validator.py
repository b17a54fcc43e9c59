from __future__ import annotations

"""
Configuration Validation Service.

Normalizes the builder configuration coming from persistent storage or the
command line. Coerces human-friendly values, injects defaults for missing
keys and rejects unknown handler names or naming modes.
"""

import logging
from typing import Any, Dict, List, Tuple

from statwrap.core.handlers import resolve_handlers
from statwrap.domain.config import get_default_config
from statwrap.domain.constants import TREE_NAME_MODES

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def validate_config(
        config: Any,
        *,
        strict: bool = False,
) -> Tuple[Dict[str, Any], List[str]]:
    """
    Validate and normalize a builder configuration dictionary.

    Args:
        config: Raw configuration data (usually a dictionary).
        strict: If True, raise on invalid values instead of falling back.

    Returns:
        Tuple[Dict[str, Any], List[str]]: The normalized configuration and
                                          the list of warnings raised.

    Raises:
        TypeError: In strict mode, on a value of the wrong type.
        ValueError: In strict mode, on an out-of-domain value.
    """
    warnings: List[str] = []
    defaults = get_default_config()

    if not isinstance(config, dict):
        msg = f"Invalid config type: expected dict, received {type(config).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using defaults.")
        logger.warning(msg)
        return defaults, warnings

    merged: Dict[str, Any] = dict(defaults)
    merged.update(config)

    for field in ("relativize_to_root", "strict_metadata"):
        merged[field] = _as_bool(merged.get(field), defaults[field], field, warnings, strict)

    merged["tree_name_mode"] = _as_choice(
        merged.get("tree_name_mode"), defaults["tree_name_mode"],
        "tree_name_mode", TREE_NAME_MODES, warnings, strict,
    )
    merged["handlers"] = _as_handler_list(
        merged.get("handlers"), defaults["handlers"], warnings, strict
    )
    merged["json_indent"] = _as_indent(
        merged.get("json_indent"), defaults["json_indent"], warnings, strict
    )

    return merged, warnings


# -----------------------------------------------------------------------------
# PRIVATE HELPERS: TYPE COERCION
# -----------------------------------------------------------------------------

def _as_bool(value: Any, fallback: bool, field: str, warnings: List[str], strict: bool) -> bool:
    """Coerce various input types into native booleans."""
    if isinstance(value, bool):
        return value
    if value is None:
        return fallback

    if not strict:
        if isinstance(value, (int, float)) and value in (0, 1):
            warnings.append(f"Field '{field}' converted from number {value} to bool.")
            return bool(value)
        if isinstance(value, str):
            s = value.strip().lower()
            if s in ("true", "1", "yes", "y", "on"):
                warnings.append(f"Field '{field}' converted from '{value}' to True.")
                return True
            if s in ("false", "0", "no", "n", "off"):
                warnings.append(f"Field '{field}' converted from '{value}' to False.")
                return False

    msg = f"Invalid field '{field}': expected bool, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


def _as_choice(
        value: Any,
        fallback: str,
        field: str,
        choices: Tuple[str, ...],
        warnings: List[str],
        strict: bool,
) -> str:
    """Ensure a string value belongs to a closed set of options."""
    if value is None:
        return fallback
    if isinstance(value, str) and value.strip().lower() in choices:
        return value.strip().lower()

    msg = f"Invalid field '{field}': expected one of {', '.join(choices)}, received {value!r}."
    if strict:
        raise ValueError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


def _as_handler_list(value: Any, fallback: List[str], warnings: List[str], strict: bool) -> List[str]:
    """Ensure the handler selection is a non-empty list of known handler names."""
    if value is None:
        return list(fallback)

    if isinstance(value, str) and not strict:
        items = [x.strip() for x in value.split(",") if x.strip()]
        warnings.append("Field 'handlers' converted from CSV string to list.")
        value = items

    if not isinstance(value, list) or not all(isinstance(x, str) for x in value):
        msg = f"Invalid field 'handlers': expected list[str], received {type(value).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using fallback.")
        return list(fallback)

    names = [x.strip().lower() for x in value if x.strip()]
    if not names:
        return list(fallback)

    try:
        return [handler.asset_type for handler in resolve_handlers(names)]
    except ValueError as e:
        if strict:
            raise
        warnings.append(f"Invalid field 'handlers': {e} Using fallback.")
        return list(fallback)


def _as_indent(value: Any, fallback: int, warnings: List[str], strict: bool) -> int:
    """Ensure the JSON indentation is a non-negative integer."""
    if value is None:
        return fallback
    if isinstance(value, int) and not isinstance(value, bool) and value >= 0:
        return value

    if isinstance(value, str) and not strict and value.strip().isdigit():
        warnings.append(f"Field 'json_indent' converted from '{value}' to int.")
        return int(value.strip())

    msg = f"Invalid field 'json_indent': expected non-negative int, received {value!r}."
    if strict:
        raise ValueError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback
