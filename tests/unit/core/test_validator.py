from __future__ import annotations

"""
Unit tests for the Configuration Validator.

Verifies:
1. Default value injection.
2. Type coercion (strings to bools, CSV to lists).
3. Domain checks on handler names and naming modes.
4. Strict mode validation.
"""

import pytest

from statwrap.core.validator import validate_config
from statwrap.domain.config import get_default_config


def test_validate_none_returns_defaults() -> None:
    cfg, warnings = validate_config(None)

    assert cfg == get_default_config()
    assert len(warnings) == 1


def test_validate_empty_dict_returns_defaults_without_warnings() -> None:
    cfg, warnings = validate_config({})

    assert cfg == get_default_config()
    assert warnings == []


def test_validate_coerces_human_friendly_values() -> None:
    cfg, warnings = validate_config({
        "relativize_to_root": "yes",
        "strict_metadata": 0,
        "tree_name_mode": " Basename ",
        "handlers": "r, python",
        "json_indent": "4",
    })

    assert cfg["relativize_to_root"] is True
    assert cfg["strict_metadata"] is False
    assert cfg["tree_name_mode"] == "basename"
    assert cfg["handlers"] == ["r", "python"]
    assert cfg["json_indent"] == 4
    assert len(warnings) == 4


def test_validate_normalizes_handler_ids_to_types() -> None:
    cfg, warnings = validate_config({"handlers": ["StatWrap.StataHandler", "SAS"]})

    assert cfg["handlers"] == ["stata", "sas"]
    assert warnings == []


def test_validate_falls_back_on_invalid_values() -> None:
    cfg, warnings = validate_config({
        "relativize_to_root": "maybe",
        "tree_name_mode": "title",
        "handlers": ["python", "julia"],
        "json_indent": -1,
    })
    defaults = get_default_config()

    assert cfg["relativize_to_root"] is defaults["relativize_to_root"]
    assert cfg["tree_name_mode"] == defaults["tree_name_mode"]
    assert cfg["handlers"] == defaults["handlers"]
    assert cfg["json_indent"] == defaults["json_indent"]
    assert len(warnings) == 4
    assert any("julia" in w for w in warnings)


def test_validate_empty_handler_list_uses_defaults() -> None:
    cfg, _ = validate_config({"handlers": []})
    assert cfg["handlers"] == ["python", "r", "sas", "stata"]


def test_validate_keeps_unknown_keys() -> None:
    cfg, _ = validate_config({"custom": 1})
    assert cfg["custom"] == 1


def test_strict_mode_raises() -> None:
    with pytest.raises(TypeError):
        validate_config("not a dict", strict=True)
    with pytest.raises(TypeError):
        validate_config({"relativize_to_root": "yes"}, strict=True)
    with pytest.raises(ValueError):
        validate_config({"tree_name_mode": "title"}, strict=True)
    with pytest.raises(ValueError):
        validate_config({"handlers": ["julia"]}, strict=True)
    with pytest.raises(TypeError):
        validate_config({"handlers": "python,r"}, strict=True)
