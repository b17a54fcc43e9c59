from __future__ import annotations

"""
Integration tests for the FileSystem infrastructure layer.

Verifies asset tree document loading (and its error reporting) and output
persistence against a temporary directory.
"""

import json

import pytest

from statwrap.domain.errors import AssetTreeLoadError, StatWrapError
from statwrap.infra.fs import load_asset_tree, normalize_path, save_text


def _write_json(path, data):
    path.write_text(json.dumps(data), encoding="utf-8")
    return str(path)


def test_load_asset_tree(tmp_path, scenario_tree_dict, scenario_tree):
    path = _write_json(tmp_path / "assets.json", scenario_tree_dict)

    assert load_asset_tree(path) == scenario_tree


def test_load_asset_tree_missing_file(tmp_path):
    with pytest.raises(AssetTreeLoadError, match="not found"):
        load_asset_tree(str(tmp_path / "nope.json"))


def test_load_asset_tree_invalid_json(tmp_path):
    bad = tmp_path / "bad.json"
    bad.write_text("{\"uri\": ", encoding="utf-8")

    with pytest.raises(AssetTreeLoadError, match="Invalid JSON"):
        load_asset_tree(str(bad))


@pytest.mark.parametrize("data", [
    ["/proj"],
    {"uri": "/proj", "children": [42]},
    {"uri": "/proj", "children": [{"uri": 7}]},
])
def test_load_asset_tree_malformed_hierarchy(tmp_path, data):
    path = _write_json(tmp_path / "weird.json", data)

    with pytest.raises(StatWrapError, match="Malformed asset tree"):
        load_asset_tree(path)


def test_save_text_creates_parent_dirs_and_trailing_newline(tmp_path):
    target = tmp_path / "out" / "graph.txt"

    save_text(str(target), "line one")

    assert target.read_text(encoding="utf-8") == "line one\n"


def test_normalize_path_fallback(tmp_path):
    assert normalize_path("   ", str(tmp_path)) == str(tmp_path)
    assert normalize_path(str(tmp_path / "x"), "/ignored") == str(tmp_path / "x")


def test_normalize_path_expands_user_and_variables(tmp_path, monkeypatch):
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setenv("STATWRAP_OUT", "render")

    assert normalize_path("~/$STATWRAP_OUT/tree.txt", "/ignored") == str(tmp_path / "render" / "tree.txt")
