from __future__ import annotations

"""
Unit tests for the Asset hierarchy models.

Verifies:
1. Decoding of raw JSON hierarchies (absent vs empty children).
2. Handler metadata lookup in both supported metadata shapes.
"""

import pytest

from statwrap.domain.asset_models import Asset, get_handler_metadata
from statwrap.domain.constants import PYTHON_HANDLER_ID, R_HANDLER_ID


def test_from_dict_preserves_empty_children_and_missing_children():
    asset = Asset.from_dict({
        "uri": "/proj",
        "children": [
            {"uri": "/proj/empty_dir", "children": []},
            {"uri": "/proj/file.txt"},
        ],
    })

    assert asset.uri == "/proj"
    assert asset.metadata is None
    assert [c.uri for c in asset.children] == ["/proj/empty_dir", "/proj/file.txt"]
    assert asset.children[0].children == []
    assert asset.children[1].children is None


def test_from_dict_keeps_metadata_untouched():
    metadata = {PYTHON_HANDLER_ID: {"libraries": [{"id": "numpy"}]}}
    asset = Asset.from_dict({"uri": "/a.py", "metadata": metadata})

    assert asset.metadata == metadata


def test_from_dict_rejects_non_mapping_nodes():
    with pytest.raises(TypeError):
        Asset.from_dict(["not", "an", "asset"])

    with pytest.raises(TypeError):
        Asset.from_dict({"uri": "/proj", "children": ["oops"]})

    with pytest.raises(TypeError):
        Asset.from_dict({"uri": "/proj", "children": "oops"})


def test_from_dict_rejects_non_string_uri():
    with pytest.raises(TypeError, match="uri must be a string"):
        Asset.from_dict({"uri": 7})

    with pytest.raises(TypeError):
        Asset.from_dict({"uri": "/p", "children": [{"uri": ["/p", "a"]}]})


def test_from_dict_decodes_deep_hierarchies():
    data = {"uri": "/deep/leaf"}
    for depth in range(3000):
        data = {"uri": f"/deep/{depth}", "children": [data]}

    asset = Asset.from_dict(data)

    levels = 0
    while asset.children:
        asset = asset.children[0]
        levels += 1
    assert levels == 3000
    assert asset.uri == "/deep/leaf"
    assert asset.children is None


def test_get_handler_metadata_from_mapping():
    block = {"libraries": [{"id": "numpy"}]}
    metadata = {PYTHON_HANDLER_ID: block}

    assert get_handler_metadata(PYTHON_HANDLER_ID, metadata) == block
    assert get_handler_metadata(R_HANDLER_ID, metadata) is None


def test_get_handler_metadata_from_list_of_blocks():
    """The original tool stores one block per handler, tagged with its id."""
    r_block = {"id": R_HANDLER_ID, "libraries": [{"id": "dplyr"}]}
    metadata = [{"id": "StatWrap.Other"}, r_block]

    assert get_handler_metadata(R_HANDLER_ID, metadata) == r_block
    assert get_handler_metadata(PYTHON_HANDLER_ID, metadata) is None


@pytest.mark.parametrize("metadata", [None, {}, [], "garbage", 42])
def test_get_handler_metadata_handles_missing_or_odd_shapes(metadata):
    assert get_handler_metadata(PYTHON_HANDLER_ID, metadata) is None


def test_get_handler_metadata_ignores_non_mapping_block():
    assert get_handler_metadata(PYTHON_HANDLER_ID, {PYTHON_HANDLER_ID: ["numpy"]}) is None
