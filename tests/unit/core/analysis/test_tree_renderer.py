from __future__ import annotations

"""
Unit tests for the ASCII tree renderer.
"""

from statwrap.core.analysis.tree_builder import build_tree
from statwrap.core.analysis.tree_renderer import render_tree
from statwrap.domain.graph_models import TreeNode


def test_render_none_is_empty():
    assert render_tree(None) == []


def test_render_scenario(scenario_tree):
    assert render_tree(build_tree(scenario_tree)) == [
        "/proj [generic]",
        "└── /proj/a.py [python]",
        "    └── numpy [dependency]",
    ]


def test_render_connectors_and_prefixes():
    tree = TreeNode("root", "generic", children=[
        TreeNode("a", "python", children=[TreeNode("numpy", "dependency", is_dependency=True)]),
        TreeNode("empty", "generic", children=[]),
        TreeNode("b", "r"),
    ])

    assert render_tree(tree) == [
        "root [generic]",
        "├── a [python]",
        "│   └── numpy [dependency]",
        "├── empty [generic]",
        "└── b [r]",
    ]


def test_render_deep_chain():
    tree = TreeNode("leaf", "python")
    for depth in range(1500):
        tree = TreeNode(f"dir{depth}", "generic", children=[tree])

    lines = render_tree(tree)

    assert len(lines) == 1501
    assert lines[0] == "dir1499 [generic]"
    assert lines[-1] == " " * (4 * 1499) + "└── leaf [python]"
