from __future__ import annotations

"""
Tree Renderer.

Converts a TreeNode hierarchy into ASCII lines for terminal output. Every
line shows the node name followed by its asset type in brackets.
"""

from typing import List, Optional, Tuple

from statwrap.domain.graph_models import TreeNode

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def render_tree(tree: Optional[TreeNode]) -> List[str]:
    """
    Render a dependency tree using standard ASCII connectors (├──, └──).

    Args:
        tree: Root of the tree; None renders nothing.

    Returns:
        List[str]: Visual lines, root first.
    """
    lines: List[str] = []
    if tree is None:
        return lines

    lines.append(_label(tree))
    stack = _child_entries(tree, prefix="")
    while stack:
        node, prefix, is_last = stack.pop()
        connector = "└── " if is_last else "├── "
        lines.append(f"{prefix}{connector}{_label(node)}")

        if node.children:
            stack.extend(_child_entries(node, prefix + ("    " if is_last else "│   ")))
    return lines

# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _child_entries(node: TreeNode, prefix: str) -> List[Tuple[TreeNode, str, bool]]:
    """Stack entries for the children of a node, first child on top."""
    children = node.children or []
    total = len(children)
    entries = [(child, prefix, i == total - 1) for i, child in enumerate(children)]
    entries.reverse()
    return entries


def _label(node: TreeNode) -> str:
    return f"{node.name} [{node.asset_type}]"
