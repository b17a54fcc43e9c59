from __future__ import annotations

"""
Workflow Graph and Tree Data Models.

Defines the snapshot structures handed to the visualization layer: the
deduplicated node/link graph and the hierarchy-preserving dependency tree.
Both serialize to the plain dictionary shapes consumed by the renderers.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

# -----------------------------------------------------------------------------
# GRAPH COMPONENTS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class GraphNode:
    """
    A single vertex of the dependency graph.

    Attributes:
        id: Asset identifier or dependency identifier.
        asset_type: Classification tag (handler type, 'dependency' or 'generic').
    """
    id: str
    asset_type: str

    def to_dict(self) -> Dict[str, str]:
        return {"id": self.id, "assetType": self.asset_type}


@dataclass(frozen=True)
class GraphEdge:
    """Directed link between two GraphNode ids."""
    source: str
    target: str

    def to_dict(self) -> Dict[str, str]:
        return {"source": self.source, "target": self.target}


@dataclass
class DependencyGraph:
    """
    Node/link collection produced by a single graph build.

    Attributes:
        nodes: Unique nodes in first-seen order.
        links: Unique directed edges in first-seen order.
    """
    nodes: List[GraphNode] = field(default_factory=list)
    links: List[GraphEdge] = field(default_factory=list)

    def is_empty(self) -> bool:
        return not self.nodes and not self.links

    def to_dict(self) -> Dict[str, List[Dict[str, str]]]:
        return {
            "nodes": [n.to_dict() for n in self.nodes],
            "links": [e.to_dict() for e in self.links],
        }

# -----------------------------------------------------------------------------
# TREE COMPONENTS
# -----------------------------------------------------------------------------

@dataclass
class TreeNode:
    """
    Hierarchical node of the dependency tree.

    Attributes:
        name: Display identifier derived from an asset uri or dependency id.
        asset_type: Classification tag stored under attributes.assetType.
        children: Nested nodes, or None when there are none.
        is_dependency: True for dependency leaves, which never carry children.
    """
    name: str
    asset_type: str
    children: Optional[List["TreeNode"]] = None
    is_dependency: bool = False

    @property
    def attributes(self) -> Dict[str, str]:
        return {"assetType": self.asset_type}

    def to_dict(self) -> Dict[str, Any]:
        """
        Serialize into the nested ``{name, children, attributes}`` shape.

        Dependency leaves omit the ``children`` key entirely. The tree is
        walked with an explicit stack, so depth is not bounded by recursion.
        """
        root = self._shallow_dict()
        stack: List[Tuple[TreeNode, Dict[str, Any]]] = [(self, root)]
        while stack:
            node, out = stack.pop()
            if node.is_dependency or node.children is None:
                continue
            out["children"] = []
            for child in node.children:
                child_out = child._shallow_dict()
                out["children"].append(child_out)
                stack.append((child, child_out))
        return root

    def _shallow_dict(self) -> Dict[str, Any]:
        if self.is_dependency:
            return {"name": self.name, "attributes": self.attributes}
        return {"name": self.name, "children": None, "attributes": self.attributes}
