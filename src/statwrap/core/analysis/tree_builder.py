from __future__ import annotations

"""
Dependency Tree Builder.

Mirrors the asset hierarchy as a TreeNode structure and attaches each
asset's own dependencies as terminal leaves. Unlike the graph, the tree does
not merge cross-references: a dependency leaf stays a leaf even when its id
names another asset of the hierarchy.
"""

import re
from typing import List, Optional, Set, Tuple

from statwrap.core.analysis.aggregator import MetadataAggregator
from statwrap.core.analysis.classifier import AssetTypeClassifier
from statwrap.domain.asset_models import Asset
from statwrap.domain.constants import ASSET_TYPE_DEPENDENCY, TREE_NAME_MODES
from statwrap.domain.graph_models import TreeNode


_SEPARATORS_RX = re.compile(r"[\\/]+")


class DependencyTreeBuilder:
    """
    Builds a TreeNode hierarchy for an asset and all of its descendants.

    Args:
        classifier: Resolves the type of every visited asset.
        aggregator: Produces the dependency leaves of every visited asset.
        name_mode: 'uri' to display full uris, 'basename' for the last segment.
    """

    def __init__(
            self,
            classifier: Optional[AssetTypeClassifier] = None,
            aggregator: Optional[MetadataAggregator] = None,
            *,
            name_mode: str = "uri",
    ) -> None:
        if name_mode not in TREE_NAME_MODES:
            raise ValueError(f"Invalid tree name mode '{name_mode}'. Expected one of {TREE_NAME_MODES}.")
        self.classifier = classifier or AssetTypeClassifier()
        self.aggregator = aggregator or MetadataAggregator()
        self.name_mode = name_mode

    def build_tree(self, asset: Optional[Asset]) -> Optional[TreeNode]:
        """
        Build the dependency tree rooted at an asset.

        Nodes are expanded from an explicit stack, so arbitrarily deep
        hierarchies do not hit the interpreter recursion limit.

        Args:
            asset: Root of the (sub)hierarchy.

        Returns:
            Optional[TreeNode]: The tree, or None for an absent asset.
        """
        if asset is None:
            return None

        root = self._new_node(asset)
        stack: List[Tuple[Asset, TreeNode]] = [(asset, root)]

        while stack:
            current, node = stack.pop()

            pending: List[Tuple[Asset, TreeNode]] = []
            if current.children is not None:
                node.children = []
                for child in current.children:
                    if child is None:
                        continue
                    child_node = self._new_node(child)
                    node.children.append(child_node)
                    pending.append((child, child_node))

            self._attach_dependencies(current, node)
            stack.extend(reversed(pending))

        return root

    def display_name(self, asset: Asset) -> str:
        """Derive the display name of an asset from its uri."""
        uri = "" if asset.uri is None else str(asset.uri)
        if self.name_mode == "basename":
            segments = [s for s in _SEPARATORS_RX.split(uri) if s]
            if segments:
                return segments[-1]
        return uri

    def _new_node(self, asset: Asset) -> TreeNode:
        return TreeNode(
            name=self.display_name(asset),
            asset_type=self.classifier.classify(asset),
        )

    def _attach_dependencies(self, asset: Asset, node: TreeNode) -> None:
        """Append the asset's dependencies as leaves after its structural children."""
        dependencies = self.aggregator.collect_dependencies(asset)
        if not dependencies:
            return
        if node.children is None:
            node.children = []

        # Only attach each dependency once
        seen: Set[Tuple[str, str]] = {(c.name, c.asset_type) for c in node.children}
        for dependency in dependencies:
            key = (dependency.id, ASSET_TYPE_DEPENDENCY)
            if key in seen:
                continue
            seen.add(key)
            node.children.append(TreeNode(
                name=dependency.id,
                asset_type=ASSET_TYPE_DEPENDENCY,
                is_dependency=True,
            ))


def build_tree(asset: Optional[Asset], *, name_mode: str = "uri") -> Optional[TreeNode]:
    """Build a dependency tree using the built-in handlers."""
    return DependencyTreeBuilder(name_mode=name_mode).build_tree(asset)
