from __future__ import annotations

"""
Dependency Graph Builder.

Walks an asset hierarchy and folds the dependencies reported for every asset
into a deduplicated node/link graph. Dependency targets referenced from
several assets share a single node; each ordered (source, target) pair is
linked once. Assets reporting no dependencies do not appear in the graph.
"""

import logging
from typing import Dict, Iterator, List, NamedTuple, Optional, Tuple

from statwrap.core.analysis.aggregator import MetadataAggregator
from statwrap.core.analysis.classifier import AssetTypeClassifier
from statwrap.domain.asset_models import Asset, DependencyDescriptor
from statwrap.domain.constants import ASSET_TYPE_DEPENDENCY, DIRECTION_IN
from statwrap.domain.graph_models import DependencyGraph, GraphEdge, GraphNode

logger = logging.getLogger(__name__)


class AssetDependencies(NamedTuple):
    """Flattened view of one asset: its graph id, type and dependencies."""
    asset_id: str
    asset_type: str
    dependencies: List[DependencyDescriptor]


class DependencyGraphBuilder:
    """
    Builds a DependencyGraph for an asset and all of its descendants.

    Args:
        classifier: Resolves the type of every visited asset.
        aggregator: Produces the dependency descriptors of every visited asset.
        relativize_to_root: Strip the root uri from descendant ids.
    """

    def __init__(
            self,
            classifier: Optional[AssetTypeClassifier] = None,
            aggregator: Optional[MetadataAggregator] = None,
            *,
            relativize_to_root: bool = False,
    ) -> None:
        self.classifier = classifier or AssetTypeClassifier()
        self.aggregator = aggregator or MetadataAggregator()
        self.relativize_to_root = relativize_to_root

    # -------------------------------------------------------------------------
    # PUBLIC API
    # -------------------------------------------------------------------------

    def build_graph(self, root: Optional[Asset]) -> DependencyGraph:
        """
        Build the deduplicated dependency graph of a hierarchy.

        Args:
            root: Root asset of the hierarchy.

        Returns:
            DependencyGraph: Nodes and links; empty when the root or its uri
            is missing or not a string.
        """
        graph = DependencyGraph()
        if root is None or not _has_uri(root):
            return graph

        nodes: Dict[str, GraphNode] = {}
        links: Dict[Tuple[str, str], GraphEdge] = {}

        for entry in self.flatten(root):
            if not entry.dependencies:
                continue

            # An earlier dependency node with the same id keeps its entry
            nodes.setdefault(entry.asset_id, GraphNode(entry.asset_id, entry.asset_type))

            for dependency in entry.dependencies:
                self._add_dependency_node(nodes, dependency)

                if dependency.direction == DIRECTION_IN:
                    pair = (dependency.id, entry.asset_id)
                else:
                    pair = (entry.asset_id, dependency.id)
                if pair not in links:
                    links[pair] = GraphEdge(source=pair[0], target=pair[1])

        graph.nodes.extend(nodes.values())
        graph.links.extend(links.values())
        logger.debug(
            f"Dependency graph for '{root.uri}': {len(graph.nodes)} nodes, {len(graph.links)} links."
        )
        return graph

    def flatten(self, root: Optional[Asset]) -> List[AssetDependencies]:
        """
        List every asset of the hierarchy in pre-order with its dependencies.

        Args:
            root: Root asset of the hierarchy.

        Returns:
            List[AssetDependencies]: One entry per asset carrying a string uri.
        """
        if root is None:
            return []
        root_uri = root.uri if self.relativize_to_root else None
        return [
            AssetDependencies(
                asset_id=self._asset_id(asset.uri, root_uri),
                asset_type=self.classifier.classify(asset),
                dependencies=self.aggregator.collect_dependencies(asset),
            )
            for asset in _iter_preorder(root)
            if _has_uri(asset)
        ]

    # -------------------------------------------------------------------------
    # INTERNAL HELPERS
    # -------------------------------------------------------------------------

    @staticmethod
    def _asset_id(uri: str, root_uri: Optional[str]) -> str:
        """Compute a graph id, optionally relative to the root uri."""
        if not root_uri or not uri.startswith(root_uri):
            return uri
        relative = uri[len(root_uri):].lstrip("/\\")
        return relative or uri

    @staticmethod
    def _add_dependency_node(nodes: Dict[str, GraphNode], dependency: DependencyDescriptor) -> None:
        """Register a dependency target; the first recorded type wins."""
        asset_type = dependency.type or ASSET_TYPE_DEPENDENCY
        existing = nodes.get(dependency.id)
        if existing is None:
            nodes[dependency.id] = GraphNode(dependency.id, asset_type)
        elif dependency.type and existing.asset_type != dependency.type:
            logger.debug(
                f"Keeping type '{existing.asset_type}' for '{dependency.id}' "
                f"(later report: '{dependency.type}')."
            )


def _has_uri(asset: Asset) -> bool:
    return isinstance(asset.uri, str) and bool(asset.uri)


def _iter_preorder(root: Asset) -> Iterator[Asset]:
    """Yield the hierarchy depth-first, parents before children, in child order."""
    stack: List[Asset] = [root]
    while stack:
        asset = stack.pop()
        if asset is None:
            continue
        yield asset
        if asset.children:
            stack.extend(reversed(asset.children))


def build_graph(root: Optional[Asset], *, relativize_to_root: bool = False) -> DependencyGraph:
    """Build a dependency graph using the built-in handlers."""
    return DependencyGraphBuilder(relativize_to_root=relativize_to_root).build_graph(root)
