from __future__ import annotations

"""
Workflow Builder Factory.

Wires a validated configuration into the graph and tree builders. Both
builders share one classifier and one aggregator over the same ordered
handler list.
"""

from dataclasses import dataclass
from typing import Any, Dict

from statwrap.core.analysis.aggregator import MetadataAggregator
from statwrap.core.analysis.classifier import AssetTypeClassifier
from statwrap.core.analysis.graph_builder import DependencyGraphBuilder
from statwrap.core.analysis.tree_builder import DependencyTreeBuilder
from statwrap.core.handlers import resolve_handlers


@dataclass(frozen=True)
class WorkflowBuilders:
    """Graph and tree builders configured from the same settings."""
    graph: DependencyGraphBuilder
    tree: DependencyTreeBuilder


def create_builders(config: Dict[str, Any]) -> WorkflowBuilders:
    """
    Instantiate the builders described by a validated configuration.

    Args:
        config: Output of ``validate_config``.

    Returns:
        WorkflowBuilders: The configured graph and tree builders.
    """
    handlers = resolve_handlers(config.get("handlers"))
    classifier = AssetTypeClassifier(handlers)
    aggregator = MetadataAggregator(handlers, strict=bool(config.get("strict_metadata")))

    return WorkflowBuilders(
        graph=DependencyGraphBuilder(
            classifier,
            aggregator,
            relativize_to_root=bool(config.get("relativize_to_root")),
        ),
        tree=DependencyTreeBuilder(
            classifier,
            aggregator,
            name_mode=config.get("tree_name_mode", "uri"),
        ),
    )
