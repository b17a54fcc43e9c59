from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: logging bootstrap, configuration resolution
(defaults, persisted settings and command-line overrides), asset tree
loading, graph/tree construction and result rendering.
"""

import json
import os
import sys
from typing import Any, Dict, List, Optional

from statwrap.core.analysis.tree_renderer import render_tree
from statwrap.core.validator import validate_config
from statwrap.core.workflow import create_builders
from statwrap.domain.config import get_default_config, load_config, save_config
from statwrap.domain.errors import AssetTreeLoadError, MetadataIntegrityError
from statwrap.domain.graph_models import DependencyGraph, TreeNode
from statwrap.infra.fs import load_asset_tree, normalize_path, save_text
from statwrap.infra.logging import LoggingConfig, configure_logging, get_default_log_path, get_logger
from statwrap.interface.cli import args as cli_args

logger = get_logger(__name__)

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the CLI workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code (0 success, 1 build failure, 2 invalid input
        or configuration, 130 interrupted).
    """
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    log_level = "DEBUG" if args.debug else "INFO"
    log_file = None
    if args.log_file is not None:
        log_file = normalize_path(args.log_file, get_default_log_path())
    configure_logging(LoggingConfig(level=log_level, console=True, log_file=log_file))

    # 1. Resolve configuration
    overrides = cli_args.args_to_overrides(args)
    try:
        # Explicit command-line values never fall back silently
        validate_config(overrides, strict=True)
    except (TypeError, ValueError) as e:
        logger.error(f"Invalid command-line option: {e}")
        print(f"ERROR: {e}", file=sys.stderr)
        return 2

    base_conf = get_default_config() if args.use_defaults else load_config()
    raw_conf = _merge_config(base_conf, overrides)
    clean_conf, warnings = validate_config(raw_conf, strict=False)
    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    if args.save_config:
        save_config(clean_conf)

    if args.dump_config:
        print(json.dumps(clean_conf, ensure_ascii=False, indent=2))
        return 0

    # 2. Load the asset hierarchy
    if not (args.input_path or "").strip():
        msg = "An asset tree file is required (-i/--input)."
        logger.error(msg)
        print(f"ERROR: {msg}", file=sys.stderr)
        return 2

    input_path = normalize_path(args.input_path, os.getcwd())
    try:
        root = load_asset_tree(input_path)
    except AssetTreeLoadError as e:
        logger.error(str(e))
        print(f"ERROR: {e}", file=sys.stderr)
        return 2

    # 3. Build and render
    builders = create_builders(clean_conf)
    indent = clean_conf["json_indent"]
    try:
        if args.view == "tree":
            tree = builders.tree.build_tree(root)
            output = _render_tree_output(tree, args.json_output, indent)
        else:
            graph = builders.graph.build_graph(root)
            output = _render_graph_output(graph, args.json_output, indent)
    except KeyboardInterrupt:
        logger.warning("Interrupted by user.")
        return 130
    except MetadataIntegrityError as e:
        logger.error(str(e))
        print(f"ERROR: {e}", file=sys.stderr)
        return 1
    except RecursionError:
        # json.dumps walks nested containers recursively
        msg = "Result is nested too deeply to serialize as JSON; use the text view."
        logger.error(msg)
        print(f"ERROR: {msg}", file=sys.stderr)
        return 1

    print(output)

    if args.output_path:
        output_path = normalize_path(args.output_path, os.getcwd())
        try:
            save_text(output_path, output)
        except OSError as e:
            logger.error(f"Failed to write output to '{output_path}': {e}")
            print(f"ERROR: Unable to write '{output_path}': {e}", file=sys.stderr)
            return 1

    return 0

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """Shallow-merge known, non-null override values into the base configuration."""
    out = dict(base)
    for k in get_default_config():
        if k in overrides and overrides[k] is not None:
            out[k] = overrides[k]
    return out

# -----------------------------------------------------------------------------
# VIEW RENDERING
# -----------------------------------------------------------------------------

def _render_graph_output(graph: DependencyGraph, as_json: bool, indent: Optional[int]) -> str:
    if as_json:
        return json.dumps(graph.to_dict(), ensure_ascii=False, indent=indent)

    lines = [f"Dependency graph: {len(graph.nodes)} nodes, {len(graph.links)} links"]
    for node in graph.nodes:
        lines.append(f"  [{node.asset_type}] {node.id}")
    for link in graph.links:
        lines.append(f"  {link.source} -> {link.target}")
    return "\n".join(lines)


def _render_tree_output(tree: Optional[TreeNode], as_json: bool, indent: Optional[int]) -> str:
    if as_json:
        return json.dumps(tree.to_dict() if tree else None, ensure_ascii=False, indent=indent)
    return "\n".join(render_tree(tree))

# -----------------------------------------------------------------------------
# CLI ENTRYPOINT
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())
