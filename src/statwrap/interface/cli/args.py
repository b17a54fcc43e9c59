from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema of ``statwrap-workflow`` and translates the
parsed namespace into configuration overrides.
"""

import argparse
from typing import Any, Dict, List, Optional

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the workflow CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="statwrap-workflow",
        description="Build dependency graphs and trees from a StatWrap asset hierarchy.",
    )

    # --- Input / Output ---
    p.add_argument(
        "-i", "--input",
        dest="input_path",
        default=None,
        help="Asset tree JSON document (root asset object).",
    )
    p.add_argument(
        "-o", "--output",
        dest="output_path",
        default=None,
        help="Also write the rendered output to this file.",
    )

    # --- View Selection ---
    view = p.add_mutually_exclusive_group()
    view.add_argument(
        "--graph",
        dest="view",
        action="store_const",
        const="graph",
        help="Build the deduplicated dependency graph (default).",
    )
    view.add_argument(
        "--tree",
        dest="view",
        action="store_const",
        const="tree",
        help="Build the hierarchical dependency tree.",
    )
    p.set_defaults(view="graph")

    # --- Builder Options ---
    p.add_argument(
        "--relativize",
        action="store_true",
        help="Use ids relative to the root asset uri in the graph.",
    )
    p.add_argument(
        "--basename",
        action="store_true",
        help="Name tree nodes after the last segment of their uri.",
    )
    p.add_argument(
        "--handlers",
        default=None,
        help="Comma-separated handlers in priority order (python,r,sas,stata).",
    )
    p.add_argument(
        "--strict",
        action="store_true",
        help="Fail on malformed handler metadata instead of skipping it.",
    )

    # --- Format Selection ---
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help="Emit the result as JSON.",
    )

    # --- Configuration and Diagnostics ---
    p.add_argument(
        "--use-defaults",
        action="store_true",
        help="Ignore the persisted configuration.",
    )
    p.add_argument(
        "--save-config",
        action="store_true",
        help="Persist the effective configuration as the new default.",
    )
    p.add_argument(
        "--dump-config",
        action="store_true",
        help="Print the effective configuration and exit.",
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        nargs="?",
        const="",
        default=None,
        help="Also write logs to a rotating file (default location when no path is given).",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into configuration overrides.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Only the keys explicitly requested on the command line.
    """
    overrides: Dict[str, Any] = {}

    if args.relativize:
        overrides["relativize_to_root"] = True
    if args.basename:
        overrides["tree_name_mode"] = "basename"
    if args.strict:
        overrides["strict_metadata"] = True

    handlers = _split_csv(args.handlers)
    if handlers:
        overrides["handlers"] = handlers

    return overrides

# -----------------------------------------------------------------------------
# HELPERS
# -----------------------------------------------------------------------------

def _split_csv(value: Optional[str]) -> Optional[List[str]]:
    """Convert a comma-separated string into a list of trimmed items."""
    if value is None:
        return None
    parts = [x.strip() for x in value.split(",")]
    return [x for x in parts if x]
