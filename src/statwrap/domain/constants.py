from __future__ import annotations

"""
Domain Constants.

Centralizes the identifiers shared between the metadata handlers, the
classification stage and the graph/tree builders: handler ids, asset type
tags, dependency directions and metadata bucket names.
"""

from typing import List, Tuple

# -----------------------------------------------------------------------------
# HANDLER IDENTIFIERS
# -----------------------------------------------------------------------------
# Keys under which the extraction layer stores each handler's metadata block.

PYTHON_HANDLER_ID = "StatWrap.PythonHandler"
R_HANDLER_ID = "StatWrap.RHandler"
SAS_HANDLER_ID = "StatWrap.SASHandler"
STATA_HANDLER_ID = "StatWrap.StataHandler"

# -----------------------------------------------------------------------------
# ASSET TYPE TAGS
# -----------------------------------------------------------------------------

ASSET_TYPE_PYTHON = "python"
ASSET_TYPE_R = "r"
ASSET_TYPE_SAS = "sas"
ASSET_TYPE_STATA = "stata"
ASSET_TYPE_GENERIC = "generic"
ASSET_TYPE_DEPENDENCY = "dependency"

# Priority order used when more than one handler reports on the same asset
HANDLER_PRIORITY: List[Tuple[str, str]] = [
    (ASSET_TYPE_PYTHON, PYTHON_HANDLER_ID),
    (ASSET_TYPE_R, R_HANDLER_ID),
    (ASSET_TYPE_SAS, SAS_HANDLER_ID),
    (ASSET_TYPE_STATA, STATA_HANDLER_ID),
]

# -----------------------------------------------------------------------------
# DEPENDENCY DESCRIPTORS
# -----------------------------------------------------------------------------

DIRECTION_IN = "in"
DIRECTION_OUT = "out"

METADATA_LIBRARIES = "libraries"
METADATA_INPUTS = "inputs"
METADATA_OUTPUTS = "outputs"

# -----------------------------------------------------------------------------
# PRESENTATION
# -----------------------------------------------------------------------------

TREE_NAME_MODES: Tuple[str, ...] = ("uri", "basename")
