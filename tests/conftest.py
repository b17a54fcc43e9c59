from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

1. Puts the 'src' directory on sys.path.
2. Provides the shared asset hierarchies used across unit and e2e tests.
"""

import os
import sys
from typing import Any, Dict

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from statwrap.domain.asset_models import Asset  # noqa: E402
from statwrap.domain.constants import PYTHON_HANDLER_ID, R_HANDLER_ID  # noqa: E402


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def scenario_tree_dict() -> Dict[str, Any]:
    """
    Root project folder with one Python script importing numpy.

    /proj            (no metadata)
      /proj/a.py     (Python handler: libraries = [numpy])
    """
    return {
        "uri": "/proj",
        "children": [
            {
                "uri": "/proj/a.py",
                "metadata": {
                    PYTHON_HANDLER_ID: {"libraries": [{"id": "numpy"}]},
                },
            }
        ],
    }


@pytest.fixture
def scenario_tree(scenario_tree_dict: Dict[str, Any]) -> Asset:
    return Asset.from_dict(scenario_tree_dict)


@pytest.fixture
def analysis_project() -> Asset:
    """
    A small analysis project where scripts share libraries and data files.

    /study
      /study/code
        /study/code/clean.py   reads raw.csv, writes clean.csv, uses pandas
        /study/code/model.R    reads clean.csv, writes model.rds, uses dplyr + pandas
      /study/data              (empty folder)
      /study/README.md         (no metadata)
    """
    clean = Asset(
        uri="/study/code/clean.py",
        metadata={
            PYTHON_HANDLER_ID: {
                "libraries": [{"id": "pandas"}],
                "inputs": [{"id": "raw.csv", "type": "data"}],
                "outputs": [{"id": "clean.csv", "type": "data"}],
            }
        },
    )
    model = Asset(
        uri="/study/code/model.R",
        metadata={
            R_HANDLER_ID: {
                "libraries": [{"id": "dplyr"}, {"id": "pandas"}],
                "inputs": [{"id": "clean.csv", "type": "data"}],
                "outputs": [{"id": "model.rds"}],
            }
        },
    )
    return Asset(
        uri="/study",
        children=[
            Asset(uri="/study/code", children=[clean, model]),
            Asset(uri="/study/data", children=[]),
            Asset(uri="/study/README.md"),
        ],
    )
