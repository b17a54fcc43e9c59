from __future__ import annotations

"""
Built-in Language Handlers.

Bindings for the Python, R, SAS and Stata analysis handlers. Each one maps a
stable handler id to the asset type tag used by the classifier.
"""

from statwrap.core.handlers.base import MetadataHandler
from statwrap.domain import constants as const


class PythonHandler(MetadataHandler):
    id = const.PYTHON_HANDLER_ID
    asset_type = const.ASSET_TYPE_PYTHON


class RHandler(MetadataHandler):
    id = const.R_HANDLER_ID
    asset_type = const.ASSET_TYPE_R


class SASHandler(MetadataHandler):
    id = const.SAS_HANDLER_ID
    asset_type = const.ASSET_TYPE_SAS


class StataHandler(MetadataHandler):
    id = const.STATA_HANDLER_ID
    asset_type = const.ASSET_TYPE_STATA
