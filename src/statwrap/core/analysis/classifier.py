from __future__ import annotations

"""
Asset Type Classifier.

Determines which language handler owns an asset from the metadata attached to
it. The first handler in priority order reporting a non-empty block wins.
"""

from typing import List, Optional, Sequence

from statwrap.core.handlers import MetadataHandler, default_handlers
from statwrap.domain.asset_models import Asset
from statwrap.domain.constants import ASSET_TYPE_GENERIC


class AssetTypeClassifier:
    """
    Resolves the classification tag of an asset against an ordered list of
    metadata handlers.
    """

    def __init__(self, handlers: Optional[Sequence[MetadataHandler]] = None) -> None:
        self._handlers: List[MetadataHandler] = (
            list(handlers) if handlers is not None else default_handlers()
        )

    @property
    def handlers(self) -> List[MetadataHandler]:
        return list(self._handlers)

    def classify(self, asset: Optional[Asset]) -> str:
        """
        Return the asset type of the first handler reporting on the asset.

        Args:
            asset: Asset to classify (may be None).

        Returns:
            str: The owning handler's asset type, or 'generic'.
        """
        if asset is None:
            return ASSET_TYPE_GENERIC

        for handler in self._handlers:
            if handler.get_metadata(asset):
                return handler.asset_type
        return ASSET_TYPE_GENERIC


def get_asset_type(asset: Optional[Asset]) -> str:
    """Classify an asset against the built-in handlers."""
    return AssetTypeClassifier().classify(asset)
