from __future__ import annotations

"""
Base Definitions for Metadata Handlers.

A handler represents one per-language static-analysis capability. The
workflow core never extracts metadata itself: it only asks each handler for
the block it previously attached to an asset.
"""

from abc import ABC
from typing import Any, Mapping, Optional

from statwrap.domain.asset_models import Asset, get_handler_metadata


class MetadataHandler(ABC):
    """
    Abstract capability exposing the libraries, inputs and outputs recorded
    for an asset by a single extraction handler.

    Subclasses declare ``id`` (the key used by the extraction layer) and
    ``asset_type`` (the classification tag assigned to assets they own).
    """

    id: str = ""
    asset_type: str = ""

    def get_metadata(self, asset: Optional[Asset]) -> Optional[Mapping[str, Any]]:
        """
        Retrieve this handler's metadata block from an asset.

        Args:
            asset: The asset to inspect.

        Returns:
            Optional[Mapping[str, Any]]: The block, or None if the handler
            reported nothing for this asset.
        """
        if asset is None:
            return None
        return get_handler_metadata(self.id, asset.metadata)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self.id!r})"
