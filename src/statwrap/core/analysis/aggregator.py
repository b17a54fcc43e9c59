from __future__ import annotations

"""
Metadata Aggregator.

Flattens the library, input and output collections reported by every
handler for one asset into a single list of directed dependency descriptors.
The result is always ``libraries ++ inputs ++ outputs`` with handler priority
order preserved inside each bucket.
"""

import logging
from typing import Any, List, Mapping, Optional, Sequence

from statwrap.core.handlers import MetadataHandler, default_handlers
from statwrap.domain import constants as const
from statwrap.domain.asset_models import Asset, DependencyDescriptor
from statwrap.domain.errors import MetadataIntegrityError

logger = logging.getLogger(__name__)


class MetadataAggregator:
    """
    Collects dependency descriptors from an ordered list of handlers.

    Malformed handler output (a sub-collection that is not a list, or an entry
    without a usable ``id``) is skipped with a warning. With ``strict=True``
    it raises MetadataIntegrityError instead.
    """

    def __init__(
            self,
            handlers: Optional[Sequence[MetadataHandler]] = None,
            *,
            strict: bool = False,
    ) -> None:
        self._handlers: List[MetadataHandler] = (
            list(handlers) if handlers is not None else default_handlers()
        )
        self.strict = strict

    @property
    def handlers(self) -> List[MetadataHandler]:
        return list(self._handlers)

    def collect_dependencies(self, asset: Optional[Asset]) -> List[DependencyDescriptor]:
        """
        Gather every dependency reported for an asset.

        Args:
            asset: The asset to inspect (may be None).

        Returns:
            List[DependencyDescriptor]: Libraries and inputs tagged 'in',
            followed by outputs tagged 'out'. Empty if nothing is reported.
        """
        if asset is None:
            return []

        libraries: List[DependencyDescriptor] = []
        inputs: List[DependencyDescriptor] = []
        outputs: List[DependencyDescriptor] = []

        for handler in self._handlers:
            metadata = handler.get_metadata(asset)
            if not metadata:
                continue
            libraries.extend(self._read_bucket(
                handler, asset, metadata, const.METADATA_LIBRARIES, const.DIRECTION_IN
            ))
            inputs.extend(self._read_bucket(
                handler, asset, metadata, const.METADATA_INPUTS, const.DIRECTION_IN
            ))
            outputs.extend(self._read_bucket(
                handler, asset, metadata, const.METADATA_OUTPUTS, const.DIRECTION_OUT
            ))

        return libraries + inputs + outputs

    # -------------------------------------------------------------------------
    # INTERNAL HELPERS
    # -------------------------------------------------------------------------

    def _read_bucket(
            self,
            handler: MetadataHandler,
            asset: Asset,
            metadata: Mapping[str, Any],
            bucket: str,
            direction: str,
    ) -> List[DependencyDescriptor]:
        """Convert one sub-collection of a handler block into descriptors."""
        raw = metadata.get(bucket)
        if raw is None:
            return []

        if not isinstance(raw, (list, tuple)):
            self._report(
                handler, asset,
                f"'{bucket}' must be a list, received {type(raw).__name__}."
            )
            return []

        out: List[DependencyDescriptor] = []
        for i, entry in enumerate(raw):
            dep_id = entry.get("id") if isinstance(entry, Mapping) else None
            if not isinstance(dep_id, str) or not dep_id:
                self._report(handler, asset, f"'{bucket}[{i}]' has no usable 'id'.")
                continue
            dep_type = entry.get("type")
            out.append(DependencyDescriptor(
                id=dep_id,
                direction=direction,
                type=dep_type if isinstance(dep_type, str) and dep_type else None,
            ))
        return out

    def _report(self, handler: MetadataHandler, asset: Asset, detail: str) -> None:
        if self.strict:
            raise MetadataIntegrityError(handler.id, str(asset.uri), detail)
        logger.warning(f"Ignoring malformed metadata from '{handler.id}' on '{asset.uri}': {detail}")


def collect_dependencies(asset: Optional[Asset]) -> List[DependencyDescriptor]:
    """Flatten the dependencies of an asset using the built-in handlers."""
    return MetadataAggregator().collect_dependencies(asset)
