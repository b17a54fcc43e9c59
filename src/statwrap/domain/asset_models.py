from __future__ import annotations

"""
Asset Hierarchy Data Models.

Provides the read-only input structures consumed by the workflow builders:
the recursive Asset node supplied by the discovery layer, and the flattened
DependencyDescriptor produced per asset by the metadata aggregator.
"""

from dataclasses import dataclass
from typing import Any, List, Mapping, Optional, Sequence, Union

# Metadata arrives either keyed by handler id, or as a list of blocks that
# each carry their handler id under "id".
Metadata = Union[Mapping[str, Any], Sequence[Mapping[str, Any]]]

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class Asset:
    """
    Represents a file or folder entry in a project's hierarchy.

    Attributes:
        uri: Unique identifier of the asset (usually an absolute path).
        metadata: Handler-specific analysis payloads keyed by handler id.
        children: Nested assets, or None when the entry is a leaf.
    """
    uri: Optional[str]
    metadata: Optional[Metadata] = None
    children: Optional[List["Asset"]] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Asset":
        """
        Build an Asset hierarchy from its decoded JSON representation.

        An explicit empty ``children`` list is preserved, while a missing or
        null one becomes None. The hierarchy is decoded with an explicit
        stack, so its depth is not bounded by the interpreter recursion limit.

        Raises:
            TypeError: If a node of the hierarchy is not a mapping, or carries
                a non-string uri or a non-list children collection.
        """
        root = cls._decode_node(data)
        stack = [(data, root)]
        while stack:
            entry, asset = stack.pop()
            if asset.children is None:
                continue
            for raw_child in entry["children"]:
                child = cls._decode_node(raw_child)
                asset.children.append(child)
                stack.append((raw_child, child))
        return root

    @classmethod
    def _decode_node(cls, data: Any) -> "Asset":
        """Decode a single node; its children list is left empty for the caller."""
        if not isinstance(data, Mapping):
            raise TypeError(f"Asset entry must be an object, received {type(data).__name__}.")

        uri = data.get("uri")
        if uri is not None and not isinstance(uri, str):
            raise TypeError(f"Asset uri must be a string, received {type(uri).__name__}.")

        raw_children = data.get("children")
        if raw_children is not None and not isinstance(raw_children, (list, tuple)):
            raise TypeError(
                f"Asset children must be a list, received {type(raw_children).__name__}."
            )

        return cls(
            uri=uri,
            metadata=data.get("metadata"),
            children=None if raw_children is None else [],
        )


@dataclass(frozen=True)
class DependencyDescriptor:
    """
    One relationship reported by a handler for a single asset.

    Attributes:
        id: Target identifier (library name or another asset's identifier).
        direction: 'in' when the asset consumes the target, 'out' when it produces it.
        type: Optional semantic tag reported by the handler.
    """
    id: str
    direction: str
    type: Optional[str] = None

# -----------------------------------------------------------------------------
# METADATA LOOKUP
# -----------------------------------------------------------------------------

def get_handler_metadata(handler_id: str, metadata: Optional[Metadata]) -> Optional[Mapping[str, Any]]:
    """
    Locate the metadata block recorded by a given handler.

    Args:
        handler_id: Stable identifier of the handler.
        metadata: The asset's metadata in either supported shape.

    Returns:
        Optional[Mapping[str, Any]]: The handler's block, or None if absent.
    """
    if not metadata:
        return None

    if isinstance(metadata, Mapping):
        block = metadata.get(handler_id)
        return block if isinstance(block, Mapping) else None

    if isinstance(metadata, (list, tuple)):
        for block in metadata:
            if isinstance(block, Mapping) and block.get("id") == handler_id:
                return block

    return None
