from __future__ import annotations

"""
Domain Exceptions.

The builders themselves never raise: these errors only surface from opt-in
strict metadata checks and from the infrastructure that loads asset trees.
"""


class StatWrapError(Exception):
    """Base class for all workflow errors."""


class MetadataIntegrityError(StatWrapError):
    """Raised in strict mode when a handler reports a malformed metadata block."""

    def __init__(self, handler_id: str, uri: str, detail: str) -> None:
        self.handler_id = handler_id
        self.uri = uri
        self.detail = detail
        super().__init__(f"Malformed metadata from '{handler_id}' on '{uri}': {detail}")


class AssetTreeLoadError(StatWrapError):
    """Raised when an asset tree document cannot be read or decoded."""
