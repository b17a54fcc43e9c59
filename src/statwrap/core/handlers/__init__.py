from __future__ import annotations

"""
Metadata Handler Registry.

Exposes the built-in handlers in their fixed priority order and resolves
user-supplied handler selections (by asset type tag or handler id).
"""

from typing import Dict, List, Optional, Sequence, Type

from .base import MetadataHandler
from .languages import PythonHandler, RHandler, SASHandler, StataHandler

# Fixed priority order: the first handler reporting on an asset owns it
BUILTIN_HANDLERS: List[Type[MetadataHandler]] = [
    PythonHandler,
    RHandler,
    SASHandler,
    StataHandler,
]


def default_handlers() -> List[MetadataHandler]:
    """Return fresh instances of every built-in handler in priority order."""
    return [handler_cls() for handler_cls in BUILTIN_HANDLERS]


def resolve_handlers(names: Optional[Sequence[str]]) -> List[MetadataHandler]:
    """
    Select and order built-in handlers by asset type tag or handler id.

    Args:
        names: Requested handlers (e.g. ``["r", "python"]``). None or empty
            selects every built-in handler.

    Returns:
        List[MetadataHandler]: Handler instances in the requested order,
        without duplicates.

    Raises:
        ValueError: If a name does not match any built-in handler.
    """
    if not names:
        return default_handlers()

    lookup: Dict[str, Type[MetadataHandler]] = {}
    for handler_cls in BUILTIN_HANDLERS:
        lookup[handler_cls.asset_type] = handler_cls
        lookup[handler_cls.id.lower()] = handler_cls

    selected: List[MetadataHandler] = []
    seen = set()
    for name in names:
        handler_cls = lookup.get(name.strip().lower())
        if handler_cls is None:
            raise ValueError(f"Unknown metadata handler: '{name}'.")
        if handler_cls in seen:
            continue
        seen.add(handler_cls)
        selected.append(handler_cls())
    return selected


__all__ = [
    "MetadataHandler",
    "PythonHandler",
    "RHandler",
    "SASHandler",
    "StataHandler",
    "BUILTIN_HANDLERS",
    "default_handlers",
    "resolve_handlers",
]
