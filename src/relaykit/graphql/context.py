"""
GraphQL context carrying the node dispatcher and per-request loaders
"""

from typing import Any

import strawberry

from ..nodes.dispatch import NodeDispatcher
from ..nodes.loaders import NodeLoaders


def build_context(dispatcher: NodeDispatcher, **extra: Any) -> dict[str, Any]:
    """Build a fresh context dict for one GraphQL request."""
    return {
        "node_dispatcher": dispatcher,
        "node_loaders": NodeLoaders(dispatcher.registry),
        **extra,
    }


def get_dispatcher(info: strawberry.Info) -> NodeDispatcher:
    """
    Get the node dispatcher from the GraphQL context.

    Raises:
        RuntimeError: If the context was built without a dispatcher
    """
    dispatcher = _context_get(info, "node_dispatcher")
    if dispatcher is None:
        raise RuntimeError("node_dispatcher not found in GraphQL context")
    return dispatcher


def get_loaders(info: strawberry.Info) -> NodeLoaders | None:
    return _context_get(info, "node_loaders")


def _context_get(info: strawberry.Info, key: str) -> Any:
    context = info.context
    if isinstance(context, dict):
        return context.get(key)
    return getattr(context, key, None)
