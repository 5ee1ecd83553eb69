"""
Strawberry integration for global object identification
"""

from .context import build_context, get_dispatcher, get_loaders
from .errors import to_graphql_error
from .extensions import RequestContextExtension
from .query import NodeQuery, decode_node_reference, fetch_node_reference, global_id_of
from .schema import SchemaValidationError, create_graphql_router, validate_schema
from .types import Node

__all__ = [
    "Node",
    "NodeQuery",
    "RequestContextExtension",
    "SchemaValidationError",
    "build_context",
    "create_graphql_router",
    "decode_node_reference",
    "fetch_node_reference",
    "get_dispatcher",
    "get_loaders",
    "global_id_of",
    "to_graphql_error",
    "validate_schema",
]
