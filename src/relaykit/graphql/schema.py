"""
Schema validation and FastAPI integration for node-enabled schemas
"""

from typing import Any

import strawberry
from fastapi import Request
from graphql import get_introspection_query, graphql_sync
from graphql import validate_schema as gql_validate_schema
from strawberry.fastapi import GraphQLRouter

from ..config import settings
from ..logging import get_logger, set_request_context
from ..nodes.dispatch import NodeDispatcher
from .context import build_context
from .extensions import RequestContextExtension

logger = get_logger(__name__)


class SchemaValidationError(Exception):
    """Raised when a GraphQL schema fails validation at startup."""

    pass


def validate_schema(schema: strawberry.Schema) -> None:
    """Validate a GraphQL schema at startup.

    This ensures that all type references can be resolved, so the server
    fails fast instead of erroring at runtime.

    Raises:
        SchemaValidationError: If the schema is invalid or introspection fails
    """
    graphql_schema = schema._schema

    errors = gql_validate_schema(graphql_schema)
    if errors:
        message = "; ".join(str(e) for e in errors)
        logger.error("GraphQL schema validation failed", error=message)
        raise SchemaValidationError(f"GraphQL schema validation failed: {message}")

    result = graphql_sync(graphql_schema, get_introspection_query())
    if result.errors:
        message = "; ".join(str(e) for e in result.errors)
        logger.error("GraphQL introspection failed", error=message)
        raise SchemaValidationError(f"GraphQL introspection failed: {message}")

    logger.info("GraphQL schema validation successful")


def create_graphql_router(
    schema: strawberry.Schema,
    dispatcher: NodeDispatcher,
) -> GraphQLRouter[dict[str, Any], None]:
    """Create a GraphQL router for FastAPI.

    The registry is frozen here; no node types can be added once requests
    are being served. ``RequestContextExtension`` is added to the schema
    unless it already carries it.
    """
    dispatcher.registry.freeze()

    # Operation names reach log records through this extension
    if RequestContextExtension not in schema.extensions:
        schema.extensions = (*schema.extensions, RequestContextExtension)

    async def get_context(request: Request) -> dict[str, Any]:
        """Get the context for GraphQL resolvers."""
        request_id = set_request_context(request.headers.get("x-request-id"))
        return build_context(dispatcher, request=request, request_id=request_id)

    return GraphQLRouter(
        schema,
        path=settings.graphql_path,
        graphql_ide="graphiql" if settings.graphiql else None,
        context_getter=get_context,
    )
