"""
Conversion of global id failures into GraphQL field errors
"""

from graphql import GraphQLError

from ..globalid.errors import GlobalIdError
from ..logging import get_logger

logger = get_logger(__name__)


def to_graphql_error(error: GlobalIdError) -> GraphQLError:
    """Build a field error carrying the failure's code in its extensions.

    Raising the result from a resolver nulls only that field; sibling fields
    of the response still resolve.
    """
    logger.warning("Rejected global id", code=error.code, error=str(error))
    return GraphQLError(str(error), extensions={"code": error.code})
