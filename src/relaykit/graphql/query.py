"""
Root `node` and `nodes` fields plus helpers for node references in resolvers
"""

from typing import Any

import strawberry

from ..globalid.errors import GlobalIdError
from .context import get_dispatcher, get_loaders
from .errors import to_graphql_error
from .types import Node


@strawberry.type
class NodeQuery:
    """Root fields for fetching objects by global id.

    Inherit from this in the application's ``Query`` type. Node resolvers must
    return instances of Strawberry types implementing ``Node``.
    """

    @strawberry.field(description="Fetch an object by its global id.")
    async def node(self, info: strawberry.Info, id: strawberry.ID) -> Node | None:
        dispatcher = get_dispatcher(info)
        try:
            return await dispatcher.fetch(id, info.context, get_loaders(info))
        except GlobalIdError as e:
            raise to_graphql_error(e) from e

    # Nullable so a bad id nulls only this field, not its parent
    @strawberry.field(description="Fetch several objects by global id, in order.")
    async def nodes(
        self, info: strawberry.Info, ids: list[strawberry.ID]
    ) -> list[Node | None] | None:
        dispatcher = get_dispatcher(info)
        try:
            return await dispatcher.fetch_many(ids, info.context, get_loaders(info))
        except GlobalIdError as e:
            raise to_graphql_error(e) from e


def global_id_of(info: strawberry.Info, value: Any) -> strawberry.ID:
    """Build the global id for a domain value being serialized."""
    return strawberry.ID(get_dispatcher(info).global_id_of(value))


def decode_node_reference(info: strawberry.Info, global_id: str, expected_type: str) -> str:
    """
    Decode a node reference passed as an argument or input field.

    Use this, never a bare decode, wherever a resolver expects a node of a
    known type.

    Returns:
        The internal id

    Raises:
        GraphQLError: If the id is malformed, names an unknown type, or names
            another type than ``expected_type``
    """
    try:
        return get_dispatcher(info).decode_with_expected_type(global_id, expected_type)
    except GlobalIdError as e:
        raise to_graphql_error(e) from e


async def fetch_node_reference(
    info: strawberry.Info, global_id: str, expected_type: str
) -> Any | None:
    """Fetch a node of a known type from a reference; None if it does not exist."""
    dispatcher = get_dispatcher(info)
    try:
        return await dispatcher.fetch_typed(
            global_id, expected_type, info.context, get_loaders(info)
        )
    except GlobalIdError as e:
        raise to_graphql_error(e) from e
