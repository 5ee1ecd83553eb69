"""
Node interface GraphQL type definitions
"""

import strawberry


@strawberry.interface(description="An object with a global id.")
class Node:
    """Interface for every type that participates in global identification.

    Implementing types must put the global id, never the raw internal id,
    in ``id``.
    """

    id: strawberry.ID
