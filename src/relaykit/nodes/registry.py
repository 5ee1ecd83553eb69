"""
Node registry: the per-type table of resolvers used for global id dispatch.
"""

import re
from collections.abc import Awaitable, Callable, Sequence
from dataclasses import dataclass
from operator import attrgetter
from types import MappingProxyType
from typing import Any

from ..globalid.errors import EncodingError, UnknownTypeError
from ..logging import get_logger

logger = get_logger(__name__)

_GRAPHQL_NAME = re.compile(r"[_A-Za-z][_0-9A-Za-z]*")

NodeResolver = Callable[[str, Any], Any]
BatchNodeResolver = Callable[[list[str]], Awaitable[Sequence[Any]]]
InternalIdFetcher = Callable[[Any], Any]
TypeResolver = Callable[[Any], str]


@dataclass(frozen=True)
class NodeType:
    """A type that participates in global identification.

    ``resolver`` receives the decoded internal id and the request context and
    returns the value, or None when no such record exists. It may be a plain
    function or a coroutine function.
    """

    name: str
    resolver: NodeResolver
    internal_id_fetcher: InternalIdFetcher = attrgetter("id")
    model: type | None = None
    batch_resolver: BatchNodeResolver | None = None


class NodeRegistry:
    """
    Lookup table from type name to node resolver.

    Built once while the schema is assembled, then frozen; after ``freeze()``
    it is read-only and can be shared by concurrent requests.
    """

    def __init__(self, type_resolver: TypeResolver | None = None):
        self._types: dict[str, NodeType] = {}
        self._models: dict[type, str] = {}
        self._type_resolver = type_resolver
        self._frozen = False

    def register(
        self,
        name: str,
        resolver: NodeResolver,
        *,
        internal_id_fetcher: InternalIdFetcher | None = None,
        model: type | None = None,
        batch_resolver: BatchNodeResolver | None = None,
    ) -> NodeType:
        """
        Register a node type.

        Args:
            name: GraphQL type name
            resolver: Fetches one value by internal id
            internal_id_fetcher: Extracts the internal id from a value
                (defaults to its ``id`` attribute)
            model: Python class whose instances belong to this type
            batch_resolver: Fetches many values by internal id, in key order

        Raises:
            ValueError: If the name is not a legal GraphQL name, or the name or
                model is already registered
            RuntimeError: If the registry is frozen
        """
        if self._frozen:
            raise RuntimeError(f"Cannot register '{name}': node registry is frozen")
        if not isinstance(name, str) or not _GRAPHQL_NAME.fullmatch(name):
            raise ValueError(f"'{name}' is not a valid GraphQL type name")
        if name in self._types:
            raise ValueError(f"Node type '{name}' is already registered")
        if model is not None and model in self._models:
            raise ValueError(
                f"Model {model.__name__} is already registered as '{self._models[model]}'"
            )

        node_type = NodeType(
            name=name,
            resolver=resolver,
            internal_id_fetcher=internal_id_fetcher or attrgetter("id"),
            model=model,
            batch_resolver=batch_resolver,
        )
        logger.info("Registering node type", name=name)
        self._types[name] = node_type
        if model is not None:
            self._models[model] = name
        return node_type

    def node_type(self, name: str, **kwargs: Any) -> Callable[[NodeResolver], NodeResolver]:
        """Decorator form of :meth:`register` for resolver functions."""

        def decorator(resolver: NodeResolver) -> NodeResolver:
            self.register(name, resolver, **kwargs)
            return resolver

        return decorator

    def freeze(self) -> "NodeRegistry":
        """Make the registry read-only."""
        if not self._frozen:
            self._types = MappingProxyType(self._types)  # type: ignore[assignment]
            self._models = MappingProxyType(self._models)  # type: ignore[assignment]
            self._frozen = True
            logger.debug("Node registry frozen", types=list(self._types))
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    def get(self, name: str) -> NodeType | None:
        """Get a node type by name, or None if not registered."""
        return self._types.get(name)

    def require(self, name: str) -> NodeType:
        """
        Get a node type by name.

        Raises:
            UnknownTypeError: If no node type has that name
        """
        node_type = self._types.get(name)
        if node_type is None:
            raise UnknownTypeError(name)
        return node_type

    def resolve_type(self, value: Any) -> str:
        """
        Map a domain value to its type name.

        Uses the registry's ``type_resolver`` when one was given, otherwise the
        exact class of the value is looked up among registered models.

        Raises:
            EncodingError: If no type name can be determined
        """
        if self._type_resolver is not None:
            name = self._type_resolver(value)
        else:
            name = self.model_type_name(value)

        if not name:
            raise EncodingError(f"No node type registered for {type(value).__name__} values")
        return name

    def model_type_name(self, value: Any) -> str | None:
        """Type name registered for the exact class of ``value``, if any."""
        return self._models.get(type(value))

    def list_names(self) -> list[str]:
        """List all registered type names."""
        return list(self._types.keys())

    def __len__(self) -> int:
        return len(self._types)

    def __contains__(self, name: object) -> bool:
        return name in self._types
