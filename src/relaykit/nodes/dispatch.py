"""
Decode global ids and dispatch them to the registered per-type resolvers
"""

import asyncio
import inspect
from collections.abc import Iterable
from typing import Any

from ..globalid.codec import GlobalIdCodec, get_default_codec
from ..globalid.errors import TypeMismatchError
from ..globalid.types import NodeDescriptor
from ..logging import get_logger
from .loaders import NodeLoaders
from .registry import NodeRegistry

logger = get_logger(__name__)


class NodeDispatcher:
    """
    Entry point for fetching nodes by global id.

    A resolver returning None means the record does not exist; that is a
    normal empty result and never raised as an error. Malformed tokens and
    unregistered type names are raised as ``MalformedIdError`` and
    ``UnknownTypeError`` respectively.
    """

    def __init__(self, registry: NodeRegistry, codec: GlobalIdCodec | None = None):
        self.registry = registry
        self.codec = codec or get_default_codec()

    def global_id_of(self, value: Any) -> str:
        """
        Build the global id for a domain value.

        Raises:
            EncodingError: If the value's type cannot be determined or its
                internal id is missing
            UnknownTypeError: If a custom type resolver returned an
                unregistered name
        """
        type_name = self.registry.resolve_type(value)
        node_type = self.registry.require(type_name)
        return self.codec.encode(type_name, node_type.internal_id_fetcher(value))

    def resolve(self, global_id: str) -> NodeDescriptor:
        """Decode a global id and check that its type is registered."""
        descriptor = self.codec.decode(global_id)
        self.registry.require(descriptor.type_name)
        return descriptor

    def decode_with_expected_type(self, global_id: str, expected_type_name: str) -> str:
        """
        Decode a reference to a node of a known type and return its internal id.

        Raises:
            MalformedIdError: If the token does not parse
            UnknownTypeError: If the token names an unregistered type
            TypeMismatchError: If the token names a different registered type
        """
        descriptor = self.resolve(global_id)
        if descriptor.type_name != expected_type_name:
            raise TypeMismatchError(expected_type_name, descriptor.type_name)
        return descriptor.internal_id

    async def fetch(
        self,
        global_id: str,
        context: Any = None,
        loaders: NodeLoaders | None = None,
    ) -> Any | None:
        """
        Fetch the node a global id refers to.

        Args:
            global_id: Opaque token supplied by the client
            context: Request context handed to the resolver
            loaders: Per-request batch loaders, used when the type has one

        Returns:
            The resolved value, or None if the record does not exist
        """
        return await self._load(self.resolve(global_id), context, loaders)

    async def fetch_typed(
        self,
        global_id: str,
        expected_type_name: str,
        context: Any = None,
        loaders: NodeLoaders | None = None,
    ) -> Any | None:
        """Fetch a node that must be of ``expected_type_name``."""
        internal_id = self.decode_with_expected_type(global_id, expected_type_name)
        return await self._load(NodeDescriptor(expected_type_name, internal_id), context, loaders)

    async def fetch_many(
        self,
        global_ids: Iterable[str],
        context: Any = None,
        loaders: NodeLoaders | None = None,
    ) -> list[Any | None]:
        """
        Fetch several nodes concurrently, preserving input order.

        Every id is decoded before any resolver runs, so a single bad id
        fails the whole call without side effects.
        """
        descriptors = [self.resolve(global_id) for global_id in global_ids]
        return list(
            await asyncio.gather(
                *(self._load(descriptor, context, loaders) for descriptor in descriptors)
            )
        )

    async def _load(
        self,
        descriptor: NodeDescriptor,
        context: Any,
        loaders: NodeLoaders | None,
    ) -> Any | None:
        type_name, internal_id = descriptor
        logger.debug("Dispatching node fetch", type_name=type_name, internal_id=internal_id)

        loader = loaders.get(type_name) if loaders is not None else None
        if loader is not None:
            result = await loader.load(internal_id)
        else:
            result = self.registry.require(type_name).resolver(internal_id, context)
            if inspect.isawaitable(result):
                result = await result

        if result is None:
            logger.debug("Node not found", type_name=type_name, internal_id=internal_id)
            return None

        actual_type = self._result_type_name(result)
        if actual_type is not None and actual_type != type_name:
            logger.error(
                "Node resolver returned a value of another type",
                type_name=type_name,
                internal_id=internal_id,
                actual_type=actual_type,
            )
            raise TypeMismatchError(type_name, actual_type)
        return result

    def _result_type_name(self, result: Any) -> str | None:
        # Registered model class first, then a Strawberry type named like a node type
        name = self.registry.model_type_name(result)
        if name is not None:
            return name
        definition = getattr(type(result), "__strawberry_definition__", None)
        if definition is not None and definition.name in self.registry:
            return definition.name
        return None
