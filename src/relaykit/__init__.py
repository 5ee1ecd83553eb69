"""
relaykit
Relay-style global object identification for Strawberry GraphQL
"""

__version__ = "0.1.0"

from .config import settings
from .globalid import (
    EncodingError,
    GlobalIdCodec,
    GlobalIdError,
    MalformedIdError,
    NodeDescriptor,
    TypeMismatchError,
    UnknownTypeError,
    decode,
    decode_with_expected_type,
    encode,
)
from .nodes import NodeDispatcher, NodeLoaders, NodeRegistry, NodeType

__all__ = [
    "EncodingError",
    "GlobalIdCodec",
    "GlobalIdError",
    "MalformedIdError",
    "NodeDescriptor",
    "NodeDispatcher",
    "NodeLoaders",
    "NodeRegistry",
    "NodeType",
    "TypeMismatchError",
    "UnknownTypeError",
    "__version__",
    "decode",
    "decode_with_expected_type",
    "encode",
    "settings",
]
