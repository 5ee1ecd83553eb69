"""
Global object identification: opaque ids for (type name, internal id) pairs
"""

from .codec import (
    GlobalIdCodec,
    decode,
    decode_with_expected_type,
    encode,
    get_default_codec,
    reset_default_codec,
)
from .errors import (
    EncodingError,
    GlobalIdError,
    MalformedIdError,
    TypeMismatchError,
    UnknownTypeError,
)
from .types import NodeDescriptor

__all__ = [
    "EncodingError",
    "GlobalIdCodec",
    "GlobalIdError",
    "MalformedIdError",
    "NodeDescriptor",
    "TypeMismatchError",
    "UnknownTypeError",
    "decode",
    "decode_with_expected_type",
    "encode",
    "get_default_codec",
    "reset_default_codec",
]
