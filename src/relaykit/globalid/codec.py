"""
Reversible codec between (type name, internal id) pairs and opaque global ids.

A global id is the URL-safe base64 form (padding stripped) of
``"<type_name><delimiter><internal_id>"``. Decoding splits on the first
delimiter only, so internal ids may themselves contain the delimiter while
type names may not.
"""

import base64
import binascii
import re
from typing import Any

from .errors import EncodingError, MalformedIdError, TypeMismatchError
from .types import NodeDescriptor

DEFAULT_DELIMITER = ":"

_TOKEN_PATTERN = re.compile(r"[A-Za-z0-9_-]+")
_NAME_CHARACTER = re.compile(r"[_0-9A-Za-z]")


class GlobalIdCodec:
    """Encode and decode global ids.

    Instances hold no mutable state and are safe to share across threads and
    tasks.
    """

    def __init__(self, delimiter: str = DEFAULT_DELIMITER):
        if not delimiter:
            raise ValueError("Global id delimiter must not be empty")
        if _NAME_CHARACTER.search(delimiter):
            raise ValueError(
                f"Global id delimiter {delimiter!r} may not contain characters "
                "that are legal in GraphQL type names"
            )
        self._delimiter = delimiter

    @property
    def delimiter(self) -> str:
        return self._delimiter

    def encode(self, type_name: str, internal_id: Any) -> str:
        """Encode a type name and an internal id into a global id.

        Args:
            type_name: Name of the GraphQL object type
            internal_id: Backing-store identifier, converted with ``str()``

        Returns:
            Opaque URL-safe token

        Raises:
            EncodingError: If the type name is empty or contains the delimiter,
                or if the internal id is missing
        """
        if not isinstance(type_name, str) or not type_name:
            raise EncodingError(f"Type name must be a non-empty string, got {type_name!r}")
        if self._delimiter in type_name:
            raise EncodingError(
                f"Type name {type_name!r} contains the reserved delimiter {self._delimiter!r}"
            )
        if internal_id is None:
            raise EncodingError(f"Internal id for type '{type_name}' is missing")

        internal = str(internal_id)
        if not internal:
            raise EncodingError(f"Internal id for type '{type_name}' is empty")

        raw = f"{type_name}{self._delimiter}{internal}".encode()
        return _to_token(raw)

    def decode(self, global_id: str) -> NodeDescriptor:
        """Decode a global id into its type name and internal id.

        Registration of the decoded type is not checked here.

        Raises:
            MalformedIdError: If the token does not parse into exactly a
                non-empty type name and a non-empty internal id
        """
        if not isinstance(global_id, str):
            raise MalformedIdError(global_id, "global id must be a string")
        if not _TOKEN_PATTERN.fullmatch(global_id):
            raise MalformedIdError(global_id, "unexpected characters")

        padded = global_id + "=" * (-len(global_id) % 4)
        try:
            raw = base64.b64decode(padded, altchars=b"-_", validate=True)
            text = raw.decode("utf-8")
        except (binascii.Error, UnicodeDecodeError) as e:
            raise MalformedIdError(global_id, "not a valid encoding") from e

        # Tokens with non-zero trailing bits decode to the same bytes as the
        # canonical token; accepting them would break the one-to-one mapping.
        if _to_token(raw) != global_id:
            raise MalformedIdError(global_id, "not a canonical encoding")

        type_name, delimiter, internal_id = text.partition(self._delimiter)
        if not delimiter:
            raise MalformedIdError(global_id, "missing type delimiter")
        if not type_name or not internal_id:
            raise MalformedIdError(global_id, "empty type name or internal id")

        return NodeDescriptor(type_name, internal_id)

    def decode_with_expected_type(self, global_id: str, expected_type_name: str) -> str:
        """Decode a global id that must refer to ``expected_type_name``.

        Returns:
            The internal id

        Raises:
            MalformedIdError: If the token does not parse
            TypeMismatchError: If the token names another type
        """
        descriptor = self.decode(global_id)
        if descriptor.type_name != expected_type_name:
            raise TypeMismatchError(expected_type_name, descriptor.type_name)
        return descriptor.internal_id


def _to_token(raw: bytes) -> str:
    return base64.urlsafe_b64encode(raw).decode("ascii").rstrip("=")


# Singleton codec built from settings on first use
_default_codec: GlobalIdCodec | None = None


def get_default_codec() -> GlobalIdCodec:
    """Get the codec configured by ``settings.global_id_delimiter``."""
    global _default_codec

    if _default_codec is None:
        from ..config import settings

        _default_codec = GlobalIdCodec(settings.global_id_delimiter)

    return _default_codec


def reset_default_codec() -> None:
    """Drop the cached default codec so the next use re-reads settings."""
    global _default_codec
    _default_codec = None


def encode(type_name: str, internal_id: Any) -> str:
    """Encode with the default codec."""
    return get_default_codec().encode(type_name, internal_id)


def decode(global_id: str) -> NodeDescriptor:
    """Decode with the default codec."""
    return get_default_codec().decode(global_id)


def decode_with_expected_type(global_id: str, expected_type_name: str) -> str:
    """Decode with the default codec and check the type name."""
    return get_default_codec().decode_with_expected_type(global_id, expected_type_name)
