"""
Exceptions raised while encoding, decoding and dispatching global IDs
"""


class GlobalIdError(Exception):
    """Base exception for global identification failures.

    Every subclass carries a stable ``code`` that the GraphQL layer copies
    into the error's ``extensions`` so clients can tell the kinds apart.
    """

    code = "GLOBAL_ID_ERROR"


class EncodingError(GlobalIdError):
    """Raised when a (type name, internal id) pair cannot be encoded.

    This points at a server-side bug: the inputs come from our own data.
    """

    code = "GLOBAL_ID_ENCODING"


class MalformedIdError(GlobalIdError):
    """Raised when a token cannot be parsed back into a type name and an id."""

    code = "MALFORMED_GLOBAL_ID"

    def __init__(self, global_id: object, reason: str):
        self.global_id = global_id
        self.reason = reason
        super().__init__(f"Invalid global id {global_id!r}: {reason}")


class TypeMismatchError(GlobalIdError):
    """Raised when a well-formed token names a different type than expected."""

    code = "GLOBAL_ID_TYPE_MISMATCH"

    def __init__(self, expected_type: str, actual_type: str):
        self.expected_type = expected_type
        self.actual_type = actual_type
        super().__init__(
            f"Expected a global id of type '{expected_type}', got one of type '{actual_type}'"
        )


class UnknownTypeError(GlobalIdError):
    """Raised when a well-formed token names a type with no registered resolver."""

    code = "UNKNOWN_NODE_TYPE"

    def __init__(self, type_name: str):
        self.type_name = type_name
        super().__init__(f"Unknown node type '{type_name}'")
