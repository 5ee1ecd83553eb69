from typing import NamedTuple


class NodeDescriptor(NamedTuple):
    """Decoded form of a global id."""

    type_name: str
    internal_id: str
