from strawberry.dataloader import DataLoader

from .registry import NodeRegistry


class NodeLoaders:
    """Per-request DataLoaders for node types that registered a batch resolver.

    Create one instance per request; loaders cache results and must not be
    shared between requests.
    """

    def __init__(self, registry: NodeRegistry):
        self._registry = registry
        self._loaders: dict[str, DataLoader] = {}

    def get(self, type_name: str) -> DataLoader | None:
        """Get the loader for a type, or None if it has no batch resolver."""
        loader = self._loaders.get(type_name)
        if loader is not None:
            return loader

        node_type = self._registry.get(type_name)
        if node_type is None or node_type.batch_resolver is None:
            return None

        loader = DataLoader(load_fn=node_type.batch_resolver)
        self._loaders[type_name] = loader
        return loader
