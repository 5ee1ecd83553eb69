"""
Node registration and global id dispatch
"""

from .dispatch import NodeDispatcher
from .loaders import NodeLoaders
from .registry import NodeRegistry, NodeType

__all__ = ["NodeDispatcher", "NodeLoaders", "NodeRegistry", "NodeType"]
