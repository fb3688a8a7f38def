"""Core abstractions for traversal-builder.

This module contains the node and adapter interfaces and the traversal
engine that walks them.
"""

from .node import ContentNode, NodeIterator
from .adapter import NodeAdapter
from .traversal import Traversal

__all__ = [
    "ContentNode",
    "NodeIterator",
    "NodeAdapter",
    "Traversal",
]
