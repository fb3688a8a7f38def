"""Testing utilities for traversal-builder."""

from .fixtures import MemoryNode, build_tree, iter_nodes

__all__ = ['MemoryNode', 'build_tree', 'iter_nodes']
