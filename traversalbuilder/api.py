"""High-level API for traversal-builder.

This module provides simple, functional interfaces for common traversals.
These functions wrap the builder for ease of use in simple cases.
"""

import threading
from typing import Any, Callable, Iterable, List, Optional, Union

from .builder import TraversalBuilder
from .core.adapter import NodeAdapter
from .core.traversal import Traversal

_shared_builder: Optional[TraversalBuilder] = None
_shared_lock = threading.Lock()


def get_builder() -> TraversalBuilder:
    """Return the process-wide shared builder, creating it on first use.

    Meant for hosts that configure traversals from many places and want
    them to share one configuration. The builder is not thread-safe; use
    ``new_builder()`` for independent configurations.
    """
    global _shared_builder
    with _shared_lock:
        if _shared_builder is None:
            _shared_builder = TraversalBuilder()
        return _shared_builder


def new_builder() -> TraversalBuilder:
    """Return a new builder with default configuration."""
    return TraversalBuilder()


def _configure(builder: TraversalBuilder,
               accept_types: Optional[Union[str, Iterable[str]]] = None,
               recurse_types: Optional[Union[str, Iterable[str]]] = None,
               accept: Optional[Callable[[Any], bool]] = None,
               recurse: Optional[Callable[[Any], bool]] = None,
               deny_callback: Optional[Callable[[Any, Any], None]] = None,
               max_depth: Optional[Any] = None,
               max_nodes: Optional[Any] = None,
               adapter: Optional[NodeAdapter] = None) -> TraversalBuilder:
    if accept_types is not None:
        builder.set_accept_types(accept_types)
    if recurse_types is not None:
        builder.set_recurse_types(recurse_types)
    if accept is not None:
        builder.set_accept_callback(accept)
    if recurse is not None:
        builder.set_recurse_callback(recurse)
    if deny_callback is not None:
        builder.set_deny_callback(deny_callback)
    if max_depth is not None:
        builder.set_max_depth(max_depth)
    if max_nodes is not None:
        builder.set_max_nodes(max_nodes)
    if adapter is not None:
        builder.set_adapter(adapter)
    return builder


def traverse_content(root: Any,
                     callback: Callable[[Any, Any], None],
                     context: Any = None,
                     **options) -> Traversal:
    """Build a traversal and run it once.

    Args:
        root: Starting node
        callback: Called as ``callback(node, context)`` for accepted nodes
        context: Value passed to every callback
        **options: accept_types, recurse_types, accept, recurse,
            deny_callback, max_depth, max_nodes, adapter

    Returns:
        The finished Traversal (``num_nodes`` holds the accepted count)

    Raises:
        ConfigurationError: If the options do not form a valid configuration

    Example:
        >>> traversal = traverse_content(site_root, print, max_depth=2)
        >>> traversal.num_nodes
        12
    """
    builder = _configure(TraversalBuilder(), **options)
    traversal = builder.set_callback(callback).build()
    traversal.traverse(root, context)
    return traversal


def collect_accepted(root: Any, context: Optional[List[Any]] = None, **options) -> List[Any]:
    """Collect accepted nodes in pre-order.

    Args:
        root: Starting node
        context: List to append accepted nodes to (a new list if None)
        **options: See ``traverse_content``

    Returns:
        The list holding the accepted nodes
    """
    found: List[Any] = context if context is not None else []
    traverse_content(root, lambda node, ctx: ctx.append(node), found, **options)
    return found


def count_accepted(root: Any, **options) -> int:
    """Count accepted nodes.

    Args:
        root: Starting node
        **options: See ``traverse_content``

    Returns:
        Number of nodes the callback would run on
    """
    return traverse_content(root, lambda node, ctx: None, **options).num_nodes
