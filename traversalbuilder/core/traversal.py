"""Traversal engine for traversal-builder.

A Traversal is produced by ``TraversalBuilder.build()`` and holds the
resolved policy of a walk: which nodes to accept, which to recurse into,
what to call for each, and how far to go. The policy never changes after
construction; only the per-walk counters do.
"""

import logging
from typing import Any, Callable, Optional

from .adapter import NodeAdapter

logger = logging.getLogger(__name__)

NodePredicate = Callable[[Any], bool]
NodeCallback = Callable[[Any, Any], None]


class Traversal:
    """Depth-first, pre-order walk over a content tree.

    For every visited node the accept decision picks between ``callback``
    and ``deny_callback``; the recurse decision, made independently,
    controls whether the node's children are visited. ``max_nodes`` caps
    the number of accepted nodes and ``max_depth`` caps how many levels
    of children are fetched below the starting node.

    A Traversal may be reused for any number of sequential walks. Its
    counters make overlapping walks on the same instance unsafe; build one
    Traversal per concurrent walker instead.

    Example:
        >>> traversal = (TraversalBuilder()
        ...              .set_callback(lambda node, ctx: ctx.append(node))
        ...              .build())
        >>> found = []
        >>> traversal.traverse(site_root, found)
    """

    def __init__(self,
                 recurse_decision: NodePredicate,
                 accept_decision: NodePredicate,
                 callback: NodeCallback,
                 deny_callback: Optional[NodeCallback],
                 max_depth: Optional[int],
                 max_nodes: int,
                 adapter: NodeAdapter):
        """Initialize a traversal with fully resolved policy.

        Args:
            recurse_decision: Predicate deciding whether to visit a node's children
            accept_decision: Predicate deciding whether a node is accepted
            callback: Called as ``callback(node, context)`` for accepted nodes
            deny_callback: Called for rejected nodes, or None
            max_depth: Deepest level whose nodes are visited (None = unlimited)
            max_nodes: Maximum accepted nodes per walk (0 = unlimited)
            adapter: Node representation used to classify and expand nodes
        """
        self._recurse_decision = recurse_decision
        self._accept_decision = accept_decision
        self._callback = callback
        self._deny_callback = deny_callback
        self._max_depth = max_depth
        self._max_nodes = max_nodes
        self._adapter = adapter

        # Per-walk state
        self._level = 0
        self._num_nodes = 0
        self._broken = False

    @property
    def max_depth(self) -> Optional[int]:
        return self._max_depth

    @property
    def max_nodes(self) -> int:
        return self._max_nodes

    @property
    def adapter(self) -> NodeAdapter:
        return self._adapter

    @property
    def has_deny_callback(self) -> bool:
        return self._deny_callback is not None

    @property
    def level(self) -> int:
        """Current recursion depth (0 at the starting node)."""
        return self._level

    @property
    def num_nodes(self) -> int:
        """Number of nodes passed to ``callback`` during the current walk."""
        return self._num_nodes

    @property
    def broken(self) -> bool:
        """True once ``break_()`` has been called during the current walk."""
        return self._broken

    def accepts(self, node: Any) -> bool:
        """Evaluate the accept decision for ``node``."""
        return bool(self._accept_decision(node))

    def recurses(self, node: Any) -> bool:
        """Evaluate the recurse decision for ``node``."""
        return bool(self._recurse_decision(node))

    def traverse(self, node: Any, context: Any = None) -> None:
        """Walk the tree below ``node``, starting with ``node`` itself.

        Resets the accepted-node count and the break flag, so every call is
        an independent walk. All results are delivered through the
        callbacks; ``context`` is passed to each of them unchanged.

        Errors raised by callbacks, predicates or the adapter are not
        caught; they abort the walk and reach the caller as raised.

        Args:
            node: The starting node
            context: Arbitrary value shared by all callback invocations
        """
        self._num_nodes = 0
        self._broken = False
        self._level = 0

        logger.debug("Traversal start: %r (max_depth=%s, max_nodes=%s)",
                     node, self._max_depth, self._max_nodes)
        self._traverse(node, context)
        logger.debug("Traversal done: %d node(s) accepted%s",
                     self._num_nodes, " (broken)" if self._broken else "")

    def break_(self) -> None:
        """Stop the walk in progress.

        The step currently executing finishes (typically the callback that
        called this method); every following node is skipped. The next call
        to ``traverse`` starts unbroken.
        """
        self._broken = True

    def _limit_reached(self) -> bool:
        return self._max_nodes > 0 and self._num_nodes >= self._max_nodes

    def _traverse(self, node: Any, context: Any) -> None:
        if self._broken:
            return

        # Checked before visiting, so an exhausted walk fetches nothing more
        if self._limit_reached():
            return

        if not self._adapter.is_node(node):
            return

        if self._accept_decision(node):
            self._callback(node, context)
            self._num_nodes += 1
        elif self._deny_callback is not None:
            self._deny_callback(node, context)

        if self._recurse_decision(node):
            self._level += 1
            if self._max_depth is None or self._level <= self._max_depth:
                for child in self._adapter.get_children(node):
                    self._traverse(child, context)
            self._level -= 1

    def __repr__(self) -> str:
        return (f"Traversal(adapter={self._adapter!r}, max_depth={self._max_depth!r}, "
                f"max_nodes={self._max_nodes!r})")
