"""Fluent builder for content tree traversals.

The builder accumulates a ``TraversalConfig`` through chained setters and
freezes it into an immutable ``Traversal`` on ``build()``. A builder can be
reconfigured and built again at any time; traversals built earlier are not
affected.

Example:
    >>> traversal = (TraversalBuilder()
    ...              .set_accept_types(ARTICLE_TYPE)
    ...              .set_max_nodes(10)
    ...              .set_callback(publish)
    ...              .build())
    >>> traversal.traverse(site_root, context)
"""

import json
import logging
from typing import Any, Callable, Iterable, List, Optional, Union

from .adapters.native import NativeNodeAdapter
from .config import TraversalConfig, coerce_limit, default_accept_types, default_recurse_types
from .core.adapter import NodeAdapter
from .core.traversal import Traversal
from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)

TypeSpec = Union[str, Iterable[str]]


def _normalize_types(types: TypeSpec) -> List[Any]:
    """Turn a single type tag or an iterable of tags into a detached list.

    The list is deep-copied through a JSON round trip so that later changes
    to the caller's objects cannot reach the builder. Values JSON cannot
    represent are kept as given, with a debug record.
    """
    if isinstance(types, (str, bytes)) or not isinstance(types, Iterable):
        types = [types]
    else:
        types = list(types)

    try:
        return json.loads(json.dumps(types))
    except (TypeError, ValueError) as e:
        logger.debug("Type list not copied: %s", e)
        return types


def _type_predicate(adapter: NodeAdapter, types: Iterable[Any]) -> Callable[[Any], bool]:
    """Predicate testing a node against a frozen copy of ``types``."""
    frozen = frozenset(str(t) for t in types)

    def predicate(node: Any) -> bool:
        return adapter.is_type_of(node, frozen)

    return predicate


class TraversalBuilder:
    """Mutable, chainable configuration for a ``Traversal``.

    Every setter returns the builder itself. ``build()`` validates the
    configuration and returns a new Traversal, raising
    ``ConfigurationError`` when:

    - no callback is set
    - neither a recurse predicate nor recurse types are set
    - neither an accept predicate nor accept types are set
    - a depth or node limit is invalid or negative

    The builder is meant for sequential, single-threaded configuration.
    """

    def __init__(self, config: Optional[TraversalConfig] = None):
        """Initialize builder.

        Args:
            config: Starting configuration (copied); defaults apply if None
        """
        self._config = config.copy() if config is not None else TraversalConfig()

    @property
    def config(self) -> TraversalConfig:
        """A copy of the current configuration."""
        return self._config.copy()

    # Type lists

    def set_recurse_types(self, types: TypeSpec) -> 'TraversalBuilder':
        """Set which primary node types to recurse into.

        Args:
            types: A type tag or an iterable of type tags
        """
        self._config.recurse_types = _normalize_types(types)
        return self

    def reset_recurse_types(self) -> 'TraversalBuilder':
        self._config.recurse_types = default_recurse_types()
        return self

    def set_accept_types(self, types: TypeSpec) -> 'TraversalBuilder':
        """Set which primary node types to run the callback on.

        Args:
            types: A type tag or an iterable of type tags
        """
        self._config.accept_types = _normalize_types(types)
        return self

    def reset_accept_types(self) -> 'TraversalBuilder':
        self._config.accept_types = default_accept_types()
        return self

    # Predicates

    def set_recurse_callback(self, predicate: Callable[[Any], bool]) -> 'TraversalBuilder':
        """Set the predicate deciding whether a node's children are visited.

        Used instead of the recurse types when set.
        """
        self._config.recurse_predicate = predicate
        return self

    def clear_recurse_callback(self) -> 'TraversalBuilder':
        self._config.recurse_predicate = None
        return self

    def set_accept_callback(self, predicate: Callable[[Any], bool]) -> 'TraversalBuilder':
        """Set the predicate deciding whether a node is accepted.

        Used instead of the accept types when set.
        """
        self._config.accept_predicate = predicate
        return self

    def clear_accept_callback(self) -> 'TraversalBuilder':
        self._config.accept_predicate = None
        return self

    # Callbacks

    def set_callback(self, callback: Callable[[Any, Any], None]) -> 'TraversalBuilder':
        """Set the callback run as ``callback(node, context)`` on accepted nodes."""
        self._config.callback = callback
        return self

    def set_deny_callback(self, deny_callback: Callable[[Any, Any], None]) -> 'TraversalBuilder':
        """Set the callback run as ``deny_callback(node, context)`` on rejected nodes."""
        self._config.deny_callback = deny_callback
        return self

    def clear_deny_callback(self) -> 'TraversalBuilder':
        self._config.deny_callback = None
        return self

    # Limits

    def set_max_depth(self, max_depth: Any) -> 'TraversalBuilder':
        """Set how many levels below the starting node are visited.

        0 visits the starting node only. Values that are not integers are
        coerced (``"2"`` and ``2.5`` both give 2); values that cannot be
        coerced are reported by ``build()``.
        """
        self._config.max_depth = coerce_limit(max_depth)
        return self

    def clear_max_depth(self) -> 'TraversalBuilder':
        self._config.max_depth = None
        return self

    def set_max_nodes(self, max_nodes: Any) -> 'TraversalBuilder':
        """Set the maximum number of nodes to run the callback on (0 = unlimited).

        Coerced like ``set_max_depth``.
        """
        self._config.max_nodes = coerce_limit(max_nodes)
        return self

    def reset_max_nodes(self) -> 'TraversalBuilder':
        self._config.max_nodes = 0
        return self

    # Node representation

    def set_adapter(self, adapter: NodeAdapter) -> 'TraversalBuilder':
        """Set the adapter for the node representation being walked."""
        self._config.adapter = adapter
        return self

    def reset_adapter(self) -> 'TraversalBuilder':
        self._config.adapter = NativeNodeAdapter()
        return self

    def reset_all_optionals(self) -> 'TraversalBuilder':
        """Restore every optional setting to its default. Keeps the callback."""
        return (self.reset_recurse_types()
                .reset_accept_types()
                .clear_recurse_callback()
                .clear_accept_callback()
                .clear_deny_callback()
                .clear_max_depth()
                .reset_max_nodes()
                .reset_adapter())

    def build(self) -> Traversal:
        """Build a traversal from the current configuration.

        Type lists are captured by value, so reconfiguring the builder later
        never changes the returned Traversal.

        Returns:
            A new Traversal

        Raises:
            ConfigurationError: If the configuration is invalid
        """
        config = self._config
        errors = config.validate()
        if errors:
            error = ConfigurationError(errors)
            logger.warning("Traversal not built: %s", error)
            raise error

        adapter = config.adapter

        recurse_decision = config.recurse_predicate
        if not callable(recurse_decision):
            recurse_decision = _type_predicate(adapter, config.recurse_types)

        accept_decision = config.accept_predicate
        if not callable(accept_decision):
            accept_decision = _type_predicate(adapter, config.accept_types)

        return Traversal(
            recurse_decision=recurse_decision,
            accept_decision=accept_decision,
            callback=config.callback,
            deny_callback=config.deny_callback,
            max_depth=config.max_depth,
            max_nodes=config.max_nodes,
            adapter=adapter,
        )

    def __repr__(self) -> str:
        return f"TraversalBuilder({self._config!r})"
