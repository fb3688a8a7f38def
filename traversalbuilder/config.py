"""Configuration for traversal-builder.

``TraversalConfig`` is the mutable policy a ``TraversalBuilder`` accumulates
before freezing it into a ``Traversal``. Validation reports problems as a
list of messages so every issue can be surfaced at once.
"""

import math
from dataclasses import dataclass, field, replace
from typing import Any, Callable, List, Optional, Union

from .adapters.native import NativeNodeAdapter
from .core.adapter import NodeAdapter
from .node_types import DEFAULT_ACCEPT_TYPES, DEFAULT_RECURSE_TYPES


class InvalidLimit:
    """Placeholder for a depth or node limit that could not be coerced."""

    __slots__ = ("raw",)

    def __init__(self, raw: Any):
        self.raw = raw

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, InvalidLimit):
            return NotImplemented
        return self.raw == other.raw

    def __repr__(self) -> str:
        return f"InvalidLimit({self.raw!r})"


Limit = Union[int, InvalidLimit]


def coerce_limit(value: Any) -> Limit:
    """Coerce a depth or node limit to an integer.

    Integers pass through, floats are truncated and strings are parsed as
    base-10 integers. Anything else (booleans, None, non-numeric strings,
    NaN) yields an ``InvalidLimit`` that validation rejects.

    Args:
        value: The value handed to a limit setter

    Returns:
        The integer limit, or an InvalidLimit wrapping ``value``
    """
    if isinstance(value, InvalidLimit):
        return value
    if isinstance(value, bool):
        return InvalidLimit(value)
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if math.isfinite(value):
            return int(value)
        return InvalidLimit(value)
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return InvalidLimit(value)
    return InvalidLimit(value)


def default_recurse_types() -> List[str]:
    return list(DEFAULT_RECURSE_TYPES)


def default_accept_types() -> List[str]:
    return list(DEFAULT_ACCEPT_TYPES)


@dataclass
class TraversalConfig:
    """Complete policy for a content tree traversal.

    A predicate, when set, replaces the matching type list entirely.
    """

    # What to walk and what to act on
    recurse_types: List[str] = field(default_factory=default_recurse_types)
    accept_types: List[str] = field(default_factory=default_accept_types)
    recurse_predicate: Optional[Callable[[Any], bool]] = None
    accept_predicate: Optional[Callable[[Any], bool]] = None

    # Callbacks
    callback: Optional[Callable[[Any, Any], None]] = None
    deny_callback: Optional[Callable[[Any, Any], None]] = None

    # Limits
    max_depth: Optional[Limit] = None  # None = unlimited
    max_nodes: Limit = 0               # 0 = unlimited

    # Node representation
    adapter: NodeAdapter = field(default_factory=NativeNodeAdapter)

    def copy(self) -> 'TraversalConfig':
        """Return a copy with its own type lists and coerced limits."""
        return replace(self,
                       recurse_types=list(self.recurse_types),
                       accept_types=list(self.accept_types),
                       max_depth=None if self.max_depth is None else coerce_limit(self.max_depth),
                       max_nodes=coerce_limit(self.max_nodes))

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if not callable(self.callback):
            errors.append("Missing callback.")

        if not self.recurse_types and not callable(self.recurse_predicate):
            errors.append("Missing recurse types.")

        if not self.accept_types and not callable(self.accept_predicate):
            errors.append("Missing accept types.")

        max_depth = None if self.max_depth is None else coerce_limit(self.max_depth)
        if max_depth is not None:
            if isinstance(max_depth, InvalidLimit):
                errors.append(f"Invalid max depth: {max_depth.raw!r}.")
            elif max_depth < 0:
                errors.append("Max depth cannot be negative.")

        max_nodes = coerce_limit(self.max_nodes)
        if isinstance(max_nodes, InvalidLimit):
            errors.append(f"Invalid max nodes: {max_nodes.raw!r}.")
        elif max_nodes < 0:
            errors.append("Max nodes cannot be negative.")

        if not isinstance(self.adapter, NodeAdapter):
            errors.append(f"Adapter must be a NodeAdapter, got {type(self.adapter).__name__}.")

        if self.deny_callback is not None and not callable(self.deny_callback):
            errors.append("Deny callback is not callable.")

        return errors
