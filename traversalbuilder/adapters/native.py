"""Native node adapter for traversal-builder.

Walks live node handles: ``ContentNode`` implementations, and any handle
object following the repository's conventions (``get_primary_node_type()``
and a ``get_nodes()`` cursor with ``has_next()`` / ``next_node()``).
"""

from typing import Any, Iterator, Optional

from ..core.adapter import NodeAdapter
from ..core.node import ContentNode

_TYPE_ACCESSORS = ("primary_type", "get_primary_node_type")


class NativeNodeAdapter(NodeAdapter):
    """Adapter for live node handles.

    This is the default adapter of ``TraversalBuilder``.
    """

    def is_node(self, value: Any) -> bool:
        """Accept ContentNode instances and duck-typed node handles."""
        if isinstance(value, ContentNode):
            return True
        if value is None or isinstance(value, (str, bytes, dict)):
            return False
        return (callable(getattr(value, "get_nodes", None))
                and self._type_accessor(value) is not None)

    def type_tag(self, node: Any) -> Optional[str]:
        accessor = self._type_accessor(node)
        if accessor is None:
            return None
        tag = accessor()
        return None if tag is None else str(tag)

    def get_children(self, node: Any) -> Iterator[Any]:
        """Yield children from the handle's cursor, in repository order."""
        cursor = node.get_nodes()
        if hasattr(cursor, "has_next") and hasattr(cursor, "next_node"):
            while cursor.has_next():
                yield cursor.next_node()
        else:
            yield from cursor

    @staticmethod
    def _type_accessor(node: Any):
        for name in _TYPE_ACCESSORS:
            accessor = getattr(node, name, None)
            if callable(accessor):
                return accessor
        return None
