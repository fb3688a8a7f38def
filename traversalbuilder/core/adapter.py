"""NodeAdapter abstraction for traversal-builder.

The adapter is what keeps the traversal engine representation-agnostic.
It answers three questions about a value: is it a node, what is its
primary type, and what are its children. The engine never inspects a node
any other way.
"""

from abc import ABC, abstractmethod
from typing import Any, Iterable, Iterator, Optional

from ..node_types import is_type_of


class NodeAdapter(ABC):
    """Abstract adapter for one representation of content nodes.

    Two representations ship with the library: live node handles
    (``NativeNodeAdapter``) and flattened REST records
    (``RestNodeAdapter``). Both are walked by the same engine.
    """

    @abstractmethod
    def is_node(self, value: Any) -> bool:
        """Check whether ``value`` is a node this adapter can handle.

        Values failing this check are skipped by the traversal without
        raising.

        Args:
            value: Anything yielded as a root or child

        Returns:
            True if ``value`` can be classified and traversed
        """
        pass

    @abstractmethod
    def type_tag(self, node: Any) -> Optional[str]:
        """Return the primary type tag of ``node``.

        Args:
            node: A value for which ``is_node`` returned True

        Returns:
            The type tag, or None if it cannot be determined
        """
        pass

    @abstractmethod
    def get_children(self, node: Any) -> Iterator[Any]:
        """Get an iterator of the children of ``node``, in source order.

        Only called for nodes the traversal recurses into. The iterator is
        consumed once. Errors raised while fetching children propagate to
        the caller of the traversal.

        Args:
            node: The parent node

        Returns:
            Iterator yielding child nodes
        """
        pass

    def is_type_of(self, node: Any, types: Iterable[str]) -> bool:
        """Check whether the primary type of ``node`` is one of ``types``.

        Args:
            node: The node to classify
            types: Type tags to test against

        Returns:
            True if the node's type tag is a member of ``types``
        """
        return is_type_of(self.type_tag(node), types)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"
