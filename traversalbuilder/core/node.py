"""ContentNode abstraction for traversal-builder.

A ContentNode is a handle on a node in a content repository: it knows its
identity, its primary type and how to hand out a cursor over its children.
Deciding whether a value is a node at all, and reading its type, is the job
of the NodeAdapter, which lets the traversal engine walk handles that do not
derive from this class.
"""

from abc import ABC, abstractmethod
from typing import Any, Iterable, Iterator, Optional


class NodeIterator:
    """Single-pass cursor over child nodes.

    Mirrors the repository's ``hasNext()`` / ``nextNode()`` cursor while
    also behaving as a regular Python iterator, so engines and adapters can
    simply ``for child in cursor``.
    """

    _EXHAUSTED = object()

    def __init__(self, source: Iterable[Any]):
        """Wrap an iterable of child nodes.

        Args:
            source: Any iterable; it is consumed lazily, once
        """
        self._source = iter(source)
        self._pending = self._EXHAUSTED
        self._primed = False

    @classmethod
    def of(cls, source: Iterable[Any]) -> 'NodeIterator':
        """Return ``source`` if it already is a cursor, else wrap it."""
        if isinstance(source, NodeIterator):
            return source
        return cls(source)

    def _prime(self) -> None:
        if not self._primed:
            self._pending = next(self._source, self._EXHAUSTED)
            self._primed = True

    def has_next(self) -> bool:
        """Check if another child is available."""
        self._prime()
        return self._pending is not self._EXHAUSTED

    def next_node(self) -> Any:
        """Take the next child.

        Raises:
            StopIteration: If the cursor is exhausted
        """
        self._prime()
        if self._pending is self._EXHAUSTED:
            raise StopIteration
        node = self._pending
        self._pending = self._EXHAUSTED
        self._primed = False
        return node

    def __iter__(self) -> Iterator[Any]:
        return self

    def __next__(self) -> Any:
        return self.next_node()


class ContentNode(ABC):
    """Abstract base class for nodes in a content repository.

    Implementations wrap whatever the repository hands out (a live node
    handle, an ORM row, an in-memory object). Only three things are needed
    to take part in a traversal: a stable identifier, a primary type tag
    and an ordered cursor of children.
    """

    @abstractmethod
    def identifier(self) -> str:
        """Return the repository identifier of this node.

        The identifier must be unique within the repository and stable
        across traversals. It is also what the REST representation uses
        to address the node.

        Returns:
            str: Unique, stable identifier
        """
        pass

    @abstractmethod
    def primary_type(self) -> Optional[str]:
        """Return the primary type tag of this node (e.g. ``sv:page``).

        Returns:
            The type tag, or None if the node has no primary type
        """
        pass

    @abstractmethod
    def get_nodes(self) -> NodeIterator:
        """Return a cursor over the direct children, in repository order.

        Returns:
            NodeIterator over child nodes
        """
        pass

    def name(self) -> str:
        """Display name; defaults to the identifier."""
        return self.identifier()

    def __str__(self) -> str:
        return self.name()

    def __repr__(self) -> str:
        return (f"{self.__class__.__name__}(id={self.identifier()!r}, "
                f"type={self.primary_type()!r})")

    def __eq__(self, other: object) -> bool:
        """Nodes are equal if they have the same identifier."""
        if not isinstance(other, ContentNode):
            return NotImplemented
        return self.identifier() == other.identifier()

    def __hash__(self) -> int:
        return hash(self.identifier())
