"""In-memory content trees for tests and examples.

``MemoryNode`` is a small ``ContentNode`` implementation holding its
children in a list. ``build_tree`` turns nested tuples into such a tree:

    >>> root = build_tree(("root", FOLDER_TYPE, [
    ...     ("P1", PAGE_TYPE),
    ...     ("F1", FOLDER_TYPE, [("A1", ARTICLE_TYPE)]),
    ... ]))
"""

from typing import Any, List, Optional, Sequence, Tuple

from ..core.node import ContentNode, NodeIterator


class MemoryNode(ContentNode):
    """Content node kept entirely in memory.

    Attributes:
        fetch_count: How many times ``get_nodes()`` was called, which lets
            tests check that limits stop child fetches.
    """

    def __init__(self, identifier: str, type_tag: Optional[str],
                 children: Optional[List[Any]] = None, name: Optional[str] = None):
        self._identifier = identifier
        self._type_tag = type_tag
        self._name = name
        self.children: List[Any] = list(children or [])
        self.fetch_count = 0

    def identifier(self) -> str:
        return self._identifier

    def primary_type(self) -> Optional[str]:
        return self._type_tag

    def get_nodes(self) -> NodeIterator:
        self.fetch_count += 1
        return NodeIterator(self.children)

    def name(self) -> str:
        return self._name or self._identifier


NodeSpec = Tuple[Any, ...]


def build_tree(spec: NodeSpec) -> MemoryNode:
    """Build a MemoryNode tree from ``(identifier, type_tag[, children])`` tuples."""
    identifier, type_tag = spec[0], spec[1]
    children: Sequence[NodeSpec] = spec[2] if len(spec) > 2 else ()
    return MemoryNode(identifier, type_tag, [build_tree(child) for child in children])


def iter_nodes(root: MemoryNode):
    """Yield every node of a MemoryNode tree in pre-order."""
    yield root
    for child in root.children:
        if isinstance(child, MemoryNode):
            yield from iter_nodes(child)
