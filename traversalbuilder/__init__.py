"""traversal-builder - Configurable traversals of content trees.

Configure a walk with the fluent ``TraversalBuilder``, then run the
resulting ``Traversal`` on any node:

    from traversalbuilder import TraversalBuilder, ARTICLE_TYPE

    traversal = (TraversalBuilder()
                 .set_accept_types(ARTICLE_TYPE)
                 .set_callback(lambda node, ctx: ctx.append(node))
                 .build())
    articles = []
    traversal.traverse(site_root, articles)

Live node handles are walked by default; pass a ``RestNodeAdapter`` to
``set_adapter`` to walk REST records instead.
"""

__version__ = "1.1.0"

from .exceptions import TraversalBuilderError, ConfigurationError
from .node_types import (
    SITE_TYPE,
    PAGE_TYPE,
    ARCHIVE_TYPE,
    FOLDER_TYPE,
    ARTICLE_TYPE,
    FILE_TYPE,
    IMAGE_TYPE,
    LINK_TYPE,
    DEFAULT_RECURSE_TYPES,
    DEFAULT_ACCEPT_TYPES,
    is_type_of,
)
from .core import ContentNode, NodeIterator, NodeAdapter, Traversal
from .adapters import NativeNodeAdapter, RestNodeAdapter
from .config import TraversalConfig
from .builder import TraversalBuilder
from .api import (
    get_builder,
    new_builder,
    traverse_content,
    collect_accepted,
    count_accepted,
)

__all__ = [
    "__version__",
    # Errors
    "TraversalBuilderError",
    "ConfigurationError",
    # Types
    "SITE_TYPE",
    "PAGE_TYPE",
    "ARCHIVE_TYPE",
    "FOLDER_TYPE",
    "ARTICLE_TYPE",
    "FILE_TYPE",
    "IMAGE_TYPE",
    "LINK_TYPE",
    "DEFAULT_RECURSE_TYPES",
    "DEFAULT_ACCEPT_TYPES",
    "is_type_of",
    # Core
    "ContentNode",
    "NodeIterator",
    "NodeAdapter",
    "Traversal",
    # Adapters
    "NativeNodeAdapter",
    "RestNodeAdapter",
    # Config
    "TraversalConfig",
    "TraversalBuilder",
    # API
    "get_builder",
    "new_builder",
    "traverse_content",
    "collect_accepted",
    "count_accepted",
]
