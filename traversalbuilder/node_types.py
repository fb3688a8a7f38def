"""Primary node type vocabulary for content trees.

Type tags follow the naming used by the content repository
(``sv:page``, ``sv:folder``, ...). The default recurse and accept lists
describe the common case: walk the container-like nodes, act on the
content-like ones.
"""

from typing import Iterable, Optional

SITE_TYPE = "sv:site"
PAGE_TYPE = "sv:page"
ARCHIVE_TYPE = "sv:archive"
FOLDER_TYPE = "sv:folder"
ARTICLE_TYPE = "sv:article"

# Not traversed or accepted by default
FILE_TYPE = "sv:file"
IMAGE_TYPE = "sv:image"
LINK_TYPE = "sv:link"

DEFAULT_RECURSE_TYPES = (
    SITE_TYPE,
    PAGE_TYPE,
    ARCHIVE_TYPE,
    FOLDER_TYPE,
)

DEFAULT_ACCEPT_TYPES = (
    PAGE_TYPE,
    ARTICLE_TYPE,
)


def is_type_of(type_tag: Optional[str], types: Iterable[str]) -> bool:
    """Check whether a primary type tag is one of ``types``.

    Args:
        type_tag: The node's primary type, or None if it has none
        types: Type tags to test against

    Returns:
        True if ``type_tag`` is a member of ``types``
    """
    if type_tag is None:
        return False
    return str(type_tag) in types
