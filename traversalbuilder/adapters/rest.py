"""REST adapter for traversal-builder.

Walks the flattened node records served by the content repository's REST
API. A record is a mapping such as::

    {"id": "4.1a2b3c", "name": "News", "type": "sv:page",
     "path": "", "properties": []}

Children are fetched one request per recursed node from
``{base_url}/{id}/nodes``.
"""

import logging
from typing import Any, Dict, Iterator, List, Mapping, Optional

import requests

from ..core.adapter import NodeAdapter
from .native import NativeNodeAdapter

logger = logging.getLogger(__name__)


class RestNodeAdapter(NodeAdapter):
    """Adapter for REST node records.

    A failed child listing (non-2xx status) is treated as a node without
    children and logged; it is not retried. Transport errors raised by
    ``requests`` propagate to the caller of the traversal.
    """

    def __init__(self,
                 base_url: str,
                 session: Optional[requests.Session] = None,
                 params: Optional[Mapping[str, Any]] = None,
                 timeout: Optional[float] = 30.0):
        """Initialize REST adapter.

        Args:
            base_url: Node resource root, e.g. ``https://cms.example.org/rest-api/1/0``
            session: Session to issue requests with. If None, the adapter
                creates one on first use and closes it in ``close()``
            params: Query parameters sent with every child listing
            timeout: Request timeout in seconds (None = wait forever)
        """
        self.base_url = base_url.rstrip("/")
        self._session = session
        self._owns_session = False
        self.params = dict(params or {})
        self.timeout = timeout

    def is_node(self, value: Any) -> bool:
        """A record needs a truthy ``id`` and ``type`` to be walked."""
        return (isinstance(value, Mapping)
                and bool(value.get("id"))
                and bool(value.get("type")))

    def type_tag(self, node: Any) -> Optional[str]:
        tag = node.get("type")
        return None if tag is None else str(tag)

    def children_url(self, node: Mapping[str, Any]) -> str:
        """URL listing the children of ``node``."""
        return f"{self.base_url}/{node['id']}/nodes"

    def fetch_children(self, node: Mapping[str, Any]) -> List[Dict[str, Any]]:
        """Fetch the child records of ``node``.

        Returns:
            The JSON list body of a 2xx response, or an empty list
        """
        url = self.children_url(node)
        response = self.session.get(url, params=self.params, timeout=self.timeout)

        if not 200 <= response.status_code < 300:
            logger.warning("Child listing failed for %s: HTTP %s",
                           node.get("id"), response.status_code)
            return []

        body = response.json()
        if not isinstance(body, list):
            logger.warning("Unexpected child listing for %s: %s",
                           node.get("id"), type(body).__name__)
            return []
        return body

    def get_children(self, node: Any) -> Iterator[Any]:
        yield from self.fetch_children(node)

    @staticmethod
    def record_from_node(handle: Any,
                         native: Optional[NativeNodeAdapter] = None) -> Dict[str, Any]:
        """Build a REST record for a live node handle.

        Lets a REST walk start from a node obtained through the native API.

        Args:
            handle: A ``ContentNode`` or native node handle
            native: Adapter used to read the handle's type

        Returns:
            Record with ``id``, ``name``, ``type``, ``path`` and ``properties``
        """
        native = native or NativeNodeAdapter()
        identifier = getattr(handle, "identifier", None) or getattr(handle, "get_identifier")
        return {
            "id": identifier(),
            "name": str(handle),
            "type": native.type_tag(handle),
            "path": "",
            "properties": [],
        }

    @property
    def session(self) -> requests.Session:
        """Session used for child listings, created on first access if needed."""
        if self._session is None:
            self._session = requests.Session()
            self._owns_session = True
        return self._session

    def close(self) -> None:
        """Close the session if this adapter created it.

        A session passed in by the caller is left open.
        """
        if self._owns_session and self._session is not None:
            self._session.close()
            self._session = None
            self._owns_session = False

    def __enter__(self) -> 'RestNodeAdapter':
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"RestNodeAdapter(base_url={self.base_url!r})"
