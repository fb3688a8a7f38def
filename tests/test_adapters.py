"""Tests for node adapters and the NodeIterator cursor."""

import logging
from unittest.mock import MagicMock, patch

import pytest
import requests

from traversalbuilder import (
    ARTICLE_TYPE,
    FOLDER_TYPE,
    PAGE_TYPE,
    NativeNodeAdapter,
    NodeIterator,
    RestNodeAdapter,
    TraversalBuilder,
)
from traversalbuilder.testing import MemoryNode, build_tree


# NodeIterator


def test_node_iterator_cursor_protocol():
    cursor = NodeIterator(["a", "b"])

    assert cursor.has_next()
    assert cursor.has_next()  # idempotent
    assert cursor.next_node() == "a"
    assert cursor.next_node() == "b"
    assert not cursor.has_next()
    with pytest.raises(StopIteration):
        cursor.next_node()


def test_node_iterator_is_single_pass_iterator():
    cursor = NodeIterator(iter([1, 2, 3]))
    assert list(cursor) == [1, 2, 3]
    assert list(cursor) == []


def test_node_iterator_handles_none_children():
    cursor = NodeIterator([None, "x"])
    assert cursor.has_next()
    assert cursor.next_node() is None
    assert cursor.next_node() == "x"


def test_node_iterator_of_returns_existing_cursor():
    cursor = NodeIterator([])
    assert NodeIterator.of(cursor) is cursor
    assert isinstance(NodeIterator.of([1]), NodeIterator)


# Native adapter


class RepositoryHandle:
    """Handle following the repository's own naming, not a ContentNode."""

    def __init__(self, identifier, type_tag, children=()):
        self._identifier = identifier
        self._type_tag = type_tag
        self._children = list(children)

    def get_identifier(self):
        return self._identifier

    def get_primary_node_type(self):
        return self._type_tag

    def get_nodes(self):
        return NodeIterator(self._children)

    def __str__(self):
        return self._identifier


class ListHandle(RepositoryHandle):
    """Handle whose get_nodes() returns a plain list."""

    def get_nodes(self):
        return list(self._children)


def test_native_adapter_recognizes_nodes():
    adapter = NativeNodeAdapter()

    assert adapter.is_node(MemoryNode("n", PAGE_TYPE))
    assert adapter.is_node(RepositoryHandle("h", PAGE_TYPE))
    for value in (None, "sv:page", 42, {"id": "1", "type": PAGE_TYPE}, object()):
        assert not adapter.is_node(value)


def test_native_adapter_type_tags():
    adapter = NativeNodeAdapter()

    assert adapter.type_tag(MemoryNode("n", PAGE_TYPE)) == PAGE_TYPE
    assert adapter.type_tag(RepositoryHandle("h", FOLDER_TYPE)) == FOLDER_TYPE
    assert adapter.type_tag(MemoryNode("n", None)) is None
    assert adapter.is_type_of(MemoryNode("n", PAGE_TYPE), [PAGE_TYPE, ARTICLE_TYPE])
    assert not adapter.is_type_of(MemoryNode("n", None), [PAGE_TYPE])


def test_native_adapter_reads_cursor_and_iterables():
    adapter = NativeNodeAdapter()
    a, b = RepositoryHandle("a", PAGE_TYPE), RepositoryHandle("b", PAGE_TYPE)

    assert list(adapter.get_children(RepositoryHandle("p", FOLDER_TYPE, [a, b]))) == [a, b]
    assert list(adapter.get_children(ListHandle("p", FOLDER_TYPE, [b, a]))) == [b, a]


def test_traversal_over_repository_handles():
    site = RepositoryHandle("root", FOLDER_TYPE, [
        RepositoryHandle("P1", PAGE_TYPE),
        ListHandle("F1", FOLDER_TYPE, [RepositoryHandle("A1", ARTICLE_TYPE)]),
    ])
    found = []
    traversal = TraversalBuilder().set_callback(lambda node, ctx: ctx.append(str(node))).build()

    traversal.traverse(site, found)

    assert found == ["P1", "A1"]


def test_non_nodes_among_children_are_skipped():
    site = MemoryNode("root", FOLDER_TYPE, [
        None,
        "not a node",
        MemoryNode("P1", PAGE_TYPE),
        {"id": "x", "type": PAGE_TYPE},
    ])
    events = []
    traversal = (TraversalBuilder()
                 .set_callback(lambda node, ctx: events.append(("accept", node.identifier())))
                 .set_deny_callback(lambda node, ctx: events.append(("deny", node.identifier())))
                 .build())

    traversal.traverse(site)

    assert events == [("deny", "root"), ("accept", "P1")]


def test_non_node_root_is_ignored():
    calls = []
    traversal = (TraversalBuilder()
                 .set_callback(lambda node, ctx: calls.append(node))
                 .set_deny_callback(lambda node, ctx: calls.append(node))
                 .build())

    traversal.traverse(None)
    traversal.traverse("sv:page")

    assert calls == []
    assert traversal.num_nodes == 0


# REST adapter

BASE_URL = "https://cms.test/rest-api/1/0"


def record(identifier, type_tag, name=None):
    return {"id": identifier, "name": name or identifier, "type": type_tag,
            "path": "", "properties": []}


def response(status_code, body):
    resp = MagicMock()
    resp.status_code = status_code
    resp.json.return_value = body
    return resp


def fake_session(listings):
    """Session whose GET returns ``listings[url]``, 404 for unknown URLs."""
    session = MagicMock(spec=requests.Session)

    def get(url, params=None, timeout=None):
        return listings.get(url, response(404, {"message": "not found"}))

    session.get.side_effect = get
    return session


def test_rest_adapter_recognizes_records():
    adapter = RestNodeAdapter(BASE_URL, session=fake_session({}))

    assert adapter.is_node(record("1", PAGE_TYPE))
    assert not adapter.is_node({"id": "1"})
    assert not adapter.is_node({"id": "", "type": PAGE_TYPE})
    assert not adapter.is_node({"type": PAGE_TYPE})
    assert not adapter.is_node(MemoryNode("n", PAGE_TYPE))
    assert adapter.type_tag(record("1", ARTICLE_TYPE)) == ARTICLE_TYPE


def test_rest_adapter_fetches_children_with_params():
    session = fake_session({
        BASE_URL + "/root/nodes": response(200, [record("P1", PAGE_TYPE)]),
    })
    adapter = RestNodeAdapter(BASE_URL + "/", session=session,
                              params={"properties": ["URL"]}, timeout=5)

    children = list(adapter.get_children(record("root", FOLDER_TYPE)))

    assert children == [record("P1", PAGE_TYPE)]
    session.get.assert_called_once_with(BASE_URL + "/root/nodes",
                                        params={"properties": ["URL"]}, timeout=5)


def test_rest_traversal_walks_records():
    session = fake_session({
        BASE_URL + "/root/nodes": response(200, [
            record("P1", PAGE_TYPE),
            record("F1", FOLDER_TYPE),
        ]),
        BASE_URL + "/P1/nodes": response(200, []),
        BASE_URL + "/F1/nodes": response(200, [record("A1", ARTICLE_TYPE)]),
    })
    found = []
    traversal = (TraversalBuilder()
                 .set_adapter(RestNodeAdapter(BASE_URL, session=session))
                 .set_callback(lambda node, ctx: ctx.append(node["id"]))
                 .build())

    traversal.traverse(record("root", FOLDER_TYPE), found)

    assert found == ["P1", "A1"]


def test_rest_failed_listing_means_no_children(caplog):
    session = fake_session({
        BASE_URL + "/root/nodes": response(503, {"message": "unavailable"}),
    })
    adapter = RestNodeAdapter(BASE_URL, session=session)

    with caplog.at_level(logging.WARNING, logger="traversalbuilder.adapters.rest"):
        children = list(adapter.get_children(record("root", FOLDER_TYPE)))

    assert children == []
    assert "HTTP 503" in caplog.text
    assert session.get.call_count == 1


def test_rest_unexpected_body_means_no_children():
    session = fake_session({
        BASE_URL + "/root/nodes": response(200, {"nodes": []}),
    })
    adapter = RestNodeAdapter(BASE_URL, session=session)

    assert list(adapter.get_children(record("root", FOLDER_TYPE))) == []


def test_rest_transport_error_propagates():
    session = MagicMock(spec=requests.Session)
    session.get.side_effect = requests.ConnectionError("refused")
    traversal = (TraversalBuilder()
                 .set_adapter(RestNodeAdapter(BASE_URL, session=session))
                 .set_callback(lambda node, ctx: None)
                 .build())

    with pytest.raises(requests.ConnectionError):
        traversal.traverse(record("root", FOLDER_TYPE))


def test_record_from_node():
    node = MemoryNode("4.1abc", PAGE_TYPE, name="Start")

    assert RestNodeAdapter.record_from_node(node) == {
        "id": "4.1abc",
        "name": "Start",
        "type": PAGE_TYPE,
        "path": "",
        "properties": [],
    }
    assert RestNodeAdapter.record_from_node(RepositoryHandle("7.x", FOLDER_TYPE))["id"] == "7.x"


def test_rest_walk_from_native_root():
    site = build_tree(("root", FOLDER_TYPE, []))
    session = fake_session({
        BASE_URL + "/root/nodes": response(200, [record("A1", ARTICLE_TYPE)]),
    })
    found = []
    traversal = (TraversalBuilder()
                 .set_adapter(RestNodeAdapter(BASE_URL, session=session))
                 .set_callback(lambda node, ctx: ctx.append(node["id"]))
                 .build())

    traversal.traverse(RestNodeAdapter.record_from_node(site), found)

    assert found == ["A1"]


def test_rest_adapter_leaves_injected_session_open():
    session = fake_session({})
    with RestNodeAdapter(BASE_URL, session=session) as adapter:
        assert adapter.session is session

    session.close.assert_not_called()


def test_rest_adapter_closes_session_it_created():
    with patch("traversalbuilder.adapters.rest.requests.Session") as session_class:
        session = session_class.return_value
        session.get.return_value = response(200, [record("A1", ARTICLE_TYPE)])
        found = []

        with RestNodeAdapter(BASE_URL) as adapter:
            (TraversalBuilder()
             .set_adapter(adapter)
             .set_callback(lambda node, ctx: ctx.append(node["id"]))
             .build()
             .traverse(record("root", FOLDER_TYPE), found))

    assert found == ["A1"]
    session_class.assert_called_once_with()
    session.close.assert_called_once_with()


def test_rest_adapter_close_without_requests_creates_no_session():
    with patch("traversalbuilder.adapters.rest.requests.Session") as session_class:
        RestNodeAdapter(BASE_URL).close()

    session_class.assert_not_called()
