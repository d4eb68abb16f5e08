"""Tests for the page-block store."""
from __future__ import annotations

import pytest  # type: ignore[import-not-found]
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session

from clinic.application.blocks import (
    delete_page_blocks,
    fetch_page_blocks,
    save_page_blocks,
    save_single_block,
)
from clinic.domain.invariants.exceptions import (
    BlockStoreError,
    InvariantViolation,
    ValidationError,
)


def _blocks():
    return [
        {"type": "heading", "content": {"text": "Welcome"}},
        {"type": "text", "content": {"html": "<p>Hello</p>"}},
        {"id": "fixed-id", "type": "image", "content": {"url": "/media/x.png"}},
    ]


def test_save_then_fetch_keeps_order(app):
    save_page_blocks("/eyecare", _blocks())

    blocks = fetch_page_blocks("/eyecare")

    assert [b.type for b in blocks] == ["heading", "text", "image"]
    assert [b.order_index for b in blocks] == [0, 1, 2]
    assert blocks[2].id == "fixed-id"
    assert blocks[0].content == {"text": "Welcome"}


def test_save_replaces_previous_blocks(app):
    save_page_blocks("/eyecare", _blocks())
    save_page_blocks("/eyecare", [{"type": "text", "content": {"html": "only"}}])

    blocks = fetch_page_blocks("/eyecare")

    assert len(blocks) == 1
    assert blocks[0].content == {"html": "only"}


def test_resaving_same_ids_is_allowed(app):
    save_page_blocks("/eyecare", _blocks())
    save_page_blocks("/eyecare", _blocks())

    assert len(fetch_page_blocks("/eyecare")) == 3


def test_invalid_block_leaves_previous_set(app):
    save_page_blocks("/gynecology", _blocks())

    with pytest.raises(InvariantViolation):
        save_page_blocks("/gynecology", [{"type": "text"}, {"content": {}}])

    assert len(fetch_page_blocks("/gynecology")) == 3


def test_pages_are_independent(app):
    save_page_blocks("/eyecare", _blocks()[:1])
    save_page_blocks("/gynecology", _blocks()[1:2])

    assert [b.type for b in fetch_page_blocks("/eyecare")] == ["heading"]
    assert [b.type for b in fetch_page_blocks("/gynecology")] == ["text"]


def test_save_single_block_requires_id_and_page(app):
    with pytest.raises(ValidationError, match="Block ID and page path are required"):
        save_single_block({"type": "text", "page_path": "/eyecare"})


def test_save_single_block_upserts(app):
    save_single_block({"id": "b1", "page_path": "/", "type": "text", "content": {"html": "a"}})
    save_single_block({"id": "b1", "page_path": "/", "type": "text", "content": {"html": "b"}, "order_index": 4})

    blocks = fetch_page_blocks("/")

    assert len(blocks) == 1
    assert blocks[0].content == {"html": "b"}
    assert blocks[0].order_index == 4


def test_delete_page_blocks(app):
    save_page_blocks("/eyecare", _blocks())

    assert delete_page_blocks("/eyecare") == 3
    assert fetch_page_blocks("/eyecare") == []


def test_empty_array_content_is_kept(app):
    save_page_blocks("/p", [{"type": "list", "content": []}, {"type": "text"}])

    blocks = fetch_page_blocks("/p")

    assert blocks[0].content == []
    assert blocks[1].content == {}


def test_non_object_block_is_rejected(app):
    with pytest.raises(InvariantViolation):
        save_page_blocks("/p", ["x"])


def test_delete_failure_is_reported_separately(app, monkeypatch):
    save_page_blocks("/p", _blocks())

    def broken_delete(self, instance):
        raise OperationalError("DELETE", {}, Exception("disk I/O error"))

    monkeypatch.setattr(Session, "delete", broken_delete)

    with pytest.raises(BlockStoreError, match="Error deleting existing blocks"):
        save_page_blocks("/p", [{"type": "text"}])

    monkeypatch.undo()
    assert len(fetch_page_blocks("/p")) == 3
