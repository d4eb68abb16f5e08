"""Tests for the scroll helpers, using a small in-memory document."""
from __future__ import annotations

import pytest  # type: ignore[import-not-found]

from clinic.utils.scroll import (
    AnchorScroller,
    Rect,
    init_smooth_scrolling,
    resolve_scroll_top,
    scroll_to_top,
    smooth_scroll_to,
)


class FakeWindow:
    def __init__(self, scroll_y=0):
        self.scroll_y = scroll_y
        self.calls = []

    def scroll_to(self, top, behavior):
        self.calls.append((top, behavior))


class FakeElement:
    def __init__(self, top, *, href=None, scroll_top=0, parent=None):
        self.top = top
        self.href = href
        self.scroll_top = scroll_top
        self.parent = parent
        self.calls = []
        self.listeners = {}

    def bounding_rect(self):
        return Rect(top=self.top)

    def scroll_to(self, top, behavior):
        self.calls.append((top, behavior))

    def get_attribute(self, name):
        return self.href if name == "href" else None

    def closest(self, selector):
        node = self
        while node is not None:
            if node.href is not None and node.href.startswith("#"):
                return node
            node = node.parent
        return None

    def add_event_listener(self, event_type, handler):
        self.listeners.setdefault(event_type, []).append(handler)

    def remove_event_listener(self, event_type, handler):
        self.listeners[event_type].remove(handler)


class FakeHistory:
    def __init__(self):
        self.replaced = []
        self.pushed = []

    def replace_state(self, state, title, url):
        self.replaced.append(url)


class FakeDocument(FakeElement):
    def __init__(self, elements=None, scroll_y=0):
        super().__init__(0)
        self.window = FakeWindow(scroll_y)
        self.history = FakeHistory()
        self.elements = elements or {}

    def query_selector(self, selector):
        return self.elements.get(selector)


class FakeEvent:
    def __init__(self, target):
        self.target = target
        self.default_prevented = False

    def prevent_default(self):
        self.default_prevented = True


def test_number_target_adds_offset():
    document = FakeDocument()

    assert resolve_scroll_top(200, document, offset=-80) == 120


def test_selector_in_window():
    document = FakeDocument({"#services": FakeElement(300)}, scroll_y=500)

    assert resolve_scroll_top("#services", document, offset=-80) == 720


def test_element_in_container():
    container = FakeElement(100, scroll_top=40)
    target = FakeElement(350)
    document = FakeDocument()

    assert resolve_scroll_top(target, document, container=container, offset=10) == 300


def test_unknown_selector_does_not_scroll():
    document = FakeDocument()

    assert smooth_scroll_to("#missing", document) is None
    assert document.window.calls == []


def test_smooth_scroll_uses_behavior():
    document = FakeDocument({"#faq": FakeElement(50)}, scroll_y=10)

    smooth_scroll_to("#faq", document, behavior="instant")

    assert document.window.calls == [(60, "instant")]


def test_rejects_unknown_behavior():
    with pytest.raises(ValueError):
        smooth_scroll_to(0, FakeDocument(), behavior="bouncy")


def test_scroll_to_top_of_container():
    container = FakeElement(0, scroll_top=900)
    document = FakeDocument()

    scroll_to_top(document, container=container)

    assert container.calls == [(0, "smooth")]


def test_anchor_click_scrolls_and_replaces_fragment():
    section = FakeElement(400)
    document = FakeDocument({"#contact": section}, scroll_y=100)
    link = FakeElement(0, href="#contact")
    icon = FakeElement(0, parent=link)
    event = FakeEvent(icon)

    handled = AnchorScroller(document).handle_click(event)

    assert handled is True
    assert event.default_prevented
    assert document.window.calls == [(500, "smooth")]
    assert document.history.replaced == ["#contact"]
    assert document.history.pushed == []


def test_bare_hash_link_is_ignored():
    document = FakeDocument()
    event = FakeEvent(FakeElement(0, href="#"))

    assert AnchorScroller(document).handle_click(event) is False
    assert not event.default_prevented


def test_non_anchor_click_is_ignored():
    document = FakeDocument()
    event = FakeEvent(FakeElement(0))

    assert AnchorScroller(document).handle_click(event) is False


def test_install_returns_cleanup():
    document = FakeDocument()

    cleanup = init_smooth_scrolling(document)
    assert len(document.listeners["click"]) == 1

    cleanup()
    assert document.listeners["click"] == []
