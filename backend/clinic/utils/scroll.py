# clinic/utils/scroll.py
"""
Scroll helpers for the site's page scripts.

Public API: resolve_scroll_top, smooth_scroll_to, scroll_to_top,
AnchorScroller and init_smooth_scrolling.

These work against a small document model rather than a real DOM:

- ``document.window``: ``scroll_y`` and ``scroll_to(top=, behavior=)``
- ``document.query_selector(selector)``: an element or None
- elements: ``bounding_rect()`` (with ``.top``), ``scroll_top``,
  ``scroll_to(top=, behavior=)``, ``closest(selector)``, ``get_attribute(name)``
- ``document.history.replace_state(state, title, url)``
- ``add_event_listener(type, handler)`` / ``remove_event_listener(type, handler)``
"""
from __future__ import annotations

from typing import Any, Callable, NamedTuple, Optional, Union

BEHAVIORS = ("smooth", "instant", "auto")
ANCHOR_SELECTOR = 'a[href^="#"]'

Target = Union[int, float, str, Any]


class Rect(NamedTuple):
    top: float
    left: float = 0.0


def _is_window(document, container) -> bool:
    return container is None or container is document.window


def resolve_scroll_top(
    target: Target,
    document,
    *,
    container=None,
    offset: float = 0,
) -> Optional[float]:
    """
    Absolute scroll position of ``target`` inside ``container``.

    Returns None when a selector matches nothing.
    """
    if isinstance(target, (int, float)) and not isinstance(target, bool):
        return target + offset

    element = document.query_selector(target) if isinstance(target, str) else target
    if element is None:
        return None

    rect = element.bounding_rect()
    if _is_window(document, container):
        return document.window.scroll_y + rect.top + offset

    container_rect = container.bounding_rect()
    return container.scroll_top + rect.top - container_rect.top + offset


def smooth_scroll_to(
    target: Target,
    document,
    *,
    offset: float = 0,
    behavior: str = "smooth",
    container=None,
) -> Optional[float]:
    if behavior not in BEHAVIORS:
        raise ValueError(f"Unknown scroll behavior: {behavior}")

    top = resolve_scroll_top(target, document, container=container, offset=offset)
    if top is None:
        return None

    scroller = document.window if _is_window(document, container) else container
    scroller.scroll_to(top=top, behavior=behavior)
    return top


def scroll_to_top(document, *, behavior: str = "smooth", container=None) -> Optional[float]:
    return smooth_scroll_to(0, document, behavior=behavior, container=container)


class AnchorScroller:
    """
    Turns clicks on same-page anchor links into smooth scrolls.

    The URL fragment is replaced in place, so no history entry is added.
    """

    def __init__(self, document, *, offset: float = 0) -> None:
        self.document = document
        self.offset = offset

    def handle_click(self, event) -> bool:
        target = getattr(event, "target", None)
        anchor = target.closest(ANCHOR_SELECTOR) if target is not None else None
        if anchor is None:
            return False

        href = anchor.get_attribute("href")
        if not href or href == "#":
            return False

        event.prevent_default()
        smooth_scroll_to(href, self.document, offset=self.offset, behavior="smooth")
        self.document.history.replace_state(None, "", href)
        return True

    def install(self, container=None) -> Callable[[], None]:
        """Start listening for clicks; returns the matching cleanup."""
        container = container or self.document
        container.add_event_listener("click", self.handle_click)

        def cleanup() -> None:
            container.remove_event_listener("click", self.handle_click)

        return cleanup


def init_smooth_scrolling(document, container=None, *, offset: float = 0) -> Callable[[], None]:
    return AnchorScroller(document, offset=offset).install(container)
