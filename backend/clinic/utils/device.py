# clinic/utils/device.py
"""
Viewport classification shared by the request middleware and page scripts.

get_device_type gives a one-shot answer for a width; DeviceFlags and
DeviceWatcher are the reactive form, re-evaluated as the viewport resizes.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, List, Optional

MOBILE_BREAKPOINT = 640
TABLET_BREAKPOINT = 1024
DESKTOP_BREAKPOINT = 1280
LARGE_DESKTOP_BREAKPOINT = 1536

BREAKPOINTS = {
    "sm": MOBILE_BREAKPOINT,
    "lg": TABLET_BREAKPOINT,
    "xl": DESKTOP_BREAKPOINT,
    "2xl": LARGE_DESKTOP_BREAKPOINT,
}

MOBILE = "mobile"
TABLET = "tablet"
DESKTOP = "desktop"
LARGE_DESKTOP = "largeDesktop"
UNKNOWN = "unknown"


def get_device_type(width: Optional[int]) -> str:
    """One-shot classification of a viewport width."""
    if width is None:
        return UNKNOWN
    if width < MOBILE_BREAKPOINT:
        return MOBILE
    if width < TABLET_BREAKPOINT:
        return TABLET
    if width < DESKTOP_BREAKPOINT:
        return DESKTOP
    return LARGE_DESKTOP


@dataclass(frozen=True)
class DeviceFlags:
    is_mobile: bool = False
    is_tablet: bool = False
    is_desktop: bool = False
    is_large_desktop: bool = False

    @classmethod
    def from_width(cls, width: Optional[int]) -> "DeviceFlags":
        device = get_device_type(width)
        return cls(
            is_mobile=device == MOBILE,
            is_tablet=device == TABLET,
            is_desktop=device == DESKTOP,
            is_large_desktop=device == LARGE_DESKTOP,
        )


class DeviceWatcher:
    """
    Keeps device flags current as the viewport is resized.

    Subscribers are called with the new flags only when the device class
    changes.
    """

    def __init__(self, width: Optional[int] = None) -> None:
        self.width = width
        self.flags = DeviceFlags.from_width(width)
        self._subscribers: List[Callable[[DeviceFlags], None]] = []

    @property
    def device_type(self) -> str:
        return get_device_type(self.width)

    def subscribe(self, callback: Callable[[DeviceFlags], None]) -> Callable[[], None]:
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def resize(self, width: Optional[int]) -> DeviceFlags:
        self.width = width
        flags = DeviceFlags.from_width(width)
        if flags != self.flags:
            self.flags = flags
            for callback in list(self._subscribers):
                callback(flags)
        return self.flags


def width_from_headers(headers) -> Optional[int]:
    """Read the viewport width client hint, if the browser sent one."""
    for name in ("Sec-CH-Viewport-Width", "Viewport-Width"):
        raw = headers.get(name)
        if raw:
            try:
                width = float(raw)
            except ValueError:
                return None
            if not math.isfinite(width) or width < 0:
                return None
            return int(width)
    return None
