"""Headless model of the scrolling page that hosts the showcase.

The browser owns the real page; this model stands in for it wherever the
presentation state machines run outside one (tests, the ``check`` command).
It carries just enough: element offsets, a scroll position, a viewport
height, and scroll listeners.
"""

import logging
from collections import defaultdict
from collections.abc import Callable, Iterable
from dataclasses import dataclass

logger = logging.getLogger(__name__)

Listener = Callable[[], None]

SMOOTH_SCROLL_FRAMES = 8


@dataclass
class SectionElement:
    element_id: str
    offset_top: float
    height: float

    @property
    def bottom(self) -> float:
        return self.offset_top + self.height


class Document:
    """Scrollable page with named elements and event listeners."""

    def __init__(self, viewport_height: float, elements: Iterable[SectionElement] = ()) -> None:
        if viewport_height <= 0:
            raise ValueError(f"viewport_height must be positive, got {viewport_height}")
        self.viewport_height = viewport_height
        self.scroll_y = 0.0
        self._elements: dict[str, SectionElement] = {e.element_id: e for e in elements}
        self._listeners: dict[str, list[Listener]] = defaultdict(list)

    @classmethod
    def stacked(cls, heights: dict[str, float], viewport_height: float) -> "Document":
        """Lay out elements top to bottom in the given order."""
        elements = []
        offset = 0.0
        for element_id, height in heights.items():
            elements.append(SectionElement(element_id, offset, height))
            offset += height
        return cls(viewport_height, elements)

    # --- Elements ---

    def get_element_by_id(self, element_id: str) -> SectionElement | None:
        return self._elements.get(element_id)

    def add_element(self, element: SectionElement) -> None:
        self._elements[element.element_id] = element

    def remove_element(self, element_id: str) -> None:
        self._elements.pop(element_id, None)

    @property
    def scroll_height(self) -> float:
        return max((e.bottom for e in self._elements.values()), default=0.0)

    @property
    def max_scroll(self) -> float:
        return max(0.0, self.scroll_height - self.viewport_height)

    # --- Events ---

    def add_event_listener(self, event: str, listener: Listener) -> None:
        self._listeners[event].append(listener)

    def remove_event_listener(self, event: str, listener: Listener) -> None:
        if listener in self._listeners[event]:
            self._listeners[event].remove(listener)

    def listener_count(self, event: str) -> int:
        return len(self._listeners[event])

    def dispatch(self, event: str) -> None:
        for listener in list(self._listeners[event]):
            listener()

    # --- Scrolling ---

    def scroll_to(self, y: float) -> None:
        """Jump to ``y`` (clamped to the scrollable range), firing one scroll event."""
        y = min(max(0.0, y), self.max_scroll)
        if y == self.scroll_y:
            return
        self.scroll_y = y
        self.dispatch("scroll")

    def scroll_into_view(self, element_id: str, smooth: bool = False) -> bool:
        """Scroll so the element's top meets the viewport top.

        With ``smooth`` the move is split into frames, each firing its own
        scroll event as a browser would. Returns False if the element is gone.
        """
        element = self.get_element_by_id(element_id)
        if element is None:
            logger.debug("scroll_into_view: no element %r", element_id)
            return False

        target = min(max(0.0, element.offset_top), self.max_scroll)
        if not smooth:
            self.scroll_to(target)
            return True

        start = self.scroll_y
        for frame in range(1, SMOOTH_SCROLL_FRAMES + 1):
            self.scroll_to(start + (target - start) * frame / SMOOTH_SCROLL_FRAMES)
        return True
