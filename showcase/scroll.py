"""Scroll coordination: decides which section is active as the page scrolls."""

import logging
from collections.abc import Mapping, Sequence

from showcase.document import Document
from showcase.models import SECTION_ORDER, SectionId
from showcase.state import StateCell

logger = logging.getLogger(__name__)

# Fraction of the viewport added to the scroll position, so the section
# dominating the view wins over one whose top has only just appeared.
VIEWPORT_BIAS = 1 / 3


def compute_active_section(
    scroll_y: float,
    viewport_height: float,
    offsets: Mapping[SectionId, float | None],
    order: Sequence[SectionId] = SECTION_ORDER,
) -> SectionId | None:
    """Return the last section (in document order) whose top is above the threshold.

    Sections missing from ``offsets`` or mapped to None are skipped.
    """
    threshold = scroll_y + viewport_height * VIEWPORT_BIAS
    for section_id in reversed(order):
        top = offsets.get(section_id)
        if top is not None and top <= threshold:
            return section_id
    return None


class ScrollCoordinator:
    """Sole writer of the page's active-section cell."""

    def __init__(
        self,
        document: Document,
        active: StateCell[SectionId],
        order: Sequence[SectionId] = SECTION_ORDER,
    ) -> None:
        self.document = document
        self.active = active
        self.order = tuple(order)
        self._mounted = False

    @property
    def mounted(self) -> bool:
        return self._mounted

    def mount(self) -> None:
        """Start listening for scroll events and evaluate once immediately."""
        if self._mounted:
            return
        self.document.add_event_listener("scroll", self.evaluate)
        self._mounted = True
        self.evaluate()

    def unmount(self) -> None:
        if not self._mounted:
            return
        self.document.remove_event_listener("scroll", self.evaluate)
        self._mounted = False

    def evaluate(self) -> SectionId | None:
        """Recompute the active section; write the cell only if it changed."""
        offsets: dict[SectionId, float | None] = {}
        for section_id in self.order:
            element = self.document.get_element_by_id(section_id.value)
            offsets[section_id] = element.offset_top if element is not None else None

        section_id = compute_active_section(
            self.document.scroll_y, self.document.viewport_height, offsets, self.order,
        )
        if section_id is not None and self.active.set(section_id):
            logger.debug("Active section -> %s (scroll_y=%.0f)", section_id.value, self.document.scroll_y)
        return section_id
