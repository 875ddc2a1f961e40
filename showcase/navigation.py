"""Fixed navigation bar. Highlights the active section and scrolls on click."""

import logging
from dataclasses import dataclass

from showcase.document import Document
from showcase.models import SectionId
from showcase.sections.base import esc
from showcase.state import CellView

logger = logging.getLogger(__name__)

NAV_LABELS: dict[SectionId, str] = {
    SectionId.HERO: "Home",
    SectionId.METRICS: "Impact",
    SectionId.TIMELINE: "Journey",
    SectionId.ARCHITECTURE: "Architecture",
    SectionId.CONTACT: "Contact",
}


@dataclass(frozen=True)
class NavItem:
    section_id: SectionId
    label: str
    active: bool


class NavigationBar:
    """Reads the active section; never writes it."""

    def __init__(self, active: CellView[SectionId], brand: str, document: Document | None = None) -> None:
        self.active = active
        self.brand = brand
        self.document = document

    def items(self) -> list[NavItem]:
        current = self.active.value
        return [NavItem(sid, label, sid == current) for sid, label in NAV_LABELS.items()]

    def click(self, section_id: SectionId) -> bool:
        """Smooth-scroll to a section. Returns False if it cannot be found."""
        if self.document is None:
            return False
        found = self.document.scroll_into_view(section_id.value, smooth=True)
        if not found:
            logger.debug("Nav click on missing section %s", section_id.value)
        return found

    def click_brand(self) -> bool:
        return self.click(SectionId.HERO)

    def render(self) -> str:
        links = "".join(
            f'<li><button class="nav-link{" active" if item.active else ""}" '
            f'data-nav="{item.section_id.value}">{esc(item.label)}</button></li>'
            for item in self.items()
        )
        return (
            '<nav class="navbar">'
            f'<div class="brand gradient-text" data-nav="hero">{esc(self.brand)}</div>'
            f'<ul class="nav-links">{links}</ul>'
            "</nav>"
        )
