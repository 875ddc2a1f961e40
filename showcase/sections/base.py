"""Base section interface and shared HTML helpers."""

import abc
import logging
from collections.abc import Hashable, Sequence

from showcase.counter import Scheduler
from showcase.document import Document
from showcase.errors import DataShapeError
from showcase.models import SectionId
from showcase.state import Selection

logger = logging.getLogger(__name__)


def esc(s: str) -> str:
    return (
        s.replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
        .replace("'", "&#39;")
    )


class Section(abc.ABC):
    """Base class for all page sections.

    A section renders one anchor of the page. ``mount``/``unmount`` bracket the
    time it is live in a document; anything it registers on mount it must
    release on unmount.
    """

    section_id: SectionId
    title: str

    def __init__(self) -> None:
        self._document: Document | None = None

    @property
    def mounted(self) -> bool:
        return self._document is not None

    def mount(self, document: Document, scheduler: Scheduler) -> None:
        self._document = document

    def unmount(self) -> None:
        self._document = None

    @abc.abstractmethod
    def render_body(self) -> str:
        """HTML for the section's content, below its heading."""
        ...

    def render(self) -> str:
        return (
            f'<section id="{self.section_id.value}" class="section section-{self.section_id.value}">\n'
            f'  <h2 class="section-title gradient-text">{esc(self.title)}</h2>\n'
            f"  {self.render_body()}\n"
            f"</section>"
        )


class SelectableSection(Section):
    """Section with a single-selection toggle over its cards."""

    def __init__(self) -> None:
        super().__init__()
        self.selection = Selection.none()

    @abc.abstractmethod
    def selectable_keys(self) -> Sequence[Hashable]:
        ...

    def click(self, key: Hashable) -> Selection:
        if key not in self.selectable_keys():
            raise ValueError(f"{self.section_id.value}: no item {key!r}")
        self.selection = self.selection.toggle(key)
        logger.debug("%s selection -> %r", self.section_id.value, self.selection.key)
        return self.selection

    def card_class(self, key: Hashable, base: str = "card") -> str:
        return f"{base} selected" if self.selection.is_selected(key) else base


class FailedSection(Section):
    """Explicit error state for a section whose input data was malformed."""

    def __init__(self, section_id: SectionId, title: str, error: DataShapeError | OSError) -> None:
        super().__init__()
        self.section_id = section_id
        self.title = title
        self.error = error

    def render_body(self) -> str:
        return (
            '<div class="section-error" role="alert">'
            f"This section is unavailable: {esc(str(self.error))}"
            "</div>"
        )
