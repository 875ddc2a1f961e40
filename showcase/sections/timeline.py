"""Timeline section: the platform evolution journey, one expandable card per event."""

from showcase.models import CareerTimeline, SectionId, TimelineEvent
from showcase.sections.base import SelectableSection, esc


class TimelineSection(SelectableSection):
    section_id = SectionId.TIMELINE
    title = "Platform Evolution Journey"

    def __init__(self, events: list[TimelineEvent], career: CareerTimeline | None = None) -> None:
        super().__init__()
        self.events = list(events)
        self.career = career

    def selectable_keys(self) -> range:
        return range(len(self.events))

    def is_expanded(self, index: int) -> bool:
        return self.selection.is_selected(index)

    def visible_achievements(self, index: int, expanded: bool | None = None) -> list[str]:
        """All achievements when expanded, otherwise just the first.

        ``expanded`` defaults to the card's current selection state.
        """
        if expanded is None:
            expanded = self.is_expanded(index)
        achievements = self.events[index].achievements
        return list(achievements) if expanded else achievements[:1]

    def more_label(self, index: int, expanded: bool | None = None) -> str | None:
        if expanded is None:
            expanded = self.is_expanded(index)
        hidden = len(self.events[index].achievements) - 1
        if expanded or hidden <= 0:
            return None
        return f"+{hidden} more achievements (click to expand)"

    def _render_overview(self) -> str:
        if self.career is None:
            return ""
        o = self.career.career_overview
        companies = "".join(
            f'<li><strong>{esc(c.company)}</strong> · {esc(c.role)} · {esc(c.duration)}</li>'
            for c in self.career.companies
        )
        return (
            '<div class="career-overview">'
            f'<div class="overview-line">{esc(o.total_experience)} · {esc(o.primary_focus)}</div>'
            f'<ul class="company-list">{companies}</ul>'
            "</div>"
        )

    def render_body(self) -> str:
        # Both views are emitted; the card's "selected" class picks which one shows.
        items = []
        for i, event in enumerate(self.events):
            side = "left" if i % 2 == 0 else "right"
            summary = "".join(f"• {esc(a)}" for a in self.visible_achievements(i, expanded=False))
            label = self.more_label(i, expanded=False)
            more = f'<div class="more">{esc(label)}</div>' if label else ""
            full = "".join(f"<li>{esc(a)}</li>" for a in self.visible_achievements(i, expanded=True))
            details = f'<p class="event-details">{esc(event.details)}</p>' if event.details else ""
            items.append(
                f'<div class="{self.card_class(i, f"card timeline-card {side}")}" data-select="timeline" data-key="{i}">'
                f'<div class="period">{esc(event.period)}</div>'
                f'<h3 class="event-title">{esc(event.event)}</h3>'
                f'<div class="summary">{summary}{more}</div>'
                f'<ul class="details">{full}</ul>{details}'
                f"</div>"
            )
        return f'{self._render_overview()}<div class="timeline">{"".join(items)}</div>'
