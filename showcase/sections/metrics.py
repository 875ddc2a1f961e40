"""Metrics section: Scale / Efficiency / Innovation category cards."""

from showcase.models import CareerViewModel, MetricCategory, SectionId
from showcase.sections.base import SelectableSection, esc

CATEGORY_COLORS = {
    "Scale": "var(--primary)",
    "Efficiency": "var(--success)",
    "Innovation": "var(--accent)",
}


class MetricsSection(SelectableSection):
    """Selection is keyed by category title."""

    section_id = SectionId.METRICS
    title = "Impact & Scale"

    def __init__(self, view_model: CareerViewModel) -> None:
        super().__init__()
        self.categories: list[MetricCategory] = list(view_model.metrics)

    def selectable_keys(self) -> list[str]:
        return [c.title for c in self.categories]

    @property
    def selected_category(self) -> MetricCategory | None:
        return next((c for c in self.categories if self.selection.is_selected(c.title)), None)

    def render_body(self) -> str:
        cards = []
        for category in self.categories:
            color = CATEGORY_COLORS.get(category.title, "var(--primary)")
            rows = "".join(
                f'<div class="metric"><div class="metric-value">{esc(m.value)}</div>'
                f'<div class="metric-label">{esc(m.label)}</div></div>'
                for m in category.metrics
            )
            cards.append(
                f'<div class="{self.card_class(category.title, "card metric-card")}" '
                f'data-select="metrics" data-key="{esc(category.title)}">'
                f'<div class="metric-title" style="color: {color}">{esc(category.title)}</div>'
                f"{rows}</div>"
            )
        return f'<div class="card-grid">{"".join(cards)}</div>'
