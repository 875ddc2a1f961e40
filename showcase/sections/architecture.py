"""Architecture section: cards for the platform's building blocks."""

from dataclasses import dataclass, field

from showcase.loader import format_number
from showcase.models import CareerViewModel, SectionId
from showcase.sections.base import SelectableSection, esc


@dataclass
class ArchitectureCard:
    icon: str
    title: str
    description: str
    metrics: list[str] = field(default_factory=list)
    details: list[str] = field(default_factory=list)  # shown only when expanded


def build_cards(view_model: CareerViewModel) -> list[ArchitectureCard]:
    achievements = view_model.technical_achievements
    cli = achievements.b2b_cli
    healing = achievements.self_healing_system
    arch = achievements.infrastructure_architecture
    loc = format_number(cli.lines_of_code, cli.lines_of_code)

    cards = [
        ArchitectureCard(
            icon="🧠",
            title="Platform CLI",
            description=(
                f"{loc}-line {cli.language} orchestration tool with "
                f"{healing.total_fixers} self-healing patterns"
            ),
            metrics=[f"{loc} Lines", cli.framework, f"{healing.total_fixers} Fixers"],
            details=list(cli.key_features),
        ),
    ]

    if arch is not None:
        cards.append(ArchitectureCard(
            icon="🏗️",
            title=f"{arch.codename} Architecture",
            description=arch.problem_solved,
            metrics=[arch.design_pattern, f"{len(arch.key_innovations)} Innovations"],
            details=[f"{k.description}: {k.benefit}" for k in arch.key_innovations],
        ))
        for innovation in arch.key_innovations:
            cards.append(ArchitectureCard(
                icon="🧱",
                title=innovation.description,
                description=innovation.benefit,
                metrics=[innovation.timeline],
                details=[f"Delivered: {innovation.timeline}"],
            ))

    cards.append(ArchitectureCard(
        icon="📊",
        title=healing.name,
        description="Automated recovery patterns for common infrastructure failures",
        metrics=[f"{healing.total_fixers} Patterns", "Auto Recovery"],
        details=[healing.configuration],
    ))
    return cards


class ArchitectureSection(SelectableSection):
    section_id = SectionId.ARCHITECTURE
    title = "Platform Architecture"

    def __init__(self, view_model: CareerViewModel) -> None:
        super().__init__()
        self.cards = build_cards(view_model)

    def selectable_keys(self) -> range:
        return range(len(self.cards))

    @property
    def expanded_card(self) -> ArchitectureCard | None:
        if self.selection.is_none:
            return None
        return self.cards[self.selection.key]

    def render_body(self) -> str:
        items = []
        for i, card in enumerate(self.cards):
            chips = "".join(f'<span class="chip">{esc(m)}</span>' for m in card.metrics)
            details = "".join(f"<li>{esc(d)}</li>" for d in card.details)
            items.append(
                f'<div class="{self.card_class(i, "card arch-card")}" data-select="architecture" data-key="{i}">'
                f'<div class="card-icon">{esc(card.icon)}</div>'
                f'<h3 class="card-title">{esc(card.title)}</h3>'
                f'<p class="card-description">{esc(card.description)}</p>'
                f'<div class="chips">{chips}</div>'
                f'<ul class="details">{details}</ul>'
                f"</div>"
            )
        return f'<div class="card-grid">{"".join(items)}</div>'
