"""Hero section: elevator pitch plus animated headline stats."""

from showcase.counter import DURATION_MS, STEPS, CounterAnimator, Scheduler
from showcase.document import Document
from showcase.loader import format_number
from showcase.models import CareerViewModel, SectionId
from showcase.sections.base import Section, esc

STAT_LABELS = {
    "clusters": "EKS Clusters",
    "lines_of_code": "Lines of Code",
    "fixers": "Self-Healing Patterns",
    "accounts": "AWS Accounts",
}


class HeroSection(Section):
    """Elevator pitch and four counters that animate from zero on mount.

    The display threshold is the largest of the four targets, so only the
    biggest stat switches to the ``Nk`` form. With small data this is applied
    literally: a largest target under 1000 renders as ``0k`` or ``1k``, and
    all-zero targets render every stat as ``0k``.
    """

    section_id = SectionId.HERO

    def __init__(
        self,
        view_model: CareerViewModel,
        page_title: str = "Platform Engineering at Scale",
        duration_ms: int = DURATION_MS,
        steps: int = STEPS,
    ) -> None:
        super().__init__()
        self.view_model = view_model
        self.title = page_title
        self.duration_ms = duration_ms
        self.steps = steps

        after = view_model.transformation_after
        achievements = view_model.technical_achievements
        self.targets = {
            "clusters": after.peak_clusters,
            "lines_of_code": achievements.b2b_cli.lines_of_code,
            "fixers": achievements.self_healing_system.total_fixers,
            "accounts": after.peak_accounts,
        }
        # Largest tracked magnitude; values reaching it switch to "Nk" display.
        self.threshold = max(self.targets.values())
        self.values = {name: 0 for name in self.targets}
        self.animator: CounterAnimator | None = None

    def mount(self, document: Document, scheduler: Scheduler) -> None:
        if self.mounted:
            return
        super().mount(document, scheduler)
        self.values = {name: 0 for name in self.targets}
        self.animator = CounterAnimator(
            self.targets, scheduler, self._on_update,
            duration_ms=self.duration_ms, steps=self.steps,
        )
        self.animator.start()

    def unmount(self) -> None:
        if self.animator is not None:
            self.animator.cancel()
            self.animator = None
        super().unmount()

    def _on_update(self, values: dict[str, int]) -> None:
        self.values = values

    def display(self, name: str) -> str:
        """Text currently shown for a stat (final value when not animating)."""
        value = self.values[name] if self.animator is not None else self.targets[name]
        return format_number(value, self.threshold)

    @property
    def headline(self) -> str:
        before = self.view_model.transformation_before.cluster_count
        peak = self.view_model.transformation_after.peak_clusters
        return f"Transforming Infrastructure from {before} to {peak} Clusters"

    def captions(self) -> dict[str, str]:
        before = self.view_model.transformation_before.cluster_count
        peak = self.view_model.transformation_after.peak_clusters
        growth = f"↑ {peak * 100 // before:,}%" if before > 0 else "New Platform"
        return {
            "clusters": growth,
            "lines_of_code": "Platform CLI",
            "fixers": self.view_model.technical_achievements.self_healing_system.name,
            "accounts": "Multi-Account Scale",
        }

    def render_body(self) -> str:
        captions = self.captions()
        cards = "".join(
            f'<div class="card stat-card">'
            f'<div class="stat-value gradient-text" data-counter="{name}" data-target="{self.targets[name]}">'
            f"{esc(self.display(name))}</div>"
            f'<div class="stat-label">{esc(label)}</div>'
            f'<div class="stat-caption">{esc(captions[name])}</div>'
            f"</div>"
            for name, label in STAT_LABELS.items()
        )
        return (
            f'<h3 class="hero-sub">{esc(self.headline)}</h3>\n'
            f'  <p class="hero-pitch">{esc(self.view_model.summary.pitch_text)}</p>\n'
            f'  <div class="stat-grid" data-threshold="{self.threshold}">{cards}</div>'
        )

    def render(self) -> str:
        return (
            f'<section id="{self.section_id.value}" class="section section-hero">\n'
            f'  <h1 class="hero-title gradient-text">{esc(self.title)}</h1>\n'
            f"  {self.render_body()}\n"
            f"</section>"
        )
