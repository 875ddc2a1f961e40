"""Top-level page: wires sections, scroll coordination and navigation together.

``build_page`` loads the staged data and produces a Page; ``generate_site``
renders it to one self-contained HTML file. The embedded script applies the
same rules as the Python state machines: bottom-up active-section scan with a
one-third viewport bias, 2000 ms / 60-step counters, and single selection per
section.
"""

import json
import logging
from pathlib import Path

from showcase.config import Config
from showcase.counter import DURATION_MS, STEPS, Scheduler
from showcase.document import Document
from showcase.errors import DataShapeError
from showcase.loader import load_career_timeline_file, load_master_data, load_timeline_file
from showcase.models import SECTION_ORDER, CareerTimeline, CareerViewModel, SectionId, TimelineEvent
from showcase.navigation import NavigationBar
from showcase.scroll import VIEWPORT_BIAS, ScrollCoordinator
from showcase.sections import (
    ArchitectureSection,
    ContactSection,
    FailedSection,
    HeroSection,
    MetricsSection,
    Section,
    TimelineSection,
)
from showcase.sections.base import esc
from showcase.state import StateCell

logger = logging.getLogger(__name__)

MASTER_DATA_FILE = "master-data.yaml"
TIMELINE_FILE = "timeline.json"
CAREER_TIMELINE_FILE = "career-timeline.json"


class Page:
    """Owns the active-section cell; the ScrollCoordinator is its only writer."""

    def __init__(self, config: Config, sections: list[Section]) -> None:
        self.config = config
        by_id = {s.section_id: s for s in sections}
        missing = [sid.value for sid in SECTION_ORDER if sid not in by_id]
        if missing:
            raise ValueError(f"Page is missing sections: {', '.join(missing)}")
        self.sections = [by_id[sid] for sid in SECTION_ORDER]
        self.active: StateCell[SectionId] = StateCell(SectionId.HERO)
        self.navigation = NavigationBar(self.active.view(), config.site.owner_name)
        self.coordinator: ScrollCoordinator | None = None

    def section(self, section_id: SectionId) -> Section:
        return next(s for s in self.sections if s.section_id == section_id)

    @property
    def failed_sections(self) -> list[SectionId]:
        return [s.section_id for s in self.sections if isinstance(s, FailedSection)]

    @property
    def mounted(self) -> bool:
        return self.coordinator is not None

    def mount(self, document: Document, scheduler: Scheduler) -> None:
        if self.mounted:
            return
        self.navigation.document = document
        for section in self.sections:
            section.mount(document, scheduler)
        self.coordinator = ScrollCoordinator(document, self.active, SECTION_ORDER)
        self.coordinator.mount()

    def unmount(self) -> None:
        """Release every scroll listener and timer the page registered."""
        if self.coordinator is not None:
            self.coordinator.unmount()
            self.coordinator = None
        for section in self.sections:
            section.unmount()
        self.navigation.document = None

    def render_html(self) -> str:
        body = "\n".join(s.render() for s in self.sections)
        settings = {
            "order": [sid.value for sid in SECTION_ORDER],
            "bias": VIEWPORT_BIAS,
            "durationMs": DURATION_MS,
            "steps": STEPS,
            "active": self.active.value.value,
        }
        return f"""<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="UTF-8">
<meta name="viewport" content="width=device-width, initial-scale=1.0">
<title>{esc(self.config.site.owner_name)} | {esc(self.config.site.page_title)}</title>
<style>{_CSS}</style>
</head>
<body>
{self.navigation.render()}
<main>
{body}
</main>
<script>
const SHOWCASE = {json.dumps(settings)};
{_SCRIPT}
</script>
</body>
</html>"""


def _load_section_data(loader, path: Path, label: str):
    """Run ``loader(path)``; on failure log it and return the error instead."""
    try:
        return loader(path), None
    except (DataShapeError, OSError) as e:
        logger.error("Could not load %s from %s: %s", label, path, e)
        return None, e


def _load_career_timeline(path: Path) -> CareerTimeline | None:
    if not path.exists():
        logger.info("No %s staged; timeline renders without career overview", path.name)
        return None
    try:
        return load_career_timeline_file(path)
    except (DataShapeError, OSError) as e:
        logger.warning("Ignoring malformed %s: %s", path.name, e)
        return None


def build_page(config: Config) -> Page:
    """Load staged data and assemble the page.

    A malformed or missing input only takes down the sections that depend on
    it; those render as FailedSection and the rest of the page still builds.
    """
    data_dir = config.resolved_data_dir
    view_model: CareerViewModel | None
    events: list[TimelineEvent] | None
    view_model, career_error = _load_section_data(load_master_data, data_dir / MASTER_DATA_FILE, "career data")
    events, timeline_error = _load_section_data(load_timeline_file, data_dir / TIMELINE_FILE, "timeline")
    career = _load_career_timeline(data_dir / CAREER_TIMELINE_FILE)

    sections: list[Section] = []
    if view_model is not None:
        sections += [
            HeroSection(view_model, page_title=config.site.page_title),
            MetricsSection(view_model),
            ArchitectureSection(view_model),
        ]
    else:
        sections += [
            FailedSection(SectionId.HERO, config.site.page_title, career_error),
            FailedSection(SectionId.METRICS, MetricsSection.title, career_error),
            FailedSection(SectionId.ARCHITECTURE, ArchitectureSection.title, career_error),
        ]

    if events is not None:
        sections.append(TimelineSection(events, career))
    else:
        sections.append(FailedSection(SectionId.TIMELINE, TimelineSection.title, timeline_error))

    sections.append(ContactSection(
        config.contact,
        tagline=config.site.tagline,
        summary=view_model.summary if view_model is not None else None,
    ))
    return Page(config, sections)


def generate_site(config: Config, output_path: Path | None = None) -> Path:
    """Render the page to a single HTML file and return its path."""
    page = build_page(config)
    if output_path is None:
        output_path = config.resolved_output_path
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(page.render_html(), encoding="utf-8")

    if page.failed_sections:
        logger.warning(
            "Rendered with failed sections: %s", ", ".join(s.value for s in page.failed_sections),
        )
    logger.info("Output: %s", output_path)
    return output_path


_CSS = """
:root {
  --primary: #0ea5e9; --accent: #8b5cf6; --success: #10b981;
  --dark: #0f172a; --light: #f1f5f9; --text: #94a3b8;
}
* { margin: 0; padding: 0; box-sizing: border-box; }
html { scroll-behavior: smooth; }
body { font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif;
       background: var(--dark); color: var(--light); }
.gradient-text { background: linear-gradient(90deg, var(--primary), var(--accent));
                 -webkit-background-clip: text; background-clip: text; color: transparent; }
.navbar { position: fixed; top: 0; width: 100%; z-index: 1000; display: flex;
          justify-content: space-between; align-items: center; padding: 1rem 2rem;
          background: rgba(15, 23, 42, 0.95); border-bottom: 1px solid rgba(255, 255, 255, 0.1); }
.brand { font-size: 1.5rem; font-weight: bold; cursor: pointer; }
.nav-links { display: flex; gap: 2rem; list-style: none; }
.nav-link { background: none; border: none; color: var(--light); cursor: pointer;
            padding: 0.5rem 0; border-bottom: 2px solid transparent; font-size: 1rem; }
.nav-link.active { color: var(--primary); border-bottom-color: var(--primary); }
.section { padding: 5rem 2rem; max-width: 1400px; margin: 0 auto; }
.section-title { font-size: 3rem; text-align: center; margin-bottom: 4rem; }
.section-hero { min-height: 100vh; display: flex; flex-direction: column; justify-content: center;
                text-align: center; }
.hero-title { font-size: clamp(2.5rem, 5vw, 4rem); margin-bottom: 1rem; }
.hero-sub { font-size: 1.5rem; color: var(--text); font-weight: 400; margin-bottom: 2rem; }
.hero-pitch { font-size: 1.2rem; color: var(--text); line-height: 1.6; max-width: 800px; margin: 0 auto 4rem; }
.card { background: rgba(255, 255, 255, 0.05); border: 1px solid rgba(255, 255, 255, 0.1);
        border-radius: 1rem; padding: 2rem; transition: all 0.3s; }
.card[data-select] { cursor: pointer; }
.card.selected { transform: scale(1.03); border-color: var(--primary); }
.stat-grid, .card-grid { display: grid; gap: 2rem; }
.stat-grid { grid-template-columns: repeat(auto-fit, minmax(200px, 1fr)); }
.card-grid { grid-template-columns: repeat(auto-fit, minmax(350px, 1fr)); }
.stat-value { font-size: 3rem; font-weight: bold; }
.stat-label { color: var(--text); font-size: 0.9rem; text-transform: uppercase; letter-spacing: 1px; }
.stat-caption { color: var(--success); font-size: 0.9rem; margin-top: 0.5rem; }
.metric-title { font-size: 1.5rem; font-weight: bold; margin-bottom: 2rem; }
.metric { margin-bottom: 1.5rem; text-align: center; }
.metric-value { font-size: 1.5rem; font-weight: bold; }
.metric-card.selected .metric-value { font-size: 1.8rem; }
.metric-label { color: var(--text); font-size: 0.9rem; }
.timeline { display: flex; flex-direction: column; gap: 3rem; }
.timeline-card { width: 45%; }
.timeline-card.right { margin-left: 55%; }
.period { color: var(--primary); font-weight: bold; margin-bottom: 0.5rem; }
.event-title { font-size: 1.5rem; margin-bottom: 1rem; }
.more { color: var(--primary); font-size: 0.9rem; margin-top: 0.5rem; }
.details, .event-details { display: none; color: var(--text); line-height: 1.6; padding-left: 1.2rem; }
.card.selected .details, .card.selected .event-details { display: block; }
.card.selected .summary { display: none; }
.career-overview { color: var(--text); text-align: center; margin-bottom: 3rem; }
.company-list { list-style: none; margin-top: 1rem; }
.card-icon { font-size: 3rem; margin-bottom: 1rem; }
.card-title { color: var(--primary); font-size: 1.5rem; margin-bottom: 1rem; }
.card-description { color: var(--text); line-height: 1.6; margin-bottom: 1.5rem; }
.chip { background: rgba(14, 165, 233, 0.2); color: var(--primary); padding: 0.25rem 0.75rem;
        border-radius: 1rem; font-size: 0.8rem; margin: 0 0.25rem; display: inline-block; }
.contact-prompt { color: var(--text); font-size: 1.5rem; text-align: center; margin-bottom: 4rem; }
.contact-links { display: flex; justify-content: center; gap: 3rem; flex-wrap: wrap; margin-bottom: 4rem; }
.contact-link { color: inherit; text-decoration: none; min-width: 180px; text-align: center; }
.contact-title { color: var(--primary); font-weight: bold; font-size: 1.2rem; }
.contact-value, .contact-footer { color: var(--text); text-align: center; }
.section-error { border: 1px solid #f87171; color: #fca5a5; border-radius: 1rem; padding: 2rem; text-align: center; }
"""

_SCRIPT = """
(() => {
  let active = SHOWCASE.active;

  function highlight() {
    document.querySelectorAll('.nav-link').forEach((link) => {
      link.classList.toggle('active', link.dataset.nav === active);
    });
  }

  // Active section: scan bottom-up, first top above the biased threshold wins.
  function updateActive() {
    const threshold = window.scrollY + window.innerHeight * SHOWCASE.bias;
    for (let i = SHOWCASE.order.length - 1; i >= 0; i--) {
      const el = document.getElementById(SHOWCASE.order[i]);
      if (el && el.offsetTop <= threshold) {
        if (active !== SHOWCASE.order[i]) {
          active = SHOWCASE.order[i];
          highlight();
        }
        break;
      }
    }
  }
  window.addEventListener('scroll', updateActive);
  updateActive();

  document.querySelectorAll('[data-nav]').forEach((btn) => {
    btn.addEventListener('click', () => {
      const el = document.getElementById(btn.dataset.nav);
      if (el) el.scrollIntoView({ behavior: 'smooth' });
    });
  });

  // Single selection per section: clicking the selected card clears it.
  const selected = {};
  document.querySelectorAll('[data-select].selected').forEach((card) => {
    selected[card.dataset.select] = card.dataset.key;
  });
  document.querySelectorAll('[data-select]').forEach((card) => {
    card.addEventListener('click', () => {
      const group = card.dataset.select;
      const key = card.dataset.key;
      document.querySelectorAll(`[data-select="${group}"]`).forEach((c) => c.classList.remove('selected'));
      if (selected[group] === key) {
        delete selected[group];
      } else {
        selected[group] = key;
        card.classList.add('selected');
      }
    });
  });

  // Counters: 0 -> target in SHOWCASE.steps steps over SHOWCASE.durationMs.
  const grid = document.querySelector('.stat-grid');
  if (!grid) return;
  const threshold = Number(grid.dataset.threshold);
  const counters = Array.from(grid.querySelectorAll('[data-counter]'));
  const fmt = (n) => (n >= threshold ? Math.round(n / 1000) + 'k' : n.toLocaleString('en-US'));
  let step = 0;
  counters.forEach((el) => { el.textContent = fmt(0); });
  const timer = setInterval(() => {
    step++;
    counters.forEach((el) => {
      el.textContent = fmt(Math.floor(Number(el.dataset.target) * Math.min(step, SHOWCASE.steps) / SHOWCASE.steps));
    });
    if (step >= SHOWCASE.steps) clearInterval(timer);
  }, SHOWCASE.durationMs / SHOWCASE.steps);
  window.addEventListener('pagehide', () => clearInterval(timer));
})();
"""
