"""Page sections: each renders one navigable anchor of the showcase."""

from showcase.sections.architecture import ArchitectureSection
from showcase.sections.base import FailedSection, Section
from showcase.sections.contact import ContactSection
from showcase.sections.hero import HeroSection
from showcase.sections.metrics import MetricsSection
from showcase.sections.timeline import TimelineSection

__all__ = [
    "ArchitectureSection",
    "ContactSection",
    "FailedSection",
    "HeroSection",
    "MetricsSection",
    "Section",
    "TimelineSection",
]
