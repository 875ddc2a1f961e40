"""Contact section: outbound links and a closing footer."""

from showcase.config import ContactConfig
from showcase.models import CareerSummary, SectionId
from showcase.sections.base import Section, esc


class ContactSection(Section):
    section_id = SectionId.CONTACT

    def __init__(self, contact: ContactConfig, tagline: str, summary: CareerSummary | None = None) -> None:
        super().__init__()
        self.contact = contact
        self.title = contact.heading
        self.tagline = tagline
        self.summary = summary

    @property
    def footer_lines(self) -> list[str]:
        lines = [self.tagline]
        if self.summary is not None:
            lines.append(f"{self.summary.company} • {self.summary.current_role}")
        return lines

    def render_body(self) -> str:
        links = "".join(
            f'<a class="card contact-link" href="{esc(link.href)}" '
            f'target="{"_blank" if link.opens_in_new_tab else "_self"}" rel="noopener noreferrer">'
            f'<div class="card-icon">{esc(link.icon)}</div>'
            f'<div class="contact-title">{esc(link.title)}</div>'
            f'<div class="contact-value">{esc(link.value)}</div>'
            f"</a>"
            for link in self.contact.links
        )
        footer = "".join(f"<p>{esc(line)}</p>" for line in self.footer_lines)
        return (
            f'<p class="contact-prompt">{esc(self.contact.prompt)}</p>\n'
            f'  <div class="contact-links">{links}</div>\n'
            f'  <footer class="contact-footer">{footer}</footer>'
        )
