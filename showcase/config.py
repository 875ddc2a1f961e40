"""Configuration loading for the showcase generator."""

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field


class SiteConfig(BaseModel):
    owner_name: str = "Christo De Lange"
    page_title: str = "Platform Engineering at Scale"
    tagline: str = "Platform Engineering • Cloud Architecture • DevOps Excellence"


class SyncConfig(BaseModel):
    source_dir: str = "../experience"
    files: dict[str, str] = Field(default_factory=lambda: {
        "master-data.yaml": "companies/las-vegas-sands/data/master-data.yaml",
        "timeline.json": "companies/las-vegas-sands/data/timeline.json",
        "career-timeline.json": "data/career-timeline.json",
    })


class ContactLink(BaseModel):
    icon: str
    title: str
    value: str
    href: str

    @property
    def opens_in_new_tab(self) -> bool:
        return not self.href.startswith("mailto:")


class ContactConfig(BaseModel):
    heading: str = "Let's Connect"
    prompt: str = "Interested in discussing platform engineering, DevOps, or opportunities?"
    links: list[ContactLink] = Field(default_factory=lambda: [
        ContactLink(
            icon="📧", title="Email",
            value="portfolio@christodelange.com",
            href="mailto:portfolio@christodelange.com",
        ),
        ContactLink(
            icon="💼", title="LinkedIn",
            value="/in/christo-de-lange-09134b5",
            href="https://www.linkedin.com/in/christo-de-lange-09134b5/",
        ),
        ContactLink(
            icon="💻", title="GitHub",
            value="github.com/christokur",
            href="https://github.com/christokur",
        ),
    ])


class Config(BaseModel):
    data_dir: str = "data"
    output_path: str = "dist/index.html"
    site: SiteConfig = Field(default_factory=SiteConfig)
    sync: SyncConfig = Field(default_factory=SyncConfig)
    contact: ContactConfig = Field(default_factory=ContactConfig)

    @property
    def resolved_data_dir(self) -> Path:
        """Resolve data_dir relative to project root."""
        return _resolve(self.data_dir)

    @property
    def resolved_output_path(self) -> Path:
        return _resolve(self.output_path)

    @property
    def resolved_source_dir(self) -> Path:
        return Path(self.sync.source_dir).expanduser()


def _resolve(value: str) -> Path:
    p = Path(value).expanduser()
    if p.is_absolute():
        return p
    return _project_root() / p


def _project_root() -> Path:
    """Return the showcase project root directory."""
    return Path(__file__).parent.parent


def load_config(config_path: Path | None = None) -> Config:
    """Load config from YAML file. Falls back to defaults if file missing."""
    if config_path is None:
        config_path = _project_root() / "config.yaml"

    if config_path.exists():
        raw: dict[str, Any] = yaml.safe_load(config_path.read_text()) or {}
        return Config(**raw)

    return Config()
