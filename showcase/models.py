"""Pydantic models for the showcase pipeline."""

from enum import Enum
from typing import Annotated

from pydantic import BaseModel, Field, StrictInt, StrictStr

Count = Annotated[StrictInt, Field(ge=0)]


class SectionId(str, Enum):
    HERO = "hero"
    METRICS = "metrics"
    TIMELINE = "timeline"
    ARCHITECTURE = "architecture"
    CONTACT = "contact"


# Document order of the rendered page (top to bottom).
SECTION_ORDER: tuple[SectionId, ...] = (
    SectionId.HERO,
    SectionId.METRICS,
    SectionId.TIMELINE,
    SectionId.ARCHITECTURE,
    SectionId.CONTACT,
)


# --- Raw document schema (mirrors master-data.yaml) ---


class RawCareerSummary(BaseModel):
    current_role: StrictStr
    company: StrictStr
    duration: StrictStr
    location: StrictStr
    elevator_pitch: StrictStr


class RawPlatformState(BaseModel):
    clusters: Count
    aws_accounts: Count
    deployment_method: StrictStr
    environment_creation_time: StrictStr


class RawPlatformPeak(RawPlatformState):
    peak_clusters: Count
    peak_accounts: Count


class RawPlatformScale(BaseModel):
    developers_supported: StrictStr | StrictInt


class RawPlatformTransformation(BaseModel):
    before: RawPlatformState
    after: RawPlatformPeak
    scale: RawPlatformScale


class RawPlatformCli(BaseModel):
    description: StrictStr
    lines_of_code: Count
    language: StrictStr
    framework: StrictStr
    key_features: list[StrictStr]


class RawKeyInnovation(BaseModel):
    description: StrictStr
    benefit: StrictStr
    timeline: StrictStr


class RawInfrastructureArchitecture(BaseModel):
    codename: StrictStr
    design_pattern: StrictStr
    problem_solved: StrictStr
    key_innovations: list[RawKeyInnovation] = Field(default_factory=list)


class RawEfficiency(BaseModel):
    environment_creation: StrictStr
    deployment_process: StrictStr
    platform_engineer_productivity: StrictStr


class RawMetricsAndImpact(BaseModel):
    efficiency: RawEfficiency


class RawTechnicalAchievements(BaseModel):
    b2b_cli: RawPlatformCli
    infrastructure_architecture: RawInfrastructureArchitecture | None = None
    metrics_and_impact: RawMetricsAndImpact


class RawSelfHealingSystem(BaseModel):
    name: StrictStr
    total_fixers: Count
    configuration: StrictStr


class RawCareerDocument(BaseModel):
    """Strict schema for the decoded master-data document. Unknown keys are ignored."""

    career_summary: RawCareerSummary
    platform_transformation: RawPlatformTransformation
    technical_achievements: RawTechnicalAchievements
    self_healing_system: RawSelfHealingSystem


# --- View-models (what the sections consume) ---


class CareerSummary(BaseModel):
    current_role: str
    company: str
    duration: str
    location: str
    pitch_text: str


class TransformationState(BaseModel):
    cluster_count: int
    account_count: int
    deployment_method: str
    environment_creation_time: str


class TransformationPeak(TransformationState):
    peak_clusters: int
    peak_accounts: int


class PlatformCli(BaseModel):
    description: str
    lines_of_code: int
    language: str
    framework: str
    key_features: list[str] = Field(default_factory=list)


class KeyInnovation(BaseModel):
    description: str
    benefit: str
    timeline: str


class InfrastructureArchitecture(BaseModel):
    codename: str
    design_pattern: str
    problem_solved: str
    key_innovations: list[KeyInnovation] = Field(default_factory=list)


class SelfHealingSystem(BaseModel):
    name: str
    total_fixers: int
    configuration: str


class TechnicalAchievements(BaseModel):
    b2b_cli: PlatformCli
    infrastructure_architecture: InfrastructureArchitecture | None = None
    self_healing_system: SelfHealingSystem


class Metric(BaseModel):
    label: str
    value: str


class MetricCategory(BaseModel):
    title: str
    metrics: list[Metric] = Field(default_factory=list)


class CareerViewModel(BaseModel):
    summary: CareerSummary
    transformation_before: TransformationState
    transformation_after: TransformationPeak
    technical_achievements: TechnicalAchievements
    developers_supported: str
    metrics: list[MetricCategory] = Field(default_factory=list)

    def category(self, title: str) -> MetricCategory | None:
        return next((c for c in self.metrics if c.title == title), None)


class TimelineEvent(BaseModel):
    period: str
    event: str = ""
    achievements: list[str] = Field(min_length=1)
    details: str | None = None


# --- Auxiliary career-timeline.json ---


class CareerOverview(BaseModel):
    total_experience: StrictStr
    current_role: StrictStr
    current_company: StrictStr
    primary_focus: StrictStr


class CompanyStint(BaseModel):
    company: StrictStr
    duration: StrictStr
    role: StrictStr
    focus: StrictStr = ""
    detail_level: StrictStr = ""
    data_location: StrictStr = ""


class CareerTimeline(BaseModel):
    career_overview: CareerOverview
    companies: list[CompanyStint] = Field(default_factory=list)
