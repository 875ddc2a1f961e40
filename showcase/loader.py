"""Data loading: turns staged YAML/JSON documents into typed view-models.

Three entry points:
- ``load``: master-data YAML → CareerViewModel
- ``transform`` / ``load_timeline``: event-log JSON → ordered TimelineEvents
- ``load_career_timeline``: auxiliary career-timeline JSON → CareerTimeline

All of them are pure: no caching, no module state. Shape problems raise
DataShapeError and are never papered over with defaults.
"""

import json
import logging
from decimal import ROUND_HALF_UP, Decimal
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from showcase.errors import DataShapeError
from showcase.models import (
    CareerSummary,
    CareerTimeline,
    CareerViewModel,
    InfrastructureArchitecture,
    KeyInnovation,
    Metric,
    MetricCategory,
    PlatformCli,
    RawCareerDocument,
    SelfHealingSystem,
    TechnicalAchievements,
    TimelineEvent,
    TransformationPeak,
    TransformationState,
)

logger = logging.getLogger(__name__)


# --- Formatting ---


def format_number(value: int, threshold: int) -> str:
    """Format a counter value for display.

    Values at or above ``threshold`` (the largest tracked magnitude) render as
    thousands with a ``k`` suffix, rounded half-up to zero decimals. Everything
    else gets comma digit grouping.

    >>> format_number(100000, 100000)
    '100k'
    >>> format_number(12345, 100000)
    '12,345'
    """
    if value >= threshold:
        thousands = (Decimal(value) / 1000).quantize(Decimal(1), rounding=ROUND_HALF_UP)
        return f"{thousands}k"
    return f"{value:,}"


# --- Master data ---


def _loc_to_path(loc: tuple) -> str:
    path = ""
    for part in loc:
        if isinstance(part, int):
            path += f"[{part}]"
        else:
            path += f".{part}" if path else str(part)
    return path


def _shape_error(exc: ValidationError) -> DataShapeError:
    errors = []
    for err in exc.errors():
        path = _loc_to_path(err["loc"])
        errors.append((path, err["msg"]))
    path, msg = errors[0]
    if len(errors) > 1:
        msg = f"{msg} (+{len(errors) - 1} more)"
    return DataShapeError(msg, path=path, errors=errors)


def _parse_yaml(raw_text: str) -> dict[str, Any]:
    try:
        tree = yaml.safe_load(raw_text)
    except yaml.YAMLError as e:
        raise DataShapeError(f"not valid YAML: {e}") from e
    if not isinstance(tree, dict):
        raise DataShapeError(f"expected a mapping at document root, got {type(tree).__name__}")
    return tree


def _check_growth_ordering(doc: RawCareerDocument) -> None:
    """Log (but do not reject) counts that violate peak >= after >= before."""
    before = doc.platform_transformation.before
    after = doc.platform_transformation.after
    checks = [
        ("clusters", before.clusters, after.clusters, after.peak_clusters),
        ("aws_accounts", before.aws_accounts, after.aws_accounts, after.peak_accounts),
    ]
    for name, b, a, peak in checks:
        if not (peak >= a >= b):
            logger.warning(
                "platform_transformation.%s not ordered peak >= after >= before (%d, %d, %d)",
                name, peak, a, b,
            )


def _build_metrics(doc: RawCareerDocument) -> list[MetricCategory]:
    after = doc.platform_transformation.after
    efficiency = doc.technical_achievements.metrics_and_impact.efficiency
    loc = doc.technical_achievements.b2b_cli.lines_of_code

    innovation = [
        Metric(label="Platform Code Lines", value=format_number(loc, loc)),
        Metric(label="Self-Healing Patterns", value=str(doc.self_healing_system.total_fixers)),
    ]
    arch = doc.technical_achievements.infrastructure_architecture
    if arch is not None:
        innovation.append(Metric(label="Architecture", value=f"{arch.codename} {arch.design_pattern}"))

    return [
        MetricCategory(title="Scale", metrics=[
            Metric(label="EKS Clusters", value=f"{after.peak_clusters:,}"),
            Metric(label="AWS Accounts", value=f"{after.peak_accounts:,}"),
            Metric(label="Developers Supported", value=str(doc.platform_transformation.scale.developers_supported)),
        ]),
        MetricCategory(title="Efficiency", metrics=[
            Metric(label="Environment Creation", value=efficiency.environment_creation),
            Metric(label="Deployment Process", value=efficiency.deployment_process),
            Metric(label="Platform Productivity", value=efficiency.platform_engineer_productivity),
        ]),
        MetricCategory(title="Innovation", metrics=innovation),
    ]


def load(raw_text: str) -> CareerViewModel:
    """Parse master-data YAML text into a validated CareerViewModel.

    Raises:
        DataShapeError: If the text is not a YAML mapping, or a required field
            is missing, has the wrong primitive kind, or a count is negative.
    """
    tree = _parse_yaml(raw_text)
    try:
        doc = RawCareerDocument.model_validate(tree)
    except ValidationError as e:
        raise _shape_error(e) from e

    _check_growth_ordering(doc)

    summary = doc.career_summary
    before = doc.platform_transformation.before
    after = doc.platform_transformation.after
    cli = doc.technical_achievements.b2b_cli
    arch = doc.technical_achievements.infrastructure_architecture
    healing = doc.self_healing_system

    return CareerViewModel(
        summary=CareerSummary(
            current_role=summary.current_role,
            company=summary.company,
            duration=summary.duration,
            location=summary.location,
            pitch_text=summary.elevator_pitch,
        ),
        transformation_before=TransformationState(
            cluster_count=before.clusters,
            account_count=before.aws_accounts,
            deployment_method=before.deployment_method,
            environment_creation_time=before.environment_creation_time,
        ),
        transformation_after=TransformationPeak(
            cluster_count=after.clusters,
            account_count=after.aws_accounts,
            deployment_method=after.deployment_method,
            environment_creation_time=after.environment_creation_time,
            peak_clusters=after.peak_clusters,
            peak_accounts=after.peak_accounts,
        ),
        technical_achievements=TechnicalAchievements(
            b2b_cli=PlatformCli(
                description=cli.description,
                lines_of_code=cli.lines_of_code,
                language=cli.language,
                framework=cli.framework,
                key_features=list(cli.key_features),
            ),
            infrastructure_architecture=InfrastructureArchitecture(
                codename=arch.codename,
                design_pattern=arch.design_pattern,
                problem_solved=arch.problem_solved,
                key_innovations=[
                    KeyInnovation(description=k.description, benefit=k.benefit, timeline=k.timeline)
                    for k in arch.key_innovations
                ],
            ) if arch is not None else None,
            self_healing_system=SelfHealingSystem(
                name=healing.name,
                total_fixers=healing.total_fixers,
                configuration=healing.configuration,
            ),
        ),
        developers_supported=str(doc.platform_transformation.scale.developers_supported),
        metrics=_build_metrics(doc),
    )


def _read_text(path: Path) -> str:
    """Read a staged document. Undecodable bytes are a data-shape problem, not a crash."""
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise DataShapeError(f"not valid UTF-8: {e}") from e


def load_master_data(path: Path) -> CareerViewModel:
    logger.debug("Loading master data from %s", path)
    return load(_read_text(path))


# --- Timeline ---


def _transform_event(raw: Any, path: str) -> TimelineEvent:
    if not isinstance(raw, dict):
        raise DataShapeError(f"expected a mapping, got {type(raw).__name__}", path=path)

    period = raw.get("period")
    if not isinstance(period, str):
        raise DataShapeError("period must be a string", path=f"{path}.period")

    title = raw.get("event", "")
    if title is None:
        title = ""
    if not isinstance(title, str):
        raise DataShapeError("event must be a string", path=f"{path}.event")

    achievements = raw.get("achievements")
    if achievements is not None:
        if not isinstance(achievements, list) or not all(isinstance(a, str) for a in achievements):
            raise DataShapeError("achievements must be a list of strings", path=f"{path}.achievements")

    state = raw.get("state")
    if state is not None and not isinstance(state, str):
        raise DataShapeError("state must be a string", path=f"{path}.state")

    if not achievements:
        if state is None:
            raise DataShapeError("event has neither achievements nor state", path=path)
        achievements = [state]

    details = raw.get("details")
    if details is not None and not isinstance(details, str):
        raise DataShapeError("details must be a string", path=f"{path}.details")

    return TimelineEvent(period=period, event=title, achievements=list(achievements), details=details)


def transform(raw_events: list[Any]) -> list[TimelineEvent]:
    """Normalize raw timeline entries into TimelineEvents, preserving order.

    An entry's ``achievements`` list is used as-is; failing that, a lone
    ``state`` string becomes a one-element list. No sorting, dedup or filtering.
    """
    if not isinstance(raw_events, list):
        raise DataShapeError(f"expected a list of events, got {type(raw_events).__name__}")
    return [_transform_event(raw, f"[{i}]") for i, raw in enumerate(raw_events)]


def _parse_json(raw_text: str) -> Any:
    try:
        return json.loads(raw_text)
    except json.JSONDecodeError as e:
        raise DataShapeError(f"not valid JSON: {e}") from e


def load_timeline(raw_text: str) -> list[TimelineEvent]:
    """Parse timeline.json text (``{"career_timeline": [...]}`` or a bare list)."""
    data = _parse_json(raw_text)
    if isinstance(data, dict):
        if "career_timeline" not in data:
            raise DataShapeError("missing required field", path="career_timeline")
        try:
            return transform(data["career_timeline"])
        except DataShapeError as e:
            raise DataShapeError(e.message, path=f"career_timeline{e.path}") from e
    return transform(data)


def load_timeline_file(path: Path) -> list[TimelineEvent]:
    logger.debug("Loading timeline from %s", path)
    return load_timeline(_read_text(path))


def load_career_timeline(raw_text: str) -> CareerTimeline:
    """Parse the auxiliary career-timeline.json document."""
    data = _parse_json(raw_text)
    if not isinstance(data, dict):
        raise DataShapeError(f"expected a mapping at document root, got {type(data).__name__}")
    try:
        return CareerTimeline.model_validate(data)
    except ValidationError as e:
        raise _shape_error(e) from e


def load_career_timeline_file(path: Path) -> CareerTimeline:
    logger.debug("Loading career timeline from %s", path)
    return load_career_timeline(_read_text(path))
