"""Shared test fixtures for showcase tests."""

import copy
import heapq
import itertools
import json

import pytest
import yaml

from showcase.config import Config
from showcase.document import Document
from showcase.loader import load

MASTER_TREE = {
    "career_summary": {
        "current_role": "Senior Cloud Platform Engineer",
        "company": "Las Vegas Sands Corp",
        "duration": "2021 - Present",
        "location": "Las Vegas, NV",
        "elevator_pitch": "Took infrastructure from one cluster to a GitOps fleet.",
    },
    "platform_transformation": {
        "before": {
            "clusters": 1,
            "deployment_method": "Manual",
            "environment_creation_time": "2-3 weeks",
            "aws_accounts": 3,
        },
        "after": {
            "clusters": 45,
            "deployment_method": "GitOps",
            "environment_creation_time": "Under 1 hour",
            "aws_accounts": 60,
            "peak_clusters": 67,
            "peak_accounts": 80,
        },
        "scale": {"developers_supported": "500+"},
    },
    "technical_achievements": {
        "b2b_cli": {
            "description": "Python orchestration tool",
            "lines_of_code": 100000,
            "language": "Python",
            "framework": "Click",
            "key_features": ["One-command environments", "Drift detection"],
        },
        "infrastructure_architecture": {
            "codename": "GreenPrint",
            "design_pattern": "HA/DR",
            "problem_solved": "Loosely coupled Terraform stacks",
            "key_innovations": [
                {"description": "Bricks Configuration", "benefit": "No config drift", "timeline": "2022 Q3"},
                {"description": "GitOps Automation", "benefit": "Single-file deploys", "timeline": "2023 Q2"},
            ],
        },
        "metrics_and_impact": {
            "efficiency": {
                "environment_creation": "Weeks to 1 hour",
                "deployment_process": "Single-file GitOps",
                "platform_engineer_productivity": "10x",
            },
        },
    },
    "self_healing_system": {
        "name": "Self-Healing System",
        "total_fixers": 31,
        "configuration": "Fixers per failure signature",
    },
}

TIMELINE_DOC = {
    "career_timeline": [
        {"period": "2021 Q3", "event": "Joined", "achievements": ["Inherited one cluster", "Wrote runbooks"]},
        {"period": "2022 Q1", "event": "CLI v1", "achievements": ["First release"]},
        {"period": "2023 Q2", "state": "GitOps V2 begins"},
    ],
}

CAREER_TIMELINE_DOC = {
    "career_overview": {
        "total_experience": "20+ years",
        "current_role": "Senior Cloud Platform Engineer",
        "current_company": "Las Vegas Sands Corp",
        "primary_focus": "Platform engineering",
    },
    "companies": [
        {"company": "Las Vegas Sands Corp", "duration": "2021 - Present", "role": "Senior Cloud Platform Engineer"},
    ],
}


@pytest.fixture()
def master_tree():
    """A fresh, mutable copy of a valid master-data tree."""
    return copy.deepcopy(MASTER_TREE)


@pytest.fixture()
def master_text(master_tree):
    return yaml.safe_dump(master_tree, sort_keys=False)


@pytest.fixture()
def timeline_text():
    return json.dumps(TIMELINE_DOC)


@pytest.fixture()
def view_model(master_text):
    return load(master_text)


@pytest.fixture()
def staged_config(tmp_path, master_text, timeline_text):
    """Config whose data_dir holds all three staged documents."""
    data_dir = tmp_path / "data"
    data_dir.mkdir()
    (data_dir / "master-data.yaml").write_text(master_text)
    (data_dir / "timeline.json").write_text(timeline_text)
    (data_dir / "career-timeline.json").write_text(json.dumps(CAREER_TIMELINE_DOC))
    return Config(data_dir=str(data_dir), output_path=str(tmp_path / "dist" / "index.html"))


@pytest.fixture()
def document():
    """Five stacked 1000px sections in a 900px viewport."""
    return Document.stacked(
        {"hero": 1000, "metrics": 1000, "timeline": 1000, "architecture": 1000, "contact": 1000},
        viewport_height=900,
    )


class FakeHandle:
    def __init__(self, scheduler: "FakeScheduler", when: float, callback, args) -> None:
        self.scheduler = scheduler
        self.when = when
        self.callback = callback
        self.args = args
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True


class FakeScheduler:
    """Manual-clock stand-in for an asyncio loop's call_later."""

    def __init__(self) -> None:
        self.now = 0.0
        self._queue: list[tuple[float, int, FakeHandle]] = []
        self._seq = itertools.count()

    def call_later(self, delay, callback, *args):
        handle = FakeHandle(self, self.now + delay, callback, args)
        heapq.heappush(self._queue, (handle.when, next(self._seq), handle))
        return handle

    @property
    def pending(self) -> int:
        return sum(1 for _, _, h in self._queue if not h.cancelled)

    def run_next(self) -> bool:
        while self._queue:
            when, _, handle = heapq.heappop(self._queue)
            if handle.cancelled:
                continue
            self.now = when
            handle.callback(*handle.args)
            return True
        return False

    def run_all(self, limit: int = 10_000) -> int:
        ran = 0
        while ran < limit and self.run_next():
            ran += 1
        return ran

    def advance(self, seconds: float) -> int:
        """Run every callback due within ``seconds`` of now."""
        deadline = self.now + seconds + 1e-9
        ran = 0
        while self._queue:
            when, _, handle = self._queue[0]
            if when > deadline:
                break
            heapq.heappop(self._queue)
            if handle.cancelled:
                continue
            self.now = when
            handle.callback(*handle.args)
            ran += 1
        self.now = max(self.now, deadline)
        return ran


@pytest.fixture()
def scheduler():
    return FakeScheduler()
