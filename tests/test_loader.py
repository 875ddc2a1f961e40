"""Tests for the view-model loader and number formatting."""

import logging

import pytest
import yaml

from showcase.errors import DataShapeError
from showcase.loader import format_number, load, load_career_timeline, load_master_data


def _dump(tree) -> str:
    return yaml.safe_dump(tree, sort_keys=False)


class TestFormatNumber:
    def test_at_threshold_uses_k_suffix(self):
        assert format_number(100000, 100000) == "100k"

    def test_below_threshold_groups_digits(self):
        assert format_number(12345, 100000) == "12,345"
        assert format_number(999, 100000) == "999"
        assert format_number(0, 100000) == "0"

    def test_above_threshold_rounds_half_up(self):
        assert format_number(2500, 2000) == "3k"
        assert format_number(2499, 2000) == "2k"
        assert format_number(1_250_000, 1_000_000) == "1250k"

    def test_small_value_at_threshold(self):
        # A threshold below 1000 still takes the k form once reached.
        assert format_number(67, 67) == "0k"


class TestLoad:
    def test_valid_document(self, master_text):
        vm = load(master_text)
        assert vm.summary.company == "Las Vegas Sands Corp"
        assert vm.summary.pitch_text.startswith("Took infrastructure")
        assert vm.transformation_before.cluster_count == 1
        assert vm.transformation_after.peak_clusters == 67
        assert vm.transformation_after.peak_accounts == 80
        assert vm.technical_achievements.b2b_cli.lines_of_code == 100000
        assert vm.technical_achievements.b2b_cli.key_features == ["One-command environments", "Drift detection"]
        assert vm.technical_achievements.self_healing_system.total_fixers == 31
        assert vm.developers_supported == "500+"

    def test_deterministic(self, master_text):
        assert load(master_text) == load(master_text)
        assert load(master_text).model_dump() == load(master_text).model_dump()

    def test_metric_categories(self, master_text):
        vm = load(master_text)
        assert [c.title for c in vm.metrics] == ["Scale", "Efficiency", "Innovation"]

        scale = {m.label: m.value for m in vm.category("Scale").metrics}
        assert scale == {"EKS Clusters": "67", "AWS Accounts": "80", "Developers Supported": "500+"}

        innovation = {m.label: m.value for m in vm.category("Innovation").metrics}
        assert innovation["Platform Code Lines"] == "100k"
        assert innovation["Self-Healing Patterns"] == "31"
        assert innovation["Architecture"] == "GreenPrint HA/DR"

    def test_numeric_developers_supported(self, master_tree):
        master_tree["platform_transformation"]["scale"]["developers_supported"] = 500
        vm = load(_dump(master_tree))
        assert vm.developers_supported == "500"

    def test_optional_architecture_block(self, master_tree):
        del master_tree["technical_achievements"]["infrastructure_architecture"]
        vm = load(_dump(master_tree))
        assert vm.technical_achievements.infrastructure_architecture is None
        labels = [m.label for m in vm.category("Innovation").metrics]
        assert "Architecture" not in labels

    def test_unknown_keys_ignored(self, master_tree):
        master_tree["extra_section"] = {"anything": [1, 2, 3]}
        master_tree["career_summary"]["nickname"] = "CDL"
        vm = load(_dump(master_tree))
        assert vm.summary.current_role == "Senior Cloud Platform Engineer"

    def test_from_file(self, tmp_path, master_text):
        path = tmp_path / "master-data.yaml"
        path.write_text(master_text)
        assert load_master_data(path) == load(master_text)

    def test_from_file_not_utf8(self, tmp_path):
        path = tmp_path / "master-data.yaml"
        path.write_bytes(b"career_summary:\n  company: \xff\n")
        with pytest.raises(DataShapeError, match="not valid UTF-8"):
            load_master_data(path)


class TestLoadRejects:
    def test_missing_required_field(self, master_tree):
        del master_tree["career_summary"]["company"]
        with pytest.raises(DataShapeError) as exc_info:
            load(_dump(master_tree))
        assert exc_info.value.path == "career_summary.company"

    def test_missing_block(self, master_tree):
        del master_tree["self_healing_system"]
        with pytest.raises(DataShapeError) as exc_info:
            load(_dump(master_tree))
        assert exc_info.value.path == "self_healing_system"

    def test_string_where_int_expected(self, master_tree):
        master_tree["technical_achievements"]["b2b_cli"]["lines_of_code"] = "100000"
        with pytest.raises(DataShapeError) as exc_info:
            load(_dump(master_tree))
        assert exc_info.value.path == "technical_achievements.b2b_cli.lines_of_code"

    def test_int_where_string_expected(self, master_tree):
        master_tree["career_summary"]["duration"] = 4
        with pytest.raises(DataShapeError) as exc_info:
            load(_dump(master_tree))
        assert exc_info.value.path == "career_summary.duration"

    def test_bool_is_not_a_count(self, master_tree):
        master_tree["self_healing_system"]["total_fixers"] = True
        with pytest.raises(DataShapeError) as exc_info:
            load(_dump(master_tree))
        assert exc_info.value.path == "self_healing_system.total_fixers"

    def test_negative_count(self, master_tree):
        master_tree["platform_transformation"]["after"]["peak_clusters"] = -1
        with pytest.raises(DataShapeError) as exc_info:
            load(_dump(master_tree))
        assert exc_info.value.path == "platform_transformation.after.peak_clusters"

    def test_non_string_feature(self, master_tree):
        master_tree["technical_achievements"]["b2b_cli"]["key_features"].append(42)
        with pytest.raises(DataShapeError) as exc_info:
            load(_dump(master_tree))
        assert exc_info.value.path == "technical_achievements.b2b_cli.key_features[2]"

    def test_collects_every_problem(self, master_tree):
        del master_tree["career_summary"]["company"]
        del master_tree["career_summary"]["location"]
        with pytest.raises(DataShapeError) as exc_info:
            load(_dump(master_tree))
        paths = [path for path, _ in exc_info.value.errors]
        assert "career_summary.company" in paths
        assert "career_summary.location" in paths

    def test_root_must_be_mapping(self):
        with pytest.raises(DataShapeError):
            load("- just\n- a list\n")

    def test_empty_document(self):
        with pytest.raises(DataShapeError):
            load("")

    def test_invalid_yaml(self):
        with pytest.raises(DataShapeError):
            load("career_summary: [unclosed\n")


class TestGrowthOrdering:
    def test_violation_logged_not_rejected(self, master_tree, caplog):
        master_tree["platform_transformation"]["after"]["peak_clusters"] = 10  # below after.clusters=45
        with caplog.at_level(logging.WARNING, logger="showcase.loader"):
            vm = load(_dump(master_tree))
        assert vm.transformation_after.peak_clusters == 10
        assert any("clusters" in r.getMessage() for r in caplog.records)

    def test_ordered_data_is_quiet(self, master_text, caplog):
        with caplog.at_level(logging.WARNING, logger="showcase.loader"):
            load(master_text)
        assert not caplog.records


class TestLoadCareerTimeline:
    def test_valid(self):
        text = (
            '{"career_overview": {"total_experience": "20+ years", "current_role": "Engineer",'
            ' "current_company": "Acme", "primary_focus": "Platforms"},'
            ' "companies": [{"company": "Acme", "duration": "2020-", "role": "Engineer"}]}'
        )
        career = load_career_timeline(text)
        assert career.career_overview.current_company == "Acme"
        assert career.companies[0].focus == ""

    def test_missing_overview(self):
        with pytest.raises(DataShapeError) as exc_info:
            load_career_timeline('{"companies": []}')
        assert exc_info.value.path == "career_overview"

    def test_invalid_json(self):
        with pytest.raises(DataShapeError):
            load_career_timeline("{not json")
