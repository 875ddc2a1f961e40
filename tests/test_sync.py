"""Tests for data staging from the experience repo."""

import pytest

from showcase.config import Config
from showcase.sync import SOURCE_DIR_ENV, copy_file, resolve_source_dir, sync_data

SOURCES = {
    "companies/las-vegas-sands/data/master-data.yaml": "career_summary: {}\n",
    "companies/las-vegas-sands/data/timeline.json": '{"career_timeline": []}',
    "data/career-timeline.json": '{"companies": []}',
}


@pytest.fixture(autouse=True)
def _clear_env(monkeypatch):
    monkeypatch.delenv(SOURCE_DIR_ENV, raising=False)


@pytest.fixture()
def experience(tmp_path):
    """A fake experience repo holding all three source documents."""
    root = tmp_path / "experience"
    for relative, content in SOURCES.items():
        path = root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content)
    return root


@pytest.fixture()
def config(tmp_path, experience):
    return Config(data_dir=str(tmp_path / "staged" / "data"), sync={"source_dir": str(experience)})


class TestSyncData:
    def test_copies_all_files(self, config):
        result = sync_data(config)
        assert result.ok
        assert result.exit_code == 0
        assert len(result.copied) == 3

        data_dir = config.resolved_data_dir
        assert (data_dir / "master-data.yaml").read_text() == "career_summary: {}\n"
        assert (data_dir / "timeline.json").exists()
        assert (data_dir / "career-timeline.json").exists()
        assert "3/3 files copied" in repr(result)

    def test_missing_file_warns_and_continues(self, config, experience, caplog):
        (experience / "data" / "career-timeline.json").unlink()
        result = sync_data(config)

        assert not result.ok
        assert result.exit_code == 1
        assert len(result.copied) == 2
        assert len(result.warnings) == 1
        assert result.warnings[0].source.name == "career-timeline.json"
        assert any("source file not found" in r.getMessage() for r in caplog.records)
        assert (config.resolved_data_dir / "master-data.yaml").exists()

    def test_missing_source_dir(self, config, tmp_path):
        result = sync_data(config, tmp_path / "nowhere")
        assert result.exit_code == 1
        assert result.copied == []
        assert len(result.warnings) == 3

    def test_overwrites_existing(self, config):
        data_dir = config.resolved_data_dir
        data_dir.mkdir(parents=True)
        (data_dir / "timeline.json").write_text("stale")
        sync_data(config)
        assert (data_dir / "timeline.json").read_text() == '{"career_timeline": []}'


class TestResolveSourceDir:
    def test_config_default(self, config, experience):
        assert resolve_source_dir(config) == experience

    def test_env_beats_config(self, config, monkeypatch, tmp_path):
        monkeypatch.setenv(SOURCE_DIR_ENV, str(tmp_path / "from-env"))
        assert resolve_source_dir(config) == tmp_path / "from-env"

    def test_argument_beats_env(self, config, monkeypatch, tmp_path):
        monkeypatch.setenv(SOURCE_DIR_ENV, str(tmp_path / "from-env"))
        assert resolve_source_dir(config, tmp_path / "from-arg") == tmp_path / "from-arg"

    def test_env_used_by_sync(self, tmp_path, experience, monkeypatch):
        monkeypatch.setenv(SOURCE_DIR_ENV, str(experience))
        config = Config(data_dir=str(tmp_path / "data"), sync={"source_dir": str(tmp_path / "wrong")})
        assert sync_data(config).ok


class TestCopyFile:
    def test_creates_parent_dirs(self, tmp_path):
        src = tmp_path / "a.txt"
        src.write_text("hi")
        dest = tmp_path / "x" / "y" / "a.txt"
        assert copy_file(src, dest) is None
        assert dest.read_text() == "hi"

    def test_directory_is_not_a_file(self, tmp_path):
        warning = copy_file(tmp_path, tmp_path / "out")
        assert warning is not None
        assert warning.reason == "source file not found"
