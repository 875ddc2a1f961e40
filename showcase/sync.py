"""Data staging: copies the input documents from the experience repo into data/."""

import logging
import os
import shutil
from pathlib import Path

from showcase.config import Config
from showcase.errors import MissingSourceFileWarning

logger = logging.getLogger(__name__)

SOURCE_DIR_ENV = "EXPERIENCE_REPO_PATH"


class SyncResult:
    """Summary of a staging run."""

    def __init__(self, source_dir: Path, dest_dir: Path) -> None:
        self.source_dir = source_dir
        self.dest_dir = dest_dir
        self.copied: list[Path] = []
        self.warnings: list[MissingSourceFileWarning] = []

    @property
    def total(self) -> int:
        return len(self.copied) + len(self.warnings)

    @property
    def ok(self) -> bool:
        return not self.warnings

    @property
    def exit_code(self) -> int:
        return 0 if self.ok else 1

    def __repr__(self) -> str:
        return (
            f"SyncResult({len(self.copied)}/{self.total} files copied "
            f"from {self.source_dir} to {self.dest_dir})"
        )


def resolve_source_dir(config: Config, override: str | Path | None = None) -> Path:
    """CLI argument wins, then $EXPERIENCE_REPO_PATH, then config."""
    if override:
        return Path(override).expanduser()
    env = os.environ.get(SOURCE_DIR_ENV)
    if env:
        return Path(env).expanduser()
    return config.resolved_source_dir


def copy_file(src: Path, dest: Path) -> MissingSourceFileWarning | None:
    """Copy one file, creating parent directories. Returns a warning on failure."""
    if not src.is_file():
        return MissingSourceFileWarning(src, "source file not found")
    try:
        dest.parent.mkdir(parents=True, exist_ok=True)
        shutil.copyfile(src, dest)
    except OSError as e:
        return MissingSourceFileWarning(src, f"copy failed: {e}")
    logger.info("Copied: %s -> %s", src.name, dest)
    return None


def sync_data(config: Config, source_dir: str | Path | None = None) -> SyncResult:
    """Copy every configured source file into the staging directory.

    Each failure is logged and recorded as a MissingSourceFileWarning; the
    remaining files are still copied.
    """
    source = resolve_source_dir(config, source_dir)
    dest_dir = config.resolved_data_dir
    result = SyncResult(source, dest_dir)

    logger.info("Starting data synchronization from %s", source)
    for dest_name, relative in config.sync.files.items():
        warning = copy_file(source / relative, dest_dir / dest_name)
        if warning is None:
            result.copied.append(dest_dir / dest_name)
        else:
            logger.warning("%s", warning)
            result.warnings.append(warning)

    logger.info("Sync complete: %d/%d files copied", len(result.copied), result.total)
    return result
