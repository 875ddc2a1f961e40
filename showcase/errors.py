"""Error taxonomy for the showcase pipeline."""

from pathlib import Path


class DataShapeError(ValueError):
    """An input document is missing a required field or has the wrong kind.

    Attributes:
        path: Dotted location of the first problem (e.g. ``career_summary.company``).
        errors: Every problem found, as ``(path, message)`` pairs.
    """

    def __init__(self, message: str, path: str = "", errors: list[tuple[str, str]] | None = None) -> None:
        self.message = message
        self.path = path
        self.errors = errors if errors is not None else [(path, message)]
        super().__init__(f"{path}: {message}" if path else message)


class MissingSourceFileWarning(UserWarning):
    """A staging copy failed for one source file."""

    def __init__(self, source: Path, reason: str) -> None:
        self.source = source
        self.reason = reason
        super().__init__(f"{source}: {reason}")
