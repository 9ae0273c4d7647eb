"""Exception hierarchy for the AVS scaffolder.

Every failure raised by the generation engine derives from
``ScaffoldError`` so the CLI can report it with a single handler.  None of
these are retried; the two tolerated resource failures (template fallback and
skipped contract copies) are handled inside ``ResourceProvider`` and never
surface here.
"""

from __future__ import annotations

from pathlib import Path


class ScaffoldError(Exception):
    """Base class for all scaffolding failures."""


class DirectoryExistsError(ScaffoldError):
    """Raised when the target project directory is already present on disk."""

    def __init__(self, path: Path) -> None:
        self.path = Path(path)
        super().__init__(f"Directory {self.path.name} already exists")


class PromptCancelledError(ScaffoldError):
    """Raised when the user aborts configuration collection."""

    def __init__(self, message: str = "Project configuration was cancelled") -> None:
        super().__init__(message)


class ConfigError(ScaffoldError):
    """Raised when collected configuration values fail validation."""


class ResourceReadError(ScaffoldError):
    """Raised when a bundled resource has no usable body at all."""

    def __init__(self, name: str, reason: str) -> None:
        self.name = name
        super().__init__(f"Cannot load resource '{name}': {reason}")


class FilesystemWriteError(ScaffoldError):
    """Raised when writing an artifact or directory fails.

    Generation stops at the first such failure.  Files written before it
    stay on disk.
    """

    def __init__(self, path: Path | str, reason: str) -> None:
        self.path = Path(path)
        super().__init__(f"Failed to write {self.path}: {reason}")
