"""AVS scaffolder settings.

Typed configuration for the tool itself (as opposed to ``ProjectConfig``,
which describes the project being generated).  Paths are explicit so the
engine never consults the process working directory on its own.
"""

from __future__ import annotations

import os
from pathlib import Path

from pydantic import BaseModel, Field

from .models import DEFAULT_DESCRIPTION


DEFAULT_RESOURCES_DIR = Path(__file__).parent / "resources"

_TRUTHY = {"1", "true", "yes", "on"}


class ScaffoldSettings(BaseModel):
    """Settings for a scaffolding run.

    Instances are created once by the CLI entry point (or by tests) and
    passed to ``ScaffoldOrchestrator``.
    """

    base_dir: Path = Field(..., description="Directory in which the project folder is created")
    resources_dir: Path = Field(
        default=DEFAULT_RESOURCES_DIR,
        description="Root of bundled templates and contract files",
    )
    interactive: bool = Field(default=True, description="Prompt for configuration values")
    default_description: str = Field(default=DEFAULT_DESCRIPTION)

    # ------------------------------------------------------------------
    # Derived paths (read-only properties)
    # ------------------------------------------------------------------

    @property
    def templates_dir(self) -> Path:
        """Directory holding bundled ``.j2`` template bodies."""
        return self.resources_dir / "templates"

    @property
    def contracts_dir(self) -> Path:
        """Directory holding bundled Solidity sources copied verbatim."""
        return self.resources_dir / "contracts"

    def project_path(self, name: str) -> Path:
        """Return the target directory for a project called *name*."""
        return self.base_dir / name

    @classmethod
    def from_env(cls, base_dir: Path | None = None) -> "ScaffoldSettings":
        """Build settings from environment variables.

        Recognised variables (all optional):
            AVS_SCAFFOLD_BASE_DIR, AVS_SCAFFOLD_RESOURCES_DIR,
            AVS_SCAFFOLD_NO_INPUT, AVS_SCAFFOLD_DESCRIPTION.

        Args:
            base_dir: Fallback base directory when ``AVS_SCAFFOLD_BASE_DIR``
                is unset.  Defaults to the current working directory.
        """
        env_base = os.environ.get("AVS_SCAFFOLD_BASE_DIR")
        resolved_base = Path(env_base) if env_base else (base_dir or Path.cwd())

        kwargs: dict[str, object] = {"base_dir": resolved_base}
        if os.environ.get("AVS_SCAFFOLD_RESOURCES_DIR"):
            kwargs["resources_dir"] = Path(os.environ["AVS_SCAFFOLD_RESOURCES_DIR"])
        if os.environ.get("AVS_SCAFFOLD_NO_INPUT", "").strip().lower() in _TRUTHY:
            kwargs["interactive"] = False
        if os.environ.get("AVS_SCAFFOLD_DESCRIPTION"):
            kwargs["default_description"] = os.environ["AVS_SCAFFOLD_DESCRIPTION"]

        return cls(**kwargs)
