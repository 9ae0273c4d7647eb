"""Pydantic v2 models shared by the scaffolding engine.

Defines the immutable project configuration collected once per invocation,
the artifacts produced by component generators, the resolved template
sources consumed by the renderer, and the result returned to the CLI.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


DEFAULT_PROJECT_NAME = "my-avs"
DEFAULT_DESCRIPTION = "An EigenLayer AVS project"


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class TemplateKind(str, Enum):
    """Project skeleton variants that can be generated."""
    TASK_BASED = "task-based"
    ORACLE = "oracle"


class TemplateOrigin(str, Enum):
    """Where a template body was loaded from."""
    BUNDLED = "bundled"
    EMBEDDED_DEFAULT = "embedded-default"


class GenerationStage(str, Enum):
    """Lifecycle of a single generation run."""
    START = "start"
    PRECONDITION_CHECKED = "precondition-checked"
    CONFIG_COLLECTED = "config-collected"
    DIRECTORIES_BUILT = "directories-built"
    ARTIFACTS_WRITTEN = "artifacts-written"
    DONE = "done"
    ABORTED = "aborted"


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------

def validate_project_name(value: str) -> str:
    """Return *value* stripped, or raise ``ValueError`` if it is not a usable name.

    A project name doubles as a directory name, so it must be a single
    non-empty path segment.
    """
    value = value.strip()
    if not value:
        raise ValueError("project name must not be empty")
    if "/" in value or "\\" in value or value in (".", ".."):
        raise ValueError(f"project name must be a single path segment, got {value!r}")
    return value


class ProjectDefaults(BaseModel):
    """Values requested on the command line, offered as prompt defaults."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(default=DEFAULT_PROJECT_NAME)
    template: TemplateKind = Field(default=TemplateKind.TASK_BASED)
    description: str = Field(default=DEFAULT_DESCRIPTION)


class ProjectConfig(BaseModel):
    """Validated, read-only description of the project to generate."""

    model_config = ConfigDict(frozen=True)

    project_name: str = Field(..., description="Package name written into package.json")
    template: TemplateKind = Field(default=TemplateKind.TASK_BASED)
    description: str = Field(default=DEFAULT_DESCRIPTION)

    @field_validator("project_name")
    @classmethod
    def _check_project_name(cls, value: str) -> str:
        return validate_project_name(value)

    def template_context(self) -> dict[str, Any]:
        """Return the variables visible to Jinja2 templates."""
        return {
            "projectName": self.project_name,
            "project_name": self.project_name,
            "description": self.description,
            "template": self.template.value,
        }


# ---------------------------------------------------------------------------
# Artifacts
# ---------------------------------------------------------------------------

class Artifact(BaseModel):
    """A single file destined for the output tree.

    ``relative_path`` is POSIX-style and relative to the project root.
    Text content is written as UTF-8; bytes are copied verbatim.
    """

    model_config = ConfigDict(frozen=True)

    relative_path: str
    content: Union[str, bytes]
    origin: Literal["generated", "copied"] = "generated"


# ---------------------------------------------------------------------------
# Template resolution
# ---------------------------------------------------------------------------

class TemplateSource(BaseModel):
    """A template body ready for rendering, tagged with its origin."""

    model_config = ConfigDict(frozen=True)

    name: str
    body: str
    origin: TemplateOrigin


class BundledTemplate(BaseModel):
    """Resolution outcome: read the body from a packaged ``.j2`` file."""

    model_config = ConfigDict(frozen=True)

    name: str
    path: Path


class EmbeddedTemplate(BaseModel):
    """Resolution outcome: use the body compiled into the package."""

    model_config = ConfigDict(frozen=True)

    name: str
    body: str


TemplateResolution = Union[BundledTemplate, EmbeddedTemplate]


# ---------------------------------------------------------------------------
# Results
# ---------------------------------------------------------------------------

class GenerationResult(BaseModel):
    """Summary of a completed generation run."""

    project_root: Path
    config: ProjectConfig
    written: list[str] = Field(default_factory=list)
    package_template_origin: TemplateOrigin = TemplateOrigin.BUNDLED
    contracts_skipped: bool = False
