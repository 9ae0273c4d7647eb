"""Shared pytest fixtures for the AVS scaffolder test suite.

Provides reusable fixtures for:
- Temporary base directories and settings
- Fixed-answer configuration providers
- Copies of the bundled resources that tests may damage
"""

from __future__ import annotations

import shutil
from pathlib import Path

import pytest

from avs_scaffold.config import DEFAULT_RESOURCES_DIR, ScaffoldSettings
from avs_scaffold.models import ProjectConfig, TemplateKind
from avs_scaffold.prompts import static_provider


# ---------------------------------------------------------------------------
# Paths & Directories
# ---------------------------------------------------------------------------

@pytest.fixture
def base_dir(tmp_path: Path) -> Path:
    """Empty directory in which projects are generated."""
    path = tmp_path / "workspace"
    path.mkdir()
    return path


@pytest.fixture
def resources_copy(tmp_path: Path) -> Path:
    """Private copy of the bundled resources, safe to modify."""
    target = tmp_path / "resources"
    shutil.copytree(DEFAULT_RESOURCES_DIR, target)
    return target


# ---------------------------------------------------------------------------
# Settings & Configuration
# ---------------------------------------------------------------------------

@pytest.fixture
def settings(base_dir: Path) -> ScaffoldSettings:
    """Non-interactive settings using the packaged resources."""
    return ScaffoldSettings(base_dir=base_dir, interactive=False)


@pytest.fixture
def demo_config() -> ProjectConfig:
    return ProjectConfig(
        project_name="demo",
        template=TemplateKind.TASK_BASED,
        description="x",
    )


@pytest.fixture
def fixed_provider():
    """Provider answering every prompt with the requested defaults."""
    return static_provider()


# ---------------------------------------------------------------------------
# Expected output
# ---------------------------------------------------------------------------

@pytest.fixture
def expected_files() -> set[str]:
    """Every file a complete generation writes, relative to the project root."""
    return {
        "package.json",
        "hardhat.config.ts",
        "scripts/deploy.ts",
        "test/TaskMailbox.test.ts",
        "contracts/TaskMailbox.sol",
        "contracts/TaskAVSRegistrar.sol",
        "contracts/SlashingConditions.sol",
        "contracts/interfaces/ITaskMailbox.sol",
        "contracts/interfaces/ITaskAVSRegistrar.sol",
        "off-chain/package.json",
        "off-chain/aggregator/index.ts",
        "off-chain/executor/index.ts",
    }


@pytest.fixture
def list_files():
    """Return a helper listing all file paths below a root as POSIX strings."""

    def _list(root: Path) -> set[str]:
        return {p.relative_to(root).as_posix() for p in root.rglob("*") if p.is_file()}

    return _list
