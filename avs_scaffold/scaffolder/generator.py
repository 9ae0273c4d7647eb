"""Main scaffolding orchestrator.

Sequences one generation run: check that the target directory is free,
collect the project configuration, create the project root and its fixed
directory skeleton, then let each component generator produce artifacts
and write them in order.  Every step is awaited before the next starts and
nothing is retried; the first failure aborts the run without cleaning up.
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Optional, Protocol

from ..config import ScaffoldSettings
from ..errors import ConfigError, DirectoryExistsError, FilesystemWriteError
from ..models import (
    DEFAULT_PROJECT_NAME,
    Artifact,
    GenerationResult,
    GenerationStage,
    ProjectConfig,
    ProjectDefaults,
    TemplateKind,
    TemplateOrigin,
    validate_project_name,
)
from ..prompts import ConfigProvider, prompt_for_config, static_provider
from ..utils import print_success, print_warning
from .contracts_gen import ContractsGenerator
from .offchain_gen import OffChainGenerator
from .package_gen import RootPackageGenerator
from .resources import ResourceProvider
from .scripts_gen import ScriptsGenerator
from .templates import TemplateRenderer
from .tests_gen import TestsGenerator
from .tree import build_directory_tree, directory_tree
from .writer import ArtifactWriter


class ComponentGenerator(Protocol):
    def generate(self, config: ProjectConfig) -> list[Artifact]: ...


# ---------------------------------------------------------------------------
# Precondition
# ---------------------------------------------------------------------------


def check_target_available(path: Path) -> None:
    """Raise ``DirectoryExistsError`` if anything already exists at *path*."""
    if path.exists() or path.is_symlink():
        raise DirectoryExistsError(path)


# ---------------------------------------------------------------------------
# Orchestrator
# ---------------------------------------------------------------------------


class ScaffoldOrchestrator:
    """Drives a single AVS project generation.

    Attributes:
        settings: Tool settings (base directory, resource location).
        stage: Last stage reached by the current or most recent run.
        abort_reason: Message of the failure that aborted the run, if any.
    """

    def __init__(
        self,
        settings: ScaffoldSettings,
        config_provider: Optional[ConfigProvider] = None,
        renderer: Optional[TemplateRenderer] = None,
        resources: Optional[ResourceProvider] = None,
    ) -> None:
        self.settings = settings
        if config_provider is None:
            config_provider = prompt_for_config if settings.interactive else static_provider()
        self.config_provider = config_provider
        self.renderer = renderer or TemplateRenderer()
        self.resources = resources or ResourceProvider(settings.resources_dir)

        self.package_gen = RootPackageGenerator(self.renderer, self.resources)
        self.contracts_gen = ContractsGenerator(self.resources)
        self.components: list[ComponentGenerator] = [
            self.package_gen,
            self.contracts_gen,
            ScriptsGenerator(),
            TestsGenerator(),
            OffChainGenerator(),
        ]

        self.stage = GenerationStage.START
        self.abort_reason: Optional[str] = None

    # -- Public API --------------------------------------------------------

    async def generate(
        self,
        project_name: str = DEFAULT_PROJECT_NAME,
        template: TemplateKind | str = TemplateKind.TASK_BASED,
    ) -> GenerationResult:
        """Generate a new project called *project_name* under ``settings.base_dir``.

        The directory is named after *project_name* as requested; the
        collected configuration supplies the values written into files.

        Raises:
            DirectoryExistsError: The target directory already exists.
            PromptCancelledError: Configuration collection was cancelled.
            ConfigError: The requested or collected values are invalid.
            ResourceReadError: A bundled resource could not be read.
            FilesystemWriteError: A directory or file could not be written.
        """
        self.stage = GenerationStage.START
        self.abort_reason = None
        try:
            return await self._run(project_name, template)
        except Exception as exc:
            self.stage = GenerationStage.ABORTED
            self.abort_reason = str(exc)
            raise

    # -- Stages ------------------------------------------------------------

    async def _run(self, project_name: str, template: TemplateKind | str) -> GenerationResult:
        try:
            project_name = validate_project_name(project_name)
            template = TemplateKind(template)
        except ValueError as exc:
            raise ConfigError(str(exc)) from exc

        project_root = self.settings.project_path(project_name)

        await asyncio.to_thread(check_target_available, project_root)
        self.stage = GenerationStage.PRECONDITION_CHECKED

        config = self.config_provider(
            ProjectDefaults(
                name=project_name,
                template=template,
                description=self.settings.default_description,
            )
        )
        self.stage = GenerationStage.CONFIG_COLLECTED

        await self._create_project_root(project_root)
        print_success(f"Created directory: {config.project_name}")

        tree = directory_tree(config.template)
        await build_directory_tree(project_root, tree)
        self.stage = GenerationStage.DIRECTORIES_BUILT

        if not self.contracts_gen.available:
            print_warning("Bundled contracts not found, skipping contract sources")

        writer = ArtifactWriter(project_root, tree)
        for component in self.components:
            await writer.write_all(component.generate(config))
        self.stage = GenerationStage.ARTIFACTS_WRITTEN

        print_success("Project scaffolded successfully!")
        self.stage = GenerationStage.DONE

        return GenerationResult(
            project_root=project_root,
            config=config,
            written=list(writer.written),
            package_template_origin=self.package_gen.last_origin or TemplateOrigin.BUNDLED,
            contracts_skipped=not self.contracts_gen.available,
        )

    async def _create_project_root(self, project_root: Path) -> None:
        """Create the project directory; it must not exist yet."""
        try:
            await asyncio.to_thread(project_root.mkdir, parents=True, exist_ok=False)
        except FileExistsError as exc:
            raise DirectoryExistsError(project_root) from exc
        except OSError as exc:
            raise FilesystemWriteError(project_root, exc.strerror or str(exc)) from exc


# ---------------------------------------------------------------------------
# Convenience entry point
# ---------------------------------------------------------------------------


async def scaffold_project(
    project_name: str,
    template: TemplateKind | str,
    settings: ScaffoldSettings,
    config_provider: Optional[ConfigProvider] = None,
) -> GenerationResult:
    """Run one generation with a fresh ``ScaffoldOrchestrator``."""
    orchestrator = ScaffoldOrchestrator(settings, config_provider)
    return await orchestrator.generate(project_name, template)
