"""AVS project scaffolder -- generates EigenLayer AVS project skeletons.

Takes a project name and template selection, collects the remaining
configuration through a pluggable provider, and writes contracts, a
deployment script, a test, and off-chain service stubs to disk.

Quick usage::

    from avs_scaffold.config import ScaffoldSettings
    from avs_scaffold.prompts import static_provider
    from avs_scaffold.scaffolder import ScaffoldOrchestrator

    settings = ScaffoldSettings(base_dir=Path("/tmp/output"))
    orchestrator = ScaffoldOrchestrator(settings, static_provider("My AVS"))
    result = await orchestrator.generate("my-avs", "task-based")
"""

from avs_scaffold.scaffolder.generator import (
    ScaffoldOrchestrator,
    check_target_available,
    scaffold_project,
)
from avs_scaffold.scaffolder.resources import ResourceProvider, resolve_template
from avs_scaffold.scaffolder.templates import TemplateRenderer
from avs_scaffold.scaffolder.tree import build_directory_tree, directory_tree

__all__ = [
    "ResourceProvider",
    "ScaffoldOrchestrator",
    "TemplateRenderer",
    "build_directory_tree",
    "check_target_available",
    "directory_tree",
    "resolve_template",
    "scaffold_project",
]
