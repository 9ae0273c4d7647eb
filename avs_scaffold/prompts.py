"""Configuration providers for the scaffolder.

A provider turns the values requested on the command line into a validated
``ProjectConfig``.  The engine only sees the ``ConfigProvider`` callable, so
the interactive Rich prompts can be swapped for fixed answers in tests or
non-interactive runs.
"""

from __future__ import annotations

from typing import Callable, Optional

from pydantic import ValidationError
from rich.console import Console
from rich.prompt import Prompt

from .errors import ConfigError, PromptCancelledError
from .models import ProjectConfig, ProjectDefaults, TemplateKind


ConfigProvider = Callable[[ProjectDefaults], ProjectConfig]

TEMPLATE_CHOICES: list[str] = [kind.value for kind in TemplateKind]


def build_config(project_name: str, template: str, description: str) -> ProjectConfig:
    """Validate raw answers into a ``ProjectConfig``.

    Raises:
        ConfigError: If any answer fails validation.
    """
    try:
        return ProjectConfig(
            project_name=project_name,
            template=template,
            description=description,
        )
    except ValidationError as exc:
        problems = "; ".join(err["msg"] for err in exc.errors())
        raise ConfigError(f"Invalid project configuration: {problems}") from exc


def prompt_for_config(
    defaults: ProjectDefaults,
    console: Optional[Console] = None,
) -> ProjectConfig:
    """Ask the user for the project name, template and description.

    Each question offers the corresponding value from *defaults*.

    Raises:
        PromptCancelledError: If the user interrupts a prompt (Ctrl-C or EOF).
        ConfigError: If the answers do not validate.
    """
    try:
        project_name = Prompt.ask(
            "Project name", default=defaults.name, console=console
        )
        template = Prompt.ask(
            "Select AVS template",
            choices=TEMPLATE_CHOICES,
            default=defaults.template.value,
            console=console,
        )
        description = Prompt.ask(
            "Project description", default=defaults.description, console=console
        )
    except (KeyboardInterrupt, EOFError) as exc:
        raise PromptCancelledError() from exc

    return build_config(project_name, template, description)


def static_provider(description: Optional[str] = None) -> ConfigProvider:
    """Return a provider that answers every question with its default.

    Args:
        description: Overrides the default description when given.
    """

    def _provide(defaults: ProjectDefaults) -> ProjectConfig:
        return build_config(
            defaults.name,
            defaults.template.value,
            defaults.description if description is None else description,
        )

    return _provide
