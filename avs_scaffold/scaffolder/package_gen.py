"""Root package manifest and Hardhat config generation.

``package.json`` is the only templated artifact in a generated project: it
is rendered from the ``package.json`` template with the project name and
description.
"""

from __future__ import annotations

from ..models import Artifact, ProjectConfig, TemplateOrigin
from .payloads import HARDHAT_CONFIG
from .resources import ResourceProvider
from .templates import TemplateRenderer


class RootPackageGenerator:
    """Generates the project-root ``package.json`` and ``hardhat.config.ts``."""

    TEMPLATE_NAME = "package.json"

    def __init__(self, renderer: TemplateRenderer, resources: ResourceProvider) -> None:
        self.renderer = renderer
        self.resources = resources
        self.last_origin: TemplateOrigin | None = None

    def generate(self, config: ProjectConfig) -> list[Artifact]:
        source = self.resources.load_template(self.TEMPLATE_NAME)
        self.last_origin = source.origin
        rendered = self.renderer.render(source, config.template_context())
        return [
            Artifact(relative_path="package.json", content=rendered),
            Artifact(relative_path="hardhat.config.ts", content=HARDHAT_CONFIG),
        ]
