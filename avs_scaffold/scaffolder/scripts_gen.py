"""Deployment script generation."""

from __future__ import annotations

from ..models import Artifact, ProjectConfig
from .payloads import DEPLOY_SCRIPT


class ScriptsGenerator:
    """Emits the Hardhat deployment script under ``scripts/``."""

    OUTPUT_PATH = "scripts/deploy.ts"

    def generate(self, config: ProjectConfig) -> list[Artifact]:
        return [Artifact(relative_path=self.OUTPUT_PATH, content=DEPLOY_SCRIPT)]
