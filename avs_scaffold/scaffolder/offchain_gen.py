"""Off-chain service stub generation.

Produces the aggregator and executor TypeScript stubs and the off-chain
``package.json``, whose name is derived from the project name.
"""

from __future__ import annotations

import json
from typing import Any

from ..models import Artifact, ProjectConfig
from .payloads import (
    AGGREGATOR_SOURCE,
    EXECUTOR_SOURCE,
    OFF_CHAIN_DEPENDENCIES,
    OFF_CHAIN_VERSION,
)


class OffChainGenerator:
    """Generates the ``off-chain/`` package."""

    AGGREGATOR_PATH = "off-chain/aggregator/index.ts"
    EXECUTOR_PATH = "off-chain/executor/index.ts"
    PACKAGE_PATH = "off-chain/package.json"

    def generate(self, config: ProjectConfig) -> list[Artifact]:
        """Return the aggregator, executor and package manifest artifacts."""
        return [
            Artifact(relative_path=self.AGGREGATOR_PATH, content=AGGREGATOR_SOURCE),
            Artifact(relative_path=self.EXECUTOR_PATH, content=EXECUTOR_SOURCE),
            Artifact(
                relative_path=self.PACKAGE_PATH,
                content=json.dumps(build_off_chain_package(config), indent=2) + "\n",
            ),
        ]


def build_off_chain_package(config: ProjectConfig) -> dict[str, Any]:
    """Build the off-chain ``package.json`` payload for *config*."""
    return {
        "name": f"{config.project_name}-off-chain",
        "version": OFF_CHAIN_VERSION,
        "type": "module",
        "dependencies": dict(OFF_CHAIN_DEPENDENCIES),
    }
