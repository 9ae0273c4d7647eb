"""Solidity contract copying for generated projects.

Contracts are not templated: the interface directory and the three core
contracts are copied byte-for-byte from the bundled resources.
"""

from __future__ import annotations

from ..models import Artifact, ProjectConfig
from .resources import ResourceProvider


class ContractsGenerator:
    """Produces the ``contracts/`` artifacts from bundled Solidity sources."""

    CONTRACT_FILES: tuple[str, ...] = (
        "TaskMailbox.sol",
        "TaskAVSRegistrar.sol",
        "SlashingConditions.sol",
    )

    def __init__(self, resources: ResourceProvider) -> None:
        self.resources = resources

    @property
    def available(self) -> bool:
        """``False`` when the bundle ships no contracts and the copy is skipped."""
        return self.resources.has_contracts()

    def generate(self, config: ProjectConfig) -> list[Artifact]:
        """Return the contract artifacts, or an empty list if none are bundled.

        *config* is accepted for a uniform generator signature; contract
        sources do not depend on it.
        """
        if not self.available:
            return []

        artifacts = self.resources.copy_static_tree("interfaces", "contracts/interfaces")
        for filename in self.CONTRACT_FILES:
            artifact = self.resources.load_static_file(filename, f"contracts/{filename}")
            if artifact is not None:
                artifacts.append(artifact)
        return artifacts
