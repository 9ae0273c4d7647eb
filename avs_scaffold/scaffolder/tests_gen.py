"""Contract test generation."""

from __future__ import annotations

from ..models import Artifact, ProjectConfig
from .payloads import TASK_MAILBOX_TEST


class TestsGenerator:
    """Emits the TaskMailbox Hardhat test under ``test/``."""

    # Keep pytest from collecting this class.
    __test__ = False

    OUTPUT_PATH = "test/TaskMailbox.test.ts"

    def generate(self, config: ProjectConfig) -> list[Artifact]:
        return [Artifact(relative_path=self.OUTPUT_PATH, content=TASK_MAILBOX_TEST)]
