"""Writes generated artifacts into the project tree."""

from __future__ import annotations

import asyncio
from pathlib import Path, PurePosixPath
from typing import Iterable

from ..errors import FilesystemWriteError
from ..models import Artifact


class ArtifactWriter:
    """Writes artifacts beneath a project root.

    Only paths at the root itself or below one of the already-created tree
    directories are accepted.  The first failing write raises and nothing
    already written is removed.
    """

    def __init__(self, root: Path, tree: Iterable[str]) -> None:
        self.root = Path(root)
        self.tree = tuple(tree)
        self.written: list[str] = []

    def _is_placed(self, artifact: Artifact) -> bool:
        rel = PurePosixPath(artifact.relative_path)
        if rel.is_absolute() or ".." in rel.parts or not rel.name:
            return False
        parent = rel.parent
        if parent == PurePosixPath("."):
            return True
        return any(
            parent == PurePosixPath(d) or PurePosixPath(d) in parent.parents
            for d in self.tree
        )

    async def write(self, artifact: Artifact) -> Path:
        """Write one artifact and return its absolute path."""
        target = self.root / artifact.relative_path
        if not self._is_placed(artifact):
            raise FilesystemWriteError(target, "path is outside the generated directory tree")
        try:
            await asyncio.to_thread(_write_artifact, target, artifact.content)
        except OSError as exc:
            raise FilesystemWriteError(target, exc.strerror or str(exc)) from exc
        self.written.append(artifact.relative_path)
        return target

    async def write_all(self, artifacts: Iterable[Artifact]) -> list[Path]:
        """Write artifacts sequentially, stopping at the first failure."""
        paths: list[Path] = []
        for artifact in artifacts:
            paths.append(await self.write(artifact))
        return paths


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _write_artifact(path: Path, content: str | bytes) -> None:
    """Synchronous helper: create nested subdirectories and write content."""
    path.parent.mkdir(parents=True, exist_ok=True)
    if isinstance(content, bytes):
        path.write_bytes(content)
    else:
        path.write_text(content, encoding="utf-8")
