"""Directory skeleton for generated AVS projects."""

from __future__ import annotations

import asyncio
from pathlib import Path

from ..errors import FilesystemWriteError
from ..models import TemplateKind


# Parents come before children.
_BASE_TREE: tuple[str, ...] = (
    "contracts",
    "contracts/interfaces",
    "scripts",
    "test",
    "off-chain",
    "off-chain/aggregator",
    "off-chain/executor",
)

# Both variants currently share one skeleton; the oracle template has no
# layout of its own yet.
_TREES: dict[TemplateKind, tuple[str, ...]] = {
    TemplateKind.TASK_BASED: _BASE_TREE,
    TemplateKind.ORACLE: _BASE_TREE,
}


def directory_tree(template: TemplateKind) -> tuple[str, ...]:
    """Return the ordered relative directories required by *template*."""
    return _TREES[TemplateKind(template)]


async def build_directory_tree(root: Path, tree: tuple[str, ...]) -> list[Path]:
    """Create every directory of *tree* under *root*, in order.

    Creating a directory that already exists is a no-op.  *root* itself must
    already exist.

    Returns:
        The created directory paths, in tree order.

    Raises:
        FilesystemWriteError: If a directory cannot be created.
    """
    created: list[Path] = []
    for rel in tree:
        path = root / rel
        try:
            await asyncio.to_thread(path.mkdir, exist_ok=True)
        except OSError as exc:
            raise FilesystemWriteError(path, exc.strerror or str(exc)) from exc
        created.append(path)
    return created
