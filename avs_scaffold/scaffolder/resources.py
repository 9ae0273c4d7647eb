"""Bundled resource access for the scaffolder.

Templates and static contract files ship inside the package under
``avs_scaffold/resources/``.  The two kinds of resource fail differently:

* a template that cannot be read from the bundle falls back to the body
  compiled into :mod:`payloads`, so generation always has a package.json;
* static contract files are optional, and when the bundled contracts root is
  missing the copy is skipped and generation carries on without them.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Mapping

from ..errors import ResourceReadError
from ..models import (
    Artifact,
    BundledTemplate,
    EmbeddedTemplate,
    TemplateOrigin,
    TemplateResolution,
    TemplateSource,
)
from ..utils import print_warning
from .payloads import EMBEDDED_TEMPLATES


TEMPLATE_SUFFIX = ".j2"


# ---------------------------------------------------------------------------
# Template resolution
# ---------------------------------------------------------------------------


def resolve_template(
    name: str,
    templates_dir: Path,
    bundled_names: Iterable[str],
    embedded: Mapping[str, str] = EMBEDDED_TEMPLATES,
) -> TemplateResolution:
    """Choose where the body of template *name* should come from.

    Pure: the caller supplies the names present in the bundle, so the
    decision does not depend on filesystem state.

    Raises:
        ResourceReadError: If *name* is neither bundled nor embedded.
    """
    if name in set(bundled_names):
        return BundledTemplate(name=name, path=templates_dir / f"{name}{TEMPLATE_SUFFIX}")
    if name in embedded:
        return EmbeddedTemplate(name=name, body=embedded[name])
    raise ResourceReadError(name, "no bundled template and no embedded default")


# ---------------------------------------------------------------------------
# ResourceProvider
# ---------------------------------------------------------------------------


class ResourceProvider:
    """Supplies template bodies and static file bytes from the bundle."""

    def __init__(
        self,
        resources_dir: str | Path,
        embedded_templates: Mapping[str, str] | None = None,
    ) -> None:
        self.resources_dir = Path(resources_dir)
        self.embedded_templates = dict(
            EMBEDDED_TEMPLATES if embedded_templates is None else embedded_templates
        )

    @property
    def templates_dir(self) -> Path:
        return self.resources_dir / "templates"

    @property
    def contracts_dir(self) -> Path:
        return self.resources_dir / "contracts"

    # -- Templates ---------------------------------------------------------

    def bundled_template_names(self) -> list[str]:
        """Return the names of all ``.j2`` templates present in the bundle."""
        if not self.templates_dir.is_dir():
            return []
        return sorted(
            p.name[: -len(TEMPLATE_SUFFIX)]
            for p in self.templates_dir.glob(f"*{TEMPLATE_SUFFIX}")
            if p.is_file()
        )

    def load_template(self, name: str) -> TemplateSource:
        """Load the body of template *name*.

        A bundled body that cannot be read (missing, unreadable, not UTF-8)
        is replaced by the embedded default with a console warning.

        Raises:
            ResourceReadError: If no body exists for *name* at all.
        """
        resolution = resolve_template(
            name,
            self.templates_dir,
            self.bundled_template_names(),
            self.embedded_templates,
        )
        if isinstance(resolution, EmbeddedTemplate):
            print_warning(f"Bundled template '{name}' not found, using built-in default")
            return TemplateSource(
                name=name, body=resolution.body, origin=TemplateOrigin.EMBEDDED_DEFAULT
            )

        try:
            body = resolution.path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            if name not in self.embedded_templates:
                raise ResourceReadError(name, str(exc)) from exc
            print_warning(
                f"Could not read bundled template '{name}' ({exc}), using built-in default"
            )
            return TemplateSource(
                name=name,
                body=self.embedded_templates[name],
                origin=TemplateOrigin.EMBEDDED_DEFAULT,
            )
        return TemplateSource(name=name, body=body, origin=TemplateOrigin.BUNDLED)

    # -- Static files ------------------------------------------------------

    def has_contracts(self) -> bool:
        """Whether the bundled contracts root is present."""
        return self.contracts_dir.is_dir()

    def load_static_file(self, relative_path: str, dest_path: str) -> Artifact | None:
        """Read a bundled contract file as a verbatim-copy artifact.

        Returns ``None`` when the contracts root is absent.  A missing file
        inside a present root is an error.

        Args:
            relative_path: Path under the contracts root, e.g. ``"TaskMailbox.sol"``.
            dest_path: Output path relative to the project root.
        """
        if not self.has_contracts():
            return None
        source = self.contracts_dir / relative_path
        try:
            data = source.read_bytes()
        except OSError as exc:
            raise ResourceReadError(relative_path, str(exc)) from exc
        return Artifact(relative_path=dest_path, content=data, origin="copied")

    def copy_static_tree(self, relative_dir: str, dest_prefix: str) -> list[Artifact]:
        """Read every file below a bundled contracts subdirectory.

        Subdirectory structure is preserved under *dest_prefix*.  Returns an
        empty list when the contracts root or the subdirectory is absent.
        """
        if not self.has_contracts():
            return []
        source_dir = self.contracts_dir / relative_dir
        if not source_dir.is_dir():
            return []

        artifacts: list[Artifact] = []
        for path in sorted(source_dir.rglob("*")):
            if not path.is_file():
                continue
            rel = path.relative_to(source_dir).as_posix()
            try:
                data = path.read_bytes()
            except OSError as exc:
                raise ResourceReadError(f"{relative_dir}/{rel}", str(exc)) from exc
            artifacts.append(
                Artifact(relative_path=f"{dest_prefix}/{rel}", content=data, origin="copied")
            )
        return artifacts
