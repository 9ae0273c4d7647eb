"""Jinja2 template rendering for project scaffolding.

Provides the TemplateRenderer class which compiles a resolved
``TemplateSource`` against a context dictionary.  Substitution is permissive:
placeholders missing from the context are rendered back as their literal
``{{ name }}`` text instead of raising or collapsing to an empty string.
"""

from __future__ import annotations

import json
from typing import Any

from jinja2 import DebugUndefined, Environment

from ..models import TemplateSource


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders Jinja2 template bodies for project scaffolding.

    The renderer never touches the filesystem: template bodies arrive as
    ``TemplateSource`` objects from the ``ResourceProvider`` and the rendered
    text is handed back to the caller.
    """

    def __init__(self) -> None:
        self.env = Environment(
            autoescape=False,
            undefined=DebugUndefined,
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.env.filters["json_string"] = _json_string_filter

    def render(self, source: TemplateSource, context: dict[str, Any]) -> str:
        """Render a resolved template with the provided context.

        Args:
            source: Template body and origin from the resource provider.
            context: Dictionary of variables available inside the template.

        Returns:
            The rendered template content as a string.
        """
        return self.render_string(source.body, context)

    def render_string(self, template_string: str, context: dict[str, Any]) -> str:
        """Render an inline template string with the provided context."""
        template = self.env.from_string(template_string)
        return template.render(**context)


# ---------------------------------------------------------------------------
# Jinja2 custom filters
# ---------------------------------------------------------------------------

def _json_string_filter(value: Any) -> str:
    """Quote *value* as a JSON string literal (``"..."`` with escapes)."""
    return json.dumps(str(value), ensure_ascii=False)
