"""Jinja2 template rendering for the generated documents.

Provides the TemplateRenderer class which loads Jinja2 templates from the
``cursorgen/templates/`` directory and renders them with a context built
from a ``ProjectConfig``.  The environment is created lazily and shared, so
templates are compiled once per process no matter how many documents are
generated.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any, Iterable

from jinja2 import Environment, FileSystemLoader, select_autoescape

from .models import db_slug, folder_slug, title_words


# ---------------------------------------------------------------------------
# Template directory discovery
# ---------------------------------------------------------------------------

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders the ``.j2`` fragment templates.

    Templates live in two groups, ``cursorrules/`` (AI rule sets) and
    ``devguide/`` (development guide sections), and are addressed by their
    path relative to the template root, e.g. ``"devguide/setup.md.j2"``.
    """

    def __init__(self, template_dir: str | Path | None = None) -> None:
        if template_dir is None:
            template_dir = _DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=select_autoescape([], default_for_string=False),
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        # Register custom filters
        self.env.filters["title_words"] = title_words
        self.env.filters["db_slug"] = db_slug
        self.env.filters["folder_slug"] = folder_slug
        self.env.filters["bullets"] = _bullets_filter

    # -- Rendering -----------------------------------------------------------

    def render(self, template_path: str, context: dict[str, Any]) -> str:
        """Render a single template with the provided context.

        Args:
            template_path: Path relative to the template directory (e.g.
                ``"cursorrules/general.md.j2"``).
            context: Dictionary of variables available inside the template.

        Returns:
            The rendered template content as a string.
        """
        template = self.env.get_template(template_path)
        return template.render(**context)

    # -- Utility -----------------------------------------------------------

    def list_templates(self, prefix: str = "") -> list[str]:
        """Return a sorted list of all ``.j2`` template paths under *prefix*.

        Paths are relative to the template root directory.
        """
        search_dir = self.template_dir / prefix if prefix else self.template_dir
        if not search_dir.is_dir():
            return []
        return sorted(
            p.relative_to(self.template_dir).as_posix()
            for p in search_dir.rglob("*.j2")
        )

    def missing_templates(self, required: Iterable[str]) -> list[str]:
        """Return the entries of *required* that are not present under the template root."""
        available = set(self.list_templates())
        return [name for name in required if name not in available]


@lru_cache(maxsize=None)
def get_renderer(template_dir: str | None = None) -> TemplateRenderer:
    """Return the shared renderer for *template_dir* (the packaged templates by default)."""
    return TemplateRenderer(template_dir)


# ---------------------------------------------------------------------------
# Jinja2 custom filters
# ---------------------------------------------------------------------------

def _bullets_filter(items: Iterable[str], empty: str = "") -> str:
    """Render *items* as a markdown bullet list, or ``- empty`` when there are none."""
    lines = [f"- {item}" for item in items]
    if not lines and empty:
        lines = [f"- {empty}"]
    return "\n".join(lines)
