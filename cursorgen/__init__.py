"""Cursor Config Generator -- project documentation from a single config.

Renders ``.cursorrules``, ``DEVELOPMENT_GUIDE.md`` and ``.env.example`` from a
``ProjectConfig`` describing the project's domain, stack and conventions.

Usage::

    from cursorgen import ConfigGenerator, FormState, get_preset_by_id

    state = FormState(project_name="Billing API").apply_preset(
        get_preset_by_id("fastapi-backend")
    )
    files = ConfigGenerator().generate(state.to_project_config())
    print(files.cursorrules)
"""

from cursorgen.assemblers import (
    generate_cursor_rules,
    generate_development_guide,
    generate_env_example,
)
from cursorgen.errors import (
    CursorGenError,
    GenerationError,
    OutputExistsError,
    UnknownPresetError,
)
from cursorgen.form import FormPatch, FormState, toggle_selection
from cursorgen.generator import ConfigGenerator, GeneratedFiles
from cursorgen.models import Domain, DomainFamily, ProjectConfig
from cursorgen.presets import get_preset_by_id, get_presets_by_domain

__version__ = "0.1.0"

__all__ = [
    "generate_cursor_rules",
    "generate_development_guide",
    "generate_env_example",
    "ConfigGenerator",
    "GeneratedFiles",
    "ProjectConfig",
    "Domain",
    "DomainFamily",
    "FormState",
    "FormPatch",
    "toggle_selection",
    "get_preset_by_id",
    "get_presets_by_domain",
    "CursorGenError",
    "GenerationError",
    "OutputExistsError",
    "UnknownPresetError",
]
