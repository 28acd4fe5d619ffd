"""Generation orchestrator.

Runs the three assemblers against one ``ProjectConfig`` and returns the
finished documents as a single ``GeneratedFiles`` value.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from .assemblers import (
    generate_cursor_rules,
    generate_development_guide,
    generate_env_example,
)
from .clock import Clock, system_clock
from .errors import GenerationError
from .models import ProjectConfig
from .templates import TemplateRenderer


# ---------------------------------------------------------------------------
# Conventional output names
# ---------------------------------------------------------------------------

CURSORRULES_FILE = ".cursorrules"
DEVELOPMENT_GUIDE_FILE = "DEVELOPMENT_GUIDE.md"
ENV_EXAMPLE_FILE = ".env.example"
ARCHIVE_FILE = "cursor-config-files.zip"


class GeneratedFiles(BaseModel):
    """The three generated documents."""

    model_config = ConfigDict(frozen=True)

    cursorrules: str = Field(..., description="Content of .cursorrules")
    development_guide: str = Field(..., description="Content of DEVELOPMENT_GUIDE.md")
    env_example: str = Field(..., description="Content of .env.example")

    def as_files(
        self,
        cursorrules_name: str = CURSORRULES_FILE,
        development_guide_name: str = DEVELOPMENT_GUIDE_FILE,
        env_example_name: str = ENV_EXAMPLE_FILE,
    ) -> dict[str, str]:
        """Map each output file name to its content, in generation order."""
        return {
            cursorrules_name: self.cursorrules,
            development_guide_name: self.development_guide,
            env_example_name: self.env_example,
        }


# ---------------------------------------------------------------------------
# ConfigGenerator
# ---------------------------------------------------------------------------

class ConfigGenerator:
    """Produces ``.cursorrules``, ``DEVELOPMENT_GUIDE.md`` and ``.env.example``.

    The generator holds no per-run state; one instance can serve any number
    of configs.  The clock only affects the guide's "Last Updated" footer.
    """

    def __init__(
        self,
        clock: Optional[Clock] = None,
        renderer: Optional[TemplateRenderer] = None,
    ) -> None:
        self.clock = clock or system_clock
        self.renderer = renderer

    def generate(self, config: ProjectConfig) -> GeneratedFiles:
        """Run all three assemblers.

        Raises:
            GenerationError: if any assembler fails.  No partial result is
                returned in that case.
        """
        steps = (
            (CURSORRULES_FILE, lambda: generate_cursor_rules(config, self.renderer)),
            (
                DEVELOPMENT_GUIDE_FILE,
                lambda: generate_development_guide(config, self.clock, self.renderer),
            ),
            (ENV_EXAMPLE_FILE, lambda: generate_env_example(config)),
        )
        results: list[str] = []
        for artifact, assemble in steps:
            try:
                results.append(assemble())
            except Exception as exc:
                raise GenerationError(artifact) from exc

        cursorrules, development_guide, env_example = results
        return GeneratedFiles(
            cursorrules=cursorrules,
            development_guide=development_guide,
            env_example=env_example,
        )
