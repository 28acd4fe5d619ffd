"""cursorgen application configuration.

Settings that control where and how the generated files are written.  They
are kept apart from ``ProjectConfig``, which describes the project being
documented rather than the tool run.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field

from .generator import (
    ARCHIVE_FILE,
    CURSORRULES_FILE,
    DEVELOPMENT_GUIDE_FILE,
    ENV_EXAMPLE_FILE,
)

_TRUTHY = {"1", "true", "yes", "on"}


class OutputNames(BaseModel):
    """File names used for the three documents and the archive."""

    cursorrules: str = Field(default=CURSORRULES_FILE)
    development_guide: str = Field(default=DEVELOPMENT_GUIDE_FILE)
    env_example: str = Field(default=ENV_EXAMPLE_FILE)
    archive: str = Field(default=ARCHIVE_FILE)


class Config(BaseModel):
    """Global cursorgen configuration.

    Created once by the CLI entry point (usually via ``from_env``) and passed
    to the writer.
    """

    output_dir: Path = Field(default=Path("."))
    overwrite: bool = Field(default=False, description="Replace existing output files")
    template_dir: Optional[Path] = Field(
        default=None, description="Alternative template root (defaults to the packaged templates)"
    )
    names: OutputNames = Field(default_factory=OutputNames)

    # ------------------------------------------------------------------
    # Derived paths (read-only properties)
    # ------------------------------------------------------------------

    @property
    def cursorrules_path(self) -> Path:
        return self.output_dir / self.names.cursorrules

    @property
    def development_guide_path(self) -> Path:
        return self.output_dir / self.names.development_guide

    @property
    def env_example_path(self) -> Path:
        return self.output_dir / self.names.env_example

    @property
    def archive_path(self) -> Path:
        """Path of the zip archive holding all three files."""
        return self.output_dir / self.names.archive

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: Path) -> Path:
        """Persist the configuration to a JSON file.

        Args:
            path: Destination file.

        Returns:
            The path where the file was written.
        """
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return target

    @classmethod
    def load(cls, path: Path) -> "Config":
        """Load a previously-saved configuration from JSON."""
        raw = Path(path).read_text(encoding="utf-8")
        return cls.model_validate_json(raw)

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            CURSORGEN_OUTPUT_DIR, CURSORGEN_TEMPLATE_DIR, CURSORGEN_OVERWRITE,
            CURSORGEN_ARCHIVE_NAME.
        """
        names_kwargs = {}
        if os.environ.get("CURSORGEN_ARCHIVE_NAME"):
            names_kwargs["archive"] = os.environ["CURSORGEN_ARCHIVE_NAME"]

        template_dir = os.environ.get("CURSORGEN_TEMPLATE_DIR")

        return cls(
            output_dir=Path(os.environ.get("CURSORGEN_OUTPUT_DIR", ".")),
            overwrite=os.environ.get("CURSORGEN_OVERWRITE", "").strip().lower() in _TRUTHY,
            template_dir=Path(template_dir) if template_dir else None,
            names=OutputNames(**names_kwargs),
        )
