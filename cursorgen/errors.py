"""Exception hierarchy shared across cursorgen."""

from __future__ import annotations


class CursorGenError(Exception):
    """Base class for every error raised by cursorgen."""


class GenerationError(CursorGenError):
    """Raised when an assembler cannot produce its document.

    Carries the name of the artifact that failed so the caller can surface a
    single notice without showing partial output.
    """

    def __init__(self, artifact: str, message: str = "Failed to generate files") -> None:
        self.artifact = artifact
        super().__init__(f"{message} ({artifact})")


class OutputExistsError(CursorGenError):
    """Raised when an output file already exists and overwriting is disabled."""

    def __init__(self, path) -> None:
        self.path = path
        super().__init__(f"Refusing to overwrite existing file: {path}")


class UnknownPresetError(CursorGenError, KeyError):
    """Raised when a preset id is not in the catalog."""

    def __init__(self, preset_id: str) -> None:
        self.preset_id = preset_id
        super().__init__(f"Unknown preset: {preset_id}")

    def __str__(self) -> str:
        return f"Unknown preset: {self.preset_id}"
