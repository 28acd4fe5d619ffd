"""Shared utility functions for cursorgen.

Provides form-file loading (JSON or YAML) and Rich-based console output.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml
from rich.console import Console
from rich.table import Table

console = Console()

_YAML_SUFFIXES = {".yaml", ".yml"}


class FormFileError(ValueError):
    """Raised when a form file cannot be parsed into a mapping."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        super().__init__(f"Cannot read form file {path}: {reason}")


# ---------------------------------------------------------------------------
# Form file I/O
# ---------------------------------------------------------------------------


def load_form_file(path: str | Path) -> dict[str, Any]:
    """Load a form-state file.

    ``.yaml``/``.yml`` files are parsed with PyYAML's ``safe_load``; anything
    else is parsed as JSON.  Keys may be camelCase or snake_case.

    Args:
        path: Path to the form file.

    Returns:
        The parsed mapping (empty for an empty YAML document).

    Raises:
        FileNotFoundError: If the file does not exist.
        FormFileError: If the content is malformed or not a mapping.
    """
    file_path = Path(path)
    raw = file_path.read_text(encoding="utf-8")

    try:
        if file_path.suffix.lower() in _YAML_SUFFIXES:
            data = yaml.safe_load(raw)
        else:
            data = json.loads(raw)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise FormFileError(file_path, str(exc)) from exc

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise FormFileError(file_path, f"expected a mapping, got {type(data).__name__}")
    return data


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_summary_table(data: dict[str, str], title: str = "Summary") -> None:
    """Print a two-column key/value summary table.

    Args:
        data: Mapping of label -> value.
        title: Table title.
    """
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Item", style="dim", no_wrap=True)
    table.add_column("Value")

    for key, value in data.items():
        table.add_row(key, str(value))

    console.print(table)
    console.print()


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{message}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]{message}[/bold red]")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{message}[/bold yellow]")
