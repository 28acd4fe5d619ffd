"""Command-line entry point: ``cursorgen`` / ``python -m cursorgen``."""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path
from typing import Optional, Sequence

from pydantic import ValidationError
from rich.table import Table

from .config import Config
from .errors import CursorGenError, GenerationError, UnknownPresetError
from .form import FormPatch, FormState
from .generator import ConfigGenerator, GeneratedFiles
from .models import Domain
from .presets import DOMAIN_OPTIONS, PRESETS, get_preset_by_id
from .fragments import TEMPLATES
from .templates import TemplateRenderer
from .utils import (
    FormFileError,
    console,
    load_form_file,
    print_error,
    print_success,
    print_summary_table,
    print_warning,
)
from .writer import write_archive, write_outputs

_STDOUT_CHOICES = ("cursorrules", "devguide", "env")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cursorgen",
        description="Cursor Config Generator -- .cursorrules, DEVELOPMENT_GUIDE.md and .env.example",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  cursorgen project.yaml\n"
            "  cursorgen --preset fastapi-backend --name 'Billing API' -o ./billing\n"
            "  cursorgen project.json --zip --force\n"
            "  cursorgen --preset react-spa --name Dashboard --stdout cursorrules\n"
        ),
    )

    parser.add_argument(
        "form",
        nargs="?",
        default=None,
        help="JSON or YAML form file (camelCase or snake_case keys)",
    )
    parser.add_argument(
        "--output", "-o",
        default=None,
        help="Output directory (default: CURSORGEN_OUTPUT_DIR or .)",
    )
    parser.add_argument(
        "--preset",
        default=None,
        help="Seed the form with a preset (see --list-presets)",
    )
    parser.add_argument("--name", default=None, help="Override the project name")
    parser.add_argument(
        "--domain",
        default=None,
        choices=[domain.value for domain in Domain],
        help="Override the project domain",
    )
    parser.add_argument(
        "--zip",
        action="store_true",
        help="Also write cursor-config-files.zip",
    )
    parser.add_argument(
        "--stdout",
        default=None,
        choices=_STDOUT_CHOICES,
        help="Print one document to stdout instead of writing files",
    )
    parser.add_argument(
        "--force",
        action="store_true",
        help="Overwrite existing output files",
    )
    parser.add_argument(
        "--list-presets",
        action="store_true",
        help="List the available presets and exit",
    )
    parser.add_argument(
        "--list-domains",
        action="store_true",
        help="List the project domains and exit",
    )
    return parser


# ---------------------------------------------------------------------------
# Listings
# ---------------------------------------------------------------------------


def _print_presets() -> None:
    table = Table(title="Presets", show_header=True, header_style="bold cyan")
    table.add_column("ID", no_wrap=True)
    table.add_column("Name")
    table.add_column("Domain", style="dim")
    table.add_column("Description")
    for preset in PRESETS:
        table.add_row(preset.id, f"{preset.icon} {preset.name}", preset.domain.value, preset.description)
    console.print(table)


def _print_domains() -> None:
    table = Table(title="Domains", show_header=True, header_style="bold cyan")
    table.add_column("ID", no_wrap=True)
    table.add_column("Label")
    table.add_column("Description")
    for info in DOMAIN_OPTIONS:
        table.add_row(info.id.value, f"{info.icon} {info.label}", info.description)
    console.print(table)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _fail(message: str) -> None:
    print_error(f"Error: {message}")
    sys.exit(1)


def _build_state(args: argparse.Namespace) -> FormState:
    """Preset first, then the form file, then the command-line overrides."""
    state = FormState()
    if args.preset:
        state = state.apply_preset(get_preset_by_id(args.preset))
    if args.form:
        patch = FormPatch.model_validate(load_form_file(args.form))
        state = state.apply(patch)

    overrides: dict = {}
    if args.name:
        overrides["project_name"] = args.name
    if args.domain:
        overrides["domain"] = Domain(args.domain)
    return state.model_copy(update=overrides) if overrides else state


def _select(files: GeneratedFiles, which: str) -> str:
    return {
        "cursorrules": files.cursorrules,
        "devguide": files.development_guide,
        "env": files.env_example,
    }[which]


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------


def main(argv: Optional[Sequence[str]] = None) -> None:
    """CLI entry point for ``python -m cursorgen``."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.list_presets:
        _print_presets()
        return
    if args.list_domains:
        _print_domains()
        return

    if not (args.form or args.preset or args.name):
        _fail("Provide a form file, --preset or --name")

    if args.form and not Path(args.form).exists():
        _fail(f"Form file not found: {args.form}")

    config = Config.from_env()
    if args.output:
        config.output_dir = Path(args.output)
    if args.force:
        config.overwrite = True

    try:
        state = _build_state(args)
        project = state.to_project_config()
    except UnknownPresetError as exc:
        _fail(str(exc))
    except FormFileError as exc:
        _fail(str(exc))
    except ValidationError as exc:
        details = "; ".join(
            f"{'.'.join(str(part) for part in err['loc']) or 'value'}: {err['msg']}"
            for err in exc.errors()
        )
        _fail(f"Invalid project configuration ({details})")

    renderer = None
    if config.template_dir:
        renderer = TemplateRenderer(config.template_dir)
        missing = renderer.missing_templates(TEMPLATES)
        if missing:
            _fail(f"Template directory {config.template_dir} is missing: {', '.join(missing)}")

    generator = ConfigGenerator(renderer=renderer)
    try:
        files = generator.generate(project)
    except GenerationError as exc:
        _fail(f"Generation failed: {exc}")

    if args.stdout:
        sys.stdout.write(_select(files, args.stdout))
        return

    archive_path = config.archive_path if args.zip else None
    if config.overwrite:
        targets = [
            config.cursorrules_path,
            config.development_guide_path,
            config.env_example_path,
        ]
        if archive_path is not None:
            targets.append(archive_path)
        existing = [path for path in targets if path.exists()]
        if existing:
            print_warning(f"Overwriting {len(existing)} existing file(s) in {config.output_dir}")

    try:
        written = asyncio.run(
            write_outputs(
                files,
                config.output_dir,
                config.overwrite,
                config.names,
                also_check=[archive_path] if archive_path is not None else [],
            )
        )
        if archive_path is not None:
            archive = asyncio.run(
                write_archive(files, archive_path, config.overwrite, config.names)
            )
            written.append(archive)
    except CursorGenError as exc:
        _fail(str(exc))

    print_summary_table(
        {
            "Project": project.project_name,
            "Domain": project.domain.label,
            "Output": str(config.output_dir),
            "Files": ", ".join(path.name for path in written),
        },
        title="Cursor Config Generator",
    )
    print_success("Configuration files generated successfully!")


if __name__ == "__main__":
    main()
