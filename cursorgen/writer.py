"""Output side effects: writing the generated files and zipping them.

Everything here consumes a finished ``GeneratedFiles`` value and never
modifies it.  File writes run off the event loop via ``asyncio.to_thread``.
"""

from __future__ import annotations

import asyncio
import io
import zipfile
from pathlib import Path
from typing import Optional, Sequence

from .config import OutputNames
from .errors import OutputExistsError
from .generator import GeneratedFiles
from .utils import console


def _named_files(files: GeneratedFiles, names: Optional[OutputNames]) -> dict[str, str]:
    names = names or OutputNames()
    return files.as_files(names.cursorrules, names.development_guide, names.env_example)


def _write_file(path: Path, content: str) -> None:
    """Synchronous helper: create parent dirs and write content."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


def _write_bytes(path: Path, content: bytes) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(content)


async def write_outputs(
    files: GeneratedFiles,
    output_dir: str | Path,
    overwrite: bool = False,
    names: Optional[OutputNames] = None,
    also_check: Sequence[Path] = (),
) -> list[Path]:
    """Write the three documents into *output_dir*.

    Existing files are checked before anything is written, so a refused
    overwrite leaves the directory untouched.

    Args:
        files: The generated documents.
        output_dir: Target directory (created if missing).
        overwrite: Replace files that already exist.
        names: Output file names; the conventional names by default.
        also_check: Further paths written later in the same run (such as the
            archive); they are checked for existence along with the documents.

    Returns:
        The written paths, in generation order.

    Raises:
        OutputExistsError: if a target exists and *overwrite* is false.
    """
    root = Path(output_dir)
    targets = [(root / name, content) for name, content in _named_files(files, names).items()]

    if not overwrite:
        for path in [p for p, _ in targets] + [Path(p) for p in also_check]:
            if path.exists():
                raise OutputExistsError(path)

    written: list[Path] = []
    for path, content in targets:
        await asyncio.to_thread(_write_file, path, content)
        console.print(f"[green]Wrote {path}[/green]")
        written.append(path)
    return written


def build_archive(files: GeneratedFiles, names: Optional[OutputNames] = None) -> bytes:
    """Return a zip archive (as bytes) holding the three documents."""
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w", compression=zipfile.ZIP_DEFLATED) as archive:
        for name, content in _named_files(files, names).items():
            archive.writestr(name, content)
    return buffer.getvalue()


async def write_archive(
    files: GeneratedFiles,
    path: str | Path,
    overwrite: bool = False,
    names: Optional[OutputNames] = None,
) -> Path:
    """Write the zip archive to *path*.

    Raises:
        OutputExistsError: if *path* exists and *overwrite* is false.
    """
    target = Path(path)
    if target.exists() and not overwrite:
        raise OutputExistsError(target)
    await asyncio.to_thread(_write_bytes, target, build_archive(files, names))
    console.print(f"[green]Archive written to {target}[/green]")
    return target
