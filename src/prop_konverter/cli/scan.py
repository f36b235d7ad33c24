from collections.abc import Iterator, Sequence
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table

from prop_konverter.config import load_settings
from prop_konverter.core.diagnostics import scan_document
from prop_konverter.core.languages import detect_language_from_path, is_component_file
from prop_konverter.models import Diagnostic

console = Console()


def _iter_documents(paths: Sequence[Path]) -> Iterator[Path]:
    for path in paths:
        if path.is_dir():
            yield from sorted(p for p in path.rglob("*") if p.is_file() and is_component_file(p))
        else:
            yield path


def _position(text: str, offset: int) -> tuple[int, int]:
    """1-based line and column of ``offset``."""
    line = text.count("\n", 0, offset) + 1
    column = offset - (text.rfind("\n", 0, offset) + 1) + 1
    return line, column


def scan_paths(paths: Sequence[Path]) -> list[tuple[Path, str, Diagnostic]]:
    settings = load_settings()
    found: list[tuple[Path, str, Diagnostic]] = []
    for path in _iter_documents(paths):
        text = path.read_text(encoding="utf-8")
        for diagnostic in scan_document(text, detect_language_from_path(path), settings):
            found.append((path, text, diagnostic))
    return found


def scan(
    paths: Annotated[list[Path], typer.Argument(help="Files or directories to scan.")],
) -> None:
    """Report object-style defineProps() calls; exits 1 when any are found."""
    try:
        found = scan_paths(paths)
    except (OSError, ValueError) as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(2) from exc

    if not found:
        console.print("[green]No object-style defineProps() found.[/green]")
        return

    table = Table(show_lines=False)
    for header in ("file", "line", "column", "code", "message"):
        table.add_column(header)
    for path, text, diagnostic in found:
        line, column = _position(text, diagnostic.span.start)
        table.add_row(str(path), str(line), str(column), diagnostic.code, diagnostic.message)
    console.print(table)
    console.print(f"({len(found)} diagnostics)")
    raise typer.Exit(1)
