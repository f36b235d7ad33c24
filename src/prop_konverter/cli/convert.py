from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from prop_konverter.config import load_settings
from prop_konverter.core.actions import fix_document
from prop_konverter.core.converter import convert as convert_text
from prop_konverter.core.languages import detect_language_from_path

console = Console()


def convert(
    path: Annotated[Path | None, typer.Argument(help="Vue component to convert.")] = None,
    code: Annotated[str | None, typer.Option(help="Snippet holding a defineProps() call to convert instead.")] = None,
    write: Annotated[bool, typer.Option("--write", "-w", help="Rewrite the file in place.")] = False,
) -> None:
    """Convert object-style defineProps() to the typed, destructured form."""
    settings = load_settings()

    if code is not None:
        console.print(convert_text(code, settings), markup=False, highlight=False, soft_wrap=True)
        return

    if path is None:
        console.print("[red]Provide a file path or --code.[/red]")
        raise typer.Exit(1)

    try:
        language = detect_language_from_path(path)
        original = path.read_text(encoding="utf-8")
    except (OSError, ValueError) as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(1) from exc

    fixed = fix_document(original, language, settings)
    if not write:
        console.print(fixed, markup=False, highlight=False, soft_wrap=True)
        return

    if fixed == original:
        console.print(f"[yellow]No object-style defineProps() in[/yellow] {path}")
        return
    path.write_text(fixed, encoding="utf-8")
    console.print(f"[green]Converted[/green] {path}")
