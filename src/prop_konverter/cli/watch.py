import asyncio
import contextlib
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from prop_konverter.config import load_settings
from prop_konverter.core.actions import fix_document
from prop_konverter.core.diagnostics import scan_document
from prop_konverter.watcher.watchfiles_adapter import WatchfilesWatcher

console = Console()


async def handle_changes(paths: set[Path], fix: bool = False) -> None:
    """Rescan changed components, rewriting them when ``fix`` is set."""
    settings = load_settings()
    for path in sorted(paths):
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as exc:
            console.print(f"[yellow]Skipping {path}: {exc}[/yellow]")
            continue

        diagnostics = scan_document(text, "vue", settings)
        if not diagnostics:
            continue
        if not fix:
            console.print(f"{path}: {len(diagnostics)} object-style defineProps() call(s)")
            continue

        fixed = fix_document(text, "vue", settings)
        if fixed != text:
            path.write_text(fixed, encoding="utf-8")
            console.print(f"[green]Converted[/green] {path}")


def watch(
    directory: Annotated[Path, typer.Argument(help="Directory to watch.")] = Path("."),
    fix: Annotated[bool, typer.Option("--fix", help="Rewrite changed components in place.")] = False,
) -> None:
    """Watch a directory and report (or fix) object-style defineProps() on change."""

    async def _on_change(paths: set[Path]) -> None:
        await handle_changes(paths, fix=fix)

    watcher = WatchfilesWatcher(directory, _on_change)

    async def _run() -> None:
        await watcher.start()
        try:
            await watcher.wait()
        finally:
            await watcher.stop()

    console.print(f"[green]Watching[/green] {directory} (Ctrl+C to stop)")
    with contextlib.suppress(KeyboardInterrupt):
        asyncio.run(_run())
