import logging
from typing import Annotated

import typer
from rich.logging import RichHandler

from prop_konverter.cli.convert import convert
from prop_konverter.cli.scan import scan
from prop_konverter.cli.serve import serve_app
from prop_konverter.cli.watch import watch

app = typer.Typer(
    name="prop-konverter",
    help="Prop Konverter CLI — rewrite object-style defineProps() into typed declarations.",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)


@app.callback()
def _configure(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log engine decisions.")] = False,
) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(show_path=False)],
    )


app.command("convert")(convert)
app.command("scan")(scan)
app.command("watch")(watch)
app.add_typer(serve_app, name="serve")


def main() -> None:
    app()
