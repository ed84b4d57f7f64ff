import logging
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler

from fqn_reconcile.cli.check import check
from fqn_reconcile.cli.fix import fix
from fqn_reconcile.cli.serve import serve_app
from fqn_reconcile.cli.watch import watch

app = typer.Typer(
    name="fqn-reconcile",
    help="fqn-reconcile CLI: keep PHP namespaces and class names in line with their file paths.",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)


@app.callback()
def configure(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging.")] = False,
) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


app.command("check")(check)
app.command("fix")(fix)
app.command("watch")(watch)
app.add_typer(serve_app, name="serve")


def main() -> None:
    app()
