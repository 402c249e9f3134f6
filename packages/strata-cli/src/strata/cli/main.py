import logging

import typer

from strata.common import bus, strata_catalog as catalog
from .rendering import CliRenderer

# Import commands
from .commands.names import (
    split_command,
    join_command,
    data_command,
    hash_command,
    compare_command,
)

app = typer.Typer(
    name="strata",
    help=catalog.get("cli.app.description"),
    no_args_is_help=True,
)


@app.callback()
def main(
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help=catalog.get("cli.option.verbose.help")
    ),
):
    # The CLI is the composition root. It decides *which* renderer to use.
    cli_renderer = CliRenderer(verbose=verbose)
    bus.set_renderer(cli_renderer)
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


# Register commands
app.command(name="split", help=catalog.get("cli.command.split.help"))(split_command)
app.command(name="join", help=catalog.get("cli.command.join.help"))(join_command)
app.command(name="data", help=catalog.get("cli.command.data.help"))(data_command)
app.command(name="hash", help=catalog.get("cli.command.hash.help"))(hash_command)
app.command(name="compare", help=catalog.get("cli.command.compare.help"))(
    compare_command
)


if __name__ == "__main__":
    app()
