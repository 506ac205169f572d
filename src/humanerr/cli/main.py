from __future__ import annotations

import os
from typing import Annotated

import typer

from humanerr.common import create_logger, setup_cli_logging
from humanerr.settings import Settings

from .commands import format as format_commands
from .commands import messages as messages_commands

logger = create_logger("cli")

app = typer.Typer(help="humanerr command-line interface.")
app.command("format")(format_commands.format_failures)
app.add_typer(messages_commands.app, name="messages")


@app.callback(invoke_without_command=True)
def _root_callback(
    ctx: typer.Context,
    no_color: Annotated[bool, typer.Option("--no-color", help="Disable colored output")] = False,
) -> None:
    # Respect NO_COLOR environment variable and --no-color flag
    if no_color or os.getenv("NO_COLOR"):
        ctx.color = False

    ctx.obj = Settings()

    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


def _setup_logging(settings: Settings) -> None:
    if settings.logging.enabled:
        setup_cli_logging(app_info=settings.app, config=settings.logging)
        logger.debug("CLI logging initialized", config=settings.logging.model_dump())


def main() -> None:
    """Entrypoint for the humanerr CLI."""
    _setup_logging(Settings())
    app()
