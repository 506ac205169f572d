from __future__ import annotations

import typer

from .shared import FormatOption, MessagesOption, OutputFormat, format_payload, resolve_messages

app = typer.Typer(help="Inspect message templates.")


@app.callback(invoke_without_command=True)
def _messages_root(ctx: typer.Context) -> None:
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


@app.command("show")
def show(
    ctx: typer.Context,
    format: FormatOption = OutputFormat.YAML,
    messages: MessagesOption = None,
) -> None:
    """Print the effective message table."""
    table = resolve_messages(ctx, messages)
    typer.echo(format_payload(dict(table), format))
