"""CLI principal (Typer).

Por qué Typer sin opciones declaradas:
- `cli.args.parse` es el único parser; Click solo recoge los tokens crudos.
- Este módulo es el único que termina el proceso (`typer.Exit`).
"""

from __future__ import annotations

import logging

import click
import typer
from rich.console import Console
from typer.core import TyperCommand

from adapters.process_runner import SubprocessRunner
from cli import exit_codes
from cli.args import parse
from cli.logging_setup import configure_logging
from cli.ui_components import print_error, print_output
from core.config import AppSettings
from core.domain.models import ExecutionError, ParseError, ParseErrorKind, filepaths
from core.services.handler import concatenate, render

PROG_NAME = "rcat"

logger = logging.getLogger(__name__)

app = typer.Typer(add_completion=False, help="A simple cat program.")

_err_console = Console(stderr=True, emoji=False, highlight=False)


class RawArgsCommand(TyperCommand):
    """Comando que no pasa los tokens por el parser de Click.

    `cli.args.parse` recibe `--`, `-h` y cualquier otra opción tal cual llegaron.
    """

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        ctx.args = list(args)
        return ctx.args


@app.command(cls=RawArgsCommand, add_help_option=False)
def cat(ctx: typer.Context) -> None:
    """Concatena ficheros y los imprime en la salida estándar."""

    settings = AppSettings()
    configure_logging(settings.log_level, console=_err_console)

    parsed = parse([PROG_NAME, *ctx.args])
    if isinstance(parsed, ParseError):
        logger.debug("Argument parsing stopped: %s", parsed.kind.value)
        if parsed.kind is ParseErrorKind.HELP:
            print_output(parsed.message)
            raise typer.Exit(code=exit_codes.SUCCESS)
        print_error(_err_console, parsed.message)
        raise typer.Exit(code=exit_codes.FAILURE)

    result = concatenate(filepaths(parsed), runner=SubprocessRunner(encoding=settings.encoding))
    if isinstance(result, ExecutionError):
        print_error(_err_console, render(result))
        raise typer.Exit(code=exit_codes.FAILURE)

    print_output(render(result))


def run() -> None:
    app(prog_name=PROG_NAME)


if __name__ == "__main__":
    run()
