"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar la lógica del comando con detalles de presentación.
- stdout se escribe tal cual; solo los errores pasan por Rich.
"""

from __future__ import annotations

import typer
from rich.console import Console
from rich.markup import escape


def print_output(text: str) -> None:
    """Escribe la salida de `cat` sin añadir formato ni salto de línea.

    `color=True`: Click no debe quitar las secuencias ANSI cuando stdout no es TTY.
    """

    typer.echo(text, nl=False, color=True)


def print_error(console: Console, message: str) -> None:
    """Imprime `Error: <message>` en la consola de errores."""

    text = escape(message.rstrip("\n"))
    console.print(f"[bold red]Error:[/bold red] {text}", highlight=False, soft_wrap=True)
