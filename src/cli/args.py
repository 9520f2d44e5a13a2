"""Parseo de argumentos de línea de comandos.

Por qué un parser propio:
- La CLI solo entiende rutas y `-h/--help`; cualquier otro `-x` es un error.
- El orden de las comprobaciones es parte del contrato (ver `parse`).
"""

from __future__ import annotations

from typing import Sequence

from cli.output import NO_ARGS_ERR, USAGE, invalid_opts_err
from core.domain.models import Configuration, ParseError, ParseErrorKind, make_config

HELP_FLAGS = ("-h", "--help")


def contains_help(args: Sequence[str]) -> bool:
    return any(arg in HELP_FLAGS for arg in args)


def invalid_options(args: Sequence[str]) -> list[str]:
    """Tokens que empiezan por `-` y no son `-h`/`--help`, en su orden original."""

    return [arg for arg in args if arg.startswith("-") and arg not in HELP_FLAGS]


def parse(args: Sequence[str]) -> Configuration | ParseError:
    """Parsea la lista completa de argumentos (`args[0]` es el nombre del programa).

    Orden:
    1) menos de 2 elementos -> NO_ARGUMENTS
    2) `-h`/`--help` presente -> HELP (gana sobre opciones inválidas)
    3) otras opciones con `-` -> INVALID_OPTIONS
    4) el resto son rutas
    """

    if len(args) < 2:
        return ParseError(kind=ParseErrorKind.NO_ARGUMENTS, message=NO_ARGS_ERR)

    if contains_help(args):
        return ParseError(kind=ParseErrorKind.HELP, message=USAGE)

    invalid = invalid_options(args)
    if invalid:
        return ParseError(kind=ParseErrorKind.INVALID_OPTIONS, message=invalid_opts_err(invalid))

    return make_config(args[1:])
