"""Mensajes predefinidos para la salida (texto visible en inglés)."""

from __future__ import annotations

from typing import Iterable

NO_ARGS_ERR = "Not enough arguments!"

USAGE = """USAGE: rcat [OPTIONS] [ARGUMENTS]

  A simple cat program.

EXAMPLES:
  rcat --help
  rcat /path/to/file1 /path/to/file2 ...

OPTIONS:
  -h, --help      Display this help.

ARGUMENTS:
  /path/to/file1  A path to a file.
  /path/to/file2  A path to another file.
  ...             Ditto.

"""


def invalid_opts_err(opts: Iterable[str]) -> str:
    """Mensaje para opciones no reconocidas, p.ej. `-e, -j`."""

    return "Unrecognized option(s): " + ", ".join(opts) + "\nSee rcat --help"
