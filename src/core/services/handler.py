"""Orquestación de la concatenación.

Por qué un servicio:
- Es el único lugar que sabe que la concatenación se delega en `cat`.
- La CLI pide un resultado y decide cómo imprimirlo y con qué código salir.
"""

from __future__ import annotations

from typing import Sequence

from adapters.process_runner import SubprocessRunner
from core.domain.models import Execution, ExecutionError
from core.interfaces.runner import CommandRunner

CAT_PROGRAM = "cat"


def concatenate(
    filepaths: Sequence[str],
    *,
    runner: CommandRunner | None = None,
) -> Execution | ExecutionError:
    """Pide al SO que haga `cat` de las rutas dadas."""

    runner = runner or SubprocessRunner()
    return runner.exec(CAT_PROGRAM, list(filepaths))


def render(result: Execution | ExecutionError) -> str:
    """Reduce un resultado al texto que ve el usuario.

    Cualquier tipo de error se aplana a su mensaje.
    """

    if isinstance(result, ExecutionError):
        return result.message
    return result.stdout


def run(filepaths: Sequence[str], *, runner: CommandRunner | None = None) -> str:
    """Concatena `filepaths` y devuelve la salida, o el mensaje de error."""

    return render(concatenate(filepaths, runner=runner))
