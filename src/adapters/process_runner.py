"""Wrapper de `subprocess`.

Por qué un wrapper:
- Traduce fallos del SO y del programa a un `ExecutionError` categorizado.
- Facilita testeo: el handler recibe cualquier `CommandRunner`.
"""

from __future__ import annotations

import logging
import subprocess
from typing import Sequence

from core.domain.models import Execution, ExecutionError, ExecutionErrorKind

logger = logging.getLogger(__name__)


def classify_failure(stderr: str) -> ExecutionError:
    """Clasifica el stderr de un proceso que terminó con código distinto de 0.

    El mensaje es siempre el stderr completo.
    """

    if "No such file" in stderr:
        kind = ExecutionErrorKind.FILE_NOT_FOUND
    # Sin distinguir mayúsculas: GNU `cat` escribe "Permission denied".
    elif "permission denied" in stderr.lower():
        kind = ExecutionErrorKind.PERMISSION_DENIED
    else:
        kind = ExecutionErrorKind.OTHER
    return ExecutionError(kind=kind, message=stderr)


def exec_program(
    program: str,
    arguments: Sequence[str],
    *,
    encoding: str = "utf-8",
) -> Execution | ExecutionError:
    """Ejecuta `program` con `arguments` y espera a que termine.

    Sin reintentos ni timeout. stdout y stderr se capturan completos.
    """

    argv = [program, *arguments]
    logger.debug("Running %s with %d argument(s)", program, len(arguments))

    try:
        completed = subprocess.run(argv, capture_output=True, check=False)
    except FileNotFoundError:
        logger.info("Program %r not found", program)
        return ExecutionError(
            kind=ExecutionErrorKind.PROGRAM_NOT_FOUND,
            message=f"No `{program}` program found on your machine",
        )
    except PermissionError:
        logger.info("Not allowed to execute %r", program)
        return ExecutionError(
            kind=ExecutionErrorKind.PERMISSION_DENIED,
            message=f"No permission to execute `{program}`",
        )
    except OSError as exc:
        logger.info("Could not start %r: %s", program, exc)
        return ExecutionError(kind=ExecutionErrorKind.OTHER, message=str(exc))

    if completed.returncode != 0:
        stderr = completed.stderr.decode(encoding, errors="replace")
        logger.info("%s exited with status %d", program, completed.returncode)
        return classify_failure(stderr)

    try:
        stdout = completed.stdout.decode(encoding)
    except UnicodeDecodeError:
        logger.info("Output of %s is not valid %s", program, encoding)
        return ExecutionError(
            kind=ExecutionErrorKind.DECODING,
            message=f"Output of `{program}` is not valid {encoding} text",
        )
    return Execution(stdout=stdout)


class SubprocessRunner:
    """`CommandRunner` respaldado por `subprocess`."""

    def __init__(self, *, encoding: str = "utf-8") -> None:
        self._encoding = encoding

    def exec(self, program: str, arguments: Sequence[str]) -> Execution | ExecutionError:
        return exec_program(program, arguments, encoding=self._encoding)
