"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Valores inmutables (`frozen=True`) con validación en el borde.
- Las variantes de error son un `kind` + `message`, sin jerarquía de clases.

Nota:
- Estos modelos describen *qué* produce cada etapa, no *cómo* se obtiene.
"""

from __future__ import annotations

from enum import Enum
from typing import Iterable

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class ParseErrorKind(str, Enum):
    """Por qué la línea de comandos no produjo una `Configuration`."""

    HELP = "help"
    NO_ARGUMENTS = "no_arguments"
    INVALID_OPTIONS = "invalid_options"


class ExecutionErrorKind(str, Enum):
    """Por qué la ejecución del programa externo no produjo una `Execution`."""

    PROGRAM_NOT_FOUND = "program_not_found"
    FILE_NOT_FOUND = "file_not_found"
    PERMISSION_DENIED = "permission_denied"
    DECODING = "decoding"
    OTHER = "other"


class Configuration(BaseModel):
    """Resultado validado del parseo de argumentos.

    Por qué una tupla:
    - Conserva el orden de los argumentos y no se puede mutar tras el parseo.
    """

    model_config = ConfigDict(frozen=True)

    filepaths: tuple[str, ...] = Field(
        default_factory=tuple,
        description="Rutas a concatenar, en el orden en que se recibieron.",
    )


class ParseError(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: ParseErrorKind
    message: str = Field(..., description="Texto listo para mostrar al usuario.")


class Execution(BaseModel):
    """Salida estándar capturada de un proceso que terminó con código 0."""

    model_config = ConfigDict(frozen=True)

    stdout: str = Field(default="", description="Texto decodificado de stdout.")


class ExecutionError(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: ExecutionErrorKind
    message: str = Field(..., description="Texto listo para mostrar al usuario.")


def make_config(filepaths: Iterable[str]) -> Configuration:
    return Configuration(filepaths=tuple(filepaths))


def filepaths(config: Configuration) -> list[str]:
    return list(config.filepaths)
