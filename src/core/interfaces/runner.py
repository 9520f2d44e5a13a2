"""Contrato para ejecutar programas externos.

Por qué Protocol:
- Contrato estructural (duck typing) sin herencia rígida.
- El handler se puede probar con un stub sin lanzar procesos reales.
"""

from __future__ import annotations

from typing import Protocol, Sequence, runtime_checkable

from core.domain.models import Execution, ExecutionError


@runtime_checkable
class CommandRunner(Protocol):
    """Contrato mínimo para lanzar un programa del sistema.

    Reglas de diseño:
    - `exec` es síncrono y bloqueante: una sola invocación, sin reintentos.
    - Nunca lanza por fallos del SO o del programa; devuelve un `ExecutionError`.
    """

    def exec(self, program: str, arguments: Sequence[str]) -> Execution | ExecutionError:
        """Ejecuta `program` con `arguments` y devuelve el resultado normalizado."""

        ...
