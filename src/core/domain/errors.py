"""Errores del dominio.

Por qué una jerarquía propia:
- Los adaptadores y servicios lanzan errores con significado (contrato roto,
  HTTP fallido) y solo la CLI decide cómo presentarlos y con qué exit code.
- Todos son terminales: ninguno se reintenta ni se degrada a salida parcial.
"""

from __future__ import annotations

import json
from typing import Any


class ImporterError(Exception):
    """Base de todos los errores de la importación."""


class MalformedPuzzleError(ImporterError):
    """La respuesta del proveedor no tiene la forma esperada."""


class UnsupportedCellTypeError(MalformedPuzzleError):
    """Celda no bloque con un `type` desconocido (o ausente)."""

    def __init__(self, cell: dict[str, Any]) -> None:
        self.cell = cell
        super().__init__(f"Unsupported cell type {json.dumps(cell, ensure_ascii=False)}")


class MalformedClueError(MalformedPuzzleError):
    """Pista cuyo `text` no es exactamente un elemento con `plain`."""

    def __init__(self, clue: dict[str, Any]) -> None:
        self.clue = clue
        super().__init__(f"Unknown clue text format {json.dumps(clue, ensure_ascii=False)}")


class UpstreamHTTPError(ImporterError):
    """El proveedor del puzzle respondió con un status distinto de 200."""

    def __init__(self, status_code: int, reason: str) -> None:
        self.status_code = status_code
        self.reason = reason
        super().__init__(f"NYT responded with error code {status_code}: {reason}")


class UploadError(ImporterError):
    """La subida al servicio de hosting falló."""
