"""Validación del argumento de fecha.

La fecha identifica a la vez el recurso remoto y el nombre del fichero
de salida, así que solo se acepta el formato exacto `YYYY-MM-DD`.
"""

from __future__ import annotations

import re

PUZZLE_DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def is_valid_puzzle_date(value: str) -> bool:
    # fullmatch: `$` también aceptaría un salto de línea final.
    return PUZZLE_DATE_PATTERN.fullmatch(value) is not None
