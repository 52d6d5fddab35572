"""Conversión del grid del proveedor a los grids `puzzle` y `solution` de ipuz.

El proveedor entrega las celdas como una lista plana row-major; ipuz espera
dos matrices `height × width`. Ambas se construyen en la misma pasada, así
que un bloque en una siempre es un bloque en la otra.
"""

from __future__ import annotations

import logging
from typing import Sequence

from core.domain.cell_type import CellType
from core.domain.errors import MalformedPuzzleError, UnsupportedCellTypeError
from core.domain.models import (
    BLOCK,
    EMPTY,
    CellStyle,
    Dimensions,
    PuzzleCell,
    SourceCell,
    StyledCell,
)

logger = logging.getLogger(__name__)


def transform_cell(cell: SourceCell) -> tuple[PuzzleCell, str]:
    """Devuelve `(celda_puzzle, celda_solución)` para una celda del proveedor.

    Raises:
        UnsupportedCellTypeError: celda no bloque con `type` fuera de 1/2/3.
    """

    is_block = not cell.answer
    is_answer_start = bool(cell.label)
    is_known_type = CellType.is_supported(cell.cell_type)
    is_circled = is_known_type and cell.cell_type == CellType.CIRCLE
    is_highlighted = is_known_type and cell.cell_type == CellType.HIGHLIGHT

    if not is_block and not is_known_type:
        raise UnsupportedCellTypeError(cell.model_dump(by_alias=True, exclude_none=True))

    if is_block:
        symbol = BLOCK
    elif is_answer_start:
        symbol = str(cell.label)
    else:
        symbol = EMPTY

    puzzle_cell: PuzzleCell = symbol
    if is_circled or is_highlighted:
        puzzle_cell = StyledCell(
            cell=symbol,
            style=CellStyle(
                shapebg="circle" if is_circled else None,
                highlight=True if is_highlighted else None,
            ),
        )

    solution_cell = BLOCK if is_block else str(cell.answer)
    return puzzle_cell, solution_cell


def transform_grid(
    cells: Sequence[SourceCell],
    dimensions: Dimensions,
) -> tuple[list[list[PuzzleCell]], list[list[str]]]:
    """Recorre el grid en orden row-major y produce `(puzzle, solution)`."""

    width, height = dimensions.width, dimensions.height
    expected = width * height
    if len(cells) < expected:
        raise MalformedPuzzleError(
            f"Expected {expected} cells for a {width}x{height} grid, got {len(cells)}"
        )

    puzzle: list[list[PuzzleCell]] = []
    solution: list[list[str]] = []
    for row in range(height):
        puzzle_row: list[PuzzleCell] = []
        solution_row: list[str] = []
        for column in range(width):
            puzzle_cell, solution_cell = transform_cell(cells[row * width + column])
            puzzle_row.append(puzzle_cell)
            solution_row.append(solution_cell)
        puzzle.append(puzzle_row)
        solution.append(solution_row)

    logger.debug("Transformed %dx%d grid", width, height)
    return puzzle, solution
