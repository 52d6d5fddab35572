"""Agrupa las pistas del proveedor en las secuencias `Across` / `Down` de ipuz."""

from __future__ import annotations

import logging
from typing import Iterable

from core.domain.errors import MalformedClueError
from core.domain.models import IpuzClue, IpuzClues, SourceClue

logger = logging.getLogger(__name__)

ACROSS = "Across"


def clue_plain_text(clue: SourceClue) -> str:
    """Texto plano de una pista; exige exactamente un elemento con `plain`."""

    if len(clue.text) != 1 or not clue.text[0].plain:
        raise MalformedClueError(clue.model_dump(mode="json"))
    return clue.text[0].plain


def transform_clues(clues: Iterable[SourceClue]) -> IpuzClues:
    """Particiona las pistas por dirección conservando el orden de origen.

    Cualquier dirección distinta de "Across" se trata como "Down".
    """

    out = IpuzClues()
    for clue in clues:
        formatted = IpuzClue(number=clue.label, clue=clue_plain_text(clue))
        if clue.direction == ACROSS:
            out.across.append(formatted)
        else:
            if clue.direction != "Down":
                logger.debug("Clue %s has direction %r, treating it as Down", clue.label, clue.direction)
            out.down.append(formatted)

    logger.debug("Transformed %d across / %d down clues", len(out.across), len(out.down))
    return out
