"""Ensamblado del documento ipuz a partir de la respuesta del proveedor."""

from __future__ import annotations

from core.domain.errors import MalformedPuzzleError
from core.domain.models import IpuzDocument, PuzzleBody, PuzzleResponse
from core.services.clue_transformer import transform_clues
from core.services.grid_transformer import transform_grid

AUTHOR_SEPARATOR = " & "


def single_body(response: PuzzleResponse) -> PuzzleBody:
    """El único elemento de `body`; cualquier otro conteo es un contrato roto."""

    if len(response.body) != 1:
        raise MalformedPuzzleError(
            f"Expected exactly one body element, got {len(response.body)}"
        )
    return response.body[0]


def assemble_document(response: PuzzleResponse, *, title: str) -> IpuzDocument:
    """Convierte grid + pistas y copia los metadatos tal cual."""

    body = single_body(response)
    puzzle, solution = transform_grid(body.cells, body.dimensions)
    clues = transform_clues(body.clues)

    url = response.related_content.url if response.related_content else None
    author = AUTHOR_SEPARATOR.join(response.constructors) if response.constructors else None

    return IpuzDocument(
        dimensions=body.dimensions,
        clues=clues,
        puzzle=puzzle,
        solution=solution,
        title=title,
        copyright=response.copyright,
        url=url,
        editor=response.editor,
        author=author,
        date=response.publication_date,
    )
