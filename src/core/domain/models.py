"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Valida la respuesta del proveedor en el borde: si el JSON cambia de forma,
  fallamos con un error claro en lugar de un KeyError a mitad de la conversión.
- Describe el documento ipuz de salida como tipos, no como dicts sueltos.

Nota:
- Los modelos de entrada ignoran claves desconocidas (el proveedor manda mucho más).
- Los de salida se serializan con `to_ipuz()`, que construye el mapping solo
  con las claves presentes; no dependemos de `exclude_none`.
"""

from __future__ import annotations

from typing import Any, Union

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

IPUZ_VERSION = "http://ipuz.org/v2"
IPUZ_KIND = ("http://ipuz.org/crossword#1",)

BLOCK = "#"
EMPTY = "0"


# --- Respuesta del proveedor -------------------------------------------------


class Dimensions(BaseModel):
    model_config = ConfigDict(extra="ignore")

    width: int = Field(..., ge=1, description="Columnas del grid.")
    height: int = Field(..., ge=1, description="Filas del grid.")

    def to_ipuz(self) -> dict[str, int]:
        return {"width": self.width, "height": self.height}


class SourceCell(BaseModel):
    """Una celda del grid plano (row-major) tal como llega del proveedor.

    Una celda sin `answer` es un bloque. `label` marca el inicio de una respuesta.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True, coerce_numbers_to_str=True)

    answer: str | None = Field(default=None, description="Letra(s) de la solución.")
    label: str | None = Field(default=None, description="Número de pista si la celda inicia respuesta.")
    # Valor crudo: "2", True o 1.0 no son tipos válidos y no deben coercionarse.
    cell_type: Any = Field(
        default=None,
        alias="type",
        description="Variante visual: 1 normal, 2 círculo, 3 resaltado.",
    )


class ClueText(BaseModel):
    model_config = ConfigDict(extra="ignore")

    plain: str | None = None


class SourceClue(BaseModel):
    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    label: str = Field(..., description="Número de la pista.")
    direction: str = Field(..., description="'Across' o 'Down'.")
    text: list[ClueText] = Field(default_factory=list)


class PuzzleBody(BaseModel):
    model_config = ConfigDict(extra="ignore")

    dimensions: Dimensions
    cells: list[SourceCell] = Field(default_factory=list)
    clues: list[SourceClue] = Field(default_factory=list)


class RelatedContent(BaseModel):
    model_config = ConfigDict(extra="ignore")

    url: str | None = None


class PuzzleResponse(BaseModel):
    """Respuesta completa de `/svc/crosswords/v6/puzzle/daily/<date>.json`."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    body: list[PuzzleBody] = Field(..., description="Debe contener exactamente un elemento.")
    copyright: str | None = None
    related_content: RelatedContent | None = Field(default=None, alias="relatedContent")
    editor: str | None = None
    constructors: list[str] = Field(default_factory=list)
    publication_date: str | None = Field(default=None, alias="publicationDate")


# --- Documento ipuz ----------------------------------------------------------


class CellStyle(BaseModel):
    shapebg: str | None = None
    highlight: bool | None = None

    def to_ipuz(self) -> dict[str, Any]:
        out: dict[str, Any] = {}
        if self.shapebg is not None:
            out["shapebg"] = self.shapebg
        if self.highlight is not None:
            out["highlight"] = self.highlight
        return out


class StyledCell(BaseModel):
    """Celda con anotación visual (círculo y/o resaltado)."""

    cell: str
    style: CellStyle

    def to_ipuz(self) -> dict[str, Any]:
        return {"cell": self.cell, "style": self.style.to_ipuz()}


PuzzleCell = Union[str, StyledCell]


class IpuzClue(BaseModel):
    number: str
    clue: str

    def to_ipuz(self) -> dict[str, str]:
        return {"number": self.number, "clue": self.clue}


class IpuzClues(BaseModel):
    across: list[IpuzClue] = Field(default_factory=list)
    down: list[IpuzClue] = Field(default_factory=list)

    def to_ipuz(self) -> dict[str, list[dict[str, str]]]:
        return {
            "Across": [c.to_ipuz() for c in self.across],
            "Down": [c.to_ipuz() for c in self.down],
        }


class IpuzDocument(BaseModel):
    """Documento ipuz ensamblado, listo para escribir o subir."""

    dimensions: Dimensions
    clues: IpuzClues
    puzzle: list[list[PuzzleCell]]
    solution: list[list[str]]
    title: str
    copyright: str | None = None
    url: str | None = None
    editor: str | None = None
    author: str | None = None
    date: str | None = None

    def to_ipuz(self) -> dict[str, Any]:
        """Mapping en el orden de claves del formato; omite metadatos ausentes."""

        out: dict[str, Any] = {
            "version": IPUZ_VERSION,
            "kind": list(IPUZ_KIND),
            "dimensions": self.dimensions.to_ipuz(),
            "clues": self.clues.to_ipuz(),
            "puzzle": [
                [cell if isinstance(cell, str) else cell.to_ipuz() for cell in row]
                for row in self.puzzle
            ],
            "solution": [list(row) for row in self.solution],
            "title": self.title,
        }
        for key in ("copyright", "url", "editor", "author", "date"):
            value = getattr(self, key)
            if value is not None:
                out[key] = value
        return out
