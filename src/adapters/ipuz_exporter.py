"""Exportación ipuz del documento.

Por qué separado del upload:
- El fichero en disco es el artefacto principal; la subida reutiliza
  exactamente el mismo texto serializado.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from core.domain.models import IpuzDocument

logger = logging.getLogger(__name__)

IPUZ_SUFFIX = ".ipuz"


def serialize_ipuz(document: IpuzDocument) -> str:
    """JSON con indentación de 2 espacios, en el orden de claves de ipuz."""

    return json.dumps(document.to_ipuz(), ensure_ascii=False, indent=2)


def ipuz_path(*, output_dir: Path, puzzle_date: str) -> Path:
    return output_dir / f"{puzzle_date}{IPUZ_SUFFIX}"


def export_ipuz(*, contents: str, output_dir: Path, puzzle_date: str) -> Path:
    """Escribe `<output_dir>/<fecha>.ipuz` en UTF-8, sobrescribiendo si existe."""

    output_dir.mkdir(parents=True, exist_ok=True)
    output_path = ipuz_path(output_dir=output_dir, puzzle_date=puzzle_date)
    if output_path.exists():
        logger.debug("Overwriting %s", output_path)
    output_path.write_text(contents, encoding="utf-8")
    return output_path
