"""Orquestación de la importación de un crucigrama.

Este módulo encadena fetch → conversión → escritura → subida para que la CLI
solo se ocupe de argumentos y de presentar resultados. Los efectos visuales
(mensajes de progreso, paneles) quedan fuera: la CLI los engancha mediante
`PipelineHooks`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable

import httpx

from adapters.ipuz_exporter import export_ipuz, serialize_ipuz
from adapters.puzzle_source import fetch_puzzle
from adapters.squares_uploader import upload_ipuz
from core.config import AppSettings
from core.domain.models import IpuzDocument
from core.services.document_assembler import assemble_document

logger = logging.getLogger(__name__)


@dataclass
class ImportRequest:
    """Parámetros de una ejecución."""

    puzzle_date: str
    output_dir: Path | None = None
    upload: bool | None = None


@dataclass
class PipelineHooks:
    """Callbacks opcionales para la capa de UI."""

    assembled: Callable[[IpuzDocument], None] | None = None
    written: Callable[[Path], None] | None = None
    uploading: Callable[[], None] | None = None


@dataclass
class ImportResult:
    document: IpuzDocument
    path: Path
    pid: str | None = None
    view_url: str | None = None


def run_import(
    request: ImportRequest,
    *,
    client: httpx.Client,
    settings: AppSettings | None = None,
    hooks: PipelineHooks | None = None,
) -> ImportResult:
    """Ejecuta la importación completa para `request.puzzle_date`.

    Cualquier `ImporterError` (o `httpx.HTTPError`) se propaga al llamador;
    si el fallo ocurre en la subida, el `.ipuz` ya está escrito en disco.
    """

    settings = settings or AppSettings()
    hooks = hooks or PipelineHooks()
    output_dir = request.output_dir or settings.output_dir
    upload = settings.upload_enabled if request.upload is None else request.upload

    response = fetch_puzzle(request.puzzle_date, client=client, settings=settings)
    document = assemble_document(response, title=settings.puzzle_title)
    if hooks.assembled:
        hooks.assembled(document)

    contents = serialize_ipuz(document)
    path = export_ipuz(contents=contents, output_dir=output_dir, puzzle_date=request.puzzle_date)
    if hooks.written:
        hooks.written(path)

    result = ImportResult(document=document, path=path)
    if not upload:
        logger.debug("Upload disabled, stopping after %s", path)
        return result

    if hooks.uploading:
        hooks.uploading()
    uploaded = upload_ipuz(contents, client=client, settings=settings)
    result.pid = uploaded.pid
    result.view_url = uploaded.view_url
    return result
