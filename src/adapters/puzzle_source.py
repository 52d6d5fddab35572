"""Fuente del puzzle: API JSON del crucigrama diario.

La API permite lecturas sin sesión si se envía `X-Games-Auth-Bypass: true`.
"""

from __future__ import annotations

import logging

import httpx
from pydantic import ValidationError

from core.config import AppSettings
from core.domain.errors import MalformedPuzzleError, UpstreamHTTPError
from core.domain.models import PuzzleResponse
from core.services.document_assembler import single_body

logger = logging.getLogger(__name__)

AUTH_BYPASS_HEADERS = {"X-Games-Auth-Bypass": "true"}


def build_puzzle_url(puzzle_date: str, settings: AppSettings) -> str:
    return settings.puzzle_url_template.format(date=puzzle_date)


def fetch_puzzle(
    puzzle_date: str,
    *,
    client: httpx.Client,
    settings: AppSettings | None = None,
) -> PuzzleResponse:
    """Descarga y valida el puzzle de `puzzle_date`.

    Raises:
        UpstreamHTTPError: status distinto de 200.
        MalformedPuzzleError: JSON inválido, forma inesperada o `body` con
            un número de elementos distinto de uno.
    """

    settings = settings or AppSettings()
    url = build_puzzle_url(puzzle_date, settings)

    logger.debug("GET %s", url)
    response = client.get(url, headers=AUTH_BYPASS_HEADERS)
    logger.debug("Puzzle provider answered HTTP %s", response.status_code)
    if response.status_code != 200:
        raise UpstreamHTTPError(response.status_code, response.reason_phrase)

    try:
        puzzle = PuzzleResponse.model_validate(response.json())
    except ValueError as exc:
        # ValidationError es subclase de ValueError, igual que JSONDecodeError.
        detail = exc.errors()[0]["msg"] if isinstance(exc, ValidationError) else str(exc)
        raise MalformedPuzzleError(f"Unexpected puzzle response: {detail}") from exc

    single_body(puzzle)
    return puzzle
