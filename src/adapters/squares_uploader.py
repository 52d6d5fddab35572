"""Subida del `.ipuz` a squares.io.

Replica el formulario multipart que envía la UI web: `data` con las
opciones por defecto, `puz` con el documento y `v` con la versión.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

import httpx

from core.config import AppSettings
from core.domain.errors import UploadError

logger = logging.getLogger(__name__)

# Valor que envía la UI al subir sin tocar opciones.
DEFAULT_UPLOAD_OPTIONS = '{"options":{}}'
UPLOAD_FORMAT_VERSION = "2"


@dataclass(frozen=True)
class UploadResult:
    pid: str
    view_url: str


def upload_ipuz(
    contents: str,
    *,
    client: httpx.Client,
    settings: AppSettings | None = None,
) -> UploadResult:
    """Sube el documento serializado y devuelve el id + URL pública.

    Raises:
        UploadError: status no 2xx, cuerpo no JSON o `pids` vacío.
    """

    settings = settings or AppSettings()

    # `(None, value)`: campo de formulario sin filename, fuerza multipart.
    files = {
        "data": (None, DEFAULT_UPLOAD_OPTIONS),
        "puz": (None, contents),
        "v": (None, UPLOAD_FORMAT_VERSION),
    }
    logger.debug("POST %s (%d bytes)", settings.upload_url, len(contents.encode("utf-8")))
    response = client.post(settings.upload_url, files=files)
    logger.debug("Upload answered HTTP %s", response.status_code)
    if not response.is_success:
        raise UploadError(f"Failed to upload puzzle: {response.reason_phrase}")

    try:
        payload = response.json()
    except ValueError as exc:
        raise UploadError("Upload response was not valid JSON") from exc

    pids = payload.get("pids") if isinstance(payload, dict) else None
    if not isinstance(pids, list) or not pids:
        raise UploadError("Upload response did not contain a puzzle id")

    pid = str(pids[0])
    return UploadResult(pid=pid, view_url=settings.view_url_template.format(pid=pid))
