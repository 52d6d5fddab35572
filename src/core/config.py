"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Permite que adaptadores (fetch/upload) lean endpoints y timeouts de forma consistente.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

APP_DIR_NAME = "xword-importer"


def user_env_file() -> Path:
    """`.env` global: `%APPDATA%`, `~/Library/Application Support` o XDG."""

    if sys.platform.startswith("win"):
        root = Path(os.environ.get("APPDATA", str(Path.home())))
    elif sys.platform == "darwin":
        root = Path.home() / "Library" / "Application Support"
    else:
        root = Path(os.environ.get("XDG_CONFIG_HOME") or Path.home() / ".config")
    return root / APP_DIR_NAME / ".env"


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Por qué pydantic-settings:
    - Los endpoints y constantes del esquema dejan de ser literales sueltos.
    - Un único contrato de configuración para CLI/adapters.
    """

    model_config = SettingsConfigDict(
        env_prefix="XWORD_IMPORTER_",
        extra="ignore",
        case_sensitive=False,
        env_file=(".env", str(user_env_file())),
        env_file_encoding="utf-8",
    )

    http_timeout_seconds: float = Field(
        default=30.0,
        gt=0,
        description="Timeout por request (segundos).",
    )
    user_agent: str = Field(
        default="xword-importer/0.1",
        min_length=1,
        description="User-Agent para ambas peticiones HTTP.",
    )

    puzzle_url_template: str = Field(
        default="https://www.nytimes.com/svc/crosswords/v6/puzzle/daily/{date}.json",
        min_length=8,
        description="Endpoint del crucigrama diario; `{date}` se sustituye por YYYY-MM-DD.",
    )
    upload_url: str = Field(
        default="https://squares.io/api/1/puzzle",
        min_length=8,
        description="Endpoint de subida del servicio de hosting.",
    )
    view_url_template: str = Field(
        default="https://squares.io/solve/{pid}",
        min_length=8,
        description="URL pública del puzzle subido; `{pid}` es el id devuelto.",
    )

    output_dir: Path = Field(
        default=Path("puzzles"),
        description="Directorio donde se escriben los `.ipuz`.",
    )
    puzzle_title: str = Field(
        default="NYT Crossword",
        min_length=1,
        description="Título fijo del documento ipuz.",
    )
    upload_enabled: bool = Field(
        default=True,
        description="Subir el puzzle tras escribirlo en disco.",
    )
