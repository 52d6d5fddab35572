"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica del comando con detalles visuales.
- Mantiene el pipeline libre de prints.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.models import IpuzDocument


def configure_logging(console: Console, *, verbose: bool) -> None:
    """Instala un `RichHandler` en el logger raíz (stderr)."""

    handler = RichHandler(console=console, show_path=False, markup=False)
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[handler],
        force=True,
    )
    # httpx/httpcore loguean cada request en INFO/DEBUG; con el nuestro basta.
    for noisy in ("httpx", "httpcore"):
        logging.getLogger(noisy).setLevel(logging.WARNING)


def build_summary_panel(document: IpuzDocument) -> Panel:
    """Panel con los metadatos del puzzle convertido."""

    table = Table.grid(padding=(0, 2))
    table.add_column(style="cyan", no_wrap=True)
    table.add_column(style="white")

    table.add_row("Author", document.author or "-")
    table.add_row("Editor", document.editor or "-")
    table.add_row("Date", document.date or "-")
    table.add_row("Size", f"{document.dimensions.width}x{document.dimensions.height}")
    table.add_row("Clues", f"{len(document.clues.across)} across / {len(document.clues.down)} down")

    return Panel(table, title=Text(document.title, style="bold cyan"), border_style="cyan", expand=False)
