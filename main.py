"""`python -m main <puzzle-date>` desde la raíz, sin instalar el paquete."""

from __future__ import annotations

import sys
from pathlib import Path


def main() -> None:
    sys.path.insert(0, str(Path(__file__).resolve().parent / "src"))

    from cli.main import run  # noqa: PLC0415

    run()


if __name__ == "__main__":
    main()
