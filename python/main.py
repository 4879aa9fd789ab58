#!/usr/bin/env python3
"""Ice Runner puzzle solver.

Usage::

    python python/main.py boards/zigzag.txt     # solve the board in the file
    ICERUNNER_LOG_LEVEL=DEBUG icerunner boards/wall-column.txt
"""

import logging
import os
import sys
from pathlib import Path

import typer

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

LOG_LEVEL_ENV = "ICERUNNER_LOG_LEVEL"
DEFAULT_LOG_LEVEL = logging.WARNING


# -- helpers ------------------------------------------------------------------


def _log_level() -> int:
    raw = os.environ.get(LOG_LEVEL_ENV, "").strip().upper()
    level = logging.getLevelName(raw) if raw else DEFAULT_LOG_LEVEL
    return level if isinstance(level, int) else DEFAULT_LOG_LEVEL


def _configure_logging() -> None:
    logging.basicConfig(
        level=_log_level(),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    path: Path = typer.Argument(..., help="Board file: 5 lines of 5 characters from '.*SE'."),
) -> None:
    """Solve an Ice Runner board."""
    from icerunner.frontend.cli.app import run

    _configure_logging()
    code = run(path)
    if code:
        raise typer.Exit(code=code)


if __name__ == "__main__":
    app()
