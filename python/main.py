#!/usr/bin/env python3
"""Mortal Coil puzzle.

Usage::

    python main.py play                 # Rich terminal, level picker
    python main.py play -l 3            # jump straight into level 3
    python main.py serve --port 3000    # JSON API + live event stream
    python main.py levels               # list known levels
"""

import logging
import os
import sys
from pathlib import Path
from typing import Optional

import typer

ROOT = Path(__file__).resolve().parent  # python/
PROJECT_ROOT = ROOT.parent
DATA_DIR = PROJECT_ROOT / "data"
DEFAULT_LEVELS = DATA_DIR / "mortal-coil-levels.json"

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

logger = logging.getLogger("mortal_coil")


# -- helpers ------------------------------------------------------------------


def configure_logging(level: str = "INFO") -> None:
    """Configure application-wide logging with a standard format."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def _default_port() -> int:
    raw = os.environ.get("PORT", "3000")
    try:
        return int(raw)
    except ValueError:
        return 3000


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False, help="Mortal Coil puzzle.")

LevelsOption = typer.Option(
    DEFAULT_LEVELS, "--levels",
    exists=True, dir_okay=False,
    help="JSON level file.",
)
LogLevelOption = typer.Option("INFO", "--log-level", help="Logging level.")


@app.command()
def play(
    levels: Path = LevelsOption,
    level: Optional[int] = typer.Option(
        None, "-l", "--level",
        help="Level to open directly. Omit for the level picker.",
    ),
    log_level: str = typer.Option("WARNING", "--log-level", help="Logging level."),
) -> None:
    """Play in the terminal."""
    configure_logging(log_level)
    from frontend.cli.rich.app import run

    run(levels_path=levels, level_id=level)


@app.command()
def serve(
    levels: Path = LevelsOption,
    host: str = typer.Option("127.0.0.1", "--host", help="Interface to bind."),
    port: Optional[int] = typer.Option(
        None, "-p", "--port",
        help="Port to listen on (default: $PORT or 3000).",
    ),
    level: Optional[int] = typer.Option(
        None, "-l", "--level",
        help="Level loaded at startup (default: first level in the file).",
    ),
    log_level: str = LogLevelOption,
) -> None:
    """Run the JSON API server."""
    configure_logging(log_level)
    from backend.engine.gameplay import GamePlay
    from backend.models.level import LevelCatalog
    from frontend.web.app import create_app

    catalog = LevelCatalog.from_file(levels)
    ids = catalog.ids()
    if not ids:
        raise typer.BadParameter(f"{levels} contains no levels", param_hint="--levels")
    initial = ids[0] if level is None else level
    if initial not in catalog:
        raise typer.BadParameter(f"level {initial} not found", param_hint="--level")

    engine = GamePlay(catalog)
    engine.load_level(initial)
    web = create_app(engine)

    port = _default_port() if port is None else port
    logger.info("Mortal Coil server running on http://%s:%d", host, port)
    logger.info("  GET  /api/state        - current game state")
    logger.info("  GET  /api/levels       - list of all levels")
    logger.info("  POST /api/level/<id>   - load a level")
    logger.info("  POST /api/start        - start at {x, y}")
    logger.info("  POST /api/move         - move {direction: up|down|left|right}")
    logger.info("  POST /api/reset        - reset current level")
    logger.info("  GET  /api/events       - live state stream (SSE)")
    web.run(host=host, port=port, threaded=True, use_reloader=False)


@app.command("levels")
def list_levels(levels: Path = LevelsOption) -> None:
    """List the levels in the level file."""
    from backend.models.level import LevelCatalog

    catalog = LevelCatalog.from_file(levels)
    print("\n  === LEVELS ===")
    if not len(catalog):
        print("  No levels.\n")
        return
    for entry in catalog.list_levels():
        print(f"  {entry['id']:>4}.  {entry['width']:>3} × {entry['height']:<3}")
    print()


if __name__ == "__main__":
    app()
