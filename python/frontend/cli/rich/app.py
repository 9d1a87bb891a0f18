"""Rich terminal frontend — styled board, level picker, and play loop.

Uses the ``rich`` library for styled output.  The player first picks a
level, then walks a cursor to the start cell, then slides around with the
arrow keys / WASD until the level is won or stuck.
"""

from __future__ import annotations

from pathlib import Path

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from backend.engine.gameplay import GamePlay
from backend.models.board import Direction
from backend.models.level import LevelCatalog
from frontend.cli.input_handler import get_key

console = Console()

_DIRECTIONS = {
    "up": Direction.UP,
    "down": Direction.DOWN,
    "left": Direction.LEFT,
    "right": Direction.RIGHT,
}


# -- board rendering ----------------------------------------------------------


def _render_board(game: GamePlay, cursor: tuple[int, int] | None = None) -> Table:
    """Return a Rich Table representing the puzzle grid."""
    state = game.state
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=False,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 0),
    )
    for _ in range(state.width):
        table.add_column(width=2, justify="center")

    for y, row in enumerate(state.board.cells):
        cells: list[str] = []
        for x, cell in enumerate(row):
            if (x, y) == state.position and state.started:
                cells.append("[bold yellow]●[/bold yellow]")
            elif cursor == (x, y):
                cells.append("[bold cyan]□[/bold cyan]")
            elif cell.blocked:
                cells.append("[grey35]██[/grey35]")
            elif cell.visited:
                cells.append("[green]░░[/green]")
            else:
                cells.append("[dim]·[/dim]")
        table.add_row(*cells)

    return table


def _progress(game: GamePlay) -> Text:
    state = game.state
    stats = Text()
    stats.append("  Visited: ", style="dim")
    stats.append(f"{state.visited_count}/{state.total_cells}", style="bold yellow")
    return stats


# -- screens ------------------------------------------------------------------


def _draw_menu(catalog: LevelCatalog, index: int) -> None:
    """Draw the level picker."""
    console.clear()

    table = Table(box=rich.box.ROUNDED, border_style="dim", show_lines=False)
    table.add_column("Level", justify="right", style="cyan")
    table.add_column("Size", justify="center")

    ids = catalog.ids()
    lo = max(0, min(index - 5, len(ids) - 11))
    for i in range(lo, min(len(ids), lo + 11)):
        level = catalog.get(ids[i])
        size = f"{level.width}×{level.height}"
        if i == index:
            table.add_row(f"[bold green]▶ {level.id}[/bold green]",
                          f"[bold green]{size}[/bold green]")
        else:
            table.add_row(str(level.id), size, style="dim")

    opts = Text()
    opts.append("  ↑↓", style="bold cyan")
    opts.append("  choose   ", style="dim")
    opts.append("Enter", style="bold cyan")
    opts.append("  play   ", style="dim")
    opts.append("Q", style="dim bold")
    opts.append("  Quit", style="dim")

    panel = Panel(
        Group(Align.center(table), Text(""), Align.center(opts)),
        title="[bold]M O R T A L   C O I L[/bold]",
        border_style="bright_blue",
        padding=(1, 4),
    )

    console.print()
    console.print(Align.center(panel))


def _draw_game(game: GamePlay, cursor: tuple[int, int] | None, status: str = "") -> None:
    """Draw the board; *cursor* is shown while choosing the start cell."""
    console.clear()

    state = game.state
    controls = Text()
    controls.append("  ↑↓←→", style="bold cyan")
    controls.append(" / ", style="dim")
    controls.append("WASD", style="bold cyan")
    if cursor is not None:
        controls.append("  pick start   ", style="dim")
        controls.append("Enter", style="bold cyan")
        controls.append("  start   ", style="dim")
    else:
        controls.append("  slide   ", style="dim")
        controls.append("R", style="bold cyan")
        controls.append("  reset   ", style="dim")
    controls.append("Q", style="bold cyan")
    controls.append("  back", style="dim")

    panel = Panel(
        Align.center(_render_board(game, cursor)),
        title=(
            f"[bold cyan]Level {state.level_id}  "
            f"{state.width}×{state.height}[/bold cyan]"
        ),
        border_style="bright_blue",
        padding=(1, 2),
    )

    console.print()
    console.print(Align.center(panel))
    console.print(Align.center(_progress(game)))
    if status:
        console.print(Align.center(Text.from_markup(f"  {status}")))
    console.print(Align.center(controls))


def _draw_finished(game: GamePlay) -> None:
    console.clear()

    state = game.state
    outcome = Text()
    if state.won:
        outcome.append("\n  ★ ", style="bold yellow")
        outcome.append("SOLVED!", style="bold green")
        outcome.append("  Every cell visited.  ", style="green")
        outcome.append("★\n", style="bold yellow")
        border = "bold green"
    else:
        outcome.append("\n  STUCK", style="bold red")
        outcome.append("  No way left to slide.\n", style="red")
        border = "bold red"

    panel = Panel(
        Group(
            Align.center(_render_board(game)),
            Align.center(outcome),
            Align.center(_progress(game)),
        ),
        title=f"[bold]Level {state.level_id}[/bold]",
        border_style=border,
        padding=(1, 2),
    )

    console.print()
    console.print(Align.center(panel))
    console.print(
        Align.center(Text("\n  Press R to retry, Q to go back.\n", style="dim"))
    )


# -- game loops ---------------------------------------------------------------


def _choose_start(game: GamePlay) -> bool:
    """Move a cursor to an open cell and start there.

    Returns False if the player backed out.
    """
    state = game.state
    cursor = (0, 0)
    status = ""

    while not state.started:
        _draw_game(game, cursor, status)
        status = ""
        key = get_key()

        if key in _DIRECTIONS:
            dx, dy = _DIRECTIONS[key].vector
            x, y = cursor[0] + dx, cursor[1] + dy
            if state.board.in_bounds(x, y):
                cursor = (x, y)
        elif key == "enter":
            result = game.start_game(*cursor)
            if not result.success:
                status = f"[red]{result.message}[/red]"
        elif key == "quit":
            return False

    return True


def _play_level(game: GamePlay, level_id: int) -> None:
    game.load_level(level_id)

    while True:
        if not _choose_start(game):
            return

        status = ""
        while not game.state.finished:
            _draw_game(game, None, status)
            status = ""
            key = get_key()

            if key in _DIRECTIONS:
                result = game.move(_DIRECTIONS[key])
                if not result.success:
                    status = f"[yellow]{result.message}[/yellow]"
            elif key == "restart":
                game.reset_level()
                break
            elif key == "quit":
                return

        if not game.state.finished:
            continue

        _draw_finished(game)
        while True:
            key = get_key()
            if key == "restart":
                game.reset_level()
                break
            if key == "quit":
                return


# -- menu loop ----------------------------------------------------------------


def _menu_loop(game: GamePlay) -> None:
    catalog = game.catalog
    ids = catalog.ids()
    if not ids:
        console.print("[red]No levels available.[/red]")
        return
    index = 0

    while True:
        _draw_menu(catalog, index)
        key = get_key()

        if key == "quit":
            console.clear()
            console.print(
                Align.center(Text("\nGoodbye!\n", style="bold cyan"))
            )
            return
        elif key in ("up", "left", "prev"):
            index = max(0, index - 1)
        elif key in ("down", "right", "next"):
            index = min(len(ids) - 1, index + 1)
        elif key == "enter":
            _play_level(game, ids[index])


# -- public entry point -------------------------------------------------------


def run(levels_path: Path, level_id: int | None = None) -> None:
    """Launch the Rich CLI, optionally jumping straight into *level_id*."""
    game = GamePlay(LevelCatalog.from_file(levels_path))
    if level_id is not None and level_id in game.catalog:
        _play_level(game, level_id)
    _menu_loop(game)
