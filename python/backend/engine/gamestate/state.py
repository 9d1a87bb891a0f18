"""Tracks the mutable state of a game in progress."""

from __future__ import annotations

from typing import Any

from backend.models.board import Board
from backend.models.level import LevelDefinition


class GameState:
    """Holds the current board, player position, and progress counters."""

    def __init__(self, board: Board | None = None, level_id: int | None = None) -> None:
        self._clear(board if board is not None else Board.empty(), level_id)

    def reset(self, level: LevelDefinition) -> None:
        """Put this instance back to a fresh, unstarted game on *level*."""
        self._clear(Board.from_level(level), level.id)

    def _clear(self, board: Board, level_id: int | None) -> None:
        self.level_id = level_id
        self.board = board
        self.player_x: int = -1
        self.player_y: int = -1
        self.started: bool = False
        self.finished: bool = False
        self.won: bool = False
        self.visited_count: int = 0
        self.total_cells: int = board.count_playable()

    # -- dimensions -----------------------------------------------------------

    @property
    def width(self) -> int:
        return self.board.width

    @property
    def height(self) -> int:
        return self.board.height

    # -- player ---------------------------------------------------------------

    @property
    def position(self) -> tuple[int, int]:
        return self.player_x, self.player_y

    def place_player(self, x: int, y: int) -> None:
        self.player_x, self.player_y = x, y
        self.started = True
        self.board.get_cell(x, y).visited = True
        self.visited_count = 1

    def enter(self, x: int, y: int) -> None:
        """Step the player onto ``(x, y)`` and count the visit."""
        self.player_x, self.player_y = x, y
        self.board.get_cell(x, y).visited = True
        self.visited_count += 1

    # -- status ---------------------------------------------------------------

    @property
    def is_active(self) -> bool:
        return self.started and not self.finished

    @property
    def is_complete(self) -> bool:
        return self.visited_count == self.total_cells

    def finish(self, won: bool) -> None:
        self.finished = True
        self.won = won

    def snapshot(self) -> dict[str, Any]:
        """Return a JSON-ready copy of the state."""
        return {
            "levelId": self.level_id,
            "width": self.width,
            "height": self.height,
            "board": self.board.to_rows(),
            "playerX": self.player_x,
            "playerY": self.player_y,
            "started": self.started,
            "finished": self.finished,
            "won": self.won,
            "visitedCount": self.visited_count,
            "totalCells": self.total_cells,
        }
