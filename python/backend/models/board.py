"""Board model for the mortal coil puzzle."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from backend.models.level import LevelDefinition

BLOCKED_CHAR = "X"


class Direction(StrEnum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def vector(self) -> tuple[int, int]:
        """Unit step as ``(dx, dy)``; y grows downwards."""
        return _VECTORS[self]

    @classmethod
    def parse(cls, token: object) -> Direction | None:
        """Return the direction named by *token*, or ``None`` if unknown."""
        if isinstance(token, cls):
            return token
        if not isinstance(token, str):
            return None
        try:
            return cls(token.strip().lower())
        except ValueError:
            return None


_VECTORS: dict[Direction, tuple[int, int]] = {
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}


@dataclass
class Cell:
    blocked: bool = False
    visited: bool = False

    @classmethod
    def from_char(cls, char: str) -> Cell:
        # Blocked cells start out visited so they can never be entered.
        blocked = char == BLOCKED_CHAR
        return cls(blocked=blocked, visited=blocked)

    def is_open(self) -> bool:
        """True if the player may enter this cell."""
        return not self.blocked and not self.visited

    def to_dict(self) -> dict[str, bool]:
        return {"blocked": self.blocked, "visited": self.visited}


@dataclass
class Board:
    """Grid of cells, stored row-major as ``cells[y][x]``."""

    width: int
    height: int
    cells: list[list[Cell]]

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_string(cls, width: int, height: int, cell_string: str) -> Board:
        """Create a board from a flat row-major cell string.

        Example::

            Board.from_string(3, 2, "..X...")
        """
        if len(cell_string) != width * height:
            raise ValueError(
                f"Expected {width * height} cells for a {width}×{height} board, "
                f"got {len(cell_string)}."
            )
        cells: list[list[Cell]] = []
        for y in range(height):
            row = cell_string[y * width : (y + 1) * width]
            cells.append([Cell.from_char(ch) for ch in row])
        return cls(width=width, height=height, cells=cells)

    @classmethod
    def from_level(cls, level: LevelDefinition) -> Board:
        return cls.from_string(level.width, level.height, level.cells)

    @classmethod
    def empty(cls) -> Board:
        return cls(width=0, height=0, cells=[])

    # -- queries --------------------------------------------------------------

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get_cell(self, x: int, y: int) -> Cell:
        return self.cells[y][x]

    def can_enter(self, x: int, y: int) -> bool:
        """True if ``(x, y)`` is in bounds, unblocked and unvisited."""
        return self.in_bounds(x, y) and self.cells[y][x].is_open()

    def count_playable(self) -> int:
        return sum(not cell.blocked for row in self.cells for cell in row)

    def to_rows(self) -> list[list[dict[str, bool]]]:
        return [[cell.to_dict() for cell in row] for row in self.cells]
