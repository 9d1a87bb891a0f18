"""Structured outcomes of engine operations."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from enum import StrEnum
from typing import Any


class ErrorKind(StrEnum):
    NOT_FOUND = "not_found"
    ALREADY_STARTED = "already_started"
    OUT_OF_BOUNDS = "out_of_bounds"
    BLOCKED_CELL = "blocked_cell"
    NOT_ACTIVE = "not_active"
    INVALID_DIRECTION = "invalid_direction"
    NO_MOVEMENT = "no_movement"


@dataclass(frozen=True)
class ActionResult:
    success: bool
    message: str
    error: ErrorKind | None = None

    @classmethod
    def ok(cls, message: str) -> ActionResult:
        return cls(True, message)

    @classmethod
    def fail(cls, error: ErrorKind, message: str) -> ActionResult:
        return cls(False, message, error)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"success": self.success, "message": self.message}
        if self.error is not None:
            data["error"] = self.error.value
        return data


@dataclass(frozen=True)
class MoveResult:
    success: bool
    message: str = ""
    error: ErrorKind | None = None
    finished: bool = False
    won: bool = False
    player_x: int = -1
    player_y: int = -1
    visited_count: int = 0
    total_cells: int = 0

    @classmethod
    def fail(cls, error: ErrorKind, message: str) -> MoveResult:
        return cls(False, message, error)

    def to_dict(self) -> dict[str, Any]:
        if not self.success:
            data: dict[str, Any] = {"success": False, "message": self.message}
            if self.error is not None:
                data["error"] = self.error.value
            return data
        raw = asdict(self)
        return {
            "success": True,
            "finished": raw["finished"],
            "won": raw["won"],
            "playerX": raw["player_x"],
            "playerY": raw["player_y"],
            "visitedCount": raw["visited_count"],
            "totalCells": raw["total_cells"],
        }
