"""Core gameplay logic — loads levels, slides the player, detects win/stuck."""

from __future__ import annotations

import logging
from typing import Any, Callable

from backend.engine.gameplay.results import ActionResult, ErrorKind, MoveResult
from backend.engine.gamestate import GameState
from backend.models.board import Direction
from backend.models.level import LevelCatalog

logger = logging.getLogger(__name__)

StateObserver = Callable[[dict[str, Any]], None]


class GamePlay:
    """Owns one game state and applies player actions to it.

    Every successful mutation (load, start, move, reset) is followed by a
    single call to each subscribed observer with the new snapshot.  Failed
    operations leave the state untouched and notify nobody.
    """

    def __init__(self, catalog: LevelCatalog, state: GameState | None = None) -> None:
        self.catalog = catalog
        self.state = state if state is not None else GameState()
        self._observers: list[StateObserver] = []

    # -- observers ------------------------------------------------------------

    def subscribe(self, observer: StateObserver) -> None:
        self._observers.append(observer)

    def unsubscribe(self, observer: StateObserver) -> None:
        if observer in self._observers:
            self._observers.remove(observer)

    def _notify(self) -> None:
        if not self._observers:
            return
        snapshot = self.state.snapshot()
        for observer in list(self._observers):
            try:
                observer(snapshot)
            except Exception:
                # Observer failures are logged, never propagated.
                logger.exception("State observer %r failed", observer)

    # -- queries --------------------------------------------------------------

    def snapshot(self) -> dict[str, Any]:
        return self.state.snapshot()

    def list_levels(self) -> list[dict[str, int]]:
        return self.catalog.list_levels()

    def can_step_to(self, direction: Direction) -> bool:
        """True if one step in *direction* lands on an enterable cell."""
        state = self.state
        dx, dy = direction.vector
        return state.board.can_enter(state.player_x + dx, state.player_y + dy)

    def has_any_step(self) -> bool:
        return any(self.can_step_to(d) for d in Direction)

    # -- level lifecycle ------------------------------------------------------

    def load_level(self, level_id: int) -> ActionResult:
        level = self.catalog.get(level_id)
        if level is None:
            logger.debug("Level %s not found", level_id)
            return ActionResult.fail(ErrorKind.NOT_FOUND, "Level not found")

        self.state.reset(level)
        logger.info(
            "Loaded level %s (%d×%d, %d playable cells)",
            level.id, level.width, level.height, self.state.total_cells,
        )
        self._notify()
        return ActionResult.ok(f"Level {level.id} loaded")

    def reset_level(self) -> ActionResult:
        level_id = self.state.level_id
        if level_id is None or self.catalog.get(level_id) is None:
            return ActionResult.fail(ErrorKind.NOT_FOUND, "No level loaded")
        self.load_level(level_id)
        return ActionResult.ok("Level reset")

    # -- gameplay -------------------------------------------------------------

    def start_game(self, x: int, y: int) -> ActionResult:
        """Place the player on ``(x, y)`` and begin the game."""
        state = self.state
        if state.started:
            return self._reject_start(ErrorKind.ALREADY_STARTED, "Game already started")
        if not state.board.in_bounds(x, y):
            return self._reject_start(ErrorKind.OUT_OF_BOUNDS, "Invalid start position")
        if state.board.get_cell(x, y).blocked:
            return self._reject_start(
                ErrorKind.BLOCKED_CELL, "Cannot start on a blocked cell"
            )

        state.place_player(x, y)
        logger.debug("Game started at (%d, %d) on level %s", x, y, state.level_id)
        self._notify()
        return ActionResult.ok("Game started")

    def move(self, direction: Direction | str) -> MoveResult:
        """Slide the player in *direction* until the next cell is not enterable.

        The slide stops at the grid edge, at a blocked cell, or at a cell
        that has already been visited.  Returns a failed result without
        touching the state if the player could not move at all.
        """
        state = self.state
        if not state.is_active:
            return MoveResult.fail(
                ErrorKind.NOT_ACTIVE, "Game not started or already finished"
            )

        parsed = Direction.parse(direction)
        if parsed is None:
            return MoveResult.fail(
                ErrorKind.INVALID_DIRECTION,
                "Invalid direction. Use: up, down, left, right",
            )

        dx, dy = parsed.vector
        steps = 0
        while self.can_step_to(parsed):
            state.enter(state.player_x + dx, state.player_y + dy)
            steps += 1

        if steps == 0:
            logger.debug("No movement %s from %s", parsed.value, state.position)
            return MoveResult.fail(ErrorKind.NO_MOVEMENT, "Cannot move in that direction")

        if state.is_complete:
            state.finish(won=True)
            logger.info("Level %s won", state.level_id)
        elif not self.has_any_step():
            state.finish(won=False)
            logger.info(
                "Stuck on level %s with %d/%d cells visited",
                state.level_id, state.visited_count, state.total_cells,
            )

        self._notify()
        return MoveResult(
            success=True,
            finished=state.finished,
            won=state.won,
            player_x=state.player_x,
            player_y=state.player_y,
            visited_count=state.visited_count,
            total_cells=state.total_cells,
        )

    # -- helpers --------------------------------------------------------------

    @staticmethod
    def _reject_start(error: ErrorKind, message: str) -> ActionResult:
        logger.debug("Start rejected: %s", message)
        return ActionResult.fail(error, message)
