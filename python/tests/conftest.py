"""Shared fixtures: small in-memory level catalogs and engines."""

from __future__ import annotations

from typing import Any

import pytest

from backend.engine.gameplay import GamePlay
from backend.models.level import LevelCatalog

# id -> (width, height, cells)
_LEVELS: dict[int, tuple[int, int, str]] = {
    0: (3, 1, "..."),
    1: (3, 1, ".X."),
    2: (3, 3, "........."),
    3: (4, 3, ".....X......"),
    5: (3, 3, "X.X...X.X"),
    7: (1, 1, "."),
    9: (2, 2, "XXXX"),
}


@pytest.fixture()
def levels() -> dict[int, tuple[int, int, str]]:
    return dict(_LEVELS)


@pytest.fixture(params=sorted(_LEVELS), ids=lambda i: f"level-{i}")
def level_entry(request: pytest.FixtureRequest) -> tuple[int, tuple[int, int, str]]:
    """Each in-memory level in turn, as ``(id, (width, height, cells))``."""
    return request.param, _LEVELS[request.param]


@pytest.fixture()
def catalog() -> LevelCatalog:
    return LevelCatalog.from_mapping(
        {
            str(level_id): {"width": w, "height": h, "boardStr": cells}
            for level_id, (w, h, cells) in _LEVELS.items()
        }
    )


@pytest.fixture()
def game(catalog: LevelCatalog) -> GamePlay:
    return GamePlay(catalog)


@pytest.fixture()
def recorder(game: GamePlay) -> list[dict[str, Any]]:
    """Snapshots handed to a subscribed observer, oldest first."""
    snapshots: list[dict[str, Any]] = []
    game.subscribe(snapshots.append)
    return snapshots
