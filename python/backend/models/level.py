"""Level definitions and the read-only level catalog."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterator, Mapping

logger = logging.getLogger(__name__)


class LevelFormatError(ValueError):
    """Raised when level data cannot be turned into a ``LevelDefinition``."""


@dataclass(frozen=True)
class LevelDefinition:
    id: int
    width: int
    height: int
    cells: str

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f"Level {self.id}: width and height must be positive, "
                f"got {self.width}×{self.height}."
            )
        if len(self.cells) != self.width * self.height:
            raise ValueError(
                f"Level {self.id}: expected {self.width * self.height} cells, "
                f"got {len(self.cells)}."
            )

    def summary(self) -> dict[str, int]:
        return {"id": self.id, "width": self.width, "height": self.height}


class LevelCatalog:
    """Ordered, immutable mapping of level id to definition."""

    def __init__(self, levels: list[LevelDefinition] | None = None) -> None:
        self._levels: dict[int, LevelDefinition] = {}
        for level in levels or []:
            self._levels[level.id] = level

    # -- construction ---------------------------------------------------------

    @classmethod
    def from_mapping(cls, data: Mapping[Any, Mapping[str, Any]]) -> LevelCatalog:
        """Build a catalog from ``{id: {"width", "height", "boardStr"}}``.

        Ids may be given as strings (as JSON object keys always are).
        """
        levels: list[LevelDefinition] = []
        for raw_id, raw in data.items():
            try:
                level_id = int(raw_id)
                level = LevelDefinition(
                    id=level_id,
                    width=int(raw["width"]),
                    height=int(raw["height"]),
                    cells=str(raw["boardStr"]),
                )
            except (KeyError, TypeError, ValueError) as e:
                raise LevelFormatError(f"Invalid level {raw_id!r}: {e}") from e
            levels.append(level)
        return cls(levels)

    @classmethod
    def from_file(cls, path: Path) -> LevelCatalog:
        """Load the catalog from a JSON level file."""
        try:
            data = json.loads(Path(path).read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise LevelFormatError(f"{path}: not valid JSON ({e})") from e
        if not isinstance(data, dict):
            raise LevelFormatError(f"{path}: expected a JSON object of levels")
        try:
            catalog = cls.from_mapping(data)
        except LevelFormatError as e:
            raise LevelFormatError(f"{path}: {e}") from e
        logger.info("Loaded %d levels from %s", len(catalog), path)
        return catalog

    # -- queries --------------------------------------------------------------

    def get(self, level_id: int) -> LevelDefinition | None:
        return self._levels.get(level_id)

    def list_levels(self) -> list[dict[str, int]]:
        return [level.summary() for level in self._levels.values()]

    def ids(self) -> list[int]:
        return list(self._levels)

    def __contains__(self, level_id: object) -> bool:
        return level_id in self._levels

    def __len__(self) -> int:
        return len(self._levels)

    def __iter__(self) -> Iterator[LevelDefinition]:
        return iter(self._levels.values())
