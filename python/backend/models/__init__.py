from backend.models.board import Board, Cell, Direction
from backend.models.level import LevelCatalog, LevelDefinition, LevelFormatError

__all__ = [
    "Board",
    "Cell",
    "Direction",
    "LevelCatalog",
    "LevelDefinition",
    "LevelFormatError",
]
