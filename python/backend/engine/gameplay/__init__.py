from backend.engine.gameplay.game import GamePlay, StateObserver
from backend.engine.gameplay.results import ActionResult, ErrorKind, MoveResult

__all__ = ["ActionResult", "ErrorKind", "GamePlay", "MoveResult", "StateObserver"]
