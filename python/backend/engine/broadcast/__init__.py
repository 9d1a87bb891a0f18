from backend.engine.broadcast.hub import Broadcaster, Listener

__all__ = ["Broadcaster", "Listener"]
