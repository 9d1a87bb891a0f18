"""Fan-out of game state snapshots to live listeners."""

from __future__ import annotations

import logging
import queue
import threading
from typing import Any, Callable

logger = logging.getLogger(__name__)

DEFAULT_QUEUE_SIZE = 16


class Listener:
    """One connected subscriber with its own bounded message queue."""

    def __init__(self, maxsize: int = DEFAULT_QUEUE_SIZE) -> None:
        self._queue: queue.Queue[dict[str, Any]] = queue.Queue(maxsize=maxsize)

    def offer(self, message: dict[str, Any]) -> bool:
        """Queue *message* unless the listener is not ready (queue full)."""
        try:
            self._queue.put_nowait(message)
        except queue.Full:
            return False
        return True

    def get(self, timeout: float | None = None) -> dict[str, Any] | None:
        """Return the next message, or ``None`` if *timeout* expires."""
        try:
            return self._queue.get(timeout=timeout)
        except queue.Empty:
            return None


class Broadcaster:
    """Pushes ``{"type": "state", ...}`` messages to every connected listener.

    Delivery is best effort: a listener that is not ready to receive is
    skipped for that message.  Instances are callable so they can be
    subscribed directly as a ``GamePlay`` observer.
    """

    def __init__(
        self,
        current: Callable[[], dict[str, Any]],
        maxsize: int = DEFAULT_QUEUE_SIZE,
    ) -> None:
        self._current = current
        self._maxsize = maxsize
        self._listeners: list[Listener] = []
        self._lock = threading.Lock()

    @staticmethod
    def message(snapshot: dict[str, Any]) -> dict[str, Any]:
        return {"type": "state", **snapshot}

    # -- connections ----------------------------------------------------------

    def connect(self) -> Listener:
        """Register a listener and prime it with the current snapshot."""
        listener = Listener(self._maxsize)
        listener.offer(self.message(self._current()))
        with self._lock:
            self._listeners.append(listener)
            count = len(self._listeners)
        logger.info("Client connected (%d listening)", count)
        return listener

    def disconnect(self, listener: Listener) -> None:
        with self._lock:
            if listener in self._listeners:
                self._listeners.remove(listener)
            count = len(self._listeners)
        logger.info("Client disconnected (%d listening)", count)

    @property
    def listener_count(self) -> int:
        with self._lock:
            return len(self._listeners)

    # -- publishing -----------------------------------------------------------

    def publish(self, snapshot: dict[str, Any]) -> int:
        """Send *snapshot* to all listeners; return how many received it."""
        message = self.message(snapshot)
        with self._lock:
            listeners = list(self._listeners)
        delivered = 0
        for listener in listeners:
            if listener.offer(message):
                delivered += 1
            else:
                logger.debug("Skipping listener with full queue")
        return delivered

    __call__ = publish
