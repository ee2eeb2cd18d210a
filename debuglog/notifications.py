"""
In-process notification center.

Observers subscribe to a notification name and are called
synchronously, in subscription order, each time it is posted.
"""

import logging
import threading

from collections.abc import Callable
from typing import Any

logger = logging.getLogger(__name__)

LOG_ADDED = "logAdded"
LOG_KEY = "log"

Observer = Callable[..., Any]


class NotificationCenter:
    """
    Named broadcast with synchronous delivery.

    Usage:
        center = NotificationCenter()
        center.subscribe(LOG_ADDED, lambda log: viewer.append(log))
        center.post(LOG_ADDED, log="...")
    """

    def __init__(self) -> None:
        self._observers: dict[str, list[Observer]] = {}
        self._lock = threading.Lock()

    def subscribe(self, name: str, observer: Observer) -> Observer:
        """
        Register an observer for a notification name.

        Returns the observer, to keep for unsubscribe().
        """
        with self._lock:
            self._observers.setdefault(name, []).append(observer)
        return observer

    def unsubscribe(self, name: str, observer: Observer) -> bool:
        """
        Remove an observer.

        Returns:
            True if it was registered, False otherwise
        """
        with self._lock:
            observers = self._observers.get(name, [])
            if observer not in observers:
                return False
            observers.remove(observer)
            return True

    def observers(self, name: str) -> list[Observer]:
        """Snapshot of the observers registered for a name."""
        with self._lock:
            return list(self._observers.get(name, []))

    def post(self, name: str, **user_info: Any) -> int:
        """
        Deliver a notification to every observer of `name`.

        An observer that raises is reported through the module logger
        and the remaining observers are still called.

        Returns:
            Number of observers that were called
        """
        delivered = 0
        for observer in self.observers(name):
            try:
                observer(**user_info)
            except Exception:
                logger.exception(f"Observer {observer!r} failed on {name!r}")
            delivered += 1
        return delivered
