"""
Shorthand entry points.

DebugLog gives call sites three short calls:

    dlog.log("my message", LogCategory.START)
    dlog.warning("my message")    # category = warning
    dlog.error("my message")      # category = error

In optimized runs (python -O, where __debug__ is False) local logging
is compiled out of the picture: only forwarding to an attached
RemoteLogger remains.
"""

from __future__ import annotations

from typing import Any

from .remote import RemoteLogger
from .storage import LogStore
from .types import LogCategory, LogEntry, LogLevel


class DebugLog:
    """Front door for application code."""

    def __init__(
        self,
        store: LogStore,
        remote_logger: RemoteLogger | None = None,
        debug: bool = __debug__,
    ):
        self.store = store
        self.remote_logger = remote_logger
        self.debug = debug

    def log(
        self,
        payload: Any,
        category: LogCategory = LogCategory.NONE,
        level: LogLevel = LogLevel.DEBUG,
    ) -> LogEntry | None:
        """
        Log locally (debug runs) and forward text to the remote logger.

        Only string payloads are forwarded; remote backends take text.
        """
        entry = self.store.log(payload, category) if self.debug else None

        if self.remote_logger is not None and isinstance(payload, str):
            self.remote_logger.log(payload, level, depth=2)

        return entry

    def warning(self, payload: Any) -> LogEntry | None:
        if not self.debug:
            return None
        return self.store.log(payload, LogCategory.WARNING)

    def error(self, payload: Any) -> LogEntry | None:
        if not self.debug:
            return None
        return self.store.log(payload, LogCategory.ERROR)
