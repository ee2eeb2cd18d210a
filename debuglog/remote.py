"""
Remote logging fan-out.

RemoteLogger relays each call to an ordered, fixed list of backends
(crash reporters, telemetry clients, ...). It does not store or
interpret what it relays.
"""

from __future__ import annotations

import logging
import os
import sys

from typing import Protocol, runtime_checkable

from .types import LogLevel, RemoteLogRecord

logger = logging.getLogger(__name__)


@runtime_checkable
class Logger(Protocol):
    """Capability every remote backend provides."""

    def log(self, message: str, level: LogLevel, file: str, function: str, line: int) -> None:
        ...


def caller_site(depth: int = 1) -> tuple[str, str, int]:
    """
    Return (file name, function name, line number) of a caller.

    Args:
        depth: 0 is the function calling caller_site, 1 its caller, ...
    """
    frame = sys._getframe(depth + 1)
    code = frame.f_code
    return os.path.basename(code.co_filename), code.co_name, frame.f_lineno


class RemoteLogger:
    """
    Broadcast one log call to every registered backend.

    The backend list is fixed at construction. Backends are called in
    registration order; an exception raised by one of them propagates
    to the caller and the remaining backends are not called.

    Usage:
        remote = RemoteLogger([CrashReporter(), StdlibLogger()])
        remote.log("payment failed", LogLevel.CRITICAL)
    """

    def __init__(self, loggers: list[Logger] | tuple[Logger, ...] = ()):
        self._loggers: tuple[Logger, ...] = tuple(loggers)

    @property
    def loggers(self) -> tuple[Logger, ...]:
        return self._loggers

    def __len__(self) -> int:
        return len(self._loggers)

    def log(
        self,
        message: str,
        level: LogLevel = LogLevel.DEBUG,
        file: str | None = None,
        function: str | None = None,
        line: int | None = None,
        depth: int = 1,
    ) -> None:
        """
        Forward a message to every backend.

        Call-site arguments that are not given are taken from the
        caller's frame.

        Args:
            message: Text to forward
            level: Severity (debug unless stated)
            file: Source file name of the call site
            function: Function name of the call site
            line: Line number of the call site
            depth: How many frames above this call the call site is
        """
        if file is None or function is None or line is None:
            site_file, site_function, site_line = caller_site(depth)
            file = site_file if file is None else file
            function = site_function if function is None else function
            line = site_line if line is None else line

        for backend in self._loggers:
            backend.log(message, level, file, function, line)


class StdlibLogger:
    """Backend that writes to a standard library logger."""

    LEVELS = {
        LogLevel.DEBUG: logging.DEBUG,
        LogLevel.CRITICAL: logging.CRITICAL,
    }

    def __init__(self, name: str = "debuglog.remote"):
        self.logger = logging.getLogger(name)

    def log(self, message: str, level: LogLevel, file: str, function: str, line: int) -> None:
        self.logger.log(
            self.LEVELS[level],
            message,
            extra={"site_file": file, "site_function": function, "site_line": line},
        )


class RecordingLogger:
    """
    Backend that keeps every call as a RemoteLogRecord.

    Useful for an in-app "remote calls" screen and in tests.
    """

    def __init__(self) -> None:
        self.records: list[RemoteLogRecord] = []

    def log(self, message: str, level: LogLevel, file: str, function: str, line: int) -> None:
        self.records.append(RemoteLogRecord(message, level, file, function, line))
