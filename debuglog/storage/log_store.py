"""
Log Store - The single sink for in-app debug messages.

Design principles:
- Logging never crashes the caller (every I/O error is swallowed)
- One append-only file per run, opened on first use
- Every entry is formatted once and reused for memory, file,
  observers and console
"""

import logging
import sys
import threading

from collections.abc import Callable, Iterable
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Any, TextIO

from ..config import ENABLED_KEY, Preferences, file_logging_enabled
from ..formatting import format_entry
from ..notifications import LOG_ADDED, LOG_KEY, NotificationCenter
from ..types import LogCategory, LogEntry, LoggerConfig

logger = logging.getLogger(__name__)

FALLBACK_LOG_FILENAME = "log.txt"


class FileState(str, Enum):
    """Initialization state of the active log file."""

    PENDING = "pending"
    OPEN = "open"
    FAILED = "failed"
    DISABLED = "disabled"


class LogStore:
    """
    Thread-safe debug log sink.

    Owned by the application's composition root and handed to the
    code that needs it; there is no global instance.

    Usage:
        store = LogStore(LoggerConfig(app_name="MyApp", enabled=True))
        store.log("started", LogCategory.START)
        store.log(["user", user_id, "signed in"], LogCategory.USER)
    """

    def __init__(
        self,
        config: LoggerConfig | None = None,
        notifications: NotificationCenter | None = None,
        preferences: Preferences | None = None,
        clock: Callable[[], datetime] = datetime.now,
        stream: TextIO | None = None,
    ):
        """
        Initialize the store.

        Args:
            config: Configuration (defaults when not provided)
            notifications: Where "logAdded" is posted
            preferences: Persisted preferences, read for "debug_log"
            clock: Source of capture times
            stream: Console echo target (stdout when not provided)
        """
        self.config = config or LoggerConfig()
        self.notifications = notifications or NotificationCenter()
        self.preferences = preferences or Preferences(self.config.preferences_path)
        self.enabled = self.config.enabled

        self._clock = clock
        self._stream = stream
        self._entries: list[str] = []
        self._lock = threading.Lock()

        self._file_state = FileState.PENDING
        self._file_handle: TextIO | None = None
        self._log_path: Path | None = None

    def configure(self, enabled: bool) -> None:
        """Enable or disable logging."""
        self.enabled = enabled

    def configure_from_preferences(self) -> bool:
        """
        Enable or disable logging from the persisted "debug_enabled" switch.

        Returns:
            The resulting enabled state
        """
        self.configure(self.preferences.get_bool(ENABLED_KEY))
        return self.enabled

    def log(self, payload: Any, category: LogCategory = LogCategory.NONE) -> LogEntry | None:
        """
        Record a message.

        Does nothing while the store is disabled. Otherwise the entry is
        kept in memory, appended to the active file when file logging
        is on, posted to observers and echoed to the console.

        Args:
            payload: A value, or a (nested) list/tuple of values
            category: Category used for the prefix

        Returns:
            The recorded entry, or None when disabled
        """
        if not self.enabled:
            return None

        moment = self._clock()
        text = format_entry(payload, category, moment)

        error = self._prepare_file() if self._file_state is FileState.PENDING else None

        with self._lock:
            self._entries.append(text)
            self._write(text)

        self.notifications.post(LOG_ADDED, **{LOG_KEY: text})

        if self.config.echo:
            self._echo(text)

        if error:
            self.log(error, LogCategory.ERROR)

        return LogEntry(category=category, timestamp=moment, text=text)

    def open(self) -> Path | None:
        """
        Open the active log file if file logging is on.

        Runs at most once per store: a failure is reported through the
        log itself and disables file logging for the rest of the run.

        Returns:
            Path of the active file, or None
        """
        error = self._prepare_file()
        if error:
            self.log(error, LogCategory.ERROR)
        return self._log_path

    def _prepare_file(self) -> str | None:
        """Decide on and open the active file once. Returns an error message on failure."""
        with self._lock:
            if self._file_state is not FileState.PENDING:
                return None

            if not file_logging_enabled(self.config, self.preferences):
                self._file_state = FileState.DISABLED
                return None

            return self._open_file()

    def _open_file(self) -> str | None:
        """Create directory and file - must hold lock. Returns an error message on failure."""
        directory = Path(self.config.log_directory)
        try:
            directory.mkdir(parents=True, exist_ok=True)
        except OSError:
            self._file_state = FileState.FAILED
            return f"Cannot create log directory at {directory}"

        path = directory / self._new_log_filename()
        try:
            self._file_handle = open(path, "a", encoding="utf-8")
        except OSError as e:
            self._file_state = FileState.FAILED
            return f"Cannot create file handle for writing at {path}: {e}"

        self._log_path = path
        self._file_state = FileState.OPEN
        logger.info(f"Debug log written to {path}")
        return None

    def _new_log_filename(self) -> str:
        if not self.config.app_name:
            return FALLBACK_LOG_FILENAME
        created = round(self._clock().timestamp())
        return f"{self.config.app_name}-log-{created}.txt"

    def _echo(self, text: str) -> None:
        try:
            print(text, file=self._stream or sys.stdout)
        except (OSError, ValueError) as e:
            # ValueError: console encoding cannot represent the prefix, or stream closed
            logger.debug(f"Dropping console echo: {e}")

    def _write(self, text: str) -> None:
        """Append one entry to the active file - must hold lock."""
        if self._file_handle is None:
            return
        try:
            self._file_handle.write(text + "\n")
            self._file_handle.flush()
        except (OSError, ValueError) as e:
            # ValueError: handle closed underneath us
            logger.debug(f"Dropping log line, write failed: {e}")

    @property
    def entries(self) -> list[str]:
        """Formatted entries recorded so far, oldest first."""
        with self._lock:
            return list(self._entries)

    @property
    def file_state(self) -> FileState:
        return self._file_state

    @property
    def active_log_path(self) -> Path | None:
        """Path of the file this run appends to, once opened."""
        return self._log_path

    @property
    def active_log_filename(self) -> str | None:
        return self._log_path.name if self._log_path else None

    @property
    def log_directory(self) -> Path | None:
        """Directory holding log files, or None when file logging is off."""
        if self._file_state in (FileState.DISABLED, FileState.FAILED):
            return None
        if not file_logging_enabled(self.config, self.preferences):
            return None
        return Path(self.config.log_directory)

    @property
    def logs(self) -> str | None:
        """
        Full content of the active log file.

        Returns:
            The file text, "" if it cannot be read, or None when no
            file is active
        """
        if self._log_path is None:
            return None
        try:
            return self._log_path.read_text(encoding="utf-8")
        except OSError:
            return ""

    def list_all_log_files(self) -> list[str]:
        """
        List the log directory, sorted by name.

        File names embed their creation time, so this is also
        chronological order. Empty when file logging is off or the
        directory cannot be read.
        """
        directory = self.log_directory
        if directory is None:
            return []
        try:
            return sorted(p.name for p in directory.iterdir())
        except OSError:
            return []

    def delete_log_files(self, filenames: Iterable[str]) -> list[str]:
        """
        Delete log files from the log directory.

        The active file is never deleted. A file that cannot be deleted
        is skipped without affecting the others.

        Returns:
            Names that were actually deleted
        """
        directory = self.log_directory
        if directory is None:
            return []

        deleted = []
        for filename in filenames:
            if filename == self.active_log_filename or Path(filename).name != filename:
                continue
            try:
                (directory / filename).unlink()
            except OSError as e:
                logger.debug(f"Could not delete {filename}: {e}")
                continue
            deleted.append(filename)
        return deleted

    def clear(self) -> None:
        """Forget the in-memory entries. The file is left untouched."""
        with self._lock:
            self._entries.clear()

    def close(self) -> None:
        """Close the active file."""
        with self._lock:
            if self._file_handle:
                self._file_handle.close()
                self._file_handle = None

    def __enter__(self) -> "LogStore":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: Any,
    ) -> None:
        self.close()
