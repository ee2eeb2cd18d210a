"""
Core type definitions for debuglog.

This module defines the data structures shared by the store, the
formatter, the remote fan-out and the exporter.
Design principles:
- Immutable where possible (frozen dataclasses)
- Explicit validation at construction time
- Serialization/deserialization with explicit methods
- No magic strings - categories and levels are enums

Author: debuglog Team
"""

from __future__ import annotations

import logging

from dataclasses import dataclass, field, fields
from datetime import datetime
from enum import Enum
from typing import Any, ClassVar, Final

logger = logging.getLogger(__name__)


# =============================================================================
# CONSTANTS
# =============================================================================

DEFAULT_APP_NAME: Final[str] = "app"
DEFAULT_LOG_DIRECTORY: Final[str] = "./debugLogs"
DEFAULT_PREFERENCES_PATH: Final[str] = "./debuglog_preferences.json"
CONTINUATION_INDENT: Final[str] = "   "


# =============================================================================
# ENUMS
# =============================================================================

class LogCategory(str, Enum):
    """
    Visual category of a log line.

    The value of each member is the prefix written in front of the
    timestamp. Every prefix ends with a space.
    """

    NONE = "   "
    INFO = "ℹ️ "
    WARNING = "⚠️ "
    ERROR = "⛔️ "
    SUCCESS = "✅ "
    HIGHLIGHT = "😎 "
    TEST = "❔ "
    REQUEST = "➡️ "
    RESPONSE = "⬅️ "
    START = "🚀 "
    END = "🏁 "
    PACKAGE = "📦 "
    DELETE = "🗑 "
    USER = "👤 "
    TRACKING = "🏷 "

    def __str__(self) -> str:
        return self.name.lower()

    @property
    def prefix(self) -> str:
        """Display prefix, including its trailing space."""
        return self.value

    @classmethod
    def from_name(cls, name: str) -> LogCategory:
        """
        Parse a category from its member name, case-insensitively.

        Raises:
            ValueError: If no category has that name
        """
        try:
            return cls[name.strip().upper()]
        except KeyError:
            valid = ", ".join(str(c) for c in cls)
            raise ValueError(f"Unknown log category {name!r}, expected one of: {valid}") from None


class LogLevel(str, Enum):
    """
    Severity used by the remote logging path only.

    Independent of LogCategory: categories decorate local lines,
    levels are what remote backends filter on.
    """

    DEBUG = "debug"
    """Regular diagnostic output."""

    CRITICAL = "critical"
    """Something remote backends should surface."""

    def __str__(self) -> str:
        return self.value


# =============================================================================
# DATA CLASSES
# =============================================================================

@dataclass(frozen=True, slots=True)
class LogEntry:
    """
    One formatted log line, as produced by LogStore.log().

    The text is computed once at log time and never changes. It is the
    unit kept in memory, broadcast to observers and appended to file.

    Attributes:
        category: Category the message was logged with
        timestamp: Capture time
        text: Fully formatted line (prefix, timestamp, flattened payload)
    """

    category: LogCategory
    timestamp: datetime
    text: str

    def __str__(self) -> str:
        return self.text

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "category": str(self.category),
            "timestamp": self.timestamp.isoformat(),
            "text": self.text,
        }


@dataclass(frozen=True, slots=True)
class RemoteLogRecord:
    """
    A log call as relayed to remote backends.

    RemoteLogger does not store these; backends that buffer calls
    can use it as their unit.
    """

    message: str
    level: LogLevel
    file: str
    function: str
    line: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "message": self.message,
            "level": self.level.value,
            "file": self.file,
            "function": self.function,
            "line": self.line,
        }


@dataclass
class LoggerConfig:
    """
    Configuration for a LogStore and its exporter.

    Configuration can be loaded from:
    - Python code (direct instantiation)
    - JSON file (via config.load_config)
    - Environment variable pointing to JSON file

    Attributes:
        app_name: Application identifier used in log file names
        log_directory: Directory holding one log file per run
        enabled: Whether logging is active at all
        file_logging: Force file persistence on/off; None reads the
            "debug_log" preference
        echo: Echo every entry to stdout
        preferences_path: JSON file holding persisted boolean preferences
        mail_subject: Subject of export e-mails
        mail_recipients: ";"-separated export recipients
        mail_sender: From address of export e-mails
        smtp_host: SMTP server used by the default transport
        smtp_port: SMTP port used by the default transport
    """

    MIN_PORT: ClassVar[int] = 1
    MAX_PORT: ClassVar[int] = 65535

    app_name: str = DEFAULT_APP_NAME
    log_directory: str = DEFAULT_LOG_DIRECTORY
    enabled: bool = False
    file_logging: bool | None = None
    echo: bool = True
    preferences_path: str = DEFAULT_PREFERENCES_PATH

    # Export
    mail_subject: str = "Debug logs"
    mail_recipients: str = ""
    mail_sender: str = "debuglog@localhost"
    smtp_host: str = "localhost"
    smtp_port: int = 25

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if "/" in self.app_name or "\\" in self.app_name:
            raise ValueError(f"app_name cannot contain path separators, got {self.app_name!r}")

        if not self.log_directory:
            raise ValueError("log_directory cannot be empty")

        if not (self.MIN_PORT <= self.smtp_port <= self.MAX_PORT):
            raise ValueError(
                f"smtp_port must be between {self.MIN_PORT} and "
                f"{self.MAX_PORT}, got {self.smtp_port}"
            )

        if self.mail_recipients and not self.recipients:
            logger.warning("mail_recipients is set but contains no address")

    @property
    def recipients(self) -> list[str]:
        """Export recipients, split on ";"."""
        return [r.strip() for r in self.mail_recipients.split(";") if r.strip()]

    def to_dict(self) -> dict[str, Any]:
        """Serialize configuration to dictionary."""
        return {
            "app_name": self.app_name,
            "log_directory": self.log_directory,
            "enabled": self.enabled,
            "file_logging": self.file_logging,
            "echo": self.echo,
            "preferences_path": self.preferences_path,
            "mail_subject": self.mail_subject,
            "mail_recipients": self.mail_recipients,
            "mail_sender": self.mail_sender,
            "smtp_host": self.smtp_host,
            "smtp_port": self.smtp_port,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> LoggerConfig:
        """
        Create configuration from dictionary.

        Unknown keys are ignored with a warning so older config files
        keep loading.
        """
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            logger.warning(f"Ignoring unknown config keys: {sorted(unknown)}")
        return cls(**{k: v for k, v in data.items() if k in known})


@dataclass(slots=True)
class ExportBundle:
    """
    Result of preparing an export.

    Attributes:
        message: The e-mail ready to hand to a transport
        attached: Log files attached, in order
        to_delete: Attached files that may be deleted once sent
            (every attached file except the active one)
        sent: Set once a transport accepted the message
    """

    message: Any
    attached: list[str] = field(default_factory=list)
    to_delete: list[str] = field(default_factory=list)
    sent: bool = False

    @property
    def is_empty(self) -> bool:
        """True if nothing could be attached."""
        return not self.attached
