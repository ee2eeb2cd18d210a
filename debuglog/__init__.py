"""
debuglog - Categorized in-app debug logging.

Tags every message with an emoji category and a timestamp, keeps it in
memory, appends it to a per-run log file, tells observers about it and
echoes it to the console. Log files can be e-mailed and cleaned up.

Quick Start:
    >>> from debuglog import DebugLog, LogCategory, LogStore, LoggerConfig
    >>> store = LogStore(LoggerConfig(app_name="MyApp", enabled=True))
    >>> dlog = DebugLog(store)
    >>> dlog.log("app launched", LogCategory.START)
    >>> dlog.warning("low disk space")

For remote backends:
    >>> from debuglog import RemoteLogger, StdlibLogger
    >>> remote = RemoteLogger([StdlibLogger()])
    >>> dlog = DebugLog(store, remote_logger=remote)

Key Components:
    - LogStore: The sink (memory, file, observers, console)
    - DebugLog: Short log / warning / error calls
    - RemoteLogger: Fan-out to remote logger backends
    - LogExporter: E-mail log files and delete them once sent
    - LoggerConfig: Configuration

Design Principles:
    - Logging never crashes the caller
    - No global instance: the application owns its store
    - Every entry is formatted once

Author: debuglog Team
Version: 0.1.0
License: MIT
"""

from __future__ import annotations

__version__ = "0.1.0"
__author__ = "debuglog Team"
__license__ = "MIT"

# Configuration
from debuglog.config import Preferences, load_config, save_config

# Components
from debuglog.export import ExportChoice, LogExporter, SMTPTransport
from debuglog.facade import DebugLog
from debuglog.notifications import LOG_ADDED, LOG_KEY, NotificationCenter
from debuglog.remote import Logger, RecordingLogger, RemoteLogger, StdlibLogger
from debuglog.storage import LogReader, LogStore
from debuglog.types import (
    ExportBundle,
    LogCategory,
    LogEntry,
    LoggerConfig,
    LogLevel,
    RemoteLogRecord,
)

__all__ = [
    "LOG_ADDED",
    "LOG_KEY",
    "DebugLog",
    "ExportBundle",
    "ExportChoice",
    # Types - Enums
    "LogCategory",
    # Types - Data classes
    "LogEntry",
    "LogExporter",
    "LogLevel",
    "LogReader",
    "LogStore",
    "Logger",
    # Configuration
    "LoggerConfig",
    "NotificationCenter",
    "Preferences",
    "RecordingLogger",
    "RemoteLogRecord",
    "RemoteLogger",
    "SMTPTransport",
    "StdlibLogger",
    "__author__",
    "__license__",
    # Version info
    "__version__",
    "load_config",
    "save_config",
]
