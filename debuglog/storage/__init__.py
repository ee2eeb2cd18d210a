"""
Storage subsystem for debuglog.

One append-only UTF-8 text file per run, plus the in-memory log.
"""

from .log_reader import LogReader
from .log_store import FileState, LogStore

__all__ = ["FileState", "LogReader", "LogStore"]
