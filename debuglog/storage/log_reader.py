"""
Log Reader - Reading persisted debug log files.

Supports:
- Whole-file reads (for display)
- Raw reads (for attachments)
- Memory-efficient line streaming
"""

from collections.abc import Generator
from pathlib import Path

from ..types import CONTINUATION_INDENT


class LogReader:
    """
    Reads log files from a log directory.

    Read failures never raise: they come back as empty content, the
    same way the store treats them.

    Usage:
        reader = LogReader("./debugLogs")
        for line in reader.iter_lines(reader.list_files()[-1]):
            print(line)
    """

    def __init__(self, log_directory: str | Path):
        """
        Initialize the log reader.

        Args:
            log_directory: Directory containing log files
        """
        self.log_directory = Path(log_directory)

    def list_files(self) -> list[str]:
        """Names of the regular files in the directory, sorted."""
        try:
            return sorted(p.name for p in self.log_directory.iterdir() if p.is_file())
        except OSError:
            return []

    def latest(self) -> str | None:
        """Name of the newest log file, if any."""
        files = self.list_files()
        return files[-1] if files else None

    def read(self, filename: str) -> str:
        """Text of a log file, "" if it cannot be read."""
        try:
            return self._path(filename).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError):
            return ""

    def read_bytes(self, filename: str) -> bytes | None:
        """Raw content of a log file, None if it cannot be read."""
        try:
            return self._path(filename).read_bytes()
        except OSError:
            return None

    def iter_lines(self, filename: str) -> Generator[str, None, None]:
        """Stream the lines of a log file without their newline."""
        try:
            with open(self._path(filename), encoding="utf-8") as f:
                for line in f:
                    yield line.rstrip("\n")
        except (OSError, UnicodeDecodeError):
            return

    def iter_entries(self, filename: str) -> Generator[str, None, None]:
        """
        Stream whole entries of a log file.

        Continuation lines (indented multi-line messages) are joined
        back onto the entry they belong to.
        """
        current: str | None = None
        for line in self.iter_lines(filename):
            if current is not None and line.startswith(CONTINUATION_INDENT) and not _starts_entry(line):
                current += "\n" + line
                continue
            if current is not None:
                yield current
            current = line
        if current is not None:
            yield current

    def count_entries(self, filename: str) -> int:
        """Count entries without loading the file into memory."""
        count = 0
        for _ in self.iter_entries(filename):
            count += 1
        return count

    def _path(self, filename: str) -> Path:
        return self.log_directory / filename


def _starts_entry(line: str) -> bool:
    """
    True if an indented line is itself an uncategorized entry.

    Uncategorized entries start with the same three spaces as
    continuation lines, followed by a "HH:MM:SSxx " timestamp.
    """
    stamp = line[len(CONTINUATION_INDENT):len(CONTINUATION_INDENT) + 11]
    return (
        len(stamp) == 11
        and stamp[2] == ":"
        and stamp[5] == ":"
        and stamp[10] == " "
        and stamp.replace(":", "").strip().isdigit()
    )
