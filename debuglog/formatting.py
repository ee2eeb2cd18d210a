"""
Formatting helpers for log entries.

Pure functions: no I/O, no clock access. The caller passes the
capture time so entries stay reproducible in tests.
"""

from collections.abc import Sequence
from datetime import datetime
from typing import Any

from .types import CONTINUATION_INDENT, LogCategory

ITEM_SEPARATOR = " "


def format_timestamp(moment: datetime) -> str:
    """
    Format a capture time as hours, minutes, seconds and hundredths.

    The hundredths follow the seconds directly, e.g. 14:03:07.12 is
    rendered as "14:03:0712".
    """
    hundredths = moment.microsecond // 10_000
    return f"{moment:%H:%M:%S}{hundredths:02d}"


def is_sequence_payload(payload: Any) -> bool:
    """True if the payload should be flattened item by item."""
    return isinstance(payload, Sequence) and not isinstance(payload, (str, bytes, bytearray))


def flatten(payload: Any) -> str:
    """
    Render a payload as a single line without timestamp.

    Scalars render with str(). Sequences render each item followed by
    one space, the last item included, and nested sequences are
    flattened the same way.

    Args:
        payload: A scalar value or a (nested) list/tuple of values

    Returns:
        The flattened text
    """
    if not is_sequence_payload(payload):
        return str(payload)

    return "".join(flatten(item) + ITEM_SEPARATOR for item in payload)


def format_message(payload: Any, moment: datetime) -> str:
    """Timestamp, one space, then the flattened payload."""
    return f"{format_timestamp(moment)} {flatten(payload)}"


def format_entry(payload: Any, category: LogCategory, moment: datetime) -> str:
    """
    Build the full text of a log entry.

    Embedded newlines are followed by a three-space indent so a
    multi-line message stays grouped under its prefix.
    """
    text = category.prefix + format_message(payload, moment)
    return text.replace("\n", "\n" + CONTINUATION_INDENT)
