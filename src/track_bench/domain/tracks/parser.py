"""
Record parser for the comma-delimited track dataset.

No quoting or escaping is supported: a field that contains a comma shifts
every later column.
"""

from typing import List, Optional

from .models import TrackRecord

DELIMITER = ","
MIN_FIELDS = 10


def split_fields(line: str) -> List[str]:
    """Split a raw line on the delimiter, dropping trailing empty fields."""
    fields = line.rstrip("\r\n").split(DELIMITER)
    while fields and fields[-1] == "":
        fields.pop()
    return fields


def parse_line(line: str) -> Optional[TrackRecord]:
    """Parse one data line into a TrackRecord.

    Returns:
        The record, or None when the line has fewer than MIN_FIELDS fields
        (skipped, not an error)
    """
    fields = split_fields(line)
    if len(fields) < MIN_FIELDS:
        return None
    return TrackRecord.from_fields(fields)
