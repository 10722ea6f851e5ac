"""
Track domain models.

Contains the record type for one catalog row and the result types the
sort, search, filter and benchmark operations report.
"""

import re
from dataclasses import dataclass
from typing import NamedTuple, Optional, Sequence, Tuple

# Fixed column offsets of the dataset
TITLE_COLUMN = 0
DURATION_COLUMN = 3
ALBUM_TYPE_COLUMN = 4
ALBUM_NAME_COLUMN = 7
RELEASE_DATE_COLUMN = 8
POPULARITY_COLUMN = 10
FIRST_ARTIST_COLUMN = 13
LAST_ARTIST_COLUMN = 24  # inclusive

UNKNOWN_ARTIST = "Unknown"

# ASCII digits with an optional sign; no whitespace, underscores or other digits
INT_PATTERN = re.compile(r"[+-]?[0-9]+")
INT_MIN = -(2 ** 31)
INT_MAX = 2 ** 31 - 1


def _field(fields: Sequence[str], index: int) -> str:
    """Return the field at index, or an empty string when out of range."""
    return fields[index] if 0 <= index < len(fields) else ""


def parse_int(text: str, default: Optional[int] = None) -> Optional[int]:
    """Parse a signed 32-bit decimal integer.

    Returns:
        The value, or default when text is not a plain decimal number or is
        out of 32-bit range
    """
    if not INT_PATTERN.fullmatch(text):
        return default
    value = int(text)
    if not INT_MIN <= value <= INT_MAX:
        return default
    return value


def year_from_date(release_date: str) -> int:
    """Year from the first four characters of a release date, 0 when malformed."""
    if len(release_date) < 4:
        return 0
    return parse_int(release_date[:4], default=0)


class TrackRecord(NamedTuple):
    """Represents one catalog entry.

    Derived fields are computed once from fixed column offsets by
    ``from_fields``; ``raw_fields`` keeps the complete input row.
    """
    title: str
    album_name: str = ""
    album_type: str = ""  # album, single, compilation, ...
    release_date: str = ""  # YYYY-MM-DD...
    duration_ms: str = ""  # kept as raw text
    artists: Tuple[str, ...] = ()
    popularity: int = 0  # 0-100
    raw_fields: Tuple[str, ...] = ()

    @classmethod
    def from_fields(cls, fields: Sequence[str]) -> "TrackRecord":
        """Build a record from a split row. Never raises on short or malformed rows."""
        artists = tuple(
            artist
            for artist in (
                _field(fields, i)
                for i in range(FIRST_ARTIST_COLUMN, LAST_ARTIST_COLUMN + 1)
            )
            if artist
        )
        return cls(
            title=_field(fields, TITLE_COLUMN),
            album_name=_field(fields, ALBUM_NAME_COLUMN),
            album_type=_field(fields, ALBUM_TYPE_COLUMN),
            release_date=_field(fields, RELEASE_DATE_COLUMN),
            duration_ms=_field(fields, DURATION_COLUMN),
            artists=artists,
            popularity=parse_int(_field(fields, POPULARITY_COLUMN), default=0),
            raw_fields=tuple(fields),
        )

    @property
    def year(self) -> int:
        return year_from_date(self.release_date)

    @property
    def artists_display(self) -> str:
        return ", ".join(self.artists) if self.artists else UNKNOWN_ARTIST


@dataclass(frozen=True)
class LoadResult:
    count: int
    elapsed_ms: float


@dataclass(frozen=True)
class SortResult:
    algorithm: str
    criteria: str
    elapsed_ms: float


@dataclass(frozen=True)
class SearchResult:
    track: Optional[TrackRecord]
    comparisons: int
    elapsed_ms: float

    @property
    def found(self) -> bool:
        return self.track is not None


@dataclass(frozen=True)
class FilterResult:
    removed: int
    remaining: int
    elapsed_ms: float


@dataclass(frozen=True)
class RemovalResult:
    removed: int
    elapsed_ms: float


@dataclass(frozen=True)
class SortTiming:
    """One row of the sort comparison; elapsed_ms is None when the sort was skipped."""
    algorithm: str
    elapsed_ms: Optional[float]
    note: str = ""
