"""Track filtering.

Filters keep the matching tracks and remove every other one from the store:
- Year filter: exact release year, removed one index at a time from the end
- Field filter: substring match on artist/album/title, exact match on type
"""

from typing import Callable, Dict

from loguru import logger

from .models import FilterResult, TrackRecord, parse_int
from .store import TrackStore
from track_bench.utils.timing import timed


def _contains(text: str, value: str) -> bool:
    return value.lower() in text.lower()


# Criteria name -> predicate(track, value) deciding whether a track is kept
FIELD_MATCHERS: Dict[str, Callable[[TrackRecord, str], bool]] = {
    'artist': lambda track, value: _contains(track.artists_display, value),
    'album': lambda track, value: _contains(track.album_name, value),
    'title': lambda track, value: _contains(track.title, value),
    'type': lambda track, value: track.album_type.lower() == value.lower(),
}

VALID_CRITERIA = tuple(FIELD_MATCHERS)


def parse_year(text: str) -> int:
    """Parse a year filter value; surrounding whitespace is ignored.

    Raises:
        ValueError: If text is not a plain decimal number
    """
    year = parse_int(text.strip())
    if year is None:
        raise ValueError(f"Invalid year: {text!r}")
    return year


def filter_by_year(store: TrackStore, text: str) -> FilterResult:
    """Keep only tracks released in the given year.

    Raises:
        ValueError: If text is not a whole number (the store is left untouched)
    """
    year = parse_year(text)
    initial_size = len(store)

    with timed() as timer:
        # Highest index first so remaining indexes stay valid
        for i in range(len(store) - 1, -1, -1):
            if store.get(i).year != year:
                store.remove_at(i)

    removed = initial_size - len(store)
    logger.info(f"Year filter {year}: removed {removed}, kept {len(store)}")
    return FilterResult(removed, len(store), timer.elapsed_ms)


def filter_by_field(store: TrackStore, criteria: str, value: str) -> FilterResult:
    """Keep only tracks whose field matches value.

    Args:
        store: Store to filter in place
        criteria: One of 'artist', 'album', 'title' (substring, case-insensitive)
            or 'type' (exact, case-insensitive)
        value: Text to match

    Raises:
        ValueError: If criteria is unknown (the store is left untouched)
    """
    matcher = FIELD_MATCHERS.get(criteria)
    if matcher is None:
        raise ValueError(
            f"Invalid filter criteria: {criteria!r}. Must be one of {VALID_CRITERIA}"
        )

    with timed() as timer:
        removed = store.remove_if(lambda track: not matcher(track, value))

    logger.info(f"Filter {criteria}={value!r}: removed {removed}, kept {len(store)}")
    return FilterResult(removed, len(store), timer.elapsed_ms)
