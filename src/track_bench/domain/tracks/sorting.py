"""
Sorting strategies over a TrackStore.

Selection sort and merge sort are written by hand and order by popularity;
the library sort delegates to Python's sort and supports three criteria.
Every strategy sorts ascending and mutates the store in place.
"""

from typing import Callable, List, Optional

from loguru import logger

from .models import SortResult, TrackRecord
from .store import TrackStore
from track_bench.utils.timing import timed

# Library sort criteria
SORT_BY_TITLE = 0
SORT_BY_POPULARITY = 1
SORT_BY_YEAR = 2

SORT_CRITERIA = {
    SORT_BY_TITLE: ("Title", lambda track: track.title),
    SORT_BY_POPULARITY: ("Popularity", lambda track: track.popularity),
    SORT_BY_YEAR: ("Year", lambda track: track.year),
}

PROGRESS_THRESHOLD = 1000


def selection_sort(
    store: TrackStore,
    progress: Optional[Callable[[int], None]] = None,
) -> SortResult:
    """Selection sort by popularity. Not stable.

    Args:
        store: Store to sort in place
        progress: Called with the outer index roughly every n/10 iterations
            when the store holds more than PROGRESS_THRESHOLD tracks
    """
    n = len(store)
    step = n // 10

    with timed() as timer:
        for i in range(n - 1):
            min_idx = i
            min_popularity = store.get(i).popularity

            for j in range(i + 1, n):
                popularity = store.get(j).popularity
                if popularity < min_popularity:
                    min_idx = j
                    min_popularity = popularity

            if min_idx != i:
                current = store.get(i)
                store.set(i, store.get(min_idx))
                store.set(min_idx, current)

            if progress is not None and n > PROGRESS_THRESHOLD and i % step == 0:
                progress(i)

    logger.info(f"Selection sort of {n} tracks took {timer.elapsed_ms:.2f} ms")
    return SortResult("Selection sort", "Popularity", timer.elapsed_ms)


def _merge(items: List[TrackRecord], left: int, middle: int, right: int, key) -> None:
    left_run = items[left:middle + 1]
    right_run = items[middle + 1:right + 1]

    i = j = 0
    k = left
    while i < len(left_run) and j < len(right_run):
        # <= keeps equal keys in left-run order
        if key(left_run[i]) <= key(right_run[j]):
            items[k] = left_run[i]
            i += 1
        else:
            items[k] = right_run[j]
            j += 1
        k += 1

    while i < len(left_run):
        items[k] = left_run[i]
        i += 1
        k += 1

    while j < len(right_run):
        items[k] = right_run[j]
        j += 1
        k += 1


def _merge_sort(items: List[TrackRecord], left: int, right: int, key) -> None:
    if left < right:
        middle = (left + right) // 2
        _merge_sort(items, left, middle, key)
        _merge_sort(items, middle + 1, right, key)
        _merge(items, left, middle, right, key)


def merge_sort_records(
    items: List[TrackRecord],
    key: Callable[[TrackRecord], object] = lambda track: track.popularity,
) -> None:
    """Stable top-down merge sort of a list, in place."""
    _merge_sort(items, 0, len(items) - 1, key)


def merge_sort(store: TrackStore) -> SortResult:
    """Merge sort by popularity. Stable.

    Works on a dense copy of the store, then writes the sorted order back.
    """
    with timed() as timer:
        items = store.to_list()
        merge_sort_records(items)
        store.replace_all(items)

    logger.info(f"Merge sort of {len(store)} tracks took {timer.elapsed_ms:.2f} ms")
    return SortResult("Merge sort", "Popularity", timer.elapsed_ms)


def library_sort(store: TrackStore, criteria: int) -> SortResult:
    """Sort with Python's built-in stable sort.

    Args:
        store: Store to sort in place
        criteria: SORT_BY_TITLE (case-sensitive), SORT_BY_POPULARITY or SORT_BY_YEAR

    Raises:
        ValueError: If criteria is unknown (the store is left untouched)
    """
    if criteria not in SORT_CRITERIA:
        raise ValueError(
            f"Invalid sort criteria: {criteria}. "
            f"Must be one of {sorted(SORT_CRITERIA)}"
        )

    label, key = SORT_CRITERIA[criteria]
    with timed() as timer:
        store.sort(key=key)

    logger.info(
        f"Library sort by {label.lower()} of {len(store)} tracks took {timer.elapsed_ms:.2f} ms"
    )
    return SortResult("Library sort", label, timer.elapsed_ms)
