"""
Performance tests over a TrackStore.
"""

from typing import List

from loguru import logger

from .models import RemovalResult, SortTiming
from .sorting import SORT_BY_POPULARITY, library_sort, merge_sort, selection_sort
from .store import TrackStore
from track_bench.utils.timing import timed


def remove_one_by_one(store: TrackStore) -> RemovalResult:
    """Empty the store by repeatedly removing its first track."""
    initial_size = len(store)

    with timed() as timer:
        while not store.is_empty():
            store.remove_at(0)

    logger.info(
        f"Removed {initial_size} tracks one by one from {store.label} "
        f"in {timer.elapsed_ms:.2f} ms"
    )
    return RemovalResult(initial_size, timer.elapsed_ms)


def compare_sorts(store: TrackStore, max_selection_sort_size: int) -> List[SortTiming]:
    """Time every popularity sort on its own copy of the store.

    The store itself is not modified. Selection sort is skipped when the
    store holds more than max_selection_sort_size tracks.
    """
    timings: List[SortTiming] = []

    if len(store) > max_selection_sort_size:
        timings.append(
            SortTiming(
                "Selection sort",
                None,
                f"skipped (more than {max_selection_sort_size} tracks)",
            )
        )
    else:
        result = selection_sort(store.copy())
        timings.append(SortTiming(result.algorithm, result.elapsed_ms))

    result = merge_sort(store.copy())
    timings.append(SortTiming(result.algorithm, result.elapsed_ms))

    result = library_sort(store.copy(), SORT_BY_POPULARITY)
    timings.append(SortTiming(result.algorithm, result.elapsed_ms))

    return timings
