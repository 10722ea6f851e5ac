"""
Title search over a TrackStore.

Both searches compare titles case-insensitively and count comparisons.
"""

from loguru import logger

from .models import SearchResult
from .store import TrackStore
from track_bench.utils.timing import timed


def linear_search(store: TrackStore, title: str) -> SearchResult:
    """Scan from the first track and stop at the first exact title match.

    A miss examines every track, so comparisons equals the store size.
    """
    wanted = title.lower()
    comparisons = 0
    found = None

    with timed() as timer:
        for track in store:
            comparisons += 1
            if track.title.lower() == wanted:
                found = track
                break

    logger.info(
        f"Linear search for {title!r}: {'hit' if found else 'miss'} "
        f"after {comparisons} comparisons"
    )
    return SearchResult(found, comparisons, timer.elapsed_ms)


def binary_search(store: TrackStore, title: str) -> SearchResult:
    """Iterative binary search by title.

    The store must already be sorted ascending by title; this is not checked
    and the result is meaningless otherwise.
    """
    wanted = title.lower()
    left, right = 0, len(store) - 1
    comparisons = 0
    found = None

    with timed() as timer:
        while left <= right:
            comparisons += 1
            mid = left + (right - left) // 2
            track = store.get(mid)
            current = track.title.lower()

            if current == wanted:
                found = track
                break
            elif current < wanted:
                left = mid + 1
            else:
                right = mid - 1

    logger.info(
        f"Binary search for {title!r}: {'hit' if found else 'miss'} "
        f"after {comparisons} comparisons"
    )
    return SearchResult(found, comparisons, timer.elapsed_ms)
