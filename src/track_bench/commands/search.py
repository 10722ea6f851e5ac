"""
Search command handlers for Track Bench.

Handles: linear search, binary search
"""

from typing import Tuple

from track_bench.context import AppContext
from track_bench.core.output import log
from track_bench.domain.tracks import search
from track_bench.domain.tracks.display import format_duration, format_track
from track_bench.domain.tracks.models import SearchResult
from track_bench.helpers import print_menu, prompt_choice, prompt_text
from track_bench.utils.timing import format_ms

SEARCH_MENU = [
    (1, "Linear search"),
    (2, "Binary search (list must be sorted by title!)"),
]


def _report(result: SearchResult) -> None:
    if result.track is not None:
        track = result.track
        log(f"✓ Found: {format_track(track)}")
        log(
            f"  Type: {track.album_type or '?'} | Released: {track.release_date or '?'} "
            f"| Duration: {format_duration(track.duration_ms)}"
        )
    else:
        log("✗ Title not found")
    log(f"✓ Comparisons: {result.comparisons}")
    log(f"✓ Time: {format_ms(result.elapsed_ms)}")


def handle_linear_search_command(ctx: AppContext, title: str) -> Tuple[AppContext, bool]:
    """Find the first track with this exact title (case-insensitive).

    Returns:
        (updated_context, should_continue)
    """
    log("\n=== LINEAR SEARCH ===")
    _report(search.linear_search(ctx.store, title))
    return ctx, True


def handle_binary_search_command(ctx: AppContext, title: str) -> Tuple[AppContext, bool]:
    """Binary search by title; the store must be sorted by title first.

    Returns:
        (updated_context, should_continue)
    """
    log("\n=== BINARY SEARCH ===")
    log("⚠ The list must be sorted by title!", level="warning")
    _report(search.binary_search(ctx.store, title))
    return ctx, True


def handle_search_menu(ctx: AppContext) -> Tuple[AppContext, bool]:
    """Show the search menu, read a title and run the chosen search.

    Returns:
        (updated_context, should_continue)
    """
    print_menu("SEARCH", SEARCH_MENU)
    choice = prompt_choice()

    if choice not in (1, 2):
        if choice is not None:
            log(f"❌ Invalid choice: {choice}", level="warning")
        return ctx, True

    title = prompt_text("Title to search: ")
    if choice == 1:
        return handle_linear_search_command(ctx, title)
    return handle_binary_search_command(ctx, title)
