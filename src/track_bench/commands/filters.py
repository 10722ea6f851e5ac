"""
Filter command handlers for Track Bench.

Handles: year filter, artist/album/title/type filter
"""

from typing import Tuple

from track_bench.context import AppContext
from track_bench.core.output import log
from track_bench.domain.tracks import filters as track_filters
from track_bench.domain.tracks.models import FilterResult
from track_bench.helpers import print_menu, prompt_choice, prompt_text
from track_bench.utils.timing import format_ms

FILTER_MENU = [
    (1, "Year filter (manual scan)"),
    (2, "Artist filter"),
    (3, "Album filter"),
    (4, "Title filter"),
    (5, "Type filter"),
]

# Menu choice -> field filter criteria
FIELD_CHOICES = {2: 'artist', 3: 'album', 4: 'title', 5: 'type'}


def _report(result: FilterResult) -> None:
    log(f"✓ Filtered: {result.removed} tracks removed")
    log(f"✓ Remaining: {result.remaining} tracks")
    log(f"✓ Time: {format_ms(result.elapsed_ms)}")


def handle_year_filter_command(ctx: AppContext, year_text: str) -> Tuple[AppContext, bool]:
    """Keep only tracks from the given year.

    Args:
        ctx: Application context
        year_text: Year as typed by the user

    Returns:
        (updated_context, should_continue)
    """
    log("\n=== YEAR FILTER (manual scan) ===")
    try:
        result = track_filters.filter_by_year(ctx.store, year_text)
    except ValueError:
        log("❌ Invalid year", level="warning")
        return ctx, True

    _report(result)
    return ctx, True


def handle_field_filter_command(
    ctx: AppContext, criteria: str, value: str
) -> Tuple[AppContext, bool]:
    """Keep only tracks whose field matches value.

    Args:
        ctx: Application context
        criteria: artist, album, title or type
        value: Text to match

    Returns:
        (updated_context, should_continue)
    """
    log(f"\n=== FIELD FILTER ({criteria}) ===")
    try:
        result = track_filters.filter_by_field(ctx.store, criteria, value)
    except ValueError as e:
        log(f"❌ {e}", level="warning")
        return ctx, True

    _report(result)
    return ctx, True


def handle_filter_menu(ctx: AppContext) -> Tuple[AppContext, bool]:
    """Show the filter menu, read the value and run the chosen filter.

    Returns:
        (updated_context, should_continue)
    """
    print_menu("FILTER", FILTER_MENU)
    choice = prompt_choice()

    if choice == 1:
        year_text = prompt_text("Year: ")
        return handle_year_filter_command(ctx, year_text)
    elif choice in FIELD_CHOICES:
        value = prompt_text("Value to match: ")
        return handle_field_filter_command(ctx, FIELD_CHOICES[choice], value)
    elif choice is not None:
        log(f"❌ Invalid choice: {choice}", level="warning")
    return ctx, True
