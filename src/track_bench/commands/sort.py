"""
Sort command handlers for Track Bench.

Handles: selection sort, merge sort, library sort by title/popularity/year
"""

from typing import Tuple

from track_bench.context import AppContext
from track_bench.core.output import log
from track_bench.domain.tracks import sorting
from track_bench.helpers import print_menu, prompt_choice
from track_bench.utils.timing import format_ms

SORT_MENU = [
    (1, "Selection sort (by popularity)"),
    (2, "Merge sort (by popularity)"),
    (3, "Library sort - by title"),
    (4, "Library sort - by popularity"),
    (5, "Library sort - by year"),
]


def _print_progress(_index: int) -> None:
    print(".", end="", flush=True)


def handle_selection_sort_command(ctx: AppContext) -> Tuple[AppContext, bool]:
    """Sort by popularity with selection sort, printing progress dots on large stores.

    Returns:
        (updated_context, should_continue)
    """
    log("\n=== SELECTION SORT (by popularity) ===")
    result = sorting.selection_sort(ctx.store, progress=_print_progress)
    print()
    log(f"✓ Selection sort finished in {format_ms(result.elapsed_ms)}")
    return ctx, True


def handle_merge_sort_command(ctx: AppContext) -> Tuple[AppContext, bool]:
    """Sort by popularity with merge sort.

    Returns:
        (updated_context, should_continue)
    """
    log("\n=== MERGE SORT (by popularity) ===")
    result = sorting.merge_sort(ctx.store)
    log(f"✓ Merge sort finished in {format_ms(result.elapsed_ms)}")
    return ctx, True


def handle_library_sort_command(ctx: AppContext, criteria: int) -> Tuple[AppContext, bool]:
    """Sort with the built-in sort.

    Args:
        ctx: Application context
        criteria: 0 title, 1 popularity, 2 year

    Returns:
        (updated_context, should_continue)
    """
    log("\n=== LIBRARY SORT (Timsort) ===")
    try:
        result = sorting.library_sort(ctx.store, criteria)
    except ValueError as e:
        log(f"❌ {e}", level="warning")
        return ctx, True

    log(f"Criteria: {result.criteria}")
    log(f"✓ Library sort finished in {format_ms(result.elapsed_ms)}")
    return ctx, True


def handle_sort_menu(ctx: AppContext) -> Tuple[AppContext, bool]:
    """Show the sort menu and run the chosen sort.

    Returns:
        (updated_context, should_continue)
    """
    print_menu("SORT", SORT_MENU)
    choice = prompt_choice()

    if choice == 1:
        return handle_selection_sort_command(ctx)
    elif choice == 2:
        return handle_merge_sort_command(ctx)
    elif choice == 3:
        return handle_library_sort_command(ctx, sorting.SORT_BY_TITLE)
    elif choice == 4:
        return handle_library_sort_command(ctx, sorting.SORT_BY_POPULARITY)
    elif choice == 5:
        return handle_library_sort_command(ctx, sorting.SORT_BY_YEAR)
    elif choice is not None:
        log(f"❌ Invalid choice: {choice}", level="warning")
    return ctx, True
