"""
Menu routing for Track Bench.

Routes main menu choices to the appropriate handler functions.
"""

from typing import Tuple

from track_bench.context import AppContext
from track_bench.core.output import log

# Import command handlers
from track_bench.commands import filters
from track_bench.commands import library
from track_bench.commands import performance
from track_bench.commands import search
from track_bench.commands import sort

MAIN_MENU = [
    (1, "Load a file"),
    (2, "Display tracks"),
    (3, "Sort"),
    (4, "Filter"),
    (5, "Search"),
    (6, "Performance tests"),
    (0, "Quit"),
]


def print_main_menu(ctx: AppContext) -> None:
    """Display the main menu with the current structure and track count."""
    print("\n" + "=" * 60)
    print(f"MAIN MENU - Structure: {ctx.backend_label}")
    print(f"Tracks loaded: {len(ctx.store)}")
    print("=" * 60)
    for number, label in MAIN_MENU:
        print(f"{number}. {label}")


def handle_choice(ctx: AppContext, choice: int) -> Tuple[AppContext, bool]:
    """
    Handle a single main menu choice with explicit state passing.

    Args:
        ctx: Application context
        choice: Main menu selector

    Returns:
        (updated_context, should_continue) - Updated context and whether to continue
    """
    if choice == 0:
        print("Goodbye!")
        return ctx, False

    elif choice == 1:
        return library.handle_load_menu(ctx)

    elif choice == 2:
        return library.handle_display_command(ctx)

    elif choice == 3:
        return sort.handle_sort_menu(ctx)

    elif choice == 4:
        return filters.handle_filter_menu(ctx)

    elif choice == 5:
        return search.handle_search_menu(ctx)

    elif choice == 6:
        return performance.handle_performance_menu(ctx)

    else:
        log(f"❌ Invalid choice: {choice}", level="warning")
        return ctx, True
