"""
Performance test command handlers for Track Bench.

Handles: one-by-one removal, sort comparison
"""

from typing import Tuple

from rich.table import Table

from track_bench.context import AppContext
from track_bench.core.output import log
from track_bench.domain.tracks import benchmark
from track_bench.helpers import print_menu, prompt_choice
from track_bench.utils.timing import format_ms

PERFORMANCE_MENU = [
    (1, "One-by-one removal test"),
    (2, "Compare all sorts"),
]


def handle_removal_test_command(ctx: AppContext) -> Tuple[AppContext, bool]:
    """Empty the store by removing the first track until none are left.

    Returns:
        (updated_context, should_continue)
    """
    log("\n=== ONE-BY-ONE REMOVAL (performance test) ===")
    log("⚠ This empties the whole list!", level="warning")

    result = benchmark.remove_one_by_one(ctx.store)
    log(f"✓ Removed: {result.removed} tracks")
    log(f"✓ Time: {format_ms(result.elapsed_ms)}")
    return ctx, True


def handle_compare_sorts_command(ctx: AppContext) -> Tuple[AppContext, bool]:
    """Time every popularity sort on a copy of the store and show a table.

    Returns:
        (updated_context, should_continue)
    """
    log(f"\n=== SORT COMPARISON ({len(ctx.store)} tracks, {ctx.backend_label}) ===")
    log("⚠ Each sort runs on its own copy; the loaded list is not changed")

    timings = benchmark.compare_sorts(
        ctx.store, ctx.config.performance.max_selection_sort_size
    )

    table = Table(title="Sort timings")
    table.add_column("Algorithm")
    table.add_column("Time", justify="right")
    table.add_column("Note")
    for timing in timings:
        elapsed = format_ms(timing.elapsed_ms) if timing.elapsed_ms is not None else "-"
        table.add_row(timing.algorithm, elapsed, timing.note)
        log(f"{timing.algorithm}: {elapsed} {timing.note}".rstrip(), level="debug")

    ctx.console.print(table)
    return ctx, True


def handle_performance_menu(ctx: AppContext) -> Tuple[AppContext, bool]:
    """Show the performance menu and run the chosen test.

    Returns:
        (updated_context, should_continue)
    """
    print_menu("PERFORMANCE TESTS", PERFORMANCE_MENU)
    choice = prompt_choice()

    if choice == 1:
        return handle_removal_test_command(ctx)
    elif choice == 2:
        return handle_compare_sorts_command(ctx)
    elif choice is not None:
        log(f"❌ Invalid choice: {choice}", level="warning")
    return ctx, True
