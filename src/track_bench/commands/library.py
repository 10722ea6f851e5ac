"""
Library command handlers for Track Bench.

Handles: load file, display
"""

from pathlib import Path
from typing import Tuple

from track_bench.context import AppContext
from track_bench.core.output import log
from track_bench.domain.tracks.display import display_count, format_header, format_track, RULE_WIDTH
from track_bench.domain.tracks.store import load_tracks
from track_bench.helpers import print_menu, prompt_choice
from track_bench.utils.timing import format_ms


def handle_load_command(ctx: AppContext, path: str | Path) -> Tuple[AppContext, bool]:
    """Load a dataset into the current store.

    I/O errors propagate to the menu loop, which reports them. Tracks parsed
    before the failure stay loaded.

    Args:
        ctx: Application context
        path: CSV file to load

    Returns:
        (updated_context, should_continue)
    """
    log(f"\n=== LOADING with {ctx.backend_label} ===")
    result = load_tracks(
        ctx.store,
        path,
        encoding=ctx.config.data.encoding,
        errors=ctx.config.data.decode_errors,
    )

    log(f"✓ Loaded: {result.count} tracks")
    log(f"✓ Time: {format_ms(result.elapsed_ms)}")
    log(f"✓ Structure: {ctx.backend_label}")
    return ctx, True


def handle_load_menu(ctx: AppContext) -> Tuple[AppContext, bool]:
    """Offer the preset datasets and load the chosen one.

    Returns:
        (updated_context, should_continue)
    """
    presets = ctx.config.data.preset_paths()
    print_menu("LOAD A FILE", [(i, path.name) for i, path in enumerate(presets, start=1)])

    choice = prompt_choice()
    if choice is None:
        return ctx, True

    if not 1 <= choice <= len(presets):
        log(f"❌ Invalid choice: {choice}", level="warning")
        return ctx, True

    return handle_load_command(ctx, presets[choice - 1])


def handle_display_command(ctx: AppContext) -> Tuple[AppContext, bool]:
    """Print the first rows of the store within the display budget.

    Returns:
        (updated_context, should_continue)
    """
    size = len(ctx.store)
    rows = display_count(size, ctx.config.display)

    print(f"\n=== DISPLAY ({size} tracks) ===")
    print(format_header())
    print("-" * RULE_WIDTH)

    for i, track in enumerate(ctx.store):
        if i >= rows:
            break
        print(f"{i}. {format_track(track)}")

    if rows < size:
        print(f"... ({size - rows} more tracks)")

    return ctx, True
