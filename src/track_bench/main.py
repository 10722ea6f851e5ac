"""
Track Bench - Main interactive loop
"""

import sys
from pathlib import Path
from typing import Optional

from loguru import logger
from rich.console import Console
from rich.markup import escape

from track_bench import router
from track_bench.context import AppContext
from track_bench.core import config
from track_bench.core.output import setup_loguru
from track_bench.commands import library
from track_bench.helpers import prompt_text
from track_bench.utils import parsers

# Backend selector -> store backend
BACKEND_CHOICES = {1: "array", 2: "linked"}


def choose_backend(default: str, console: Console) -> str:
    """Ask which backing structure to use; an empty answer keeps the default."""
    console.print("\nChoose the implementation:", style="bold")
    print("1. Array")
    print("2. Linked list")

    while True:
        raw = prompt_text(f"Choice [{default}]: ")
        if not raw.strip():
            return default
        choice = parsers.parse_choice(raw)
        if choice in BACKEND_CHOICES:
            return BACKEND_CHOICES[choice]
        console.print("❌ Please enter 1 or 2", style="red")


def run_menu_loop(ctx: AppContext) -> AppContext:
    """Run the main menu until the user quits or input ends.

    Errors raised by a command (for example a missing dataset) are reported
    and the loop continues with the store as the command left it.
    """
    console = ctx.console
    should_continue = True

    while should_continue:
        router.print_main_menu(ctx)
        try:
            raw = prompt_text("\nChoice: ")
            choice = parsers.parse_choice(raw)
            if choice is None:
                console.print(f"[red]❌ Invalid choice: {escape(repr(raw.strip()))}[/red]")
                continue

            ctx, should_continue = router.handle_choice(ctx, choice)

        except KeyboardInterrupt:
            console.print("\n[yellow]Use 0 to quit gracefully.[/yellow]")
        except EOFError:
            console.print("\n[green]Goodbye![/green]")
            break
        except Exception as e:
            logger.exception("Command failed")
            console.print(f"[red]❌ Error: {escape(str(e))}[/red]")

    return ctx


def interactive_mode(
    config_path: Optional[Path] = None,
    backend: Optional[str] = None,
    preload: Optional[Path] = None,
) -> None:
    """Run the interactive menu.

    Args:
        config_path: Explicit config file (standard lookup when None)
        backend: Store backend; asked interactively when None
        preload: Dataset to load before the first menu
    """
    current_config = config.load_config(config_path)
    setup_loguru(
        config.get_log_file_path(current_config), level=current_config.logging.level
    )

    console = Console()
    console.print("[bold green]=== Track Bench - music data exploration ===[/bold green]")

    try:
        if backend is None:
            backend = choose_backend(current_config.store.backend, console)
    except (EOFError, KeyboardInterrupt):
        console.print("\n[green]Goodbye![/green]")
        return

    ctx = AppContext.create(current_config, backend=backend, console=console)
    logger.info(f"Starting with {ctx.backend_label} store")

    try:
        if preload is not None:
            try:
                ctx, _ = library.handle_load_command(ctx, preload)
            except (OSError, ValueError) as e:
                logger.exception("Preload failed")
                console.print(f"[red]❌ Error: {escape(str(e))}[/red]")

        run_menu_loop(ctx)

    except Exception as e:
        logger.exception("Unexpected error")
        console.print(f"[red]An unexpected error occurred: {escape(str(e))}[/red]")
        sys.exit(1)
