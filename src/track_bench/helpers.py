"""
Prompt helpers shared by the menu loop and command handlers.
"""

from typing import Optional

from track_bench.core.output import log
from track_bench.utils.parsers import parse_choice


def prompt_text(message: str) -> str:
    """Read one line of free text."""
    return input(message)


def prompt_choice(message: str = "Choice: ") -> Optional[int]:
    """Read one integer menu selector.

    Returns:
        The choice, or None after reporting non-numeric input
    """
    raw = input(message)
    choice = parse_choice(raw)
    if choice is None:
        log(f"❌ Invalid choice: {raw.strip()!r} is not a number", level="warning")
    return choice


def print_menu(title: str, options: list[tuple[int, str]]) -> None:
    """Print a numbered submenu."""
    print(f"\n=== {title} ===")
    for number, label in options:
        print(f"{number}. {label}")
