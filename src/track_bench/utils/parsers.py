"""
Menu input parsing utilities.
"""

from typing import Optional


def parse_choice(user_input: str) -> Optional[int]:
    """
    Parse a menu selector.

    Args:
        user_input: Raw user input string

    Returns:
        The integer choice, or None when the input is not a whole number
    """
    text = user_input.strip()
    if not text:
        return None
    try:
        return int(text)
    except ValueError:
        return None


__all__ = ['parse_choice']
