"""
Cross-cutting utilities for Track Bench.

Contains:
- parsers: Menu input parsing
- timing: Wall-clock timing of operations
"""

from .parsers import *
from .timing import Timer, timed, format_ms

__all__ = [
    # From parsers
    'parse_choice',
    # From timing
    'Timer',
    'timed',
    'format_ms',
]
