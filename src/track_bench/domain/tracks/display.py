"""
Track display formatting and the row budget for listing a store.
"""

from track_bench.core.config import DisplayConfig

from .models import TrackRecord

TITLE_WIDTH = 40
ARTIST_WIDTH = 30
ALBUM_WIDTH = 20
RULE_WIDTH = 120


def truncate(text: str, width: int) -> str:
    """Cut text longer than width to width-3 characters plus '...'."""
    return text[:width - 3] + "..." if len(text) > width else text


def format_header() -> str:
    return (
        f"{'TITLE':<{TITLE_WIDTH}} | {'ARTIST':<{ARTIST_WIDTH}} | "
        f"{'ALBUM':<{ALBUM_WIDTH}} | {'YEAR':>4} | POP"
    )


def format_track(track: TrackRecord) -> str:
    """One fixed-width row: title | artists | album | year | popularity."""
    return (
        f"{truncate(track.title, TITLE_WIDTH):<{TITLE_WIDTH}} | "
        f"{truncate(track.artists_display, ARTIST_WIDTH):<{ARTIST_WIDTH}} | "
        f"{truncate(track.album_name, ALBUM_WIDTH):<{ALBUM_WIDTH}} | "
        f"{track.year:4d} | Pop: {track.popularity:3d}"
    )


def format_duration(duration_ms: str) -> str:
    """Format a raw millisecond duration as m:ss, or '?:??' when not numeric."""
    try:
        seconds = int(duration_ms) // 1000
    except ValueError:
        return "?:??"

    hours, remainder = divmod(seconds, 3600)
    minutes, secs = divmod(remainder, 60)
    if hours > 0:
        return f"{hours}:{minutes:02d}:{secs:02d}"
    return f"{minutes}:{secs:02d}"


def display_count(size: int, config: DisplayConfig) -> int:
    """Number of rows to show for a store of the given size."""
    if size > config.medium_limit:
        return size // config.sample_divisor
    if size > config.full_limit:
        return min(config.medium_rows, size)
    return size
