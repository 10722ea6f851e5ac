"""Domain layer for Track Bench."""
