"""Track Bench - sort, filter and search a music dataset."""

__version__ = "0.1.0"
