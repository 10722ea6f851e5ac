"""Tracks domain - the record model and the algorithm suite.

This domain handles:
- Track records and CSV row parsing
- The two store backing structures and dataset loading
- Sorting, searching and filtering
- Performance tests
"""

# Models
from .models import (
    TrackRecord,
    LoadResult,
    SortResult,
    SearchResult,
    FilterResult,
    RemovalResult,
    SortTiming,
)

# Parsing
from .parser import parse_line, split_fields

# Stores
from .store import (
    TrackStore,
    ArrayTrackStore,
    LinkedTrackStore,
    create_store,
    load_tracks,
)

# Algorithms
from .sorting import (
    SORT_BY_TITLE,
    SORT_BY_POPULARITY,
    SORT_BY_YEAR,
    selection_sort,
    merge_sort,
    library_sort,
)
from .search import linear_search, binary_search
from .filters import filter_by_year, filter_by_field
from .benchmark import remove_one_by_one, compare_sorts

__all__ = [
    # Models
    "TrackRecord",
    "LoadResult",
    "SortResult",
    "SearchResult",
    "FilterResult",
    "RemovalResult",
    "SortTiming",
    # Parsing
    "parse_line",
    "split_fields",
    # Stores
    "TrackStore",
    "ArrayTrackStore",
    "LinkedTrackStore",
    "create_store",
    "load_tracks",
    # Sorting
    "SORT_BY_TITLE",
    "SORT_BY_POPULARITY",
    "SORT_BY_YEAR",
    "selection_sort",
    "merge_sort",
    "library_sort",
    # Search
    "linear_search",
    "binary_search",
    # Filters
    "filter_by_year",
    "filter_by_field",
    # Benchmark
    "remove_one_by_one",
    "compare_sorts",
]
