"""Tests for the performance test operations."""

from track_bench.domain.tracks.benchmark import compare_sorts, remove_one_by_one


def test_remove_one_by_one_empties_store(store_factory, track_factory):
    store = store_factory([track_factory(title=str(i)) for i in range(25)])

    result = remove_one_by_one(store)

    assert result.removed == 25
    assert result.elapsed_ms >= 0
    assert store.is_empty()


def test_remove_one_by_one_on_empty_store(store_factory):
    result = remove_one_by_one(store_factory())
    assert result.removed == 0


def test_compare_sorts_leaves_store_unchanged(store_factory, track_factory):
    tracks = [track_factory(title=str(i), popularity=str(10 - i)) for i in range(10)]
    store = store_factory(tracks)

    timings = compare_sorts(store, max_selection_sort_size=100)

    assert [t.algorithm for t in timings] == ["Selection sort", "Merge sort", "Library sort"]
    assert all(t.elapsed_ms is not None and t.elapsed_ms >= 0 for t in timings)
    assert [t.title for t in store] == [t.title for t in tracks]


def test_compare_sorts_skips_selection_sort_above_limit(store_factory, track_factory):
    store = store_factory([track_factory(title=str(i)) for i in range(5)])

    timings = compare_sorts(store, max_selection_sort_size=4)

    selection = timings[0]
    assert selection.algorithm == "Selection sort"
    assert selection.elapsed_ms is None
    assert "skipped" in selection.note
    assert timings[1].elapsed_ms is not None
