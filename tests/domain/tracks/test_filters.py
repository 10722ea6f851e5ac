"""Tests for year and field filters."""

import pytest

from track_bench.domain.tracks.filters import (
    VALID_CRITERIA,
    filter_by_field,
    filter_by_year,
    parse_year,
)


@pytest.fixture
def catalog(track_factory):
    return [
        track_factory(title="Intro", album="First Light", album_type="album",
                      release_date="2020-01-10", artists=("Nova", "Kite")),
        track_factory(title="Outro", album="First Light", album_type="Album",
                      release_date="2020-12-01", artists=("Nova",)),
        track_factory(title="Radio Edit", album="Singles Club", album_type="single",
                      release_date="2019-03-03", artists=("Echo Park",)),
        track_factory(title="Hits Live", album="Greatest", album_type="compilation",
                      release_date="2018", artists=()),
        track_factory(title="B-side", album="Singles Club", album_type="singles",
                      release_date="bad", artists=("kite runner",)),
    ]


def titles(store):
    return [t.title for t in store]


class TestYearFilter:
    def test_keeps_only_matching_year(self, store_factory, catalog):
        store = store_factory(catalog)

        result = filter_by_year(store, "2020")

        assert titles(store) == ["Intro", "Outro"]
        assert result.removed == 3
        assert result.remaining == 2
        assert result.elapsed_ms >= 0

    def test_is_idempotent(self, store_factory, catalog):
        once = store_factory(catalog)
        twice = store_factory(catalog)

        filter_by_year(once, "2020")
        filter_by_year(twice, "2020")
        second = filter_by_year(twice, "2020")

        assert titles(once) == titles(twice)
        assert second.removed == 0

    def test_year_zero_matches_malformed_dates(self, store_factory, catalog):
        store = store_factory(catalog)
        filter_by_year(store, "0")
        assert titles(store) == ["B-side"]

    def test_no_match_empties_store(self, store_factory, catalog):
        store = store_factory(catalog)
        result = filter_by_year(store, "1970")
        assert len(store) == 0
        assert result.removed == len(catalog)

    @pytest.mark.parametrize("text", ["", "twenty", "20.5", "2020-01"])
    def test_invalid_year_does_not_mutate(self, store_factory, catalog, text):
        store = store_factory(catalog)

        with pytest.raises(ValueError, match="Invalid year"):
            filter_by_year(store, text)

        assert len(store) == len(catalog)

    def test_parse_year_strips_whitespace(self):
        assert parse_year(" 1999\n") == 1999


class TestFieldFilter:
    def test_artist_substring_case_insensitive(self, store_factory, catalog):
        store = store_factory(catalog)

        result = filter_by_field(store, "artist", "KITE")

        assert titles(store) == ["Intro", "B-side"]
        assert result.removed == 3
        assert result.remaining == 2

    def test_artist_matches_joined_display(self, store_factory, catalog):
        store = store_factory(catalog)
        filter_by_field(store, "artist", "nova, kite")
        assert titles(store) == ["Intro"]

    def test_artist_unknown_display(self, store_factory, catalog):
        store = store_factory(catalog)
        filter_by_field(store, "artist", "unknown")
        assert titles(store) == ["Hits Live"]

    def test_album_substring(self, store_factory, catalog):
        store = store_factory(catalog)
        filter_by_field(store, "album", "singles")
        assert titles(store) == ["Radio Edit", "B-side"]

    def test_title_substring(self, store_factory, catalog):
        store = store_factory(catalog)
        filter_by_field(store, "title", "TRO")
        assert titles(store) == ["Intro", "Outro"]

    def test_type_is_exact_match(self, store_factory, catalog):
        """'single' keeps 'single' but not 'singles'."""
        store = store_factory(catalog)

        filter_by_field(store, "type", "single")

        assert titles(store) == ["Radio Edit"]

    def test_type_is_case_insensitive(self, store_factory, catalog):
        store = store_factory(catalog)
        filter_by_field(store, "type", "ALBUM")
        assert titles(store) == ["Intro", "Outro"]

    def test_unknown_criteria_does_not_mutate(self, store_factory, catalog):
        store = store_factory(catalog)

        with pytest.raises(ValueError, match="Invalid filter criteria"):
            filter_by_field(store, "genre", "rock")

        assert len(store) == len(catalog)

    def test_valid_criteria(self):
        assert set(VALID_CRITERIA) == {"artist", "album", "title", "type"}
