"""Shared fixtures for Track Bench tests."""

from pathlib import Path
from typing import Callable, Iterable, Sequence

import pytest

from track_bench.core.config import Config
from track_bench.domain.tracks.models import TrackRecord
from track_bench.domain.tracks.store import TrackStore, create_store

HEADER = (
    "name,album_id,track_id,duration_ms,album_type,label,album_uri,album_name,"
    "release_date,total_tracks,album_popularity,explicit,track_number,"
    + ",".join(f"artist_{i}" for i in range(12))
)


def make_row(
    title: str = "Song",
    popularity: str = "50",
    release_date: str = "2020-01-01",
    album: str = "Album",
    album_type: str = "album",
    artists: Sequence[str] = ("Artist",),
    duration_ms: str = "200000",
) -> str:
    """Build one dataset line with values at the fixed column offsets."""
    fields = ["x"] * 13 + [""] * 12
    fields[0] = title
    fields[3] = duration_ms
    fields[4] = album_type
    fields[7] = album
    fields[8] = release_date
    fields[10] = popularity
    for offset, artist in enumerate(artists):
        fields[13 + offset] = artist
    return ",".join(fields)


def make_track(**kwargs) -> TrackRecord:
    return TrackRecord.from_fields(make_row(**kwargs).split(","))


@pytest.fixture
def row_factory() -> Callable[..., str]:
    """Factory building raw dataset lines."""
    return make_row


@pytest.fixture
def track_factory() -> Callable[..., TrackRecord]:
    """Factory building TrackRecords through the real column layout."""
    return make_track


@pytest.fixture
def write_csv(tmp_path: Path) -> Callable[..., Path]:
    """Write a dataset file with a header line followed by the given lines."""

    def _write(lines: Iterable[str], name: str = "tracks.csv", header: str = HEADER) -> Path:
        path = tmp_path / name
        path.write_text("\n".join([header, *lines]) + "\n", encoding="utf-8")
        return path

    return _write


@pytest.fixture(params=["array", "linked"])
def backend(request) -> str:
    """Every store test runs against both backing structures."""
    return request.param


@pytest.fixture
def store_factory(backend: str) -> Callable[[Iterable[TrackRecord]], TrackStore]:
    """Build a store of the current backend holding the given tracks."""

    def _build(tracks: Iterable[TrackRecord] = ()) -> TrackStore:
        store = create_store(backend)
        store.extend(tracks)
        return store

    return _build


@pytest.fixture
def test_config(tmp_path: Path) -> Config:
    """Default config pointing its data directory at tmp_path."""
    config = Config()
    config.data.data_dir = str(tmp_path)
    return config
