"""
Track store backing structures.

Two interchangeable implementations of one ordered, duplicate-permitting
collection: a contiguous growable array and a doubly linked list. They
behave identically; only their performance differs.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Callable, Iterable, Iterator, List, Optional

from loguru import logger

from .models import LoadResult, TrackRecord
from .parser import parse_line
from track_bench.utils.timing import timed


class TrackStore(ABC):
    """Ordered collection of TrackRecord with 0-based index access.

    Index operations raise IndexError when out of range.
    """

    backend: str = ""
    label: str = ""

    @abstractmethod
    def __len__(self) -> int: ...

    @abstractmethod
    def __iter__(self) -> Iterator[TrackRecord]: ...

    @abstractmethod
    def get(self, index: int) -> TrackRecord: ...

    @abstractmethod
    def set(self, index: int, record: TrackRecord) -> None: ...

    @abstractmethod
    def append(self, record: TrackRecord) -> None: ...

    @abstractmethod
    def remove_at(self, index: int) -> TrackRecord: ...

    @abstractmethod
    def clear(self) -> None: ...

    def size(self) -> int:
        return len(self)

    def is_empty(self) -> bool:
        return len(self) == 0

    def extend(self, records: Iterable[TrackRecord]) -> None:
        for record in records:
            self.append(record)

    def to_list(self) -> List[TrackRecord]:
        return list(self)

    def replace_all(self, records: Iterable[TrackRecord]) -> None:
        """Replace the whole contents, keeping the given order."""
        records = list(records)
        self.clear()
        self.extend(records)

    def copy(self) -> "TrackStore":
        """A new store of the same backend holding the same records in order."""
        clone = type(self)()
        clone.extend(self)
        return clone

    def sort(self, key: Callable[[TrackRecord], object]) -> None:
        """Stable ascending sort with the library sort."""
        self.replace_all(sorted(self, key=key))

    def remove_if(self, predicate: Callable[[TrackRecord], bool]) -> int:
        """Remove every record matching predicate. Returns the number removed."""
        kept = [record for record in self if not predicate(record)]
        removed = len(self) - len(kept)
        if removed:
            self.replace_all(kept)
        return removed

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self):
            raise IndexError(f"index {index} out of range for {len(self)} tracks")

    def __repr__(self) -> str:
        return f"{type(self).__name__}(size={len(self)})"


class ArrayTrackStore(TrackStore):
    """Contiguous growable array backed by a Python list."""

    backend = "array"
    label = "Array"

    def __init__(self, records: Optional[Iterable[TrackRecord]] = None) -> None:
        self._items: List[TrackRecord] = list(records) if records is not None else []

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[TrackRecord]:
        return iter(self._items)

    def get(self, index: int) -> TrackRecord:
        self._check_index(index)
        return self._items[index]

    def set(self, index: int, record: TrackRecord) -> None:
        self._check_index(index)
        self._items[index] = record

    def append(self, record: TrackRecord) -> None:
        self._items.append(record)

    def extend(self, records: Iterable[TrackRecord]) -> None:
        self._items.extend(records)

    def remove_at(self, index: int) -> TrackRecord:
        self._check_index(index)
        return self._items.pop(index)

    def clear(self) -> None:
        self._items.clear()

    def to_list(self) -> List[TrackRecord]:
        return self._items[:]

    def sort(self, key: Callable[[TrackRecord], object]) -> None:
        self._items.sort(key=key)

    def remove_if(self, predicate: Callable[[TrackRecord], bool]) -> int:
        before = len(self._items)
        self._items[:] = [record for record in self._items if not predicate(record)]
        return before - len(self._items)


class _Node:
    __slots__ = ("record", "prev", "next")

    def __init__(self, record: TrackRecord) -> None:
        self.record = record
        self.prev: Optional["_Node"] = None
        self.next: Optional["_Node"] = None


class LinkedTrackStore(TrackStore):
    """Doubly linked list. Index access walks from the nearer end."""

    backend = "linked"
    label = "Linked list"

    def __init__(self, records: Optional[Iterable[TrackRecord]] = None) -> None:
        self._head: Optional[_Node] = None
        self._tail: Optional[_Node] = None
        self._size = 0
        if records is not None:
            self.extend(records)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[TrackRecord]:
        node = self._head
        while node is not None:
            yield node.record
            node = node.next

    def _node_at(self, index: int) -> _Node:
        self._check_index(index)
        if index < self._size // 2:
            node = self._head
            for _ in range(index):
                node = node.next
        else:
            node = self._tail
            for _ in range(self._size - 1 - index):
                node = node.prev
        return node

    def get(self, index: int) -> TrackRecord:
        return self._node_at(index).record

    def set(self, index: int, record: TrackRecord) -> None:
        self._node_at(index).record = record

    def append(self, record: TrackRecord) -> None:
        node = _Node(record)
        if self._tail is None:
            self._head = self._tail = node
        else:
            node.prev = self._tail
            self._tail.next = node
            self._tail = node
        self._size += 1

    def _unlink(self, node: _Node) -> None:
        if node.prev is None:
            self._head = node.next
        else:
            node.prev.next = node.next
        if node.next is None:
            self._tail = node.prev
        else:
            node.next.prev = node.prev
        node.prev = node.next = None
        self._size -= 1

    def remove_at(self, index: int) -> TrackRecord:
        node = self._node_at(index)
        self._unlink(node)
        return node.record

    def clear(self) -> None:
        self._head = self._tail = None
        self._size = 0

    def remove_if(self, predicate: Callable[[TrackRecord], bool]) -> int:
        removed = 0
        node = self._head
        while node is not None:
            following = node.next
            if predicate(node.record):
                self._unlink(node)
                removed += 1
            node = following
        return removed


STORE_BACKENDS = {
    ArrayTrackStore.backend: ArrayTrackStore,
    LinkedTrackStore.backend: LinkedTrackStore,
}


def create_store(backend: str) -> TrackStore:
    """Create an empty store for the named backend ('array' or 'linked').

    Raises:
        ValueError: If the backend name is unknown
    """
    try:
        return STORE_BACKENDS[backend]()
    except KeyError:
        raise ValueError(
            f"Unknown store backend: {backend!r}. "
            f"Available: {', '.join(STORE_BACKENDS)}"
        ) from None


def load_tracks(
    store: TrackStore,
    path: str | Path,
    encoding: str = "utf-8",
    errors: str = "replace",
) -> LoadResult:
    """Append every parseable data line of a CSV file to the store.

    The first line is a header and is discarded. Lines with too few fields
    are skipped. Records are appended as they are read, so lines parsed
    before an I/O error stay in the store. Undecodable bytes are handled
    per ``errors`` (see ``open``); the default substitutes U+FFFD.

    Raises:
        OSError: If the file cannot be opened or read
        UnicodeDecodeError: On undecodable bytes when errors is "strict"
    """
    path = Path(path)
    count = 0
    skipped = 0

    with timed() as timer:
        with open(path, "r", encoding=encoding, errors=errors, newline=None) as f:
            f.readline()  # header
            for line in f:
                record = parse_line(line)
                if record is None:
                    skipped += 1
                    continue
                store.append(record)
                count += 1

    if skipped:
        logger.debug(f"Skipped {skipped} short lines in {path}")
    logger.info(
        f"Loaded {count} tracks from {path} into {store.label} in {timer.elapsed_ms:.2f} ms"
    )
    return LoadResult(count=count, elapsed_ms=timer.elapsed_ms)
