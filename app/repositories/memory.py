import threading
from contextlib import contextmanager
from dataclasses import replace
from typing import Callable, Dict, Generic, Iterator, List, Optional, TypeVar

T = TypeVar("T")


class InMemoryRepository(Generic[T]):
    """
    Thread-safe in-memory store keyed by integer identifiers.

    Records are frozen dataclasses with an ``id`` field. A record saved
    without an identifier gets the next value of a counter that starts at 1
    and only ever grows, so identifiers are never reused after a delete.

    CONCURRENCY STRATEGY:
    =====================
    One re-entrant lock guards both the counter and the dict:

    - ``save`` and ``delete_by_id`` mutate under the lock, so two concurrent
      inserts can never receive the same identifier
    - reads copy the values under the lock and filter the copy afterwards,
      so a scan never sees a torn write and never holds the lock while
      evaluating predicates
    - ``atomic()`` exposes the same lock to callers that need a
      read-modify-write sequence (stock adjustment, email uniqueness)

    Because the lock is re-entrant, ``save`` and the read helpers can be
    called from inside an ``atomic()`` block.
    """

    def __init__(self):
        self._lock = threading.RLock()
        self._items: Dict[int, T] = {}
        self._next_id = 1

    @contextmanager
    def atomic(self) -> Iterator[None]:
        """Hold exclusive access to the store for the duration of the block."""
        with self._lock:
            yield

    def find_all(self) -> List[T]:
        """Return a snapshot of all records."""
        with self._lock:
            return list(self._items.values())

    def find_by_id(self, item_id: int) -> Optional[T]:
        with self._lock:
            return self._items.get(item_id)

    def filter(self, predicate: Callable[[T], bool]) -> List[T]:
        """Return the records of a snapshot that satisfy predicate."""
        return [item for item in self.find_all() if predicate(item)]

    def find_first(self, predicate: Callable[[T], bool]) -> Optional[T]:
        return next((item for item in self.find_all() if predicate(item)), None)

    def save(self, item: T) -> T:
        """
        Insert or overwrite a record.

        Args:
            item: Record to store. When its id is None a fresh identifier
                is assigned.

        Returns:
            The stored record with its identifier populated
        """
        with self._lock:
            if item.id is None:
                item = replace(item, id=self._next_id)
                self._next_id += 1
            elif item.id >= self._next_id:
                self._next_id = item.id + 1
            self._items[item.id] = item
            return item

    def delete_by_id(self, item_id: int) -> bool:
        """
        Remove a record.

        Returns:
            True if deleted, False if not found
        """
        with self._lock:
            return self._items.pop(item_id, None) is not None

    def exists_by_id(self, item_id: int) -> bool:
        with self._lock:
            return item_id in self._items

    def count(self) -> int:
        with self._lock:
            return len(self._items)
