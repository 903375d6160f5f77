"""Thread-safe collection of matched items."""

import json
import threading
from typing import Iterable, Iterator, List, Set

from config.models import ItemRecord

class ResultSet:
    """
    Matched items deduplicated by full record equality.

    Two records with the same id but different content are kept as
    separate entries.
    """

    def __init__(self, items: Iterable[ItemRecord] = ()):
        self._items: Set[ItemRecord] = set(items)
        self._lock = threading.Lock()

    def add(self, item: ItemRecord) -> None:
        with self._lock:
            self._items.add(item)

    def update(self, items: Iterable[ItemRecord]) -> None:
        batch = list(items)
        with self._lock:
            self._items.update(batch)

    def sorted(self) -> List[ItemRecord]:
        """
        Items ordered by id ascending.

        Equal ids are ordered by their canonical JSON text so the order
        does not depend on insertion order.
        """
        with self._lock:
            snapshot = list(self._items)
        return sorted(snapshot, key=_sort_key)

    def __contains__(self, item: object) -> bool:
        with self._lock:
            return item in self._items

    def __iter__(self) -> Iterator[ItemRecord]:
        return iter(self.sorted())

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ResultSet):
            return NotImplemented
        return set(self.sorted()) == set(other.sorted())

    def __repr__(self):
        return f"ResultSet({len(self)} items)"

def _sort_key(item: ItemRecord):
    return item.id, json.dumps(item.to_dict(), sort_keys=True)
