"""Ordered in-memory table with monotonically increasing integer ids."""

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass
class InMemoryTable(Generic[T]):
    """Rows keyed by id, iterated in insertion order.

    Ids start at 1 and are never reused, even after a row is deleted.
    """

    rows: dict[int, T] = field(default_factory=dict)
    last_id: int = 0

    def next_id(self) -> int:
        """Reserve and return the next identifier."""
        self.last_id += 1
        return self.last_id

    def insert(self, build: Callable[[int], T]) -> T:
        """Build a row with a fresh id, store it and return it."""
        row_id = self.next_id()
        row = build(row_id)
        self.rows[row_id] = row
        return row

    def get(self, row_id: int) -> T | None:
        """Return a row by id, if present."""
        return self.rows.get(row_id)

    def replace(self, row_id: int, row: T) -> T:
        """Overwrite an existing row, keeping its position."""
        if row_id not in self.rows:
            raise KeyError(row_id)
        self.rows[row_id] = row
        return row

    def delete(self, row_id: int) -> None:
        """Remove a row if present."""
        self.rows.pop(row_id, None)

    def values(self) -> list[T]:
        """Return all rows in insertion order."""
        return list(self.rows.values())

    def filter(self, predicate: Callable[[T], bool]) -> list[T]:
        """Return rows matching a predicate, in insertion order."""
        return [row for row in list(self.rows.values()) if predicate(row)]

    def __iter__(self) -> Iterator[T]:
        return iter(list(self.rows.values()))

    def __len__(self) -> int:
        return len(self.rows)
