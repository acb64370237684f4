"""
CollectionOrderer - Owner-scoped ordered collections of links and content blocks.

Functional Core - pure business logic.

Invariants:
- After append/move the positions are exactly {0, 1, ..., n-1}
- Positions are recomputed from list indices, never incremented in place,
  so repeating a move is a no-op
- A rejected move leaves the collection untouched

Every operation returns a new orderer; instances are never mutated.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any, Generic, Protocol, TypeVar
from uuid import UUID

from .models import InvalidIndex, UnknownItem


class Positioned(Protocol):
    """Anything the orderer can hold (Link, ContentBlock)."""

    id: UUID
    position: int
    is_active: bool

    def model_copy(self, *, update: Any = None, deep: bool = False) -> Any: ...


T = TypeVar("T", bound=Positioned)


class ActiveView(Generic[T]):
    """
    Lazy, restartable view of the active subset in ascending position order.

    Each iteration sorts a snapshot of the items; equal positions keep
    their insertion order.
    """

    def __init__(self, items: tuple[T, ...]) -> None:
        self._items = items

    def __iter__(self) -> Iterator[T]:
        return (item for item in sorted(self._items, key=lambda i: i.position) if item.is_active)


class CollectionOrderer(Generic[T]):
    """Ordered collection for one owner."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        # Stable sort: ties keep the order the persistence layer returned them in
        self._items: tuple[T, ...] = tuple(sorted(items, key=lambda i: i.position))

    # --- Introspection ---

    @property
    def items(self) -> tuple[T, ...]:
        return self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def ids(self) -> tuple[UUID, ...]:
        return tuple(item.id for item in self._items)

    def positions(self) -> tuple[int, ...]:
        return tuple(item.position for item in self._items)

    def index_of(self, item_id: UUID) -> int:
        for index, item in enumerate(self._items):
            if item.id == item_id:
                return index
        raise UnknownItem(item_id)

    def next_position(self) -> int:
        """Position for a newly appended item: one past the highest, or 0."""
        if not self._items:
            return 0
        return max(item.position for item in self._items) + 1

    # --- Operations ---

    def append(self, item: T) -> CollectionOrderer[T]:
        """Add an item after every existing one. Freed positions are not reused."""
        placed = item.model_copy(update={"position": self.next_position()})
        return CollectionOrderer((*self._items, placed))

    def move(self, item_id: UUID, from_index: int, to_index: int) -> CollectionOrderer[T]:
        """
        Move an item to to_index and reindex the whole collection.

        The item is located by id; from_index is range-checked but the
        item's actual index wins, so replaying a move is a no-op.

        Raises:
            InvalidIndex: from_index or to_index is outside 0..n-1.
            UnknownItem: item_id is not in the collection.
        """
        size = len(self._items)
        for index in (from_index, to_index):
            if index < 0 or index >= size:
                raise InvalidIndex(index, size)

        current = self.index_of(item_id)
        reordered = list(self._items)
        moved = reordered.pop(current)
        reordered.insert(to_index, moved)
        return CollectionOrderer._from_order(reordered)

    def reindexed(self) -> CollectionOrderer[T]:
        """Dense positions for the current order."""
        return CollectionOrderer._from_order(self._items)

    def remove(self, item_id: UUID) -> CollectionOrderer[T]:
        """Drop an item. Remaining positions are left as they are."""
        self.index_of(item_id)
        return CollectionOrderer(item for item in self._items if item.id != item_id)

    def replace(self, item: T) -> CollectionOrderer[T]:
        """Swap in an updated copy of an existing item, keeping its slot."""
        index = self.index_of(item.id)
        updated = list(self._items)
        updated[index] = item
        return CollectionOrderer._from_order(updated, reassign=False)

    def active_in_order(self) -> ActiveView[T]:
        return ActiveView(self._items)

    def changed_positions(self, before: CollectionOrderer[T]) -> dict[UUID, int]:
        """Positions that differ from another snapshot of the same collection."""
        previous = {item.id: item.position for item in before}
        return {
            item.id: item.position
            for item in self._items
            if previous.get(item.id) != item.position
        }

    # --- Helpers ---

    @classmethod
    def _from_order(cls, ordered: Iterable[T], reassign: bool = True) -> CollectionOrderer[T]:
        orderer: CollectionOrderer[T] = cls.__new__(cls)
        if reassign:
            orderer._items = tuple(
                item if item.position == index else item.model_copy(update={"position": index})
                for index, item in enumerate(ordered)
            )
        else:
            orderer._items = tuple(ordered)
        return orderer


def is_contiguous(positions: Iterable[int]) -> bool:
    """True when positions are exactly 0..n-1, each once."""
    values = sorted(positions)
    return values == list(range(len(values)))
