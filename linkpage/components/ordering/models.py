"""
Ordering component - Data models.

Errors raised by the functional core and the shell input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from uuid import UUID

# --- Core Errors ---


class OrderingError(Exception):
    """Base class for ordering failures. The collection is never left half-moved."""


class InvalidIndex(OrderingError):
    """Move source or target index is outside the collection."""

    def __init__(self, index: int, size: int) -> None:
        self.index = index
        self.size = size
        super().__init__(f"Index {index} is out of range for a collection of {size} items")


class UnknownItem(OrderingError):
    """Moved item is not part of the collection."""

    def __init__(self, item_id: UUID) -> None:
        self.item_id = item_id
        super().__init__(f"Item {item_id} is not in the collection")


# --- Validation Errors ---


@dataclass(frozen=True)
class OrderingValidationError:
    """Ordering error as surfaced to the shell."""

    code: str
    message: str
    field: str | None = None


# --- Input Models ---


@dataclass(frozen=True)
class MoveInput:
    """Input for moving one item inside an owner's collection."""

    owner_id: UUID
    item_id: UUID
    from_index: int
    to_index: int


# --- Output Models ---


@dataclass(frozen=True)
class MoveOutput:
    """Output from a move operation."""

    # Item ids in their new order; empty when the move was rejected
    order: tuple[UUID, ...] = ()
    errors: tuple[OrderingValidationError, ...] = field(default_factory=tuple)
    success: bool = True
    writes: int = 0
