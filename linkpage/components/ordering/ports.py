"""
Ordering component - Port interfaces.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, Protocol
from uuid import UUID


class OrderedRepoPort(Protocol):
    """Persistence view of an owner-scoped ordered collection."""

    def list_for_owner(self, owner_id: UUID, active_only: bool = False) -> Sequence[Any]:
        """List the owner's items ordered by position ascending."""
        ...

    def save_positions(self, owner_id: UUID, positions: Mapping[UUID, int]) -> None:
        """Persist new positions for several items as one atomic write."""
        ...
