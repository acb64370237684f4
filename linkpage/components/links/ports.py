"""
Links component - Port interfaces.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Protocol
from uuid import UUID

from linkpage.domain.entities import Link


class LinkRepoPort(Protocol):
    """Repository interface for links."""

    def save(self, link: Link) -> Link:
        """Save or update link."""
        ...

    def get_by_id(self, link_id: UUID) -> Link | None:
        """Get link by ID."""
        ...

    def list_for_owner(self, owner_id: UUID, active_only: bool = False) -> list[Link]:
        """List an owner's links ordered by position ascending."""
        ...

    def delete(self, link_id: UUID) -> None:
        """Delete link."""
        ...

    def save_positions(self, owner_id: UUID, positions: Mapping[UUID, int]) -> None:
        """Persist several positions as one atomic write."""
        ...

    def increment_clicks(self, link_id: UUID) -> None:
        """Add one to the link's click counter."""
        ...
