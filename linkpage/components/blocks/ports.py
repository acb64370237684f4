"""
Blocks component - Port interfaces.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Protocol
from uuid import UUID

from linkpage.domain.entities import ContentBlock


class BlockRepoPort(Protocol):
    """Repository interface for content blocks."""

    def save(self, block: ContentBlock) -> ContentBlock:
        """Save or update block."""
        ...

    def get_by_id(self, block_id: UUID) -> ContentBlock | None:
        """Get block by ID."""
        ...

    def list_for_owner(self, owner_id: UUID, active_only: bool = False) -> list[ContentBlock]:
        """List an owner's blocks ordered by position ascending."""
        ...

    def delete(self, block_id: UUID) -> None:
        """Delete block."""
        ...

    def save_positions(self, owner_id: UUID, positions: Mapping[UUID, int]) -> None:
        """Persist several positions as one atomic write."""
        ...
