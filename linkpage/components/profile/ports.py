"""
Profile component - Port interfaces.
"""

from __future__ import annotations

from typing import Protocol
from uuid import UUID

from linkpage.domain.entities import Profile


class ProfileRepoPort(Protocol):
    """Repository interface for profiles."""

    def get_by_username(self, username: str) -> Profile | None:
        """Get profile by its public username."""
        ...

    def get_by_owner(self, owner_id: UUID) -> Profile | None:
        """Get the owner's profile."""
        ...

    def save(self, profile: Profile) -> Profile:
        """Save or update profile."""
        ...
