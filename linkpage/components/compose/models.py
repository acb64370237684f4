"""
Compose component - Data models.

The page view model is derived on every read and never persisted.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from uuid import UUID

from linkpage.components.blocks import ContentUnit
from linkpage.components.links import LinkUnit
from linkpage.components.theme import ThemeParams

# --- Not Found ---


@dataclass(frozen=True)
class ProfileNotFound:
    """No profile is published under this username."""

    username: str


@dataclass(frozen=True)
class LinkNotFound:
    """The profile has no active link with this id."""

    username: str
    link_id: UUID


# --- View Model ---


@dataclass(frozen=True)
class ProfileHeader:
    profile_id: UUID
    username: str
    display_name: str
    bio: str
    avatar_url: str | None


@dataclass(frozen=True)
class PageViewModel:
    """Everything needed to draw one public profile page."""

    header: ProfileHeader
    theme: ThemeParams
    content: tuple[ContentUnit, ...]
    links: tuple[LinkUnit, ...]


# --- Input Models ---


@dataclass(frozen=True)
class ComposePageInput:
    """Public page request; a leading "@" on the username is ignored."""

    username: str


@dataclass(frozen=True)
class LinkClickInput:
    username: str
    link_id: UUID


# --- Output Models ---


@dataclass(frozen=True)
class ComposeOutput:
    page: PageViewModel | None = None
    not_found: ProfileNotFound | None = None
    # Sections that could not be loaded and were rendered empty
    warnings: tuple[str, ...] = field(default_factory=tuple)

    @property
    def success(self) -> bool:
        return self.page is not None


@dataclass(frozen=True)
class LinkClickOutput:
    destination_url: str | None = None
    not_found: ProfileNotFound | LinkNotFound | None = None

    @property
    def success(self) -> bool:
        return self.destination_url is not None
