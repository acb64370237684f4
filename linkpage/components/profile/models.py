"""
Profile component - Data models.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from uuid import UUID

from linkpage.domain.entities import Owner, Profile

# --- Validation Errors ---


@dataclass(frozen=True)
class ProfileValidationError:
    """Profile validation error."""

    code: str
    message: str
    field: str | None = None


# --- Configuration ---


@dataclass(frozen=True)
class ProfileConfig:
    username_min: int = 3
    username_max: int = 30
    username_pattern: str = r"^[a-z0-9][a-z0-9_.-]*$"
    reserved_usernames: frozenset[str] = frozenset(
        {"admin", "api", "assets", "dashboard", "docs", "health", "login", "logout", "redoc"}
    )
    display_name_max: int = 100
    bio_max: int = 500

    default_bio: str = "Welcome to my page!"
    default_template: str = "designer"
    default_primary_color: str = "#6366F1"
    default_background_color: str | None = "#F8FAFC"
    default_font_family: str = "Inter, sans-serif"
    default_font_size: str = "medium"
    default_page_width: str = "normal"
    default_is_rtl: bool = True


# --- Input Models ---


@dataclass(frozen=True)
class GetOrCreateProfileInput:
    """The signed-in owner whose profile the dashboard opens."""

    owner: Owner


@dataclass(frozen=True)
class UpdateProfileInput:
    """Input for updating a profile. None fields are left unchanged."""

    owner_id: UUID
    username: str | None = None
    display_name: str | None = None
    bio: str | None = None
    avatar_url: str | None = None
    template: str | None = None
    primary_color: str | None = None
    background_color: str | None = None
    font_family: str | None = None
    font_size: str | None = None
    page_width: str | None = None
    is_rtl: bool | None = None


# --- Output Models ---


@dataclass(frozen=True)
class ProfileOperationOutput:
    """Output from profile operation."""

    profile: Profile | None
    errors: tuple[ProfileValidationError, ...] = field(default_factory=tuple)
    success: bool = True
    created: bool = False
