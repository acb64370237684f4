"""
Links component - Data models.
"""

from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID

from linkpage.components.icons import IconDescriptor
from linkpage.domain.entities import DEFAULT_ICON_SOURCE, IconStyle, Link

# --- Validation Errors ---


@dataclass(frozen=True)
class LinkValidationError:
    """Link validation error."""

    code: str
    message: str
    field: str | None = None


# --- Configuration ---


@dataclass(frozen=True)
class LinkConfig:
    title_max: int = 200
    description_max: int = 300
    url_max: int = 2048
    allowed_protocols: frozenset[str] = frozenset({"http", "https", "mailto", "tel"})
    default_scheme: str = "https"


# --- Renderable Unit ---


@dataclass(frozen=True)
class LinkUnit:
    """Clickable link as the presentation layer needs it."""

    link_id: UUID
    title: str
    description: str | None
    url: str
    icon: IconDescriptor
    background_color: str
    border_color: str
    text_color: str
    muted_text_color: str
    font_family: str
    font_size: str


# --- Input Models ---


@dataclass(frozen=True)
class CreateLinkInput:
    """Input for creating a link."""

    owner_id: UUID
    title: str
    url: str
    icon: str = DEFAULT_ICON_SOURCE
    icon_style: str = IconStyle.FILLED.value
    custom_icon_url: str | None = None
    description: str | None = None


@dataclass(frozen=True)
class UpdateLinkInput:
    """Input for updating a link."""

    owner_id: UUID
    link_id: UUID
    title: str | None = None
    url: str | None = None
    icon: str | None = None
    icon_style: str | None = None
    custom_icon_url: str | None = None
    description: str | None = None


@dataclass(frozen=True)
class ToggleLinkInput:
    """Flip (is_active=None) or set a link's active flag."""

    owner_id: UUID
    link_id: UUID
    is_active: bool | None = None


@dataclass(frozen=True)
class DeleteLinkInput:
    """Input for deleting a link."""

    owner_id: UUID
    link_id: UUID


@dataclass(frozen=True)
class GetLinkInput:
    """Input for getting a link."""

    owner_id: UUID
    link_id: UUID


@dataclass(frozen=True)
class ListLinksInput:
    owner_id: UUID


# --- Output Models ---


@dataclass(frozen=True)
class LinkOperationOutput:
    """Output from link operation."""

    link: Link | None
    errors: tuple[LinkValidationError, ...]
    success: bool


@dataclass(frozen=True)
class LinkListOutput:
    """Output from list operation."""

    links: tuple[Link, ...]
    total: int
