from datetime import UTC, datetime
from enum import Enum
from typing import Literal
from uuid import UUID, uuid4

from pydantic import BaseModel, Field

# --- Enums / Literals ---


class BlockVariant(str, Enum):
    """Closed set of content block variants."""

    IMAGE = "image"
    TEXT = "text"
    GALLERY = "gallery"


class IconStyle(str, Enum):
    """Rendering styles a link icon can take."""

    FILLED = "filled"
    OUTLINED = "outlined"
    ROUNDED = "rounded"
    SQUARE = "square"


CUSTOM_ICON_SOURCE = "custom"
DEFAULT_ICON_SOURCE = "default"

FontSizeTier = Literal["small", "medium", "large", "xl"]
PageWidthTier = Literal["narrow", "normal", "wide", "full"]


def _utcnow() -> datetime:
    return datetime.now(UTC)


# --- Owner ---


class Owner(BaseModel):
    """Authenticated dashboard user as handed over by the auth collaborator."""

    id: UUID
    email: str | None = None
    display_name: str | None = None


# --- Profile ---


class Profile(BaseModel):
    id: UUID = Field(default_factory=uuid4)
    user_id: UUID
    username: str
    display_name: str
    bio: str = ""
    avatar_url: str | None = None

    template: str = "designer"
    primary_color: str = "#6366F1"
    background_color: str | None = "#F8FAFC"
    font_family: str = "Inter, sans-serif"
    font_size: str = "medium"
    page_width: str = "normal"
    is_rtl: bool = False

    created_at: datetime = Field(default_factory=_utcnow)
    updated_at: datetime = Field(default_factory=_utcnow)


# --- Links ---


class Link(BaseModel):
    id: UUID = Field(default_factory=uuid4)
    user_id: UUID
    title: str
    url: str
    icon: str = DEFAULT_ICON_SOURCE
    icon_style: IconStyle = IconStyle.FILLED
    custom_icon_url: str | None = None
    description: str | None = None
    is_active: bool = True
    position: int = 0
    clicks: int = 0

    created_at: datetime = Field(default_factory=_utcnow)
    updated_at: datetime = Field(default_factory=_utcnow)


# --- Content Blocks ---


class ContentBlock(BaseModel):
    id: UUID = Field(default_factory=uuid4)
    user_id: UUID
    variant: BlockVariant
    title: str | None = None
    # image: one URL, text: rich-text markup, gallery: JSON array of URLs
    content: str = ""
    is_active: bool = True
    position: int = 0

    created_at: datetime = Field(default_factory=_utcnow)
    updated_at: datetime = Field(default_factory=_utcnow)
