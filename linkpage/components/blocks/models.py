"""
Blocks component - Data models.

Image, text and gallery content blocks.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from uuid import UUID

from linkpage.domain.entities import BlockVariant, ContentBlock

# --- Errors ---


class MalformedGalleryPayload(ValueError):
    """Stored gallery content is not a JSON array of URLs."""


@dataclass(frozen=True)
class BlockValidationError:
    """Block validation error."""

    code: str
    message: str
    field: str | None = None


# --- Renderable Units ---


@dataclass(frozen=True)
class ImageUnit:
    block_id: UUID
    title: str | None
    image_url: str
    alt: str
    variant: BlockVariant = field(default=BlockVariant.IMAGE, init=False)


@dataclass(frozen=True)
class TextUnit:
    block_id: UUID
    title: str | None
    # Stored markup, replayed verbatim; sanitizing is the presentation layer's job
    markup: str
    background: str
    accent_color: str
    border_side: str
    variant: BlockVariant = field(default=BlockVariant.TEXT, init=False)


@dataclass(frozen=True)
class GalleryUnit:
    block_id: UUID
    title: str | None
    images: tuple[str, ...]
    columns: int
    variant: BlockVariant = field(default=BlockVariant.GALLERY, init=False)

    @property
    def rows(self) -> int:
        return -(-len(self.images) // self.columns) if self.columns else 0


ContentUnit = ImageUnit | TextUnit | GalleryUnit


# --- Configuration ---


@dataclass(frozen=True)
class BlockConfig:
    title_max: int = 200
    gallery_columns: int = 2
    max_gallery_images: int = 24


# --- Input Models ---


@dataclass(frozen=True)
class CreateBlockInput:
    """Input for creating a content block."""

    owner_id: UUID
    variant: BlockVariant
    title: str | None = None
    content: str = ""
    # Gallery images; serialized into content when given
    gallery_images: tuple[str, ...] | None = None


@dataclass(frozen=True)
class UpdateBlockInput:
    """Input for editing a block's title and content."""

    owner_id: UUID
    block_id: UUID
    title: str | None = None
    content: str | None = None
    gallery_images: tuple[str, ...] | None = None


@dataclass(frozen=True)
class DeleteBlockInput:
    owner_id: UUID
    block_id: UUID


@dataclass(frozen=True)
class ToggleBlockInput:
    """Flip (is_active=None) or set a block's active flag."""

    owner_id: UUID
    block_id: UUID
    is_active: bool | None = None


@dataclass(frozen=True)
class ListBlocksInput:
    owner_id: UUID


# --- Output Models ---


@dataclass(frozen=True)
class BlockOperationOutput:
    """Output from block operation."""

    block: ContentBlock | None
    errors: tuple[BlockValidationError, ...]
    success: bool


@dataclass(frozen=True)
class BlockListOutput:
    """Output from list operation."""

    blocks: tuple[ContentBlock, ...]
    total: int
