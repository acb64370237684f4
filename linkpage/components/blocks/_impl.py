"""
ContentBlockRenderer and ContentBlockService.

Functional Core - pure business logic.

Rendering dispatches over the closed BlockVariant set:
- image: one URL; an empty URL still renders (broken image is visible, not fatal)
- text: stored markup passed through unmodified
- gallery: JSON array of URLs; malformed payloads render as an empty gallery

The service handles owner-scoped create/edit/delete/toggle for the dashboard.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Callable
from datetime import UTC, datetime
from typing import Any
from uuid import UUID, uuid4

from linkpage.components.ordering import CollectionOrderer
from linkpage.components.theme import ThemeParams
from linkpage.domain.entities import BlockVariant, ContentBlock
from linkpage.rules.models import ContentRules

from .models import (
    BlockConfig,
    BlockValidationError,
    ContentUnit,
    GalleryUnit,
    ImageUnit,
    MalformedGalleryPayload,
    TextUnit,
)
from .ports import BlockRepoPort

logger = logging.getLogger(__name__)

DEFAULT_CONFIG = BlockConfig()


def block_config_from_rules(rules: ContentRules | None) -> BlockConfig:
    if rules is None:
        return DEFAULT_CONFIG
    return BlockConfig(
        title_max=rules.title_max,
        gallery_columns=rules.gallery_columns,
        max_gallery_images=rules.max_gallery_images,
    )


# --- Gallery Payload ---


def parse_gallery_payload(content: str | None) -> list[str]:
    """
    Parse stored gallery content.

    Empty content is an empty gallery. Non-string entries are dropped.

    Raises:
        MalformedGalleryPayload: content is not JSON or not a JSON array.
    """
    if not content or not content.strip():
        return []
    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise MalformedGalleryPayload(f"Gallery content is not valid JSON: {e.msg}") from e
    if not isinstance(data, list):
        raise MalformedGalleryPayload(
            f"Gallery content must be a JSON array, got {type(data).__name__}"
        )
    return [item for item in data if isinstance(item, str) and item.strip()]


def load_gallery_images(block_id: UUID, content: str | None) -> tuple[str, ...]:
    """Gallery images for rendering; a malformed payload degrades to none."""
    try:
        return tuple(parse_gallery_payload(content))
    except MalformedGalleryPayload as e:
        logger.warning("Gallery block %s rendered empty: %s", block_id, e)
        return ()


def serialize_gallery(images: tuple[str, ...] | list[str]) -> str:
    return json.dumps([image.strip() for image in images])


# --- Rendering ---


def _render_image(block: ContentBlock, theme: ThemeParams, config: BlockConfig) -> ContentUnit:
    return ImageUnit(
        block_id=block.id,
        title=block.title or None,
        image_url=(block.content or "").strip(),
        alt=block.title or "Image",
    )


def _render_text(block: ContentBlock, theme: ThemeParams, config: BlockConfig) -> ContentUnit:
    return TextUnit(
        block_id=block.id,
        title=block.title or None,
        markup=block.content,
        background=theme.text_block_background,
        accent_color=theme.primary_color,
        border_side=theme.start_side,
    )


def _render_gallery(block: ContentBlock, theme: ThemeParams, config: BlockConfig) -> ContentUnit:
    return GalleryUnit(
        block_id=block.id,
        title=block.title or None,
        images=load_gallery_images(block.id, block.content),
        columns=config.gallery_columns,
    )


_RENDERERS: dict[BlockVariant, Callable[[ContentBlock, ThemeParams, BlockConfig], ContentUnit]] = {
    BlockVariant.IMAGE: _render_image,
    BlockVariant.TEXT: _render_text,
    BlockVariant.GALLERY: _render_gallery,
}

# Every variant has a renderer
assert set(_RENDERERS) == set(BlockVariant)


def render_block(
    block: ContentBlock,
    theme: ThemeParams,
    config: BlockConfig = DEFAULT_CONFIG,
) -> ContentUnit:
    """Turn a content block into a renderable unit."""
    return _RENDERERS[block.variant](block, theme, config)


# --- Validation ---


def validate_block_data(
    variant: BlockVariant,
    title: str | None = None,
    content: str | None = None,
    gallery_images: tuple[str, ...] | list[str] | None = None,
    config: BlockConfig = DEFAULT_CONFIG,
) -> list[BlockValidationError]:
    """Validate block fields for the dashboard. None means "not supplied"."""
    errors: list[BlockValidationError] = []

    if title is not None and len(title) > config.title_max:
        errors.append(
            BlockValidationError(
                code="title_too_long",
                message=f"Title must be {config.title_max} characters or less",
                field="title",
            )
        )

    if variant == BlockVariant.GALLERY:
        if gallery_images is None and content is not None:
            try:
                gallery_images = parse_gallery_payload(content)
            except MalformedGalleryPayload as e:
                errors.append(
                    BlockValidationError(code="gallery_malformed", message=str(e), field="content")
                )
                return errors
        if gallery_images is not None:
            images = [image for image in gallery_images if image and image.strip()]
            if not images:
                errors.append(
                    BlockValidationError(
                        code="gallery_empty",
                        message="A gallery needs at least one image",
                        field="gallery_images",
                    )
                )
            elif len(images) > config.max_gallery_images:
                errors.append(
                    BlockValidationError(
                        code="gallery_too_large",
                        message=f"A gallery holds at most {config.max_gallery_images} images",
                        field="gallery_images",
                    )
                )
    elif content is not None and not content.strip():
        errors.append(
            BlockValidationError(
                code="content_required",
                message="Image URL is required"
                if variant == BlockVariant.IMAGE
                else "Text content is required",
                field="content",
            )
        )

    return errors


# --- Block Service ---


class ContentBlockService:
    """
    Content block service.

    All operations are scoped to one owner; another owner's block reads as
    not found.
    """

    def __init__(self, repo: BlockRepoPort, config: BlockConfig = DEFAULT_CONFIG) -> None:
        self._repo = repo
        self._config = config

    def list_for_owner(self, owner_id: UUID) -> list[ContentBlock]:
        return list(CollectionOrderer(self._repo.list_for_owner(owner_id)))

    def get_for_owner(self, owner_id: UUID, block_id: UUID) -> ContentBlock | None:
        block = self._repo.get_by_id(block_id)
        if block is None or block.user_id != owner_id:
            return None
        return block

    def create(
        self,
        owner_id: UUID,
        variant: BlockVariant,
        title: str | None = None,
        content: str = "",
        gallery_images: tuple[str, ...] | None = None,
    ) -> tuple[ContentBlock | None, list[BlockValidationError]]:
        """
        Create a block at the end of the owner's collection.

        Returns:
            Tuple of (block, errors). Block is None if validation fails.
        """
        errors = validate_block_data(
            variant, title=title, content=content, gallery_images=gallery_images, config=self._config
        )
        if errors:
            return None, errors

        if variant == BlockVariant.GALLERY:
            images = gallery_images if gallery_images is not None else parse_gallery_payload(content)
            content = serialize_gallery([image for image in images if image.strip()])
        else:
            content = content.strip() if variant == BlockVariant.IMAGE else content

        block = ContentBlock(
            id=uuid4(),
            user_id=owner_id,
            variant=variant,
            title=title.strip() if title and title.strip() else None,
            content=content,
            is_active=True,
        )
        placed = CollectionOrderer(self._repo.list_for_owner(owner_id)).append(block).items[-1]

        saved = self._repo.save(placed)
        logger.info("Created %s block %s at position %d", variant.value, saved.id, saved.position)
        return saved, []

    def update(
        self,
        owner_id: UUID,
        block_id: UUID,
        updates: dict[str, Any],
    ) -> tuple[ContentBlock | None, list[BlockValidationError]]:
        """
        Edit title and/or content.

        Returns:
            Tuple of (block, errors). Block is None if not found or validation fails.
        """
        block = self.get_for_owner(owner_id, block_id)
        if block is None:
            return None, [_not_found(block_id)]

        errors = validate_block_data(
            block.variant,
            title=updates.get("title"),
            content=updates.get("content"),
            gallery_images=updates.get("gallery_images"),
            config=self._config,
        )
        if errors:
            return None, errors

        changes: dict[str, Any] = {"updated_at": datetime.now(UTC)}
        if "title" in updates:
            title = updates["title"]
            changes["title"] = title.strip() if title and title.strip() else None
        if updates.get("gallery_images") is not None:
            changes["content"] = serialize_gallery(
                [image for image in updates["gallery_images"] if image.strip()]
            )
        elif updates.get("content") is not None:
            changes["content"] = updates["content"]

        saved = self._repo.save(block.model_copy(update=changes))
        return saved, []

    def set_active(
        self,
        owner_id: UUID,
        block_id: UUID,
        is_active: bool | None = None,
    ) -> tuple[ContentBlock | None, list[BlockValidationError]]:
        """Set the active flag, or flip it when is_active is None."""
        block = self.get_for_owner(owner_id, block_id)
        if block is None:
            return None, [_not_found(block_id)]

        new_state = (not block.is_active) if is_active is None else is_active
        saved = self._repo.save(
            block.model_copy(update={"is_active": new_state, "updated_at": datetime.now(UTC)})
        )
        return saved, []

    def delete(self, owner_id: UUID, block_id: UUID) -> tuple[bool, list[BlockValidationError]]:
        """
        Delete a block.

        Returns:
            Tuple of (success, errors).
        """
        block = self.get_for_owner(owner_id, block_id)
        if block is None:
            return False, [_not_found(block_id)]

        self._repo.delete(block_id)
        return True, []


def _not_found(block_id: UUID) -> BlockValidationError:
    return BlockValidationError(
        code="block_not_found",
        message=f"Content block with ID {block_id} not found",
    )
