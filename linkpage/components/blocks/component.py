"""
Blocks component - Content block management and rendering.

Shell Layer - handles I/O and error conversion.
"""

from __future__ import annotations

from typing import Any

from linkpage.components.ordering import MoveInput, MoveOutput, run_move
from linkpage.components.theme import ThemeParams
from linkpage.domain.entities import ContentBlock

from ._impl import ContentBlockService, render_block
from .models import (
    BlockConfig,
    BlockListOutput,
    BlockOperationOutput,
    ContentUnit,
    CreateBlockInput,
    DeleteBlockInput,
    ListBlocksInput,
    ToggleBlockInput,
    UpdateBlockInput,
)
from .ports import BlockRepoPort


def run_create(
    input_data: CreateBlockInput,
    service: ContentBlockService,
) -> BlockOperationOutput:
    """Create a new content block."""
    block, errors = service.create(
        owner_id=input_data.owner_id,
        variant=input_data.variant,
        title=input_data.title,
        content=input_data.content,
        gallery_images=input_data.gallery_images,
    )
    return BlockOperationOutput(block=block, errors=tuple(errors), success=block is not None)


def run_update(
    input_data: UpdateBlockInput,
    service: ContentBlockService,
) -> BlockOperationOutput:
    """Edit a block's title and content."""
    updates: dict[str, Any] = {}
    if input_data.title is not None:
        updates["title"] = input_data.title
    if input_data.content is not None:
        updates["content"] = input_data.content
    if input_data.gallery_images is not None:
        updates["gallery_images"] = input_data.gallery_images

    block, errors = service.update(input_data.owner_id, input_data.block_id, updates)
    return BlockOperationOutput(block=block, errors=tuple(errors), success=block is not None)


def run_toggle(
    input_data: ToggleBlockInput,
    service: ContentBlockService,
) -> BlockOperationOutput:
    """Enable or disable a block."""
    block, errors = service.set_active(
        input_data.owner_id, input_data.block_id, input_data.is_active
    )
    return BlockOperationOutput(block=block, errors=tuple(errors), success=block is not None)


def run_delete(
    input_data: DeleteBlockInput,
    service: ContentBlockService,
) -> BlockOperationOutput:
    """Delete a block."""
    success, errors = service.delete(input_data.owner_id, input_data.block_id)
    return BlockOperationOutput(block=None, errors=tuple(errors), success=success)


def run_list(
    input_data: ListBlocksInput,
    service: ContentBlockService,
) -> BlockListOutput:
    """List all of an owner's blocks, active or not, in position order."""
    blocks = service.list_for_owner(input_data.owner_id)
    return BlockListOutput(blocks=tuple(blocks), total=len(blocks))


def run_reorder(input_data: MoveInput, repo: BlockRepoPort) -> MoveOutput:
    """Move a block within the owner's collection."""
    return run_move(input_data, repo)


def run_render(
    block: ContentBlock,
    theme: ThemeParams,
    config: BlockConfig | None = None,
) -> ContentUnit:
    """Render a block with the resolved page theme."""
    if config is None:
        return render_block(block, theme)
    return render_block(block, theme, config)
