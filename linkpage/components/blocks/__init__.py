"""
Blocks component - Image, text and gallery content blocks.
"""

from ._impl import (
    ContentBlockService,
    block_config_from_rules,
    load_gallery_images,
    parse_gallery_payload,
    render_block,
    serialize_gallery,
    validate_block_data,
)
from .component import (
    run_create,
    run_delete,
    run_list,
    run_render,
    run_reorder,
    run_toggle,
    run_update,
)
from .models import (
    BlockConfig,
    BlockListOutput,
    BlockOperationOutput,
    BlockValidationError,
    ContentUnit,
    CreateBlockInput,
    DeleteBlockInput,
    GalleryUnit,
    ImageUnit,
    ListBlocksInput,
    MalformedGalleryPayload,
    TextUnit,
    ToggleBlockInput,
    UpdateBlockInput,
)
from .ports import BlockRepoPort

__all__ = [
    # Entry points
    "run_create",
    "run_update",
    "run_toggle",
    "run_delete",
    "run_list",
    "run_reorder",
    "run_render",
    # Core
    "ContentBlockService",
    "block_config_from_rules",
    "render_block",
    "parse_gallery_payload",
    "load_gallery_images",
    "serialize_gallery",
    "validate_block_data",
    # Input models
    "CreateBlockInput",
    "UpdateBlockInput",
    "ToggleBlockInput",
    "DeleteBlockInput",
    "ListBlocksInput",
    # Output models
    "BlockConfig",
    "BlockOperationOutput",
    "BlockListOutput",
    "BlockValidationError",
    "ContentUnit",
    "ImageUnit",
    "TextUnit",
    "GalleryUnit",
    # Errors
    "MalformedGalleryPayload",
    # Ports
    "BlockRepoPort",
]
