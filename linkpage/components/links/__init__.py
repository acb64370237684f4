"""
Links component - Outbound links with icons, ordering and click counts.
"""

from ._impl import (
    LinkService,
    link_config_from_rules,
    normalize_link_url,
    render_link,
    validate_link_data,
)
from .component import (
    run_create,
    run_delete,
    run_get,
    run_list,
    run_render,
    run_reorder,
    run_toggle,
    run_update,
)
from .models import (
    CreateLinkInput,
    DeleteLinkInput,
    GetLinkInput,
    LinkConfig,
    LinkListOutput,
    LinkOperationOutput,
    LinkUnit,
    LinkValidationError,
    ListLinksInput,
    ToggleLinkInput,
    UpdateLinkInput,
)
from .ports import LinkRepoPort

__all__ = [
    # Entry points
    "run_create",
    "run_update",
    "run_toggle",
    "run_delete",
    "run_get",
    "run_list",
    "run_reorder",
    "run_render",
    # Core
    "LinkService",
    "link_config_from_rules",
    "normalize_link_url",
    "render_link",
    "validate_link_data",
    # Input models
    "CreateLinkInput",
    "UpdateLinkInput",
    "ToggleLinkInput",
    "DeleteLinkInput",
    "GetLinkInput",
    "ListLinksInput",
    # Output models
    "LinkConfig",
    "LinkOperationOutput",
    "LinkListOutput",
    "LinkUnit",
    "LinkValidationError",
    # Ports
    "LinkRepoPort",
]
