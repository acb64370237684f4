"""
Links component - Outbound link management and rendering.

Handles owner-scoped link CRUD, reordering and icon/theme rendering.

Shell Layer - handles I/O and error conversion.
"""

from __future__ import annotations

from typing import Any

from linkpage.components.icons import resolve_icon
from linkpage.components.ordering import MoveInput, MoveOutput, run_move
from linkpage.components.theme import ThemeParams
from linkpage.domain.entities import Link

from ._impl import LinkService, render_link
from .models import (
    CreateLinkInput,
    DeleteLinkInput,
    GetLinkInput,
    LinkListOutput,
    LinkOperationOutput,
    LinkUnit,
    LinkValidationError,
    ListLinksInput,
    ToggleLinkInput,
    UpdateLinkInput,
)
from .ports import LinkRepoPort

# --- Shell Layer Functions ---


def run_create(
    input_data: CreateLinkInput,
    service: LinkService,
) -> LinkOperationOutput:
    """Create a new link."""
    link, errors = service.create(
        owner_id=input_data.owner_id,
        title=input_data.title,
        url=input_data.url,
        icon=input_data.icon,
        icon_style=input_data.icon_style,
        custom_icon_url=input_data.custom_icon_url,
        description=input_data.description,
    )

    return LinkOperationOutput(
        link=link,
        errors=tuple(errors),
        success=link is not None,
    )


def run_update(
    input_data: UpdateLinkInput,
    service: LinkService,
) -> LinkOperationOutput:
    """Update an existing link."""
    updates: dict[str, Any] = {}
    for name in ("title", "url", "icon", "icon_style", "custom_icon_url", "description"):
        value = getattr(input_data, name)
        if value is not None:
            updates[name] = value

    link, errors = service.update(input_data.owner_id, input_data.link_id, updates)

    return LinkOperationOutput(
        link=link,
        errors=tuple(errors),
        success=link is not None,
    )


def run_toggle(
    input_data: ToggleLinkInput,
    service: LinkService,
) -> LinkOperationOutput:
    """Enable or disable a link without deleting it."""
    link, errors = service.set_active(input_data.owner_id, input_data.link_id, input_data.is_active)
    return LinkOperationOutput(link=link, errors=tuple(errors), success=link is not None)


def run_delete(
    input_data: DeleteLinkInput,
    service: LinkService,
) -> LinkOperationOutput:
    """Delete a link."""
    success, errors = service.delete(input_data.owner_id, input_data.link_id)

    return LinkOperationOutput(
        link=None,
        errors=tuple(errors),
        success=success,
    )


def run_get(
    input_data: GetLinkInput,
    service: LinkService,
) -> LinkOperationOutput:
    """Get a link by ID."""
    link = service.get_for_owner(input_data.owner_id, input_data.link_id)

    if link is None:
        return LinkOperationOutput(
            link=None,
            errors=(
                LinkValidationError(
                    code="link_not_found",
                    message=f"Link with ID {input_data.link_id} not found",
                ),
            ),
            success=False,
        )

    return LinkOperationOutput(link=link, errors=(), success=True)


def run_list(input_data: ListLinksInput, service: LinkService) -> LinkListOutput:
    """List all of an owner's links in position order."""
    links = service.list_for_owner(input_data.owner_id)
    return LinkListOutput(links=tuple(links), total=len(links))


def run_reorder(input_data: MoveInput, repo: LinkRepoPort) -> MoveOutput:
    """Move a link within the owner's collection."""
    return run_move(input_data, repo)


def run_render(link: Link, theme: ThemeParams) -> LinkUnit:
    """Resolve the link's icon, tinted with the page color, and render it."""
    icon = resolve_icon(
        link.icon,
        link.icon_style,
        link.custom_icon_url,
        primary_color=theme.primary_color,
        alt=link.title,
    )
    return render_link(link, icon, theme)
