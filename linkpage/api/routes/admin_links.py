"""Admin routes for managing links."""

from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from linkpage.api.deps import get_current_user, get_link_repo, get_link_service
from linkpage.api.schemas import (
    LinkListResponse,
    LinkResponse,
    MoveRequest,
    MoveResponse,
    raise_errors,
)
from linkpage.components.links import (
    CreateLinkInput,
    DeleteLinkInput,
    GetLinkInput,
    LinkRepoPort,
    LinkService,
    ListLinksInput,
    ToggleLinkInput,
    UpdateLinkInput,
    run_create,
    run_delete,
    run_get,
    run_list,
    run_reorder,
    run_toggle,
    run_update,
)
from linkpage.components.ordering import MoveInput
from linkpage.domain.entities import DEFAULT_ICON_SOURCE, IconStyle, Owner

router = APIRouter()


# --- Request Models ---


class LinkCreateRequest(BaseModel):
    title: str
    url: str
    icon: str = DEFAULT_ICON_SOURCE
    icon_style: str = IconStyle.FILLED.value
    custom_icon_url: str | None = None
    description: str | None = None


class LinkUpdateRequest(BaseModel):
    title: str | None = None
    url: str | None = None
    icon: str | None = None
    icon_style: str | None = None
    custom_icon_url: str | None = None
    description: str | None = None


class LinkToggleRequest(BaseModel):
    # Omit to flip the current state
    is_active: bool | None = None


# --- Routes ---


@router.get("/links", response_model=LinkListResponse)
def list_links(
    current_user: Owner = Depends(get_current_user),
    service: LinkService = Depends(get_link_service),
) -> LinkListResponse:
    """List the owner's links, active or not, in position order."""
    result = run_list(ListLinksInput(owner_id=current_user.id), service)
    return LinkListResponse(
        items=[LinkResponse.from_entity(link) for link in result.links],
        total=result.total,
    )


@router.post("/links", response_model=LinkResponse, status_code=201)
def create_link(
    data: LinkCreateRequest,
    current_user: Owner = Depends(get_current_user),
    service: LinkService = Depends(get_link_service),
) -> LinkResponse:
    """Add a link after the existing ones."""
    input_data = CreateLinkInput(
        owner_id=current_user.id,
        title=data.title,
        url=data.url,
        icon=data.icon,
        icon_style=data.icon_style,
        custom_icon_url=data.custom_icon_url,
        description=data.description,
    )

    result = run_create(input_data, service)

    if not result.success:
        raise_errors(result.errors)

    link = result.link
    assert link is not None  # Success guarantees link is not None
    return LinkResponse.from_entity(link)


@router.post("/links/reorder", response_model=MoveResponse)
def reorder_links(
    data: MoveRequest,
    current_user: Owner = Depends(get_current_user),
    repo: LinkRepoPort = Depends(get_link_repo),
) -> MoveResponse:
    """Move one link; every position is rewritten densely in one batch."""
    result = run_reorder(
        MoveInput(
            owner_id=current_user.id,
            item_id=data.item_id,
            from_index=data.from_index,
            to_index=data.to_index,
        ),
        repo,
    )

    if not result.success:
        raise_errors(result.errors, not_found_code="item_not_found")

    return MoveResponse(order=[str(i) for i in result.order], writes=result.writes)


@router.get("/links/{link_id}", response_model=LinkResponse)
def get_link(
    link_id: UUID,
    current_user: Owner = Depends(get_current_user),
    service: LinkService = Depends(get_link_service),
) -> LinkResponse:
    """Get a link by ID."""
    result = run_get(GetLinkInput(owner_id=current_user.id, link_id=link_id), service)

    if not result.success:
        raise HTTPException(status_code=404, detail="Link not found")

    link = result.link
    assert link is not None
    return LinkResponse.from_entity(link)


@router.put("/links/{link_id}", response_model=LinkResponse)
def update_link(
    link_id: UUID,
    data: LinkUpdateRequest,
    current_user: Owner = Depends(get_current_user),
    service: LinkService = Depends(get_link_service),
) -> LinkResponse:
    """Update a link."""
    input_data = UpdateLinkInput(
        owner_id=current_user.id,
        link_id=link_id,
        title=data.title,
        url=data.url,
        icon=data.icon,
        icon_style=data.icon_style,
        custom_icon_url=data.custom_icon_url,
        description=data.description,
    )

    result = run_update(input_data, service)

    if not result.success:
        raise_errors(result.errors, not_found_code="link_not_found")

    link = result.link
    assert link is not None
    return LinkResponse.from_entity(link)


@router.post("/links/{link_id}/toggle", response_model=LinkResponse)
def toggle_link(
    link_id: UUID,
    data: LinkToggleRequest | None = None,
    current_user: Owner = Depends(get_current_user),
    service: LinkService = Depends(get_link_service),
) -> LinkResponse:
    """Show or hide a link on the public page without deleting it."""
    input_data = ToggleLinkInput(
        owner_id=current_user.id,
        link_id=link_id,
        is_active=data.is_active if data else None,
    )
    result = run_toggle(input_data, service)

    if not result.success:
        raise HTTPException(status_code=404, detail="Link not found")

    link = result.link
    assert link is not None
    return LinkResponse.from_entity(link)


@router.delete("/links/{link_id}", status_code=204)
def delete_link(
    link_id: UUID,
    current_user: Owner = Depends(get_current_user),
    service: LinkService = Depends(get_link_service),
) -> None:
    """Delete a link."""
    result = run_delete(DeleteLinkInput(owner_id=current_user.id, link_id=link_id), service)

    if not result.success:
        raise HTTPException(status_code=404, detail="Link not found")
