"""Admin routes for managing content blocks."""

from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from linkpage.api.deps import get_block_repo, get_block_service, get_current_user
from linkpage.api.schemas import (
    BlockListResponse,
    BlockResponse,
    MoveRequest,
    MoveResponse,
    raise_errors,
)
from linkpage.components.blocks import (
    BlockRepoPort,
    ContentBlockService,
    CreateBlockInput,
    DeleteBlockInput,
    ListBlocksInput,
    ToggleBlockInput,
    UpdateBlockInput,
    run_create,
    run_delete,
    run_list,
    run_reorder,
    run_toggle,
    run_update,
)
from linkpage.components.ordering import MoveInput
from linkpage.domain.entities import BlockVariant, Owner

router = APIRouter()


class BlockCreateRequest(BaseModel):
    variant: BlockVariant
    title: str | None = None
    content: str = ""
    gallery_images: list[str] | None = None


class BlockUpdateRequest(BaseModel):
    title: str | None = None
    content: str | None = None
    gallery_images: list[str] | None = None


class BlockToggleRequest(BaseModel):
    is_active: bool | None = None


@router.get("/blocks", response_model=BlockListResponse)
def list_blocks(
    current_user: Owner = Depends(get_current_user),
    service: ContentBlockService = Depends(get_block_service),
) -> BlockListResponse:
    result = run_list(ListBlocksInput(owner_id=current_user.id), service)
    return BlockListResponse(
        items=[BlockResponse.from_entity(block) for block in result.blocks],
        total=result.total,
    )


@router.post("/blocks", response_model=BlockResponse, status_code=201)
def create_block(
    data: BlockCreateRequest,
    current_user: Owner = Depends(get_current_user),
    service: ContentBlockService = Depends(get_block_service),
) -> BlockResponse:
    """Add an image, text or gallery block after the existing ones."""
    input_data = CreateBlockInput(
        owner_id=current_user.id,
        variant=data.variant,
        title=data.title,
        content=data.content,
        gallery_images=tuple(data.gallery_images) if data.gallery_images is not None else None,
    )
    result = run_create(input_data, service)

    if not result.success:
        raise_errors(result.errors)

    block = result.block
    assert block is not None
    return BlockResponse.from_entity(block)


@router.post("/blocks/reorder", response_model=MoveResponse)
def reorder_blocks(
    data: MoveRequest,
    current_user: Owner = Depends(get_current_user),
    repo: BlockRepoPort = Depends(get_block_repo),
) -> MoveResponse:
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


@router.put("/blocks/{block_id}", response_model=BlockResponse)
def update_block(
    block_id: UUID,
    data: BlockUpdateRequest,
    current_user: Owner = Depends(get_current_user),
    service: ContentBlockService = Depends(get_block_service),
) -> BlockResponse:
    input_data = UpdateBlockInput(
        owner_id=current_user.id,
        block_id=block_id,
        title=data.title,
        content=data.content,
        gallery_images=tuple(data.gallery_images) if data.gallery_images is not None else None,
    )
    result = run_update(input_data, service)

    if not result.success:
        raise_errors(result.errors, not_found_code="block_not_found")

    block = result.block
    assert block is not None
    return BlockResponse.from_entity(block)


@router.post("/blocks/{block_id}/toggle", response_model=BlockResponse)
def toggle_block(
    block_id: UUID,
    data: BlockToggleRequest | None = None,
    current_user: Owner = Depends(get_current_user),
    service: ContentBlockService = Depends(get_block_service),
) -> BlockResponse:
    input_data = ToggleBlockInput(
        owner_id=current_user.id,
        block_id=block_id,
        is_active=data.is_active if data else None,
    )
    result = run_toggle(input_data, service)

    if not result.success:
        raise HTTPException(status_code=404, detail="Content block not found")

    block = result.block
    assert block is not None
    return BlockResponse.from_entity(block)


@router.delete("/blocks/{block_id}", status_code=204)
def delete_block(
    block_id: UUID,
    current_user: Owner = Depends(get_current_user),
    service: ContentBlockService = Depends(get_block_service),
) -> None:
    result = run_delete(DeleteBlockInput(owner_id=current_user.id, block_id=block_id), service)

    if not result.success:
        raise HTTPException(status_code=404, detail="Content block not found")
