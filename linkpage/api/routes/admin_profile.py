"""Admin routes for the owner's profile and the appearance catalog."""

from typing import Any

from fastapi import APIRouter, Depends
from fastapi.encoders import jsonable_encoder
from pydantic import BaseModel

from linkpage.api.deps import get_current_user, get_profile_service
from linkpage.api.schemas import ProfileResponse, raise_errors
from linkpage.components.icons import ICON_CATALOG
from linkpage.components.profile import (
    GetOrCreateProfileInput,
    ProfileService,
    UpdateProfileInput,
    run_get_or_create,
    run_update,
)
from linkpage.components.theme import run_catalog
from linkpage.domain.entities import Owner

router = APIRouter()


class ProfileUpdateRequest(BaseModel):
    username: str | None = None
    display_name: str | None = None
    bio: str | None = None
    avatar_url: str | None = None
    template: str | None = None
    primary_color: str | None = None
    # "" clears the background override
    background_color: str | None = None
    font_family: str | None = None
    font_size: str | None = None
    page_width: str | None = None
    is_rtl: bool | None = None


@router.get("/profile", response_model=ProfileResponse)
def get_profile(
    current_user: Owner = Depends(get_current_user),
    service: ProfileService = Depends(get_profile_service),
) -> ProfileResponse:
    """The owner's profile; created with defaults on first visit."""
    result = run_get_or_create(GetOrCreateProfileInput(owner=current_user), service)
    assert result.profile is not None
    return ProfileResponse.from_entity(result.profile)


@router.put("/profile", response_model=ProfileResponse)
def update_profile(
    data: ProfileUpdateRequest,
    current_user: Owner = Depends(get_current_user),
    service: ProfileService = Depends(get_profile_service),
) -> ProfileResponse:
    input_data = UpdateProfileInput(owner_id=current_user.id, **data.model_dump())
    result = run_update(input_data, service)

    if not result.success:
        raise_errors(result.errors, not_found_code="profile_not_found")

    assert result.profile is not None
    return ProfileResponse.from_entity(result.profile)


@router.get("/catalog")
def get_catalog(current_user: Owner = Depends(get_current_user)) -> dict[str, Any]:
    """Templates, fonts, color presets, tiers and icon sources for the editor."""
    catalog = run_catalog()
    return {
        **jsonable_encoder(catalog),
        "icons": jsonable_encoder(ICON_CATALOG),
    }
