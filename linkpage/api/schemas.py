"""Shared request/response models for the HTTP API."""

from collections.abc import Iterable
from typing import NoReturn, Protocol
from uuid import UUID

from fastapi import HTTPException
from pydantic import BaseModel

from linkpage.domain.entities import ContentBlock, Link, Profile


class _ErrorLike(Protocol):
    code: str
    message: str
    field: str | None


def raise_errors(errors: Iterable[_ErrorLike], not_found_code: str | None = None) -> NoReturn:
    """Map component errors to 404 (not-found code first) or 400 with details."""
    errors = list(errors)
    if not_found_code and errors and errors[0].code == not_found_code:
        raise HTTPException(status_code=404, detail=errors[0].message)
    raise HTTPException(
        status_code=400,
        detail=[{"code": err.code, "message": err.message, "field": err.field} for err in errors],
    )


# --- Ordering ---


class MoveRequest(BaseModel):
    item_id: UUID
    from_index: int
    to_index: int


class MoveResponse(BaseModel):
    order: list[str]
    writes: int


# --- Profile ---


class ProfileResponse(BaseModel):
    id: str
    username: str
    display_name: str
    bio: str
    avatar_url: str | None
    template: str
    primary_color: str
    background_color: str | None
    font_family: str
    font_size: str
    page_width: str
    is_rtl: bool

    @classmethod
    def from_entity(cls, profile: Profile) -> "ProfileResponse":
        return cls(
            id=str(profile.id),
            username=profile.username,
            display_name=profile.display_name,
            bio=profile.bio,
            avatar_url=profile.avatar_url,
            template=profile.template,
            primary_color=profile.primary_color,
            background_color=profile.background_color,
            font_family=profile.font_family,
            font_size=profile.font_size,
            page_width=profile.page_width,
            is_rtl=profile.is_rtl,
        )


# --- Links ---


class LinkResponse(BaseModel):
    id: str
    title: str
    url: str
    icon: str
    icon_style: str
    custom_icon_url: str | None
    description: str | None
    is_active: bool
    position: int
    clicks: int

    @classmethod
    def from_entity(cls, link: Link) -> "LinkResponse":
        return cls(
            id=str(link.id),
            title=link.title,
            url=link.url,
            icon=link.icon,
            icon_style=link.icon_style.value,
            custom_icon_url=link.custom_icon_url,
            description=link.description,
            is_active=link.is_active,
            position=link.position,
            clicks=link.clicks,
        )


class LinkListResponse(BaseModel):
    items: list[LinkResponse]
    total: int


# --- Blocks ---


class BlockResponse(BaseModel):
    id: str
    variant: str
    title: str | None
    content: str
    is_active: bool
    position: int

    @classmethod
    def from_entity(cls, block: ContentBlock) -> "BlockResponse":
        return cls(
            id=str(block.id),
            variant=block.variant.value,
            title=block.title,
            content=block.content,
            is_active=block.is_active,
            position=block.position,
        )


class BlockListResponse(BaseModel):
    items: list[BlockResponse]
    total: int
