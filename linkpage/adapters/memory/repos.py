"""
In-memory repositories for tests, scripts and local development.

Each repo hands out copies so callers cannot mutate stored state by accident.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Generic, TypeVar
from uuid import UUID

from linkpage.domain.entities import ContentBlock, Link, Profile

T = TypeVar("T", Link, ContentBlock)


class InMemoryProfileRepo:
    def __init__(self) -> None:
        self._profiles: dict[UUID, Profile] = {}

    def save(self, profile: Profile) -> Profile:
        self._profiles[profile.id] = profile.model_copy()
        return profile

    def get_by_username(self, username: str) -> Profile | None:
        for profile in self._profiles.values():
            if profile.username == username:
                return profile.model_copy()
        return None

    def get_by_owner(self, owner_id: UUID) -> Profile | None:
        for profile in self._profiles.values():
            if profile.user_id == owner_id:
                return profile.model_copy()
        return None


class _InMemoryOrderedRepo(Generic[T]):
    def __init__(self) -> None:
        self._items: dict[UUID, T] = {}

    def save(self, item: T) -> T:
        self._items[item.id] = item.model_copy()
        return item

    def get_by_id(self, item_id: UUID) -> T | None:
        item = self._items.get(item_id)
        return item.model_copy() if item else None

    def list_for_owner(self, owner_id: UUID, active_only: bool = False) -> list[T]:
        items = [
            item.model_copy()
            for item in self._items.values()
            if item.user_id == owner_id and (item.is_active or not active_only)
        ]
        return sorted(items, key=lambda i: i.position)

    def delete(self, item_id: UUID) -> None:
        self._items.pop(item_id, None)

    def save_positions(self, owner_id: UUID, positions: Mapping[UUID, int]) -> None:
        updated = dict(self._items)
        for item_id, position in positions.items():
            item = updated.get(item_id)
            if item is not None and item.user_id == owner_id:
                updated[item_id] = item.model_copy(update={"position": position})
        self._items = updated


class InMemoryLinkRepo(_InMemoryOrderedRepo[Link]):
    def increment_clicks(self, link_id: UUID) -> None:
        link = self._items.get(link_id)
        if link is not None:
            self._items[link_id] = link.model_copy(update={"clicks": link.clicks + 1})


class InMemoryBlockRepo(_InMemoryOrderedRepo[ContentBlock]):
    pass
