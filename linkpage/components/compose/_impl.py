"""
PageComposer - Profile, links and blocks to a page view model.

Functional Core - pure business logic.

build_page is a pure function of its inputs: the same profile, links and
blocks always produce the same view model. Only active items are shown,
in ascending position order.
"""

from __future__ import annotations

from collections.abc import Iterable

from linkpage.components.blocks import BlockConfig, render_block
from linkpage.components.links import run_render as render_link_unit
from linkpage.components.ordering import CollectionOrderer
from linkpage.components.theme import run_resolve_for_profile
from linkpage.domain.entities import ContentBlock, Link, Profile

from .models import PageViewModel, ProfileHeader


def strip_username(username: str) -> str:
    """"@alice" and "Alice" both address alice."""
    return username.strip().lstrip("@").lower()


def build_header(profile: Profile) -> ProfileHeader:
    return ProfileHeader(
        profile_id=profile.id,
        username=profile.username,
        display_name=profile.display_name,
        bio=profile.bio,
        avatar_url=profile.avatar_url or None,
    )


def build_page(
    profile: Profile,
    links: Iterable[Link],
    blocks: Iterable[ContentBlock],
    block_config: BlockConfig,
) -> PageViewModel:
    theme = run_resolve_for_profile(profile)
    content = tuple(
        render_block(block, theme, block_config)
        for block in CollectionOrderer(blocks).active_in_order()
    )
    link_units = tuple(
        render_link_unit(link, theme) for link in CollectionOrderer(links).active_in_order()
    )
    return PageViewModel(
        header=build_header(profile),
        theme=theme,
        content=content,
        links=link_units,
    )
