"""
Compose component - Public page and link click entry points.

Shell Layer - handles I/O and error conversion.

A missing profile is a normal outcome, not an error. A failing links or
blocks fetch is logged and that section renders empty; a failing profile
lookup propagates because there is nothing to render without it.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TypeVar

from linkpage.components.analytics import LINK_CLICK, PROFILE_VIEW, AnalyticsEmitter
from linkpage.components.blocks import BlockConfig, BlockRepoPort
from linkpage.components.links import LinkRepoPort
from linkpage.components.ordering import CollectionOrderer
from linkpage.components.profile import ProfileRepoPort

from ._impl import build_page, strip_username
from .models import (
    ComposeOutput,
    ComposePageInput,
    LinkClickInput,
    LinkClickOutput,
    LinkNotFound,
    ProfileNotFound,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _fetch_section(
    name: str,
    fetch: Callable[[], list[T]],
    warnings: list[str],
) -> list[T]:
    try:
        return fetch()
    except Exception:
        logger.exception("Could not load %s; rendering the section empty", name)
        warnings.append(f"{name}_unavailable")
        return []


def run_compose(
    input_data: ComposePageInput,
    profile_repo: ProfileRepoPort,
    link_repo: LinkRepoPort,
    block_repo: BlockRepoPort,
    emitter: AnalyticsEmitter,
    block_config: BlockConfig | None = None,
) -> ComposeOutput:
    """Build the public page for a username and record the view."""
    username = strip_username(input_data.username)
    profile = profile_repo.get_by_username(username) if username else None
    if profile is None:
        return ComposeOutput(not_found=ProfileNotFound(username=username))

    warnings: list[str] = []
    links = _fetch_section(
        "links", lambda: link_repo.list_for_owner(profile.user_id, active_only=True), warnings
    )
    blocks = _fetch_section(
        "blocks", lambda: block_repo.list_for_owner(profile.user_id, active_only=True), warnings
    )

    page = build_page(profile, links, blocks, block_config or BlockConfig())

    emitter.log(
        PROFILE_VIEW,
        {
            "profile_id": str(profile.id),
            "username": profile.username,
            "template": profile.template,
        },
    )

    return ComposeOutput(page=page, warnings=tuple(warnings))


def run_link_click(
    input_data: LinkClickInput,
    profile_repo: ProfileRepoPort,
    link_repo: LinkRepoPort,
    emitter: AnalyticsEmitter,
) -> LinkClickOutput:
    """
    Resolve a visitor's click to its destination.

    The click is recorded and counted on a best-effort basis; the
    destination is returned either way.
    """
    username = strip_username(input_data.username)
    profile = profile_repo.get_by_username(username) if username else None
    if profile is None:
        return LinkClickOutput(not_found=ProfileNotFound(username=username))

    link = next(
        (
            item
            for item in CollectionOrderer(
                link_repo.list_for_owner(profile.user_id, active_only=True)
            ).active_in_order()
            if item.id == input_data.link_id
        ),
        None,
    )
    if link is None:
        return LinkClickOutput(
            not_found=LinkNotFound(username=profile.username, link_id=input_data.link_id)
        )

    emitter.log(
        LINK_CLICK,
        {
            "link_id": str(link.id),
            "link_title": link.title,
            "profile_id": str(profile.id),
            "username": profile.username,
        },
    )

    try:
        link_repo.increment_clicks(link.id)
    except Exception:
        logger.exception("Could not count click on link %s", link.id)

    return LinkClickOutput(destination_url=link.url)
