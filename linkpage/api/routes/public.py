"""Public profile routes: JSON view model and link click redirect."""

import logging
from typing import Any
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException
from fastapi.encoders import jsonable_encoder
from fastapi.responses import RedirectResponse

from linkpage.api.deps import (
    get_block_config,
    get_block_repo,
    get_emitter,
    get_link_repo,
    get_profile_repo,
)
from linkpage.components.analytics import AnalyticsEmitter
from linkpage.components.blocks import BlockConfig, BlockRepoPort
from linkpage.components.compose import (
    ComposeOutput,
    ComposePageInput,
    LinkClickInput,
    run_compose,
    run_link_click,
)
from linkpage.components.links import LinkRepoPort
from linkpage.components.profile import ProfileRepoPort

logger = logging.getLogger(__name__)

router = APIRouter()


def compose_page(
    username: str,
    profile_repo: ProfileRepoPort = Depends(get_profile_repo),
    link_repo: LinkRepoPort = Depends(get_link_repo),
    block_repo: BlockRepoPort = Depends(get_block_repo),
    emitter: AnalyticsEmitter = Depends(get_emitter),
    block_config: BlockConfig = Depends(get_block_config),
) -> ComposeOutput:
    """Shared by the JSON and HTML routes."""
    try:
        return run_compose(
            ComposePageInput(username=username),
            profile_repo,
            link_repo,
            block_repo,
            emitter,
            block_config,
        )
    except Exception as e:
        logger.exception("Profile lookup failed for %r", username)
        raise HTTPException(status_code=503, detail="Profile temporarily unavailable") from e


@router.get("/profiles/{username}")
def get_public_profile(result: ComposeOutput = Depends(compose_page)) -> dict[str, Any]:
    """The composed page for a username, as JSON."""
    if result.not_found is not None:
        raise HTTPException(status_code=404, detail="Profile not found")

    payload: dict[str, Any] = jsonable_encoder(result.page)
    payload["warnings"] = list(result.warnings)
    return payload


@router.get("/profiles/{username}/links/{link_id}/click")
def click_link(
    username: str,
    link_id: UUID,
    profile_repo: ProfileRepoPort = Depends(get_profile_repo),
    link_repo: LinkRepoPort = Depends(get_link_repo),
    emitter: AnalyticsEmitter = Depends(get_emitter),
) -> RedirectResponse:
    """Record the click and send the visitor on to the link's destination."""
    result = run_link_click(
        LinkClickInput(username=username, link_id=link_id),
        profile_repo,
        link_repo,
        emitter,
    )
    if result.destination_url is None:
        raise HTTPException(status_code=404, detail="Link not found")

    return RedirectResponse(url=result.destination_url, status_code=307)
