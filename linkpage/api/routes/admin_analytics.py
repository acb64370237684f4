"""Admin analytics summary route."""

from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.encoders import jsonable_encoder

from linkpage.api.deps import (
    get_analytics_config,
    get_current_user,
    get_event_store,
    get_profile_service,
)
from linkpage.api.schemas import raise_errors
from linkpage.components.analytics import (
    AnalyticsConfig,
    EventStorePort,
    SummaryInput,
    run_summary,
)
from linkpage.components.profile import ProfileService
from linkpage.domain.entities import Owner

router = APIRouter()


@router.get("/analytics/summary")
def get_summary(
    range_key: str = Query("7d", alias="range"),
    current_user: Owner = Depends(get_current_user),
    profiles: ProfileService = Depends(get_profile_service),
    store: EventStorePort = Depends(get_event_store),
    config: AnalyticsConfig = Depends(get_analytics_config),
) -> dict[str, Any]:
    """Views, clicks, click-through rate, top links and a daily series."""
    profile = profiles.get_for_owner(current_user.id)
    if profile is None:
        raise HTTPException(status_code=404, detail="Profile not found")

    result = run_summary(SummaryInput(profile_id=profile.id, range_key=range_key), store, config)
    if not result.success:
        raise_errors(result.errors)

    payload: dict[str, Any] = jsonable_encoder(result.summary)
    return payload
