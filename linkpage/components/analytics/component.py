"""
Analytics component - Dashboard summary.

Shell Layer - handles I/O and error conversion.
"""

from __future__ import annotations

from datetime import UTC, datetime

from ._impl import DEFAULT_CONFIG, range_start, summarize
from .models import AnalyticsConfig, AnalyticsValidationError, SummaryInput, SummaryOutput
from .ports import EventStorePort


def run_summary(
    input_data: SummaryInput,
    store: EventStorePort,
    config: AnalyticsConfig = DEFAULT_CONFIG,
    now: datetime | None = None,
) -> SummaryOutput:
    """Summarize a profile's views and clicks over one of the configured ranges."""
    days = config.summary_ranges.get(input_data.range_key)
    if days is None:
        allowed = ", ".join(config.summary_ranges)
        return SummaryOutput(
            summary=None,
            errors=(
                AnalyticsValidationError(
                    code="range_invalid",
                    message=f"Range must be one of: {allowed}",
                    field="range",
                ),
            ),
            success=False,
        )

    now = now or datetime.now(UTC)
    events = store.list_events(
        profile_id=input_data.profile_id,
        since=range_start(days, now),
    )
    summary = summarize(
        events,
        range_key=input_data.range_key,
        days=days,
        today=now.astimezone(UTC).date(),
        top_n=config.summary_top_links,
    )
    return SummaryOutput(summary=summary)
