"""
Analytics component - Data models.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, date, datetime
from typing import Any
from uuid import UUID, uuid4

# --- Errors ---


class AnalyticsFailure(Exception):
    """An event could not be delivered to its sink. Never reaches the caller of log()."""


@dataclass(frozen=True)
class AnalyticsValidationError:
    """Analytics error as surfaced to the shell."""

    code: str
    message: str
    field: str | None = None


# --- Configuration ---


@dataclass(frozen=True)
class AnalyticsConfig:
    enabled: bool = True
    event_names: frozenset[str] = frozenset({"profile_view", "link_click"})
    summary_top_links: int = 5
    summary_ranges: dict[str, int] = field(
        default_factory=lambda: {"7d": 7, "30d": 30, "90d": 90}
    )


# --- Events ---


@dataclass(frozen=True)
class AnalyticsEvent:
    """One recorded visitor interaction."""

    name: str
    attributes: dict[str, Any]
    timestamp: datetime = field(default_factory=lambda: datetime.now(UTC))
    id: UUID = field(default_factory=uuid4)

    @property
    def profile_id(self) -> str | None:
        value = self.attributes.get("profile_id")
        return str(value) if value is not None else None


# --- Summary ---


@dataclass(frozen=True)
class TopLink:
    link_id: str
    title: str
    clicks: int


@dataclass(frozen=True)
class DailyPoint:
    day: date
    views: int
    clicks: int


@dataclass(frozen=True)
class AnalyticsSummary:
    """Dashboard summary for one profile over a date range."""

    range_key: str
    total_views: int
    total_clicks: int
    # Percentage, one decimal
    click_through_rate: float
    top_links: tuple[TopLink, ...]
    daily: tuple[DailyPoint, ...]


@dataclass(frozen=True)
class SummaryInput:
    profile_id: UUID
    range_key: str = "7d"


@dataclass(frozen=True)
class SummaryOutput:
    summary: AnalyticsSummary | None
    errors: tuple[AnalyticsValidationError, ...] = ()
    success: bool = True
