"""
AnalyticsEmitter - Fire-and-forget visitor analytics.

Functional Core + in-memory adapters.

Key behaviors:
- log() hands delivery to a dispatcher and returns immediately
- Sink failures are logged and dropped; they never reach the page or the
  redirect that triggered them
- Disabled analytics or unknown event names drop the event with a log line
- summarize() folds stored events into the dashboard summary
"""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Callable, Iterable
from datetime import UTC, date, datetime, timedelta
from typing import Any
from uuid import UUID

from linkpage.rules.models import AnalyticsRules

from .models import (
    AnalyticsConfig,
    AnalyticsEvent,
    AnalyticsFailure,
    AnalyticsSummary,
    DailyPoint,
    TopLink,
)
from .ports import DispatcherPort, EventStorePort

logger = logging.getLogger(__name__)

PROFILE_VIEW = "profile_view"
LINK_CLICK = "link_click"

DEFAULT_CONFIG = AnalyticsConfig()


def analytics_config_from_rules(rules: AnalyticsRules | None) -> AnalyticsConfig:
    if rules is None:
        return DEFAULT_CONFIG
    return AnalyticsConfig(
        enabled=rules.enabled,
        event_names=frozenset(rules.event_names),
        summary_top_links=rules.summary_top_links,
        summary_ranges=dict(rules.summary_ranges),
    )


# --- Adapters ---


class InlineDispatcher:
    """Runs tasks immediately. Used by tests and scripts."""

    def add_task(self, func: Callable[..., Any], *args: Any, **kwargs: Any) -> None:
        func(*args, **kwargs)


class InMemoryEventStore:
    """In-memory event store for testing/dev."""

    def __init__(self) -> None:
        self._events: list[AnalyticsEvent] = []

    def store(self, event: AnalyticsEvent) -> None:
        """Store an event."""
        self._events.append(event)

    def list_events(
        self,
        profile_id: UUID | None = None,
        since: datetime | None = None,
    ) -> list[AnalyticsEvent]:
        events = self._events
        if profile_id is not None:
            events = [e for e in events if e.profile_id == str(profile_id)]
        if since is not None:
            events = [e for e in events if e.timestamp >= since]
        return sorted(events, key=lambda e: e.timestamp)

    def get_all(self) -> list[AnalyticsEvent]:
        """Get all stored events (for testing)."""
        return list(self._events)


# --- Emitter ---


class AnalyticsEmitter:
    """
    Records analytics events without ever failing the caller.

    The dispatcher decides when delivery happens: BackgroundTasks runs it
    after the response is sent, InlineDispatcher runs it straight away.
    """

    def __init__(
        self,
        sink: EventStorePort,
        dispatcher: DispatcherPort | None = None,
        config: AnalyticsConfig = DEFAULT_CONFIG,
    ) -> None:
        self._sink = sink
        self._dispatcher: DispatcherPort = dispatcher or InlineDispatcher()
        self._config = config

    @property
    def sink(self) -> EventStorePort:
        return self._sink

    def with_dispatcher(self, dispatcher: DispatcherPort) -> AnalyticsEmitter:
        """Same sink and config, different dispatcher (one per request)."""
        return AnalyticsEmitter(self._sink, dispatcher, self._config)

    def log(self, event_name: str, attributes: dict[str, Any]) -> None:
        if not self._config.enabled:
            return
        if event_name not in self._config.event_names:
            logger.warning("Dropping analytics event with unknown name %r", event_name)
            return

        event = AnalyticsEvent(name=event_name, attributes=dict(attributes))
        try:
            self._dispatcher.add_task(self._deliver, event)
        except Exception:
            logger.exception("Could not schedule analytics event %s", event_name)

    def _deliver(self, event: AnalyticsEvent) -> None:
        try:
            self._sink.store(event)
        except AnalyticsFailure as e:
            logger.warning("Analytics sink rejected %s: %s", event.name, e)
        except Exception:
            logger.exception("Analytics sink failed for %s", event.name)


# --- Summary ---


def summarize(
    events: Iterable[AnalyticsEvent],
    range_key: str,
    days: int,
    today: date,
    top_n: int = 5,
) -> AnalyticsSummary:
    """
    Fold events into totals, top links and a per-day series.

    Only events from the last `days` days (today included) count.
    """
    first_day = today - timedelta(days=days - 1)
    views_by_day: Counter[date] = Counter()
    clicks_by_day: Counter[date] = Counter()
    clicks_by_link: Counter[str] = Counter()
    titles: dict[str, str] = {}

    for event in events:
        day = event.timestamp.astimezone(UTC).date()
        if day < first_day or day > today:
            continue
        if event.name == PROFILE_VIEW:
            views_by_day[day] += 1
        elif event.name == LINK_CLICK:
            clicks_by_day[day] += 1
            link_id = str(event.attributes.get("link_id", ""))
            clicks_by_link[link_id] += 1
            # Latest title wins after a rename
            titles[link_id] = str(event.attributes.get("link_title", ""))

    total_views = sum(views_by_day.values())
    total_clicks = sum(clicks_by_day.values())
    ctr = round(total_clicks / total_views * 100, 1) if total_views else 0.0

    ranked = sorted(clicks_by_link.items(), key=lambda kv: (-kv[1], titles[kv[0]]))
    top_links = tuple(
        TopLink(link_id=link_id, title=titles[link_id], clicks=count)
        for link_id, count in ranked[:top_n]
    )
    daily = tuple(
        DailyPoint(day=d, views=views_by_day[d], clicks=clicks_by_day[d])
        for d in (first_day + timedelta(days=i) for i in range(days))
    )

    return AnalyticsSummary(
        range_key=range_key,
        total_views=total_views,
        total_clicks=total_clicks,
        click_through_rate=ctr,
        top_links=top_links,
        daily=daily,
    )


def range_start(days: int, now: datetime) -> datetime:
    """Midnight UTC at the start of the first day of the range."""
    first_day = now.astimezone(UTC).date() - timedelta(days=days - 1)
    return datetime(first_day.year, first_day.month, first_day.day, tzinfo=UTC)
