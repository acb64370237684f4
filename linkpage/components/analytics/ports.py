"""
Analytics component port definitions.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime
from typing import Any, Protocol
from uuid import UUID

from .models import AnalyticsEvent


class EventStorePort(Protocol):
    """Event store interface for storing analytics events."""

    def store(self, event: AnalyticsEvent) -> None:
        """Store an analytics event."""
        ...

    def list_events(
        self,
        profile_id: UUID | None = None,
        since: datetime | None = None,
    ) -> list[AnalyticsEvent]:
        """Events for a profile (all profiles when None), oldest first."""
        ...


class DispatcherPort(Protocol):
    """Runs work later. Matches fastapi.BackgroundTasks.add_task."""

    def add_task(self, func: Callable[..., Any], *args: Any, **kwargs: Any) -> None: ...
