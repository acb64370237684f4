"""
Analytics component - Page view and link click events.
"""

from ._impl import (
    LINK_CLICK,
    PROFILE_VIEW,
    AnalyticsEmitter,
    InlineDispatcher,
    InMemoryEventStore,
    analytics_config_from_rules,
    summarize,
)
from .component import run_summary
from .models import (
    AnalyticsConfig,
    AnalyticsEvent,
    AnalyticsFailure,
    AnalyticsSummary,
    AnalyticsValidationError,
    DailyPoint,
    SummaryInput,
    SummaryOutput,
    TopLink,
)
from .ports import DispatcherPort, EventStorePort

__all__ = [
    # Entry points
    "run_summary",
    # Core
    "AnalyticsEmitter",
    "analytics_config_from_rules",
    "summarize",
    "PROFILE_VIEW",
    "LINK_CLICK",
    # Adapters
    "InlineDispatcher",
    "InMemoryEventStore",
    # Models
    "AnalyticsConfig",
    "AnalyticsEvent",
    "AnalyticsSummary",
    "AnalyticsValidationError",
    "DailyPoint",
    "SummaryInput",
    "SummaryOutput",
    "TopLink",
    # Errors
    "AnalyticsFailure",
    # Ports
    "DispatcherPort",
    "EventStorePort",
]
