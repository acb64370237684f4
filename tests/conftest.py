from pathlib import Path
from uuid import uuid4

import pytest

from linkpage.adapters.memory import InMemoryBlockRepo, InMemoryLinkRepo, InMemoryProfileRepo
from linkpage.components.analytics import AnalyticsEmitter, AnalyticsFailure, InMemoryEventStore
from linkpage.domain.entities import Owner, Profile
from linkpage.rules.loader import load_rules
from linkpage.rules.models import Rules


@pytest.fixture
def rules() -> Rules:
    """Load the real rules from the project root (tests run from there)."""
    rules_path = Path("rules.yaml").resolve()
    if not rules_path.exists():
        raise FileNotFoundError(f"Rules not found at {rules_path}")
    return load_rules(rules_path)


@pytest.fixture
def owner() -> Owner:
    return Owner(id=uuid4(), email="alice@example.com", display_name="Alice")


@pytest.fixture
def other_owner() -> Owner:
    return Owner(id=uuid4(), email="bob@example.com", display_name="Bob")


@pytest.fixture
def profile_repo() -> InMemoryProfileRepo:
    return InMemoryProfileRepo()


@pytest.fixture
def link_repo() -> InMemoryLinkRepo:
    return InMemoryLinkRepo()


@pytest.fixture
def block_repo() -> InMemoryBlockRepo:
    return InMemoryBlockRepo()


@pytest.fixture
def event_store() -> InMemoryEventStore:
    return InMemoryEventStore()


@pytest.fixture
def emitter(event_store: InMemoryEventStore) -> AnalyticsEmitter:
    """Emitter that delivers inline so tests can inspect the store right away."""
    return AnalyticsEmitter(sink=event_store)


class FailingEventStore:
    """Sink that rejects every event."""

    def __init__(self, error: Exception | None = None) -> None:
        self.error = error or AnalyticsFailure("sink offline")
        self.attempts = 0

    def store(self, event):
        self.attempts += 1
        raise self.error

    def list_events(self, profile_id=None, since=None):
        return []


@pytest.fixture
def failing_store() -> FailingEventStore:
    return FailingEventStore()


@pytest.fixture
def alice_profile(owner: Owner, profile_repo: InMemoryProfileRepo) -> Profile:
    profile = Profile(
        user_id=owner.id,
        username="alice",
        display_name="Alice",
        bio="Designer in Lisbon",
        template="designer",
        primary_color="#6366F1",
    )
    return profile_repo.save(profile)
