"""Root conftest — shared fixtures for core, services and API tests.

Design Decisions:
    - Analytics forced off so no test can reach a real collect endpoint
    - RecordingNotifier captures events instead of patching the orchestrator
"""

import os
from datetime import date

import pytest

os.environ.setdefault("ANALYTICS_ENABLED", "false")

from seosync.core.site_config import SiteConfig
from seosync.core.sitemap import SitemapRegistry
from seosync.infrastructure.history import InMemoryHistory
from seosync.infrastructure.soup_document import SoupDocument


class RecordingNotifier:
    """Notifier that keeps every emitted event."""

    def __init__(self):
        self.events: list[tuple[str, dict]] = []

    def emit(self, event_name: str, params: dict) -> None:
        self.events.append((event_name, params))

    def names(self) -> list[str]:
        return [name for name, _ in self.events]


class FailingNotifier:
    """Notifier whose sink is always down."""

    def emit(self, event_name: str, params: dict) -> None:
        raise RuntimeError("analytics sink unavailable")


@pytest.fixture
def site():
    return SiteConfig()


@pytest.fixture
def registry():
    return SitemapRegistry.create(today=date(2024, 1, 15))


@pytest.fixture
def document():
    return SoupDocument()


@pytest.fixture
def history():
    return InMemoryHistory()


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest.fixture
def failing_notifier():
    return FailingNotifier()
