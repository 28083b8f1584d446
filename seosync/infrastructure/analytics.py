"""Analytics — Notifier implementations and the session page-view log.

Invariants:
    - Notifiers are best-effort: MeasurementProtocolNotifier raises
      AnalyticsDeliveryError on failure and callers swallow it
    - PageViewLog keeps at most MAX_PAGE_VIEWS records, oldest dropped first
    - Nothing here retries

Design Decisions:
    - httpx sync client with a short timeout: the orchestrator runs to
      completion in one caller turn, so delivery cannot be awaited elsewhere
    - NoopNotifier is the default when analytics is disabled (tests, local dev)
"""

import logging
import uuid
from collections import deque

import httpx

from seosync.core.errors import AnalyticsDeliveryError
from seosync.core.page_view_stats import PageView, compute_page_view_stats

logger = logging.getLogger(__name__)

MAX_PAGE_VIEWS = 50


class NoopNotifier:
    """Discards every event."""

    def emit(self, event_name: str, params: dict) -> None:
        return None


class LoggingNotifier:
    """Writes events to the diagnostic log instead of a remote sink."""

    def emit(self, event_name: str, params: dict) -> None:
        logger.info(f"Analytics event: {event_name}", extra={"event_params": params})


class MeasurementProtocolNotifier:
    """Posts events to a GA4-style Measurement Protocol collect endpoint."""

    def __init__(
        self,
        endpoint: str,
        measurement_id: str,
        api_secret: str,
        timeout_seconds: float = 2.0,
        client: httpx.Client | None = None,
        client_id: str | None = None,
    ):
        self._endpoint = endpoint
        self._params = {"measurement_id": measurement_id, "api_secret": api_secret}
        self._client = client or httpx.Client(timeout=timeout_seconds)
        self._client_id = client_id or str(uuid.uuid4())

    def emit(self, event_name: str, params: dict) -> None:
        body = {
            "client_id": self._client_id,
            "events": [{"name": event_name, "params": params}],
        }
        try:
            response = self._client.post(self._endpoint, params=self._params, json=body)
            response.raise_for_status()
        except httpx.HTTPError as e:
            raise AnalyticsDeliveryError(str(e), event_name) from e

    def close(self) -> None:
        self._client.close()


class PageViewLog:
    """Bounded, in-session record of page views."""

    def __init__(self, max_views: int = MAX_PAGE_VIEWS):
        self._views: deque[PageView] = deque(maxlen=max_views)

    def record(self, view: PageView) -> None:
        self._views.append(view)

    def views(self) -> list[PageView]:
        return list(self._views)

    def stats(self) -> dict:
        return compute_page_view_stats(self.views())


def build_notifier(settings) -> NoopNotifier | LoggingNotifier | MeasurementProtocolNotifier:
    """Pick the sink from settings: remote when fully configured, else log or drop."""
    if not settings.analytics_enabled:
        return NoopNotifier()
    if settings.analytics_measurement_id and settings.analytics_api_secret:
        return MeasurementProtocolNotifier(
            settings.analytics_endpoint,
            settings.analytics_measurement_id,
            settings.analytics_api_secret,
            timeout_seconds=settings.analytics_timeout_seconds,
        )
    logger.warning("Analytics enabled without credentials, logging events only")
    return LoggingNotifier()
