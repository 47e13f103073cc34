"""Global test configuration for pagerduty_events tests."""

from collections.abc import Callable
from typing import Any

import httpx
import pytest
from pagerduty_events import Event, PagerDutyEventsApi, Severity

ROUTING_KEY = "R0UT1NGK3Y0123456789abcdefabcdef"


class RecordingTransport(httpx.MockTransport):
    """MockTransport answering with a fixed response and recording requests."""

    def __init__(
        self, status_code: int, body: Any = None, content: bytes | None = None
    ) -> None:
        self.requests: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            if content is not None:
                return httpx.Response(status_code, content=content)
            if body is None:
                return httpx.Response(status_code)
            return httpx.Response(status_code, json=body)

        super().__init__(handler)


@pytest.fixture
def make_api() -> Callable[..., tuple[PagerDutyEventsApi, RecordingTransport]]:
    """Build a PagerDutyEventsApi backed by a RecordingTransport."""

    def _make_api(
        status_code: int = 202,
        body: Any = None,
        content: bytes | None = None,
        **kwargs: Any,
    ) -> tuple[PagerDutyEventsApi, RecordingTransport]:
        transport = RecordingTransport(status_code, body=body, content=content)
        return PagerDutyEventsApi(transport=transport, **kwargs), transport

    return _make_api


@pytest.fixture
def trigger_event() -> Event:
    return Event.trigger(
        routing_key=ROUTING_KEY,
        summary="Example alert on host1.example.com",
        source="host1.example.com",
        severity=Severity.CRITICAL,
    )
