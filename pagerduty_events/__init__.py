"""PagerDuty Events API v2 client and models.

- Event: tagged trigger / acknowledge / resolve event builder
- PagerDutyEventsApi: connection owning the transport configuration
- SendResult: status code and parsed body of a completed exchange

Hook System:
- PagerDutyEventsApiCallContext: Context passed to hooks
- Hooks: custom pre/post/error hooks for metrics, logging, latency

Example:
    >>> from pagerduty_events import Event, PagerDutyEventsApi, Severity
    >>> api = PagerDutyEventsApi()
    >>> event = Event.trigger(
    ...     "R0UT1NGK3Y", "Disk full on db-1", "db-1", Severity.CRITICAL,
    ...     auto_dedup_key=True,
    ... )
    >>> result = api.send(event)
    >>> if result.rate_limited:
    ...     ...  # back off and retry later
"""

from pagerduty_events.client import PagerDutyEventsApi, PagerDutyEventsApiCallContext
from pagerduty_events.config import (
    DEFAULT_TRANSPORT_OPTIONS,
    EVENTS_API_V2_URL,
    TransportOption,
)
from pagerduty_events.exceptions import (
    ConfigurationError,
    InvalidArgumentError,
    PagerDutyEventsError,
    RequestRejectedError,
    SerializationError,
    TransportFailureError,
)
from pagerduty_events.hooks import Hooks
from pagerduty_events.models import (
    Event,
    EventAction,
    Image,
    Link,
    SendResult,
    Severity,
    TriggerPayload,
)

__all__ = [
    "DEFAULT_TRANSPORT_OPTIONS",
    "EVENTS_API_V2_URL",
    "ConfigurationError",
    "Event",
    "EventAction",
    "Hooks",
    "Image",
    "InvalidArgumentError",
    "Link",
    "PagerDutyEventsApi",
    "PagerDutyEventsApiCallContext",
    "PagerDutyEventsError",
    "RequestRejectedError",
    "SendResult",
    "SerializationError",
    "Severity",
    "TransportFailureError",
    "TransportOption",
    "TriggerPayload",
]
