"""Pydantic models for the PagerDuty Events API v2.

An Event is a short-lived, mutable builder: construct it through one of the
per-action constructors, configure it with chained setters (each returns the
same instance) and hand it to PagerDutyEventsApi.send, which serializes it
once via to_canonical_form.

Example:
    >>> event = (
    ...     Event.trigger(
    ...         routing_key="R0UT1NGK3Y",
    ...         summary="Disk full on db-1",
    ...         source="db-1.example.com",
    ...         severity=Severity.CRITICAL,
    ...     )
    ...     .set_payload_component("postgres")
    ...     .add_link("https://runbooks.example.com/disk-full", "Runbook")
    ... )
    >>> event.to_canonical_form()["event_action"]
    'trigger'
"""

import contextlib
import hashlib
from collections.abc import Generator
from datetime import datetime
from enum import StrEnum
from http import HTTPStatus
from typing import Any, Self

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_serializer,
    field_validator,
    model_validator,
)

from pagerduty_events.exceptions import InvalidArgumentError

AUTO_DEDUP_KEY_PREFIX = "md5-"


class EventAction(StrEnum):
    """Event action, determines the API semantics of an event."""

    TRIGGER = "trigger"
    ACKNOWLEDGE = "acknowledge"
    RESOLVE = "resolve"


class Severity(StrEnum):
    """Perceived severity of the status the event is describing."""

    CRITICAL = "critical"
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


def _format_validation_error(error: ValidationError) -> str:
    messages = []
    for detail in error.errors():
        loc = ".".join(str(part) for part in detail["loc"])
        messages.append(f"{loc}: {detail['msg']}" if loc else detail["msg"])
    return "; ".join(messages)


@contextlib.contextmanager
def _invalid_argument() -> Generator[None, None, None]:
    try:
        yield
    except ValidationError as e:
        raise InvalidArgumentError(_format_validation_error(e)) from e


def derive_dedup_key(summary: str) -> str:
    """Deterministic dedup key for a summary ("md5-" + hex digest)."""
    digest = hashlib.md5(summary.encode("utf-8"), usedforsecurity=False)
    return AUTO_DEDUP_KEY_PREFIX + digest.hexdigest()


def _empty_to_none(value: Any) -> Any:
    return value or None


class Link(BaseModel):
    """A link attached to the incident.

    Attributes:
        href: URL of the link
        text: Plain text describing the link, omitted when empty
    """

    model_config = ConfigDict(frozen=True)

    href: str = Field(..., min_length=1)
    text: str | None = None

    @field_validator("text", mode="before")
    @classmethod
    def _omit_empty(cls, value: Any) -> Any:
        return _empty_to_none(value)


class Image(BaseModel):
    """An image attached to the incident.

    Attributes:
        src: URL of the image, must be served via HTTPS
        href: Makes the image a clickable link, omitted when empty
        alt: Alternative text for the image, omitted when empty
    """

    model_config = ConfigDict(frozen=True)

    src: str = Field(..., min_length=1)
    href: str | None = None
    alt: str | None = None

    @field_validator("href", "alt", mode="before")
    @classmethod
    def _omit_empty(cls, value: Any) -> Any:
        return _empty_to_none(value)


class TriggerPayload(BaseModel):
    """Payload of a trigger event.

    Attributes:
        summary: Human-readable summary, this is what PagerDuty reads over the phone
        source: Unique location of the affected system, preferably a hostname or FQDN
        severity: One of critical, error, warning or info
        timestamp: When the event occurred (ISO-8601 string or datetime)
        component: Component of the source responsible for the event, e.g. "mysql"
        group: Logical grouping of components, e.g. "app-stack"
        class_: Class/type of the event, e.g. "ping failure" (wire name "class")
        custom_details: Additional details about the event and affected system
    """

    model_config = ConfigDict(validate_assignment=True, populate_by_name=True)

    summary: str = Field(..., min_length=1)
    source: str = Field(..., min_length=1)
    severity: Severity
    timestamp: str | datetime | None = None
    component: str | None = None
    group: str | None = None
    class_: str | None = Field(None, alias="class")
    custom_details: dict[str, Any] | None = None

    @field_serializer("timestamp")
    def _serialize_timestamp(self, value: str | datetime | None) -> str | None:
        if isinstance(value, datetime):
            return value.isoformat()
        return value


class Event(BaseModel):
    """A PagerDuty Events API v2 event.

    A single type tagged by event_action. Trigger events carry a
    TriggerPayload plus optional links and images; acknowledge and resolve
    events carry only the routing key and a mandatory dedup key.

    Use Event.trigger, Event.acknowledge or Event.resolve to construct one.
    Validation failures raise InvalidArgumentError, also when the model is
    constructed directly with keyword arguments.

    Attributes:
        routing_key: Integration key of the target service
        event_action: trigger, acknowledge or resolve (immutable)
        dedup_key: Correlates events of one incident, omitted when unset
        payload: Trigger payload, None for acknowledge and resolve
        links: Links attached to the incident, in insertion order
        images: Images attached to the incident, in insertion order
        auto_dedup_key: Derive dedup_key from the summary at serialization time
    """

    model_config = ConfigDict(validate_assignment=True)

    routing_key: str = Field(..., min_length=1)
    event_action: EventAction = Field(..., frozen=True)
    dedup_key: str | None = Field(None, min_length=1)
    payload: TriggerPayload | None = None
    links: list[Link] = Field(default_factory=list)
    images: list[Image] = Field(default_factory=list)
    auto_dedup_key: bool = Field(default=False, exclude=True)

    def __init__(self, /, **data: Any) -> None:
        with _invalid_argument():
            super().__init__(**data)

    @model_validator(mode="after")
    def _check_variant(self) -> Self:
        match self.event_action:
            case EventAction.TRIGGER:
                if self.payload is None:
                    raise ValueError("trigger events require a payload")
            case EventAction.ACKNOWLEDGE | EventAction.RESOLVE:
                if not self.dedup_key:
                    raise ValueError(
                        f"{self.event_action} events require a dedup_key"
                    )
                if self.payload is not None or self.links or self.images:
                    raise ValueError(
                        f"{self.event_action} events carry no payload, links or images"
                    )
                if self.auto_dedup_key:
                    raise ValueError(
                        f"{self.event_action} events cannot derive their dedup_key"
                    )
        return self

    @classmethod
    def trigger(
        cls,
        routing_key: str,
        summary: str,
        source: str,
        severity: Severity | str,
        *,
        auto_dedup_key: bool = False,
    ) -> Self:
        """Create a trigger event.

        Args:
            routing_key: Integration key of the target service
            summary: Human-readable error message
            source: Unique location of the affected system
            severity: One of critical, error, warning or info
            auto_dedup_key: If True, dedup_key is "md5-" + md5(summary),
                computed from the summary current at serialization time

        Raises:
            InvalidArgumentError: On empty routing_key, summary or source,
                or an unknown severity
        """
        with _invalid_argument():
            return cls(
                routing_key=routing_key,
                event_action=EventAction.TRIGGER,
                payload=TriggerPayload(
                    summary=summary, source=source, severity=severity
                ),
                auto_dedup_key=auto_dedup_key,
            )

    @classmethod
    def acknowledge(cls, routing_key: str, dedup_key: str) -> Self:
        """Create an acknowledge event for the incident identified by dedup_key."""
        with _invalid_argument():
            return cls(
                routing_key=routing_key,
                event_action=EventAction.ACKNOWLEDGE,
                dedup_key=dedup_key,
            )

    @classmethod
    def resolve(cls, routing_key: str, dedup_key: str) -> Self:
        """Create a resolve event for the incident identified by dedup_key."""
        with _invalid_argument():
            return cls(
                routing_key=routing_key,
                event_action=EventAction.RESOLVE,
                dedup_key=dedup_key,
            )

    def _trigger_payload(self, what: str = "payload") -> TriggerPayload:
        if self.event_action != EventAction.TRIGGER or self.payload is None:
            raise InvalidArgumentError(f"{self.event_action} events carry no {what}")
        return self.payload

    def _set_payload(self, name: str, value: Any) -> Self:
        payload = self._trigger_payload()
        with _invalid_argument():
            setattr(payload, name, value)
        return self

    def set_dedup_key(self, dedup_key: str) -> Self:
        with _invalid_argument():
            self.dedup_key = dedup_key
        return self

    def set_payload_summary(self, summary: str) -> Self:
        return self._set_payload("summary", summary)

    def set_payload_source(self, source: str) -> Self:
        return self._set_payload("source", source)

    def set_payload_severity(self, severity: Severity | str) -> Self:
        return self._set_payload("severity", severity)

    def set_payload_timestamp(self, timestamp: str | datetime) -> Self:
        return self._set_payload("timestamp", timestamp)

    def set_payload_component(self, component: str) -> Self:
        return self._set_payload("component", component)

    def set_payload_group(self, group: str) -> Self:
        return self._set_payload("group", group)

    def set_payload_class(self, class_: str) -> Self:
        return self._set_payload("class_", class_)

    def set_payload_custom_details(self, custom_details: dict[str, Any]) -> Self:
        return self._set_payload("custom_details", custom_details)

    def add_link(self, href: str, text: str | None = None) -> Self:
        """Attach a link to the incident. An empty text is omitted."""
        self._trigger_payload("links")
        with _invalid_argument():
            link = Link(href=href, text=text)
        self.links.append(link)
        return self

    def add_image(
        self, src: str, href: str | None = None, alt: str | None = None
    ) -> Self:
        """Attach an image to the incident. Empty href / alt are omitted."""
        self._trigger_payload("images")
        with _invalid_argument():
            image = Image(src=src, href=href, alt=alt)
        self.images.append(image)
        return self

    def to_canonical_form(self) -> dict[str, Any]:
        """Nested map matching the Events API v2 JSON schema.

        With auto_dedup_key enabled, dedup_key is (re)derived here from the
        current summary, so the summary must be final before serialization.
        Unset fields are omitted, never emitted as null.
        """
        if self.auto_dedup_key and self.payload is not None:
            self.dedup_key = derive_dedup_key(self.payload.summary)
        exclude = {name for name in ("links", "images") if not getattr(self, name)}
        return self.model_dump(by_alias=True, exclude_none=True, exclude=exclude)


class SendResult(BaseModel):
    """Outcome of a completed Events API exchange.

    Attributes:
        status_code: HTTP status code returned by the API
        body: Parsed JSON response body, raw text if not JSON, None if empty
    """

    model_config = ConfigDict(frozen=True)

    status_code: int
    body: Any = None

    @property
    def accepted(self) -> bool:
        """The event was accepted for processing (202)."""
        return self.status_code == HTTPStatus.ACCEPTED

    @property
    def rate_limited(self) -> bool:
        """The caller is being rate limited and should back off (403)."""
        return self.status_code == HTTPStatus.FORBIDDEN
