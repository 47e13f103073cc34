"""Custom exceptions for the PagerDuty Events API client."""

from typing import Any


class PagerDutyEventsError(Exception):
    """Base exception for all errors raised by this package."""

    def __init__(self, message: str) -> None:
        """Initialize error."""
        self.message = message
        super().__init__(self.message)


class InvalidArgumentError(PagerDutyEventsError, ValueError):
    """An event field is missing or malformed.

    Always raised locally, before any network activity.
    """


class ConfigurationError(PagerDutyEventsError):
    """The transport configuration is malformed (e.g. an unparseable proxy URL)."""


class SerializationError(PagerDutyEventsError, TypeError):
    """The event could not be serialized to JSON."""


class RequestRejectedError(PagerDutyEventsError):
    """The Events API rejected the event (HTTP 400).

    Attributes:
        message: Human-readable message returned by the API
        errors: Structured error list returned by the API, verbatim
        status_code: HTTP status code of the response
        body: Parsed response body
    """

    def __init__(
        self,
        message: str,
        errors: list[Any],
        status_code: int = 400,
        body: Any = None,
    ) -> None:
        """Initialize request rejected error."""
        self.errors = errors
        self.status_code = status_code
        self.body = body
        super().__init__(message)

    def __str__(self) -> str:
        if not self.errors:
            return self.message
        return f"{self.message}: {'; '.join(str(e) for e in self.errors)}"


class TransportFailureError(PagerDutyEventsError):
    """The request failed before a status code was obtained.

    Covers DNS, connection, TLS and timeout failures. The original exception
    is available as ``__cause__``.
    """
