"""Transport configuration for the PagerDuty Events API client.

There is no environment or file based configuration. Connections start from
DEFAULT_TRANSPORT_OPTIONS and are adjusted through explicit calls.
"""

import ssl
from enum import StrEnum
from types import MappingProxyType
from typing import Any

EVENTS_API_V2_URL = "https://events.pagerduty.com/v2/enqueue"

# Joins values of a header added more than once without overwrite
HEADER_SEPARATOR = ";"

CONNECT_TIMEOUT = 10
TIMEOUT = 60
USER_AGENT = "pagerduty-events-python"

# TLS backends which do not accept a custom cipher list
CIPHER_LIST_UNSUPPORTED_BACKENDS = ("NSS/",)


class TransportOption(StrEnum):
    """Names of the transport options understood by PagerDutyEventsApi."""

    SSL_VERSION = "ssl_version"
    CONNECT_TIMEOUT = "connect_timeout"
    TIMEOUT = "timeout"
    USER_AGENT = "user_agent"
    SSL_VERIFY_HOST = "ssl_verify_host"
    SSL_VERIFY_PEER = "ssl_verify_peer"
    SSL_CIPHER_LIST = "ssl_cipher_list"
    SSL_CERT = "ssl_cert"
    SSL_CERT_PASSPHRASE = "ssl_cert_passphrase"
    PROXY = "proxy"
    PROXY_CREDENTIALS = "proxy_credentials"


DEFAULT_TRANSPORT_OPTIONS: MappingProxyType[TransportOption, Any] = MappingProxyType({
    TransportOption.SSL_VERSION: ssl.TLSVersion.TLSv1_2,
    TransportOption.CONNECT_TIMEOUT: CONNECT_TIMEOUT,
    TransportOption.TIMEOUT: TIMEOUT,
    TransportOption.USER_AGENT: USER_AGENT,
    TransportOption.SSL_VERIFY_HOST: True,
    TransportOption.SSL_VERIFY_PEER: True,
    TransportOption.SSL_CIPHER_LIST: "TLSv1:TLSv1.2",
})


def tls_backend_version() -> str:
    """Name and version of the TLS library Python is linked against."""
    return ssl.OPENSSL_VERSION


def supports_cipher_list(backend_version: str | None = None) -> bool:
    """Whether the TLS backend accepts a custom cipher list.

    Args:
        backend_version: TLS backend version string (default: the running one)
    """
    version = backend_version if backend_version is not None else tls_backend_version()
    return not version.startswith(CIPHER_LIST_UNSUPPORTED_BACKENDS)
