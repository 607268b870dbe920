# transport.py
"""
HTTP transports for the OMS client.

A transport performs exactly one HTTP call and returns the status code and
body text. It raises on transport faults (timeouts, refused connections,
DNS failures) and never retries. Two implementations are provided, one on
requests and one on httpx.
"""

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Protocol
from urllib.parse import urljoin

import httpx
import requests

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0


@dataclass(frozen=True)
class TransportResponse:
    """Status code and body text of an HTTP response."""

    status_code: int
    text: str

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300


class Transport(Protocol):
    """Performs a single HTTP call."""

    def send(
        self,
        method: str,
        url: str,
        *,
        headers: Mapping[str, str],
        query: Mapping[str, Any],
        body: Optional[str] = None,
    ) -> TransportResponse: ...


def normalize_base_url(base_url: str) -> str:
    """Ensure the base URL ends with a slash so relative paths join under it."""
    return base_url if base_url.endswith("/") else base_url + "/"


class RequestsTransport:
    """Transport backed by a requests.Session."""

    def __init__(
        self,
        base_url: str,
        timeout: float = DEFAULT_TIMEOUT,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.base_url = normalize_base_url(base_url)
        self.timeout = timeout
        self.session = session or requests.Session()

    def send(
        self,
        method: str,
        url: str,
        *,
        headers: Mapping[str, str],
        query: Mapping[str, Any],
        body: Optional[str] = None,
    ) -> TransportResponse:
        full_url = urljoin(self.base_url, url)
        logger.debug("%s %s", method, full_url)
        resp = self.session.request(
            method,
            full_url,
            headers=dict(headers),
            params=dict(query),
            data=body,
            timeout=self.timeout,
        )
        return TransportResponse(status_code=resp.status_code, text=resp.text)

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "RequestsTransport":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


class HttpxTransport:
    """Transport backed by an httpx.Client."""

    def __init__(
        self,
        base_url: str,
        timeout: float = DEFAULT_TIMEOUT,
        client: Optional[httpx.Client] = None,
    ) -> None:
        self.base_url = normalize_base_url(base_url)
        self.timeout = timeout
        self.client = client or httpx.Client(
            timeout=httpx.Timeout(timeout), follow_redirects=True
        )

    def send(
        self,
        method: str,
        url: str,
        *,
        headers: Mapping[str, str],
        query: Mapping[str, Any],
        body: Optional[str] = None,
    ) -> TransportResponse:
        full_url = urljoin(self.base_url, url)
        logger.debug("%s %s", method, full_url)
        response = self.client.request(
            method,
            full_url,
            headers=dict(headers),
            params=dict(query),
            content=body,
            timeout=self.timeout,
            follow_redirects=True,
        )
        return TransportResponse(status_code=response.status_code, text=response.text)

    def close(self) -> None:
        self.client.close()

    def __enter__(self) -> "HttpxTransport":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
