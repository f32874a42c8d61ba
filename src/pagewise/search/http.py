# ABOUTME: HTTP transport abstraction for upstream search API calls.
# ABOUTME: Returns explicit UpstreamResponse results and defines the upstream error hierarchy.

import logging
import time
from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

import httpx

logger = logging.getLogger(__name__)

_CONNECT_TIMEOUT = 10.0
_READ_TIMEOUT = 30.0


class UpstreamError(Exception):
    """Base class for failures talking to the upstream search API."""


class UpstreamTimeout(UpstreamError):
    """Connect or read timeout."""

    def __init__(self, detail: str = "") -> None:
        super().__init__("Network timeout occurred")
        self.detail = detail


class UpstreamConnectionError(UpstreamError):
    """DNS or socket level failure."""

    def __init__(self, detail: str = "") -> None:
        super().__init__("Network connection error occurred")
        self.detail = detail


class UpstreamHTTPError(UpstreamError):
    """The upstream answered with a non-200 status."""

    def __init__(self, status_code: int, message: str | None = None) -> None:
        super().__init__(message or f"API error: {status_code}")
        self.status_code = status_code


class MalformedPayloadError(UpstreamError):
    """The upstream body could not be parsed as the expected JSON."""

    def __init__(self, detail: str = "") -> None:
        super().__init__("Failed to parse upstream JSON response")
        self.detail = detail


@dataclass(frozen=True)
class UpstreamResponse:
    """Result of one HTTP GET: either a status and body, or a transport error.

    Exactly one of the two shapes is meaningful. When `error` is set the
    request never produced an HTTP response and `status_code` is 0.
    """

    status_code: int = 0
    body: str = ""
    error: UpstreamError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.status_code == 200

    @classmethod
    def failed(cls, error: UpstreamError) -> "UpstreamResponse":
        return cls(error=error)


@runtime_checkable
class HttpClient(Protocol):
    """Protocol for HTTP GET operations against the upstream API."""

    def get(self, url: str, params: dict[str, str] | None = None) -> UpstreamResponse: ...


class PagewiseHttpClient:
    """HTTP client with rate limiting and bounded timeouts for upstream calls.

    Wraps httpx.Client. Transport failures are classified into UpstreamError
    subclasses and returned inside an UpstreamResponse instead of raised.
    """

    def __init__(
        self,
        *,
        min_request_interval: float = 0.1,
        timeout: httpx.Timeout | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        client_kwargs: dict[str, Any] = {
            "headers": {"User-Agent": "pagewise/0.1.0", "Accept": "application/json"},
            "timeout": timeout or httpx.Timeout(_READ_TIMEOUT, connect=_CONNECT_TIMEOUT),
        }
        if transport is not None:
            client_kwargs["transport"] = transport
        self._client = httpx.Client(**client_kwargs)
        self._min_interval = min_request_interval
        self._last_request_time: float = 0.0

    def get(self, url: str, params: dict[str, str] | None = None) -> UpstreamResponse:
        """Send a GET request with rate limiting.

        Args:
            url: The URL to request.
            params: Optional query parameters.

        Returns:
            UpstreamResponse carrying the status and raw body text, or the
            classified transport error.
        """
        self._rate_limit()

        try:
            response = self._client.get(url, params=params)
        except httpx.TimeoutException as exc:
            logger.warning("Timeout requesting %s: %s", url, exc)
            return UpstreamResponse.failed(UpstreamTimeout(str(exc)))
        except httpx.HTTPError as exc:
            logger.warning("Request to %s failed: %s", url, exc)
            return UpstreamResponse.failed(UpstreamConnectionError(str(exc)))

        if response.status_code != 200:
            logger.warning("HTTP %d from %s", response.status_code, url)
        return UpstreamResponse(status_code=response.status_code, body=response.text)

    def close(self) -> None:
        self._client.close()

    def _rate_limit(self) -> None:
        """Sleep if needed to maintain minimum interval between requests."""
        if self._min_interval <= 0:
            return
        now = time.monotonic()
        elapsed = now - self._last_request_time
        if elapsed < self._min_interval and self._last_request_time > 0:
            time.sleep(self._min_interval - elapsed)
        self._last_request_time = time.monotonic()
