# ABOUTME: Google Books upstream search client implementation.
# ABOUTME: Issues volumes queries over HTTPS and turns responses into pages or typed errors.

import json
import logging

from pagewise.search.google_books_parser import parse_error_message, parse_volumes_response
from pagewise.search.http import (
    HttpClient,
    MalformedPayloadError,
    UpstreamHTTPError,
)
from pagewise.search.types import UpstreamPage

logger = logging.getLogger(__name__)

_VOLUMES_URL = "https://www.googleapis.com/books/v1/volumes"

# Google Books rejects maxResults above 40.
MAX_RESULTS_PER_CALL = 40


class GoogleBooksClient:
    """Upstream search client backed by the Google Books volumes API.

    The API key is passed in explicitly; nothing is read from the environment.
    Uses dependency-injected HttpClient for testability.
    """

    def __init__(self, http_client: HttpClient, api_key: str) -> None:
        self._http = http_client
        self._api_key = api_key

    @property
    def name(self) -> str:
        return "google_books"

    def fetch(self, query: str, offset: int, page_size: int) -> UpstreamPage:
        """Fetch one raw page of volumes.

        Args:
            query: Already-shaped query string.
            offset: Zero-based start index into the upstream result set.
            page_size: Requested page size, clamped to the API maximum.

        Raises:
            UpstreamTimeout, UpstreamConnectionError: On transport failures.
            UpstreamHTTPError: On any non-200 status.
            MalformedPayloadError: When the body is not a JSON object.
        """
        params = {
            "q": query,
            "startIndex": str(offset),
            "maxResults": str(min(page_size, MAX_RESULTS_PER_CALL)),
            "key": self._api_key,
            "orderBy": "relevance",
            "printType": "books",
            "projection": "lite",
        }
        response = self._http.get(_VOLUMES_URL, params=params)

        if response.error is not None:
            raise response.error

        if response.status_code != 200:
            raise UpstreamHTTPError(
                response.status_code, self._extract_error_message(response.body)
            )

        try:
            data = json.loads(response.body)
        except json.JSONDecodeError as exc:
            raise MalformedPayloadError(str(exc)) from exc
        if not isinstance(data, dict):
            raise MalformedPayloadError(f"expected JSON object, got {type(data).__name__}")

        try:
            page = parse_volumes_response(data)
        except (AttributeError, TypeError, ValueError) as exc:
            raise MalformedPayloadError(str(exc)) from exc
        logger.debug(
            "Fetched %d item(s) at offset %d (reported total %d)",
            len(page.items),
            offset,
            page.reported_total,
        )
        return page

    @staticmethod
    def _extract_error_message(body: str) -> str | None:
        if not body:
            return None
        try:
            return parse_error_message(json.loads(body))
        except json.JSONDecodeError:
            return None
