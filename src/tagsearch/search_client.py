"""Search API client for paged tag queries."""

import logging
from typing import TYPE_CHECKING, Optional

import httpx
from pydantic import ValidationError

from .config import Settings
from .errors import ConfigurationError, DecodeError, TransportError
from .models import ResponseEnvelope

if TYPE_CHECKING:
    from .pipeline.rate_limiter import RateLimiter

logger = logging.getLogger(__name__)

TWEET_FIELDS = "id,text,edit_history_tweet_ids,created_at"
USER_FIELDS = "id,name,username,location"


def escape_tag(tag: str) -> str:
    """Build the hashtag query term for a raw tag.

    The ``#`` is percent-encoded as ``%23`` when the query string is built.
    """
    tag = tag.strip()
    if not tag:
        raise ConfigurationError("Search tag must not be empty")
    if tag.startswith("#"):
        return tag
    return f"#{tag}"


def build_headers(token: str) -> dict[str, str]:
    """Build request headers carrying the bearer credential."""
    if not token.isascii() or not token.isprintable():
        raise ConfigurationError("Bearer token must be printable ASCII")
    authorization = token if token.lower().startswith("bearer ") else f"Bearer {token}"
    return {
        "Accept": "application/json",
        "Authorization": authorization,
    }


class SearchClient:
    """Client for the paged search endpoint."""

    def __init__(
        self,
        settings: Settings,
        rate_limiter: "RateLimiter",
        client: Optional[httpx.AsyncClient] = None,
    ):
        """Initialize search client.

        Args:
            settings: Application settings
            rate_limiter: Limiter gating every outbound request
            client: Optional preconfigured HTTP client (owned by the caller)
        """
        settings.validate_api_keys()
        self.settings = settings
        self.rate_limiter = rate_limiter
        self.headers = build_headers(settings.bearer_token)
        self._owns_client = client is None
        self.client = client or httpx.AsyncClient(timeout=settings.request_timeout)

    async def __aenter__(self) -> "SearchClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying HTTP client if this instance created it."""
        if self._owns_client:
            await self.client.aclose()

    def build_params(
        self, query: str, start_time: str, end_time: str, cursor: str = ""
    ) -> dict[str, str]:
        """Build query parameters for one page request."""
        params = {
            "query": query,
            "start_time": start_time,
            "end_time": end_time,
            "max_results": str(self.settings.max_results),
            "tweet.fields": TWEET_FIELDS,
            "user.fields": USER_FIELDS,
        }
        if cursor:
            params["next_token"] = cursor
        return params

    async def search(
        self, query: str, start_time: str, end_time: str, cursor: str = ""
    ) -> ResponseEnvelope:
        """Fetch one page of search results.

        Args:
            query: Search term, e.g. the output of ``escape_tag``
            start_time: Inclusive window start (``YYYY-MM-DDTHH:MM:SSZ``)
            end_time: Exclusive window end (``YYYY-MM-DDTHH:MM:SSZ``)
            cursor: Continuation token from the previous page, empty for the first

        Returns:
            Parsed response envelope

        Raises:
            TransportError: On network failure or a non-success status
            DecodeError: If the body is not a valid envelope
        """
        request = self.client.build_request(
            "GET",
            self.settings.search_url,
            params=self.build_params(query, start_time, end_time, cursor),
            headers=self.headers,
        )
        logger.info(f"GET {request.url}")

        await self.rate_limiter.acquire()

        try:
            response = await self.client.send(request)
        except httpx.TransportError as e:
            raise TransportError(f"Request to {self.settings.search_url} failed: {e}") from e

        if response.is_error:
            raise TransportError(
                f"Search API returned HTTP {response.status_code}: {response.text[:200]}",
                status_code=response.status_code,
            )

        return self._parse(response)

    def _parse(self, response: httpx.Response) -> ResponseEnvelope:
        """Parse response body into an envelope.

        Args:
            response: HTTP response

        Returns:
            Response envelope
        """
        try:
            body = response.json()
        except ValueError as e:
            raise DecodeError(f"Response body is not valid JSON: {e}") from e

        if not isinstance(body, dict):
            raise DecodeError(f"Expected a JSON object, got {type(body).__name__}")

        try:
            return ResponseEnvelope.model_validate(body)
        except ValidationError as e:
            raise DecodeError(f"Unexpected response shape: {e}") from e
