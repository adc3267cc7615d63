"""HTTP client for SNCF API requests."""

import logging
from typing import TYPE_CHECKING, Any

import aiohttp
from yarl import URL

from sncf_trains.adapters.api_request_logger import log_api_request
from sncf_trains.adapters.sncf_api.constants import (
    DEFAULT_HEADERS,
    ERROR_BODY_EXCERPT_LENGTH,
    SNCF_API_BASE_URL,
)
from sncf_trains.domain.errors import SncfApiError

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientResponse, ClientSession


class SncfHttpClient:
    """HTTP client for the SNCF coverage API.

    Network faults (aiohttp.ClientError, timeouts) propagate to the caller;
    non-success statuses are raised as SncfApiError.
    """

    def __init__(
        self,
        session: "ClientSession",
        api_key: str,
        base_url: str = SNCF_API_BASE_URL,
    ) -> None:
        """Initialize with an aiohttp session and the API credentials.

        Args:
            session: aiohttp ClientSession shared by all requests.
            api_key: SNCF API key.
            base_url: Coverage base URL, without trailing slash.
        """
        self._session = session
        self._base_url = base_url.rstrip("/")
        self._headers = dict(DEFAULT_HEADERS)
        self._auth = aiohttp.BasicAuth(api_key, "")

    def build_url(self, path: str) -> URL:
        """Build an absolute URL from a path that is already percent-encoded."""
        return URL(f"{self._base_url}/{path}", encoded=True)

    async def _raise_for_status(self, response: "ClientResponse", url: URL) -> None:
        """Log and raise SncfApiError for any non-2xx response."""
        if 200 <= response.status < 300:
            return

        response_text = await response.text()
        excerpt = response_text[:ERROR_BODY_EXCERPT_LENGTH] if response_text else "(empty body)"
        logger.warning(f"SNCF API returned status {response.status} for {url}: {excerpt}")
        raise SncfApiError(
            response.status, f"SNCF API returned status {response.status}: {excerpt}"
        )

    async def get_json(self, path: str, params: dict[str, Any] | None = None) -> dict[str, Any]:
        """Issue a GET request and return the decoded JSON body.

        Args:
            path: Path relative to the base URL, percent-encoded by the caller.
            params: Query parameters, encoded by aiohttp.

        Returns:
            The JSON response body.

        Raises:
            SncfApiError: If the API answers with a non-2xx status.
        """
        url = self.build_url(path)
        log_api_request(
            "GET", str(url), params=params, headers=self._headers, authenticated=True
        )

        async with self._session.get(
            url, params=params, headers=self._headers, auth=self._auth
        ) as response:
            await self._raise_for_status(response, url)
            data: dict[str, Any] = await response.json(content_type=None)
            return data
