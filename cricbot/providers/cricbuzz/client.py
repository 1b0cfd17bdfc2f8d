"""Cricbuzz match-center HTTP client.

Handles raw HTTP requests to the two match-center endpoints.
No data transformation - just fetch and return JSON.

No retries: a failed request raises immediately and the caller decides
whether the interaction can continue.

Timeout is fixed at config.CRICBUZZ_TIMEOUT (15 seconds).
"""

import logging

import httpx

from cricbot.config import CRICBUZZ_TIMEOUT
from cricbot.core.errors import FetchFailureError, FetchTimeoutError

logger = logging.getLogger(__name__)

CRICBUZZ_BASE_URL = "https://www.cricbuzz.com/api/mcenter"

# The match-center API rejects requests that don't look like they came from the site
CRICBUZZ_HEADERS = {
    "User-Agent": "Mozilla/5.0",
    "Referer": "https://www.cricbuzz.com",
}


def commentary_url(match_id: str) -> str:
    return f"{CRICBUZZ_BASE_URL}/comm/{match_id}"


def scorecard_url(match_id: str) -> str:
    return f"{CRICBUZZ_BASE_URL}/scorecard/{match_id}"


class CricbuzzClient:
    """Low-level async Cricbuzz client.

    One httpx.AsyncClient is created lazily and reused for every request so
    repeated refreshes share a connection pool.
    """

    def __init__(
        self,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._timeout = timeout if timeout is not None else CRICBUZZ_TIMEOUT
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=self._timeout,
                headers=CRICBUZZ_HEADERS,
                transport=self._transport,
            )
        return self._client

    async def _request(self, url: str) -> dict:
        """GET a URL and return its decoded JSON body.

        Raises:
            FetchTimeoutError: No response within the timeout
            FetchFailureError: Any other transport error, non-2xx status,
                or a body that is not a JSON object
        """
        try:
            response = await self._get_client().get(url)
            response.raise_for_status()
            data = response.json()
        except httpx.TimeoutException as e:
            logger.warning("[CRICBUZZ] Timed out after %.0fs for %s", self._timeout, url)
            raise FetchTimeoutError(url, "Request timed out") from e
        except httpx.HTTPStatusError as e:
            logger.warning("[CRICBUZZ] HTTP %d for %s", e.response.status_code, url)
            raise FetchFailureError(url, f"HTTP {e.response.status_code}") from e
        except httpx.RequestError as e:
            logger.warning("[CRICBUZZ] Request failed for %s: %s", url, e)
            raise FetchFailureError(url, "Request failed") from e
        except ValueError as e:
            logger.warning("[CRICBUZZ] Invalid JSON from %s: %s", url, e)
            raise FetchFailureError(url, "Invalid JSON") from e

        if not isinstance(data, dict):
            logger.warning("[CRICBUZZ] Unexpected payload type %s from %s", type(data), url)
            raise FetchFailureError(url, "Unexpected payload")

        logger.debug("[FETCH] %s", url.split("/mcenter/")[-1])
        return data

    async def get_commentary(self, match_id: str) -> dict:
        """Fetch live commentary (header + miniscore) for a match.

        Args:
            match_id: Cricbuzz match ID

        Returns:
            Raw Cricbuzz response
        """
        return await self._request(commentary_url(match_id))

    async def get_scorecard(self, match_id: str) -> dict:
        """Fetch the full scorecard for a match.

        Only reliable once the match has completed.

        Args:
            match_id: Cricbuzz match ID

        Returns:
            Raw Cricbuzz response
        """
        return await self._request(scorecard_url(match_id))

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None
