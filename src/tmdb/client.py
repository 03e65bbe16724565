import logging
from typing import Any, Mapping

import httpx

from exceptions import TMDBUpstreamError, TMDBUnavailableError
from tmdb.interfaces import TMDBClientInterface

logger = logging.getLogger(__name__)


class TMDBClient(TMDBClientInterface):
    """
    Thin async wrapper around the TMDB v3 REST API.

    The API key lives on the server and is appended to every request.
    """

    def __init__(self, api_key: str, base_url: str, timeout: float = 10.0):
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout

    async def get(
            self, path: str, params: Mapping[str, Any] | None = None
    ) -> dict:
        query = dict(params or {})
        query["api_key"] = self._api_key
        url = f"{self._base_url}/{path.lstrip('/')}"

        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                response = await client.get(url, params=query)
        except httpx.HTTPError as e:
            logger.error(f"TMDB request to '{path}' failed: {e}")
            raise TMDBUnavailableError from e

        if response.is_error:
            logger.warning(
                f"TMDB responded {response.status_code} for '{path}'"
            )
            raise TMDBUpstreamError(
                status_code=response.status_code, body=response.text
            )
        return response.json()
