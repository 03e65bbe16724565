from abc import ABC, abstractmethod
from typing import Any, Mapping


class TMDBClientInterface(ABC):

    @abstractmethod
    async def get(
            self, path: str, params: Mapping[str, Any] | None = None
    ) -> dict:
        """
        Asynchronously fetch a JSON document from the metadata provider.

        Args:
            path (str): Provider path without the version prefix,
                e.g. "movie/550" or "trending/movie/week".
            params (Mapping[str, Any] | None): Query parameters to forward.

        Returns:
            dict: The decoded JSON body.

        Raises:
            TMDBUpstreamError: The provider answered with a non-2xx status.
            TMDBUnavailableError: The provider could not be reached.
        """
        pass
