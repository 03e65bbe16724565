from typing import Any, Mapping

from exceptions import TMDBUpstreamError, TMDBUnavailableError
from tmdb import TMDBClientInterface


class StubTMDBClient(TMDBClientInterface):
    """
    In-memory stand-in for the metadata provider.

    Responses are registered per path. A registered exception is raised
    instead of returning a body. Every call is recorded in `calls`.
    """

    def __init__(self):
        self.responses: dict[str, dict | Exception] = {}
        self.calls: list[tuple[str, dict]] = []

    def set_response(self, path: str, body: dict) -> None:
        self.responses[path] = body

    def set_upstream_error(self, path: str, status_code: int, body: str) -> None:
        self.responses[path] = TMDBUpstreamError(status_code, body)

    def set_unavailable(self, path: str) -> None:
        self.responses[path] = TMDBUnavailableError()

    def calls_for(self, path: str) -> int:
        return sum(1 for called, _ in self.calls if called == path)

    async def get(
            self, path: str, params: Mapping[str, Any] | None = None
    ) -> dict:
        self.calls.append((path, dict(params or {})))
        response = self.responses.get(path)
        if response is None:
            raise TMDBUpstreamError(
                404, '{"status_code":34,"status_message":"The resource you requested could not be found."}'
            )
        if isinstance(response, Exception):
            raise response
        return response
