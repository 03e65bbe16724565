class TMDBError(Exception):
    pass


class TMDBUpstreamError(TMDBError):
    """The provider answered with a non-2xx status."""

    def __init__(self, status_code: int, body: str):
        self.status_code = status_code
        self.body = body
        super().__init__(f"TMDB responded with {status_code}")


class TMDBUnavailableError(TMDBError):
    """The provider could not be reached at all."""

    def __init__(self, message: str = "Movie metadata provider is unavailable."):
        super().__init__(message)
