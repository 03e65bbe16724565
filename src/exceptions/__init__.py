from exceptions.security import (
    BaseSecurityError,
    InvalidTokenError,
    TokenExpiredError,
)
from exceptions.storage import DuplicateEntryError
from exceptions.tmdb import (
    TMDBError,
    TMDBUpstreamError,
    TMDBUnavailableError,
)
