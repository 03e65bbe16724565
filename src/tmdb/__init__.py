from tmdb.interfaces import TMDBClientInterface
from tmdb.client import TMDBClient
