import os

from fastapi import Depends

from config.settings import Settings, TestingSettings, BaseAppSettings
from security.interfaces import JWTAuthManagerInterface
from security.token_manager import JWTAuthManager
from tmdb import TMDBClientInterface, TMDBClient


def get_settings() -> BaseAppSettings:
    """
    Retrieve the application settings based on the current environment.

    This function reads the 'ENVIRONMENT' environment variable (defaulting to 'developing' if not set)
    and returns a corresponding settings instance. If the environment is 'testing', it returns an instance
    of TestingSettings; otherwise, it returns an instance of Settings.

    Returns:
        BaseAppSettings: The settings instance appropriate for the current environment.
    """
    environment = os.getenv("ENVIRONMENT", "developing")
    if environment == "testing":
        return TestingSettings()
    return Settings()


def get_jwt_auth_manager(
        settings: BaseAppSettings = Depends(get_settings)
) -> JWTAuthManagerInterface:
    """
    Create and return a JWT authentication manager instance.

    This function uses the provided application settings to instantiate a JWTAuthManager, which implements
    the JWTAuthManagerInterface. The manager is configured with secret keys for access and refresh tokens,
    the JWT signing algorithm and the access token lifetime specified in the settings.

    Args:
        settings (BaseAppSettings, optional): The application settings instance.
        Defaults to the output of get_settings().

    Returns:
        JWTAuthManagerInterface: An instance of JWTAuthManager configured with the appropriate secret keys
        and algorithm.
    """
    return JWTAuthManager(
        secret_key_access=settings.SECRET_KEY_ACCESS,
        secret_key_refresh=settings.SECRET_KEY_REFRESH,
        algorithm=settings.JWT_SIGNING_ALGORITHM,
        access_token_expire_minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES,
        refresh_token_expire_days=settings.LOGIN_TIME_DAYS,
    )


def get_tmdb_client(
        settings: BaseAppSettings = Depends(get_settings)
) -> TMDBClientInterface:
    """
    Create the client used to talk to the movie metadata provider.

    The server-held API key is injected here, so routes never see it.
    """
    return TMDBClient(
        api_key=settings.TMDB_API_KEY,
        base_url=settings.TMDB_BASE_URL,
        timeout=settings.TMDB_TIMEOUT_SECONDS,
    )
