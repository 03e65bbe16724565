from config.settings import BaseAppSettings, Settings, TestingSettings
from config.dependencies import (
    get_settings,
    get_jwt_auth_manager,
    get_tmdb_client,
)
