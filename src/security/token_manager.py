import uuid
from datetime import datetime, timedelta, timezone

from jose import jwt, JWTError, ExpiredSignatureError

from exceptions import TokenExpiredError, InvalidTokenError
from security.interfaces import JWTAuthManagerInterface


class JWTAuthManager(JWTAuthManagerInterface):
    """
    Manager for handling JWT access and refresh tokens.

    Access and refresh tokens are signed with different keys, so a refresh
    token can never be presented as an access token.
    """

    def __init__(
            self,
            secret_key_access: str,
            secret_key_refresh: str,
            algorithm: str,
            access_token_expire_minutes: int = 60,
            refresh_token_expire_days: int = 7,
    ):
        self._secret_key_access = secret_key_access
        self._secret_key_refresh = secret_key_refresh
        self._algorithm = algorithm
        self._access_token_expire_minutes = access_token_expire_minutes
        self._refresh_token_expire_days = refresh_token_expire_days

    def _create_token(
            self, data: dict, secret_key: str, expires_delta: timedelta
    ) -> str:
        to_encode = data.copy()
        expire = datetime.now(timezone.utc) + expires_delta
        to_encode.update({"exp": expire, "jti": uuid.uuid4().hex})
        return jwt.encode(to_encode, secret_key, algorithm=self._algorithm)

    def _decode_token(self, token: str, secret_key: str) -> dict:
        try:
            return jwt.decode(token, secret_key, algorithms=[self._algorithm])
        except ExpiredSignatureError:
            raise TokenExpiredError
        except JWTError:
            raise InvalidTokenError

    def create_access_token(self, data: dict, expires_delta: timedelta = None) -> str:
        return self._create_token(
            data,
            self._secret_key_access,
            expires_delta or timedelta(minutes=self._access_token_expire_minutes),
        )

    def create_refresh_token(self, data: dict, expires_delta: timedelta = None) -> str:
        return self._create_token(
            data,
            self._secret_key_refresh,
            expires_delta or timedelta(days=self._refresh_token_expire_days),
        )

    def decode_access_token(self, token: str) -> dict:
        return self._decode_token(token, self._secret_key_access)

    def decode_refresh_token(self, token: str) -> dict:
        return self._decode_token(token, self._secret_key_refresh)
