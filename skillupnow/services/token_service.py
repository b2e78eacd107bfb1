# skillupnow/services/token_service.py
from datetime import datetime, timezone, timedelta
from typing import Iterable

import jwt
from jwt import PyJWTError

from skillupnow.domain.errors import AuthenticationError
from skillupnow.utils.settings import JWT_SECRET, JWT_ALGORITHM, TOKEN_TTL_SECONDS, TOKEN_PREFIX
from skillupnow.utils.logging import get_logger

logger = get_logger(__name__)


class TokenService:
    """
    Wydawanie i weryfikacja bearer tokenow (JWT, klucz symetryczny).
    Claims: sub, roles (po przecinku), exp. Brak odwolywania tokenow:
    token jest wazny do exp, nawet po zmianie hasla.
    """

    def __init__(
        self,
        secret: str | None = None,
        algorithm: str | None = None,
        ttl_seconds: int | None = None,
    ):
        self.secret = secret or JWT_SECRET
        self.algorithm = algorithm or JWT_ALGORITHM
        self.ttl = timedelta(seconds=ttl_seconds if ttl_seconds is not None else TOKEN_TTL_SECONDS)

    def issue_token(self, identity: str, roles: Iterable[str]) -> str:
        expire = datetime.now(timezone.utc) + self.ttl
        claims = {
            "sub": identity,
            "roles": ",".join(roles),
            "exp": expire,
        }
        logger.info(f"Wydano token dla {identity}")
        return jwt.encode(claims, self.secret, algorithm=self.algorithm)

    def decode_token(self, token: str) -> dict:
        try:
            payload = jwt.decode(
                token,
                self.secret,
                algorithms=[self.algorithm],
                options={"require": ["exp", "sub"]},
            )
        except PyJWTError as e:
            logger.warning(f"JWT decode error: {e}")
            raise AuthenticationError("Nieprawidlowy lub wygasly token")

        if not payload.get("sub"):
            raise AuthenticationError("Token bez identyfikatora uzytkownika")

        return payload

    @staticmethod
    def authorization_header(token: str) -> str:
        return f"{TOKEN_PREFIX}{token}"
