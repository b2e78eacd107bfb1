# skillupnow/api/deps.py
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from skillupnow.domain.errors import AuthenticationError
from skillupnow.services.token_service import TokenService

security = HTTPBearer(auto_error=False)


def get_token_service() -> TokenService:
    return TokenService()


def get_current_username(
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
    tokens: TokenService = Depends(get_token_service),
) -> str:
    """
    Zalogowany uzytkownik z naglowka Authorization: Bearer <token>.
    Brak/zly/wygasly token -> 401.
    """
    if credentials is None:
        raise AuthenticationError("Brak tokenu uwierzytelniajacego")

    payload = tokens.decode_token(credentials.credentials)
    return payload["sub"]
