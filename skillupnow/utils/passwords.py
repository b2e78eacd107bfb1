# skillupnow/utils/passwords.py
from passlib.context import CryptContext

from skillupnow.utils.logging import get_logger

logger = get_logger(__name__)

# jeden kontekst na proces
pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")


def get_password_hash(password: str) -> str:
    try:
        return pwd_context.hash(password)
    except Exception:
        logger.exception("Blad podczas hashowania hasla")
        raise


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Porownanie hasla z hashem. Uszkodzony/nieznany hash traktujemy
    jak zle haslo.
    """
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except (ValueError, TypeError):
        logger.warning("Nie mozna zweryfikowac hasla: nieprawidlowy hash")
        return False
