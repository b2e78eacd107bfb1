# skillupnow/utils/settings.py
import os
from dotenv import load_dotenv

load_dotenv()

# brak DATABASE_URL -> lokalny plik sqlite
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./skillupnow.db")

# HS512 -> klucz min. 64 bajty
JWT_SECRET = os.getenv(
    "JWT_SECRET",
    "change-me-skillupnow-dev-secret-key-0123456789abcdef0123456789abcdef",
)
JWT_ALGORITHM = os.getenv("JWT_ALGORITHM", "HS512")
TOKEN_TTL_SECONDS = int(os.getenv("TOKEN_TTL_SECONDS", 10 * 24 * 60 * 60))
TOKEN_PREFIX = "Bearer "
HEADER_STRING = "Authorization"

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# ile razy powtarzamy read-modify-write koszyka przy konflikcie wersji
CART_UPDATE_ATTEMPTS = int(os.getenv("CART_UPDATE_ATTEMPTS", 3))

SEED_CATALOG = os.getenv("SEED_CATALOG", "true").lower() in {"1", "true", "yes"}
