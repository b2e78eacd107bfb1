# skillupnow/data/seed.py
from decimal import Decimal

from skillupnow.data.models.course import CourseModel
from skillupnow.repos.course_repo import CourseRepo
from skillupnow.utils.logging import get_logger

logger = get_logger(__name__)

CATALOG = [
    {"title": "Python for Beginners", "description": "Syntax, data types and control flow.", "price": Decimal("49.99")},
    {"title": "Web APIs with FastAPI", "description": "Routing, validation and dependency injection.", "price": Decimal("79.00")},
    {"title": "Relational Databases", "description": "SQL, normalisation and transactions.", "price": Decimal("59.50")},
    {"title": "Intro to Machine Learning", "description": "Regression, classification and evaluation.", "price": Decimal("99.00")},
]


def seed_catalog(db) -> int:
    """Seeduje katalog kursow tylko gdy tabela jest pusta. Zwraca liczbe dodanych."""
    repo = CourseRepo(db)
    # not forcing: only seed if empty
    if repo.count():
        return 0
    repo.add_all(CourseModel(**entry) for entry in CATALOG)
    logger.info(f"Zaseedowano katalog: {len(CATALOG)} kursow")
    return len(CATALOG)
