# skillupnow/main.py
from contextlib import asynccontextmanager

from fastapi import FastAPI
import uvicorn

from skillupnow.data.database import Base, engine, SessionLocal
from skillupnow.api import include_routers
from skillupnow.api.errors import setup_error_handlers
from skillupnow.data.seed import seed_catalog
from skillupnow.utils.settings import LOG_LEVEL, SEED_CATALOG
from skillupnow.utils.logging import setup_logging, get_logger

# import wszystkich modeli przed create_all
import skillupnow.data.models  # noqa: F401

logger = get_logger(__name__)


def init_db():
    logger.info(f"Models registered in Base.metadata: {list(Base.metadata.tables.keys())}")
    try:
        Base.metadata.create_all(bind=engine)
    except Exception:
        logger.exception("Nie udalo sie utworzyc tabel")
        raise
    logger.info("Database tables created")

    if SEED_CATALOG:
        db = SessionLocal()
        try:
            seed_catalog(db)
        finally:
            db.close()


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    yield


def create_app(init_database: bool = True) -> FastAPI:
    setup_logging(LOG_LEVEL)

    app = FastAPI(
        title="SkillUpNow",
        version="1.0.0",
        lifespan=lifespan if init_database else None,
    )

    setup_error_handlers(app)
    include_routers(app)

    return app


app = create_app()

if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=8000)
