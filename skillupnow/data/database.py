# skillupnow/data/database.py
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base

from skillupnow.utils.settings import DATABASE_URL
from skillupnow.utils.logging import get_logger

logger = get_logger(__name__)

if DATABASE_URL.startswith("sqlite"):
    #sqlite: sesje z roznych watkow uvicorna, wylaczony check watku
    engine = create_engine(
        DATABASE_URL,
        connect_args={"check_same_thread": False},
        echo=False,
    )
else:
    engine = create_engine(
        DATABASE_URL,
        pool_pre_ping=True,
        pool_recycle=300,
        echo=False,
    )

logger.info(f"Database engine: {engine.dialect.name}")

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
