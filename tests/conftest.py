import os

# przed importem skillupnow: bez pliku sqlite i bez seedowania globalnego engine
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("SEED_CATALOG", "false")

from decimal import Decimal

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from skillupnow.data.database import Base, get_db
from skillupnow.data.models import CourseModel
from skillupnow.domain.schemas import CreateUserRequest
from skillupnow.main import create_app
from skillupnow.services.account_service import AccountService

TEST_SQLALCHEMY_DATABASE_URL = "sqlite://"

PASSWORD = "s3cret-pass"

PROFILE = {
    "firstname": "Rachel",
    "lastname": "Green",
    "email": "rachel@example.com",
    "headline": "Student",
}


@pytest.fixture(scope="function")
def db_session():
    """
    Nowa, izolowana baza in-memory na kazdy test.
    """
    engine = create_engine(
        TEST_SQLALCHEMY_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture(scope="function")
def courses(db_session):
    items = [
        CourseModel(title="Python for Beginners", description="Basics", price=Decimal("49.99")),
        CourseModel(title="Web APIs with FastAPI", description="APIs", price=Decimal("79.00")),
        CourseModel(title="Relational Databases", description="SQL", price=Decimal("19.99")),
    ]
    db_session.add_all(items)
    db_session.commit()
    for c in items:
        db_session.refresh(c)
    return items


@pytest.fixture(scope="function")
def account_service(db_session):
    return AccountService(db_session)


@pytest.fixture(scope="function")
def customer(account_service):
    return account_service.create_customer(
        CreateUserRequest(
            username="Rachel",
            password=PASSWORD,
            **PROFILE,
        )
    )


@pytest.fixture(scope="function")
def client(db_session):
    app = create_app(init_database=False)

    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture(scope="function")
def auth_headers(client):
    """
    Rejestruje klienta przez API i zwraca naglowek Authorization.
    """
    response = client.post(
        "/signup",
        json={
            "username": "Rachel",
            "password": PASSWORD,
            "userType": "CUSTOMER",
            **PROFILE,
        },
    )
    assert response.status_code == 200, response.text
    return {"Authorization": response.headers["Authorization"]}
