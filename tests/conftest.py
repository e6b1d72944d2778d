# tests/conftest.py

from datetime import datetime

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, create_engine

from salon.auth import create_access_token
from salon.data import DEFAULT_BUSINESS_HOURS, seed_defaults
from salon.db import create_db_and_tables, get_session
from salon.deps import get_now
from salon.main import app
from salon.models import Service, Staff

# Tuesday; every API test books into the following weeks
FIXED_NOW = datetime(2030, 1, 1, 12, 0)


@pytest.fixture(scope="function")
def db():
    """In-memory database shared by the test and the app for one test."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    create_db_and_tables(engine)
    with Session(engine) as session:
        yield session
    engine.dispose()


@pytest.fixture
def salon(db: Session):
    return seed_defaults(db, with_catalog=False)


@pytest.fixture
def client(db: Session, salon):
    """Create a test client with the test database."""

    def override_get_session():
        yield db

    app.dependency_overrides[get_session] = override_get_session
    app.dependency_overrides[get_now] = lambda: FIXED_NOW

    test_client = TestClient(app)
    yield test_client

    app.dependency_overrides.clear()
    test_client.close()


@pytest.fixture
def admin_headers():
    token = create_access_token({"sub": "admin", "role": "admin"})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def braids(db: Session) -> Service:
    service = Service(name="Knotless Braids", category="braids", duration_minutes=240, price=3500)
    db.add(service)
    db.commit()
    db.refresh(service)
    return service


@pytest.fixture
def cut(db: Session) -> Service:
    service = Service(name="Mens Cut & Style", category="mens", duration_minutes=45, price=800)
    db.add(service)
    db.commit()
    db.refresh(service)
    return service


@pytest.fixture
def amara(db: Session, braids: Service) -> Staff:
    hours = dict(DEFAULT_BUSINESS_HOURS)
    hours["wednesday"] = None
    member = Staff(name="Amara", title="Master Braider", working_hours=hours, services_offered=[braids.id])
    db.add(member)
    db.commit()
    db.refresh(member)
    return member
