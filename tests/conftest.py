# tests/conftest.py
import os

os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.account.models import Organization, User
from app.asset.models import Asset, Employee
from app.core.config import get_settings
from app.core.database import Base, get_db
from app.main import app


@pytest.fixture()
def engine():
    # SQLite in-memory, one shared connection across threads
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture()
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture()
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture()
def client(session_factory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture()
def requester(db):
    settings = get_settings()
    db.add(Organization(id=settings.ORG_ID, name="Demo Org", domain="demo.local"))
    user = User(email=settings.SEED_REQUESTER_EMAIL, name="Demo Admin")
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


@pytest.fixture()
def employee(db):
    person = Employee(full_name="Dana Reyes", email="dana@demo.local")
    db.add(person)
    db.commit()
    db.refresh(person)
    return person


@pytest.fixture()
def make_asset(db):
    counter = {"n": 0}

    def _make(**fields) -> Asset:
        counter["n"] += 1
        fields.setdefault("asset_tag", f"TAG-{counter['n']:03d}")
        fields.setdefault("name", f"Asset {counter['n']}")
        asset = Asset(**fields)
        db.add(asset)
        db.commit()
        db.refresh(asset)
        return asset

    return _make
