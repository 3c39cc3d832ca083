"""
Pytest configuration and shared fixtures.

The project root is put on sys.path and the environment is pointed at
throwaway resources before any application module reads its settings.
"""

import os
import sys
import tempfile
from pathlib import Path

# Add project root to sys.path so we can import app, domain, services, etc.
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("IMAGES_DIR", tempfile.mkdtemp(prefix="lenslocked-images-"))

from typing import Generator

import pytest
from fastapi import Depends
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from app.config import Settings
from domain.models import init_database
from services.container import Services, build_services
from test_fixtures import TEST_HMAC_KEY, TEST_PEPPER


@pytest.fixture()
def engine() -> Generator[Engine, None, None]:
    """In-memory SQLite database shared by every session of one test."""
    eng = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        future=True,
    )
    init_database(eng)
    try:
        yield eng
    finally:
        eng.dispose()


@pytest.fixture()
def db_session(engine) -> Generator[Session, None, None]:
    """
    Database session for integration tests.

    Each test gets a fresh database, so nothing needs rolling back.
    """
    session = sessionmaker(bind=engine, future=True)()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def test_settings(tmp_path) -> Settings:
    return Settings(
        environment="testing",
        database_url="sqlite://",
        pepper=TEST_PEPPER,
        hmac_key=TEST_HMAC_KEY,
        bcrypt_rounds=4,
        images_dir=str(tmp_path / "images"),
    )


@pytest.fixture()
def services(db_session, test_settings) -> Services:
    return build_services(db_session, test_settings)


@pytest.fixture()
def client(engine, test_settings) -> Generator[TestClient, None, None]:
    """TestClient whose requests run against the test database."""
    from main import app
    from api.dependencies import get_db, get_services

    TestSession = sessionmaker(bind=engine, future=True)

    def override_get_db():
        db = TestSession()
        try:
            yield db
        finally:
            db.close()

    def override_get_services(db: Session = Depends(get_db)) -> Services:
        return build_services(db, test_settings)

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_services] = override_get_services
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
