"""Shared test fixtures for user store tests."""

import os

# Settings are read at import time; keep the module-level engine off PostgreSQL
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("BCRYPT_ROUNDS", "4")

import pytest
from unittest.mock import MagicMock
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from userstore.domain.schemas.user import RegisterRequest
from userstore.infrastructure.database import init_db
from userstore.infrastructure.repositories.user_repository import SQLAlchemyUserRepository


@pytest.fixture
def engine():
    # One shared connection so every session sees the same in-memory database
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    @event.listens_for(engine, "connect")
    def enable_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autoflush=False, expire_on_commit=False, bind=engine)


@pytest.fixture
def mock_auth_service():
    service = MagicMock()
    service.hash_password = MagicMock(side_effect=lambda password: f"hashed:{password}")
    return service


@pytest.fixture
def repository(session_factory, mock_auth_service):
    return SQLAlchemyUserRepository(session_factory, mock_auth_service)


@pytest.fixture
def register_request():
    return RegisterRequest(
        email="wanjiku@example.com",
        password="s3cret-pass",
        first_name="Wanjiku",
        last_name="Kamau",
        phone_number="0712 345678",
    )


@pytest.fixture
def registered_user_id(repository, register_request):
    """Create the default user and return its id."""
    assert repository.create_user(register_request).is_ok
    return repository.find_by_email(register_request.email).unwrap().user_id


@pytest.fixture
def make_user(repository):
    """Create an extra user and return its id."""
    def _make_user(email, phone_number=None, first_name="Otieno", last_name="Odhiambo"):
        request = RegisterRequest(
            email=email,
            password="another-pass",
            first_name=first_name,
            last_name=last_name,
            phone_number=phone_number,
        )
        assert repository.create_user(request).is_ok
        return repository.find_by_email(email).unwrap().user_id
    return _make_user
