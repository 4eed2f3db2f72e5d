"""Tests for repository wiring."""

from userstore.application.services.auth_service import AuthService
from userstore.infrastructure.database import SessionLocal
from userstore.infrastructure.repositories.user_repository import SQLAlchemyUserRepository
from userstore.interfaces.deps import get_auth_service, get_user_repository


def test_default_repository_wiring():
    repository = get_user_repository()

    assert isinstance(repository, SQLAlchemyUserRepository)
    assert repository.session_factory is SessionLocal
    assert isinstance(repository.auth_service, AuthService)
    assert repository.auth_service is get_auth_service()


def test_repository_is_built_once():
    assert get_user_repository() is get_user_repository()
