"""
Repository wiring.
"""

from functools import lru_cache

from userstore.application.services.auth_service import AuthService
from userstore.domain.repositories.user_repository import UserRepository
from userstore.infrastructure.database import SessionLocal
from userstore.infrastructure.repositories.user_repository import SQLAlchemyUserRepository


@lru_cache
def get_auth_service() -> AuthService:
    return AuthService()


@lru_cache
def get_user_repository() -> UserRepository:
    """Get user repository instance bound to the configured database."""
    return SQLAlchemyUserRepository(SessionLocal, get_auth_service())
