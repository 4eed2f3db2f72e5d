"""Auth service — password hashing."""

from passlib.context import CryptContext

from userstore.config import get_settings

settings = get_settings()


class AuthService:
    """Hashes and verifies passwords. The hash is opaque to the user store."""

    def __init__(self, rounds: int = settings.BCRYPT_ROUNDS):
        self.pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=rounds)

    def hash_password(self, password: str) -> str:
        return self.pwd_context.hash(password)

    def verify_password(self, plain_password: str, hashed_password: str) -> bool:
        return self.pwd_context.verify(plain_password, hashed_password)
