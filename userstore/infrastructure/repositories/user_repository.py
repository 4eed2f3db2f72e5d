"""
SQLAlchemy Implementation of User Repository.
"""

import functools
from datetime import datetime
from typing import Callable, List, Optional, Set

import pytz
import structlog
from sqlalchemy.orm import Session

from userstore.application.services.auth_service import AuthService
from userstore.config import get_settings
from userstore.core.exceptions import (
    AppError,
    DuplicateEntryException,
    EntityNotFoundException,
    ValidationException,
)
from userstore.core.result import Err, ErrorKind, Ok, Result
from userstore.domain import validators
from userstore.domain.models.profile import Profile
from userstore.domain.models.profile_picture import ProfilePicture
from userstore.domain.models.user import DEFAULT_ROLE, Account
from userstore.domain.repositories.user_repository import UserRepository
from userstore.domain.schemas.user import (
    ProfilePictureRead,
    ProfileRead,
    ProfileUpdateRequest,
    RegisterRequest,
    UserRead,
)
from userstore.infrastructure.database import SessionLocal, transaction

settings = get_settings()
tz = pytz.timezone(settings.TIMEZONE)
logger = structlog.get_logger(__name__)

PROFILE_PICTURE_URL = "/users/{user_id}/profile-picture"


def guarded(action: str):
    """Convert everything raised by an operation into an Err result.

    AppError subclasses keep their kind and message; anything else is a
    storage failure reported as "Failed to <action>: <error>".
    """
    def decorator(func):
        @functools.wraps(func)
        def wrapper(self, *args, **kwargs) -> Result:
            try:
                return func(self, *args, **kwargs)
            except AppError as exc:
                logger.info("Request rejected", operation=func.__name__, kind=exc.kind.value, reason=exc.message)
                return exc.to_err()
            except Exception as exc:
                logger.exception(f"Failed to {action}", operation=func.__name__)
                return Err(ErrorKind.STORAGE_FAILURE, f"Failed to {action}: {exc}")
        return wrapper
    return decorator


class SQLAlchemyUserRepository(UserRepository):
    """User repository implementation using SQLAlchemy.

    Every public method runs in its own transaction scope and returns a
    Result; nothing is raised to the caller.
    """

    def __init__(
        self,
        session_factory: Callable[[], Session] = SessionLocal,
        auth_service: Optional[AuthService] = None,
    ):
        self.session_factory = session_factory
        self.auth_service = auth_service or AuthService()

    def get_current_time(self) -> datetime:
        """Get current time in the configured timezone."""
        return datetime.now(tz)

    # ── Reads ───────────────────────────────────────────────────────────

    @guarded("find user by email")
    def find_by_email(self, email: str) -> Result[Optional[ProfileRead]]:
        with transaction(self.session_factory) as db:
            row = (
                db.query(Account, Profile)
                .join(Profile, Profile.user_id == Account.id)
                .filter(Account.email == email)
                .first()
            )
            if row is None:
                return Ok(None)
            account, profile = row
            return Ok(self._to_profile(account, profile, self._has_picture(db, account.id)))

    @guarded("find user by ID")
    def find_by_id(self, user_id: int) -> Result[Optional[UserRead]]:
        with transaction(self.session_factory) as db:
            account = (
                db.query(Account)
                .join(Profile, Profile.user_id == Account.id)
                .filter(Account.id == user_id)
                .first()
            )
            if account is None:
                return Ok(None)
            # No active column exists; every stored account is reported active
            return Ok(UserRead(
                id=account.id,
                email=account.email,
                password_hash=account.password_hash,
                role=account.role,
                active=True,
            ))

    @guarded("find user profile")
    def find_user_profile(self, user_id: int) -> Result[Optional[ProfileRead]]:
        with transaction(self.session_factory) as db:
            row = (
                db.query(Account, Profile)
                .join(Profile, Profile.user_id == Account.id)
                .filter(Profile.user_id == user_id)
                .first()
            )
            if row is None:
                return Ok(None)
            account, profile = row
            return Ok(self._to_profile(account, profile, self._has_picture(db, account.id)))

    @guarded("find user role")
    def find_user_role(self, user_id: int) -> Result[Optional[str]]:
        with transaction(self.session_factory) as db:
            role = db.query(Account.role).filter(Account.id == user_id).scalar()
            return Ok(role)

    @guarded("retrieve all users")
    def list_all_profiles(self) -> Result[List[ProfileRead]]:
        with transaction(self.session_factory) as db:
            rows = (
                db.query(Account, Profile)
                .join(Profile, Profile.user_id == Account.id)
                .order_by(Account.id)
                .all()
            )
            with_picture: Set[int] = {r[0] for r in db.query(ProfilePicture.user_id).all()}
            return Ok([
                self._to_profile(account, profile, account.id in with_picture)
                for account, profile in rows
            ])

    @guarded("retrieve profile picture")
    def get_profile_picture(self, user_id: int) -> Result[Optional[ProfilePictureRead]]:
        with transaction(self.session_factory) as db:
            picture = db.query(ProfilePicture).filter(ProfilePicture.user_id == user_id).first()
            if picture is None:
                return Ok(None)
            return Ok(ProfilePictureRead.model_validate(picture))

    # ── Writes ──────────────────────────────────────────────────────────

    @guarded("create user")
    def create_user(self, request: RegisterRequest) -> Result[None]:
        with transaction(self.session_factory) as db:
            self._ensure_email_free(db, request.email)

            phone_number = None
            if not validators.is_blank(request.phone_number):
                phone_number = validators.clean_phone_number(request.phone_number)
                self._validate_phone(db, phone_number)

            if not validators.is_valid_email(request.email):
                raise ValidationException(validators.EMAIL_FORMAT_MESSAGE)
            # Unreachable while the format check above rejects blank emails
            if validators.is_blank(request.email):
                raise ValidationException("Email is required", ErrorKind.MISSING_FIELD)
            if validators.is_blank(request.password):
                raise ValidationException("Password is required", ErrorKind.MISSING_FIELD)

            now = self.get_current_time()
            account = Account(
                email=request.email,
                password_hash=self.auth_service.hash_password(request.password),
                role=DEFAULT_ROLE,
            )
            db.add(account)
            db.flush()

            db.add(Profile(
                user_id=account.id,
                first_name=request.first_name,
                last_name=request.last_name,
                phone_number=phone_number,
                email=request.email,
                created_at=now,
                updated_at=now,
            ))
            db.flush()

            logger.info("User created", user_id=account.id)
            return Ok()

    @guarded("update user")
    def update_user(self, request: ProfileUpdateRequest) -> Result[None]:
        with transaction(self.session_factory) as db:
            self._ensure_account(db, request.user_id)

            phone_number = validators.clean_phone_number(request.phone_number)
            if validators.is_blank(phone_number):
                phone_number = None
            else:
                self._validate_phone(db, phone_number, exclude_user_id=request.user_id)

            if not validators.is_blank(request.email):
                if not validators.is_valid_email(request.email):
                    raise ValidationException(validators.EMAIL_FORMAT_MESSAGE)
                self._ensure_email_free(db, request.email, exclude_user_id=request.user_id)

            # FIXME: users.email is never updated, only the profile copy is
            # overwritten (with None when no email is given), so lookups by
            # the new address miss. Needs the intended semantics confirmed.
            db.query(Profile).filter(Profile.user_id == request.user_id).update(
                {
                    Profile.first_name: request.first_name,
                    Profile.last_name: request.last_name,
                    Profile.email: request.email,
                    Profile.phone_number: phone_number,
                    Profile.updated_at: self.get_current_time(),
                },
                synchronize_session=False,
            )
            return Ok()

    @guarded("delete user")
    def delete_user(self, user_id: int) -> Result[None]:
        with transaction(self.session_factory) as db:
            self._ensure_account(db, user_id)
            # Dependents first: picture, profile, then the account
            db.query(ProfilePicture).filter(ProfilePicture.user_id == user_id).delete(synchronize_session=False)
            db.query(Profile).filter(Profile.user_id == user_id).delete(synchronize_session=False)
            db.query(Account).filter(Account.id == user_id).delete(synchronize_session=False)

            logger.info("User deleted", user_id=user_id)
            return Ok()

    @guarded("upload profile picture")
    def upload_profile_picture(
        self, user_id: int, filename: str, content_type: str, data: bytes
    ) -> Result[None]:
        with transaction(self.session_factory) as db:
            self._ensure_account(db, user_id)
            now = self.get_current_time()

            picture = db.query(ProfilePicture).filter(ProfilePicture.user_id == user_id).first()
            if picture is not None:
                picture.filename = filename
                picture.content_type = content_type
                picture.data = data
                picture.updated_at = now
            else:
                db.add(ProfilePicture(
                    user_id=user_id,
                    filename=filename,
                    content_type=content_type,
                    data=data,
                    created_at=now,
                    updated_at=now,
                ))

            logger.info("Profile picture stored", user_id=user_id, content_type=content_type, size=len(data))
            return Ok()

    @guarded("delete profile picture")
    def delete_profile_picture(self, user_id: int) -> Result[None]:
        with transaction(self.session_factory) as db:
            deleted = (
                db.query(ProfilePicture)
                .filter(ProfilePicture.user_id == user_id)
                .delete(synchronize_session=False)
            )
            if not deleted:
                raise EntityNotFoundException(f"Profile picture not found for user ID {user_id}")
            return Ok()

    # ── Helpers ─────────────────────────────────────────────────────────

    def _ensure_account(self, db: Session, user_id: int) -> None:
        if db.query(Account.id).filter(Account.id == user_id).first() is None:
            raise EntityNotFoundException("User not found")

    def _ensure_email_free(self, db: Session, email: str, exclude_user_id: Optional[int] = None) -> None:
        query = db.query(Account.id).filter(Account.email == email)
        if exclude_user_id is not None:
            query = query.filter(Account.id != exclude_user_id)
        if query.first() is not None:
            raise DuplicateEntryException(
                f"User with email {email} already exists", ErrorKind.DUPLICATE_EMAIL
            )

    def _validate_phone(self, db: Session, phone_number: str, exclude_user_id: Optional[int] = None) -> None:
        """Check format, then uniqueness across profiles."""
        if not validators.is_valid_phone_number(phone_number):
            raise ValidationException(validators.PHONE_FORMAT_MESSAGE)

        query = db.query(Profile.user_id).filter(Profile.phone_number == phone_number)
        if exclude_user_id is not None:
            query = query.filter(Profile.user_id != exclude_user_id)
        if query.first() is not None:
            raise DuplicateEntryException(
                f"User with phone number {phone_number} already exists", ErrorKind.DUPLICATE_PHONE
            )

    def _has_picture(self, db: Session, user_id: int) -> bool:
        return db.query(ProfilePicture.user_id).filter(ProfilePicture.user_id == user_id).first() is not None

    def _to_profile(self, account: Account, profile: Profile, has_picture: bool) -> ProfileRead:
        return ProfileRead(
            user_id=account.id,
            email=account.email,
            first_name=profile.first_name,
            last_name=profile.last_name,
            phone_number=profile.phone_number,
            user_role=account.role,
            created_at=profile.created_at,
            updated_at=profile.updated_at,
            profile_picture_url=PROFILE_PICTURE_URL.format(user_id=account.id) if has_picture else None,
        )
