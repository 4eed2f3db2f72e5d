"""
User Repository Interface.
Defines the data access operations for accounts, profiles and profile pictures.
"""

from typing import List, Optional, Protocol

from userstore.core.result import Result
from userstore.domain.schemas.user import (
    ProfilePictureRead,
    ProfileRead,
    ProfileUpdateRequest,
    RegisterRequest,
    UserRead,
)


class UserRepository(Protocol):
    """Interface for user-specific operations."""

    def find_by_email(self, email: str) -> Result[Optional[ProfileRead]]:
        """Get the profile of the account with this email."""
        ...

    def find_by_id(self, user_id: int) -> Result[Optional[UserRead]]:
        """Get an account by ID."""
        ...

    def find_user_profile(self, user_id: int) -> Result[Optional[ProfileRead]]:
        """Get the profile of an account by ID."""
        ...

    def find_user_role(self, user_id: int) -> Result[Optional[str]]:
        """Get the role of an account by ID."""
        ...

    def list_all_profiles(self) -> Result[List[ProfileRead]]:
        """Get every profile."""
        ...

    def create_user(self, request: RegisterRequest) -> Result[None]:
        """Validate and create an account together with its profile."""
        ...

    def update_user(self, request: ProfileUpdateRequest) -> Result[None]:
        """Validate and update a profile."""
        ...

    def delete_user(self, user_id: int) -> Result[None]:
        """Delete an account with its profile and picture."""
        ...

    def upload_profile_picture(
        self, user_id: int, filename: str, content_type: str, data: bytes
    ) -> Result[None]:
        """Insert or replace the profile picture of an account."""
        ...

    def get_profile_picture(self, user_id: int) -> Result[Optional[ProfilePictureRead]]:
        """Get the profile picture of an account."""
        ...

    def delete_profile_picture(self, user_id: int) -> Result[None]:
        """Delete the profile picture of an account."""
        ...
