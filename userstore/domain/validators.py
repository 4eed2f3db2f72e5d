"""Field validation for registration and profile updates."""

import re
from typing import Optional

# +254XXXXXXXXX (international) or 0XXXXXXXXX (local), ASCII digits only
PHONE_PATTERN = re.compile(r"^(\+254\d{9}|0\d{9})$", re.ASCII)
EMAIL_PATTERN = re.compile(r"^[A-Za-z0-9+_.-]+@[A-Za-z0-9.-]+$")

PHONE_FORMAT_MESSAGE = "Phone number must be in the format +254XXXXXXXXX or 0XXXXXXXXX"
EMAIL_FORMAT_MESSAGE = "Invalid email format"


def is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def clean_phone_number(phone_number: Optional[str]) -> Optional[str]:
    """Remove all spaces, so '0712 345678' becomes '0712345678'."""
    if phone_number is None:
        return None
    return phone_number.replace(" ", "")


def is_valid_phone_number(phone_number: str) -> bool:
    return PHONE_PATTERN.fullmatch(phone_number) is not None


def is_valid_email(email: str) -> bool:
    return EMAIL_PATTERN.fullmatch(email) is not None
