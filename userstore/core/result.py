"""
Tagged result values returned by the user store.
Every public operation answers with either Ok(value) or Err(kind, detail).
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, Optional, Tuple, TypeVar, Union

T = TypeVar("T")


class ErrorKind(str, Enum):
    DUPLICATE_EMAIL = "DuplicateEmail"
    DUPLICATE_PHONE = "DuplicatePhone"
    INVALID_FORMAT = "InvalidFormat"
    MISSING_FIELD = "MissingField"
    NOT_FOUND = "NotFound"
    STORAGE_FAILURE = "StorageFailure"


class ResultError(Exception):
    """Raised when unwrapping an Err."""
    def __init__(self, kind: ErrorKind, detail: str):
        self.kind = kind
        self.detail = detail
        super().__init__(f"{kind.value}: {detail}")


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: Optional[T] = None

    @property
    def is_ok(self) -> bool:
        return True

    def unwrap(self) -> Optional[T]:
        return self.value

    def as_pair(self) -> Tuple[bool, Optional[str]]:
        """Legacy (success, message) form."""
        return True, None


@dataclass(frozen=True)
class Err:
    kind: ErrorKind
    detail: str

    @property
    def is_ok(self) -> bool:
        return False

    def unwrap(self) -> Any:
        raise ResultError(self.kind, self.detail)

    def as_pair(self) -> Tuple[bool, Optional[str]]:
        return False, self.detail


Result = Union[Ok[T], Err]
