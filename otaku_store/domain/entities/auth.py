"""Authentication outcome entities."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ..errors import AccountStoreError
from .account import Session


class SessionState(str, Enum):
    """Session controller state."""
    UNAUTHENTICATED = "unauthenticated"
    AUTHENTICATED = "authenticated"


@dataclass
class AuthResult:
    """Outcome of a login or registration attempt."""

    success: bool
    session: Optional[Session] = None
    error: Optional[AccountStoreError] = None

    @property
    def message(self) -> Optional[str]:
        return self.error.message if self.error else None

    @classmethod
    def ok(cls, session: Session) -> "AuthResult":
        return cls(success=True, session=session)

    @classmethod
    def failed(cls, error: AccountStoreError) -> "AuthResult":
        return cls(success=False, error=error)
