"""Secret hasher protocol."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class SecretHasher(Protocol):
    """Protocol for salted, slow credential hashing."""

    def hash(self, secret: str) -> str:
        """Hash a secret for storage."""
        ...

    def verify(self, secret: str, hashed: str) -> bool:
        """Check a secret against a stored hash."""
        ...
