"""Persistence adapter protocol."""

from typing import Optional, Protocol, runtime_checkable


@runtime_checkable
class PersistenceAdapter(Protocol):
    """Synchronous key to string storage primitive.

    Implementations offer no transactions and no atomicity across keys.
    """

    def get(self, key: str) -> Optional[str]:
        """Read the value stored under a key.

        Args:
            key: The storage key.

        Returns:
            Optional[str]: The stored string, or None if the key is absent.
        """
        ...

    def set(self, key: str, value: str) -> None:
        """Store a value under a key, replacing any previous value.

        Args:
            key: The storage key.
            value: The string to store.
        """
        ...

    def remove(self, key: str) -> None:
        """Remove a key. Removing an absent key is a no-op.

        Args:
            key: The storage key.
        """
        ...
