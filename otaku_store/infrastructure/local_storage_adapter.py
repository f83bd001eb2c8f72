"""Local in-memory implementation of the Persistence Adapter."""

from typing import Dict, Optional

from ..domain.interfaces.persistence_adapter import PersistenceAdapter


class LocalStorageAdapter(PersistenceAdapter):
    """Local in-memory implementation of the Persistence Adapter.

    Stores raw strings in a dictionary. Several store instances sharing one
    adapter behave like several browser tabs sharing one local storage.
    """

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        """Initialize the adapter, optionally pre-populated.

        Args:
            initial: Optional mapping of keys to stored strings.
        """
        self._values: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        """Read the value stored under a key.

        Args:
            key: The storage key.

        Returns:
            Optional[str]: The stored string, or None if absent.
        """
        return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        """Store a string under a key.

        Args:
            key: The storage key.
            value: The string to store.
        """
        if not isinstance(value, str):
            raise TypeError(f"Storage values must be strings, got {type(value).__name__}")
        self._values[key] = value

    def remove(self, key: str) -> None:
        """Remove a key if present."""
        self._values.pop(key, None)

    def clear(self) -> None:
        """Clear all stored values."""
        self._values.clear()

    def keys(self) -> list[str]:
        """List stored keys."""
        return list(self._values.keys())
