"""Domain interfaces for the otaku account store."""

from .account_repository import AccountRepository
from .persistence_adapter import PersistenceAdapter
from .secret_hasher import SecretHasher

__all__ = ["AccountRepository", "PersistenceAdapter", "SecretHasher"]
