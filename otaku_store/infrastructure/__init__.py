"""Infrastructure layer components."""

from .bcrypt_secret_hasher import BcryptSecretHasher
from .dynamodb_storage_adapter import DynamoDBStorageAdapter
from .local_storage_adapter import LocalStorageAdapter
from .storage_account_repository import StorageAccountRepository

__all__ = [
    "BcryptSecretHasher",
    "DynamoDBStorageAdapter",
    "LocalStorageAdapter",
    "StorageAccountRepository",
]
