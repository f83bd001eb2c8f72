"""Account Repository backed by a Persistence Adapter."""

import logging
from typing import Optional

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from ..domain.entities.account import Account, FavoriteEntry, WatchEvent, utcnow
from ..domain.errors import (
    AuthenticationError,
    DuplicateEmailError,
    DuplicateUsernameError,
    NotFoundError,
    StorageCorruptionError,
    ValidationError,
)
from ..domain.interfaces.account_repository import AccountRepository
from ..domain.interfaces.persistence_adapter import PersistenceAdapter
from ..domain.interfaces.secret_hasher import SecretHasher

logger = logging.getLogger(__name__)

MIN_USERNAME_LENGTH = 3
MIN_SECRET_LENGTH = 6

_accounts_adapter = TypeAdapter(list[Account])


class StorageAccountRepository(AccountRepository):
    """Account repository storing the whole collection under one key.

    Every mutation reads the entire collection, changes it in memory and
    writes the entire collection back. Nothing coordinates two processes
    sharing the same storage, so interleaved read-modify-write cycles lose
    updates (last writer wins).
    """

    def __init__(
        self,
        storage: PersistenceAdapter,
        hasher: SecretHasher,
        accounts_key: str = "otaku_users",
    ):
        """Initialize the repository.

        Args:
            storage: Persistence adapter holding the account collection.
            hasher: Hasher used for account secrets.
            accounts_key: Storage key of the serialized collection.
        """
        self.storage = storage
        self.hasher = hasher
        self.accounts_key = accounts_key
        self._dummy_hash: Optional[str] = None

    def register(self, username: str, secret: str, email: str) -> Account:
        """Validate, create and persist a new account.

        Args:
            username: Desired username (case-sensitive, at least 3 characters).
            secret: Account secret (at least 6 characters).
            email: Contact email.

        Returns:
            Account: The newly created account.

        Raises:
            ValidationError: If the username or secret is too short.
            DuplicateUsernameError: If the username is already taken.
            DuplicateEmailError: If the email is already registered.
        """
        if len(username) < MIN_USERNAME_LENGTH:
            raise ValidationError(f"Username must be at least {MIN_USERNAME_LENGTH} characters")
        if len(secret) < MIN_SECRET_LENGTH:
            raise ValidationError(f"Password must be at least {MIN_SECRET_LENGTH} characters")

        accounts = self._load_accounts()

        if any(account.username == username for account in accounts):
            raise DuplicateUsernameError()
        if any(account.email == email for account in accounts):
            raise DuplicateEmailError()

        account = Account(
            username=username,
            email=email,
            secret_hash=self.hasher.hash(secret),
            favorites=[],
            watch_history=[],
            created_at=utcnow(),
        )
        accounts.append(account)
        self._save_accounts(accounts)

        logger.info(f"Registered account {account.id} for username {username}")
        return account

    def authenticate(self, username: str, secret: str) -> Account:
        """Find the account matching a username and secret.

        Args:
            username: The account username.
            secret: The cleartext secret to verify.

        Returns:
            Account: The matched account, secret hash included.

        Raises:
            AuthenticationError: If no account matches the credentials.
        """
        account = self._find_by_username(self._load_accounts(), username)
        if account is None:
            # Same bcrypt cost as a wrong secret, so timing does not reveal unknown usernames
            self.hasher.verify(secret, self._get_dummy_hash())
            raise AuthenticationError()
        if not self.hasher.verify(secret, account.secret_hash):
            raise AuthenticationError()
        return account

    def get_account(self, account_id: str) -> Account:
        """Retrieve an account by id.

        Raises:
            NotFoundError: If the account does not exist.
        """
        accounts = self._load_accounts()
        return accounts[self._index_of(accounts, account_id)]

    def list_accounts(self) -> list[Account]:
        """List every stored account."""
        return self._load_accounts()

    def update_favorites(self, account_id: str, favorites: list[FavoriteEntry]) -> list[FavoriteEntry]:
        """Replace the favorites of an account and persist the collection.

        Args:
            account_id: Id of the account to update.
            favorites: The complete new favorites list.

        Returns:
            list[FavoriteEntry]: The stored favorites.

        Raises:
            NotFoundError: If the account does not exist.
        """
        accounts = self._load_accounts()
        index = self._index_of(accounts, account_id)
        accounts[index] = accounts[index].model_copy(update={"favorites": list(favorites)})
        self._save_accounts(accounts)
        return accounts[index].favorites

    def update_watch_history(self, account_id: str, history: list[WatchEvent]) -> list[WatchEvent]:
        """Replace the watch history of an account and persist the collection.

        Args:
            account_id: Id of the account to update.
            history: The complete new history, newest first.

        Returns:
            list[WatchEvent]: The stored history.

        Raises:
            NotFoundError: If the account does not exist.
        """
        accounts = self._load_accounts()
        index = self._index_of(accounts, account_id)
        accounts[index] = accounts[index].model_copy(update={"watch_history": list(history)})
        self._save_accounts(accounts)
        return accounts[index].watch_history

    def _load_accounts(self) -> list[Account]:
        """Read the collection, treating an unreadable value as empty."""
        try:
            return self._read_collection()
        except StorageCorruptionError as e:
            logger.warning(f"{e.message}; treating account collection as empty")
            return []

    def _read_collection(self) -> list[Account]:
        raw = self.storage.get(self.accounts_key)
        if raw is None:
            return []
        try:
            return _accounts_adapter.validate_json(raw)
        except PydanticValidationError as e:
            raise StorageCorruptionError(self.accounts_key, f"{e.error_count()} validation error(s)") from e

    def _save_accounts(self, accounts: list[Account]) -> None:
        self.storage.set(self.accounts_key, _accounts_adapter.dump_json(accounts).decode("utf-8"))

    def _get_dummy_hash(self) -> str:
        if self._dummy_hash is None:
            self._dummy_hash = self.hasher.hash("otaku-store-dummy-secret")
        return self._dummy_hash

    @staticmethod
    def _find_by_username(accounts: list[Account], username: str) -> Optional[Account]:
        return next((account for account in accounts if account.username == username), None)

    @staticmethod
    def _index_of(accounts: list[Account], account_id: str) -> int:
        for index, account in enumerate(accounts):
            if account.id == account_id:
                return index
        logger.error(f"Account with id {account_id} not found")
        raise NotFoundError(f"Account with id {account_id} not found")
