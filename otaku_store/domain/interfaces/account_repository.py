"""Account Repository interface."""

from typing import Protocol, runtime_checkable

from ..entities.account import Account, FavoriteEntry, WatchEvent


@runtime_checkable
class AccountRepository(Protocol):
    """Protocol defining the interface for account repositories.

    The repository owns the canonical account collection and enforces
    username/email uniqueness and registration validation.
    """

    def register(self, username: str, secret: str, email: str) -> Account:
        """Create and persist a new account.

        Args:
            username: Desired username, at least 3 characters.
            secret: Account secret, at least 6 characters.
            email: Contact email, unique across accounts.

        Returns:
            Account: The newly created account.

        Raises:
            ValidationError: If the username or secret is too short.
            DuplicateUsernameError: If the username is taken.
            DuplicateEmailError: If the email is taken.
        """
        ...

    def authenticate(self, username: str, secret: str) -> Account:
        """Find the account matching the given credentials.

        Raises:
            AuthenticationError: If no account matches.
        """
        ...

    def get_account(self, account_id: str) -> Account:
        """Retrieve an account by id.

        Raises:
            NotFoundError: If the account does not exist.
        """
        ...

    def list_accounts(self) -> list[Account]:
        """List every stored account."""
        ...

    def update_favorites(self, account_id: str, favorites: list[FavoriteEntry]) -> list[FavoriteEntry]:
        """Replace the favorites of an account.

        Raises:
            NotFoundError: If the account does not exist.
        """
        ...

    def update_watch_history(self, account_id: str, history: list[WatchEvent]) -> list[WatchEvent]:
        """Replace the watch history of an account.

        Raises:
            NotFoundError: If the account does not exist.
        """
        ...
