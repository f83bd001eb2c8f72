"""Favorites service for managing the favorites ledger of the active account."""

import logging
from typing import Any, Union

from ..entities.account import CatalogItem, FavoriteEntry, utcnow
from ..errors import NotFoundError
from ..interfaces.account_repository import AccountRepository
from .session_controller import SessionController

logger = logging.getLogger(__name__)


class FavoritesService:
    """Adds, removes and looks up favorites of the authenticated account.

    New favorites are computed from the session's copy, persisted through
    the account repository, then pushed back into the session.
    """

    def __init__(
        self,
        session: SessionController,
        accounts: AccountRepository,
        strict_removal: bool = False,
    ):
        """Initialize the service.

        Args:
            session: Controller holding the active session.
            accounts: Repository persisting the favorites.
            strict_removal: Raise NotFoundError when removing an id that is
                not a favorite instead of reporting success.
        """
        self.session = session
        self.accounts = accounts
        self.strict_removal = strict_removal

    def add(self, item: Union[CatalogItem, dict[str, Any]]) -> bool:
        """Mark a catalog item as favorite.

        Args:
            item: The catalog item, as a model or a mapping with an ``id``.

        Returns:
            bool: True if the item was added, False if no session is active,
            the item is already a favorite or the account no longer exists.
        """
        current = self.session.current
        if current is None:
            return False

        item = CatalogItem.model_validate(item)
        if self._contains(current.favorites, item.id):
            return False

        favorites = [*current.favorites, FavoriteEntry(item=item, added_at=utcnow())]
        if not self._persist(current.id, favorites):
            return False
        logger.debug(f"Added {item.id} to favorites of {current.username}")
        return True

    def remove(self, item_id: Union[str, int]) -> bool:
        """Remove a catalog item from the favorites.

        Removing an id that is not a favorite still reports success unless
        the service was created with ``strict_removal``.

        Args:
            item_id: Id of the catalog item.

        Returns:
            bool: True if a session is active, False otherwise or when the
            session's account no longer exists.

        Raises:
            NotFoundError: In strict mode, if the id is not a favorite.
        """
        current = self.session.current
        if current is None:
            return False

        item_id = str(item_id)
        if self.strict_removal and not self._contains(current.favorites, item_id):
            raise NotFoundError(f"Item {item_id} is not in favorites")

        favorites = [entry for entry in current.favorites if entry.item_id != item_id]
        return self._persist(current.id, favorites)

    def contains(self, item_id: Union[str, int]) -> bool:
        """Check whether an item is a favorite of the active session."""
        current = self.session.current
        if current is None:
            return False
        return self._contains(current.favorites, str(item_id))

    def entries(self) -> list[FavoriteEntry]:
        """Favorites of the active session, in insertion order."""
        current = self.session.current
        return list(current.favorites) if current else []

    def _persist(self, account_id: str, favorites: list[FavoriteEntry]) -> bool:
        try:
            stored = self.accounts.update_favorites(account_id, favorites)
        except NotFoundError:
            # Session outlived its account (e.g. the collection was reset)
            logger.warning(f"Dropping session for missing account {account_id}")
            self.session.logout()
            return False
        self.session.refresh(favorites=stored)
        return True

    @staticmethod
    def _contains(favorites: list[FavoriteEntry], item_id: str) -> bool:
        return any(entry.item_id == item_id for entry in favorites)
