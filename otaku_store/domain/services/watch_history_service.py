"""Watch-history service for the active account."""

import logging
from typing import Any, Union

from ..entities.account import CatalogItem, Episode, WatchEvent, utcnow
from ..errors import NotFoundError
from ..interfaces.account_repository import AccountRepository
from .session_controller import SessionController

logger = logging.getLogger(__name__)

DEFAULT_HISTORY_LIMIT = 50


class WatchHistoryService:
    """Records watch events into a bounded, newest-first, deduplicated log."""

    def __init__(
        self,
        session: SessionController,
        accounts: AccountRepository,
        limit: int = DEFAULT_HISTORY_LIMIT,
    ):
        if limit < 1:
            raise ValueError(f"History limit must be positive, got {limit}")
        self.session = session
        self.accounts = accounts
        self.limit = limit

    def record(self, item: Union[CatalogItem, dict[str, Any]], episode: Episode = None) -> bool:
        """Record that a catalog item (optionally an episode of it) was watched.

        Any earlier entry with the same (item id, episode) is dropped, the new
        event goes to the front and the log is truncated to ``limit`` entries.

        Args:
            item: The catalog item, as a model or a mapping with an ``id``.
            episode: Optional episode marker.

        Returns:
            bool: True if recorded, False if no session is active or its
            account no longer exists.
        """
        current = self.session.current
        if current is None:
            return False

        event = WatchEvent(item=CatalogItem.model_validate(item), episode=episode, watched_at=utcnow())
        history = [entry for entry in current.watch_history if entry.key != event.key]
        history.insert(0, event)
        del history[self.limit:]

        try:
            stored = self.accounts.update_watch_history(current.id, history)
        except NotFoundError:
            # Session outlived its account (e.g. the collection was reset)
            logger.warning(f"Dropping session for missing account {current.id}")
            self.session.logout()
            return False
        self.session.refresh(watch_history=stored)
        logger.debug(f"Recorded {event.key} in watch history of {current.username}")
        return True

    def entries(self) -> list[WatchEvent]:
        """Watch history of the active session, newest first."""
        current = self.session.current
        return list(current.watch_history) if current else []
