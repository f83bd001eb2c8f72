"""Domain services for the otaku account store."""

from .favorites_service import FavoritesService
from .session_controller import SessionController
from .watch_history_service import WatchHistoryService

__all__ = ["FavoritesService", "SessionController", "WatchHistoryService"]
