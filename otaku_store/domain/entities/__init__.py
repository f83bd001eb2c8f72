"""Domain entities for the otaku account store."""

from .account import (
    Account,
    CatalogItem,
    Episode,
    FavoriteEntry,
    Session,
    WatchEvent,
    utcnow,
)
from .auth import AuthResult, SessionState

__all__ = [
    # Account entities
    "Account",
    "Session",
    "CatalogItem",
    "Episode",
    "FavoriteEntry",
    "WatchEvent",
    "utcnow",
    # Auth entities
    "AuthResult",
    "SessionState",
]
