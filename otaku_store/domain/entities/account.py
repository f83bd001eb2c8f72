"""Account and session entities for the otaku account store."""

import uuid
from datetime import datetime, timezone
from typing import Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field


def utcnow() -> datetime:
    """Current time as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


Episode = Optional[Union[int, str]]


class CatalogItem(BaseModel):
    """Reference to a movie, show or anime from the remote catalog.

    Only ``id`` is interpreted by the store. Whatever other metadata the
    caller attaches (title, poster path, media type, ...) is kept verbatim.
    """

    model_config = ConfigDict(extra="allow", coerce_numbers_to_str=True)

    id: str = Field(min_length=1, description="Catalog item identifier")


class FavoriteEntry(BaseModel):
    """A catalog item marked as favorite."""

    item: CatalogItem
    added_at: datetime = Field(default_factory=utcnow)

    @property
    def item_id(self) -> str:
        return self.item.id


class WatchEvent(BaseModel):
    """A single entry of the watch-history log."""

    item: CatalogItem
    episode: Episode = None
    watched_at: datetime = Field(default_factory=utcnow)

    @property
    def key(self) -> Tuple[str, Episode]:
        """Dedup key of the event: (item id, episode)."""
        return (self.item.id, self.episode)


class Session(BaseModel):
    """Secret-free view of the currently authenticated account."""

    id: str
    username: str = Field(min_length=3)
    email: str
    favorites: list[FavoriteEntry] = Field(default_factory=list)
    watch_history: list[WatchEvent] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=utcnow)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "1718000000000",
                "username": "demo",
                "email": "demo@x.com",
                "favorites": [],
                "watch_history": [],
                "created_at": "2026-01-13T10:00:00+00:00",
            }
        }
    )


class Account(Session):
    """Durable account record, including the hashed secret."""

    id: str = Field(default_factory=lambda: uuid.uuid4().hex)
    secret_hash: str = Field(min_length=1, description="bcrypt hash of the account secret")

    def to_session(self) -> Session:
        """Project the account into a session, dropping the secret hash."""
        return Session.model_validate(self.model_dump(exclude={"secret_hash"}))
