"""Known lost-update races between processes sharing one storage.

Nothing coordinates two store instances (two browser tabs) writing the same
account collection: the last full-collection write wins. These tests pin that
behaviour down so a future compare-and-swap write shows up as a deliberate
change.
"""

import pytest

from otaku_store.application.config import Settings
from otaku_store.application.store import build_store
from otaku_store.infrastructure.bcrypt_secret_hasher import BcryptSecretHasher
from otaku_store.infrastructure.local_storage_adapter import LocalStorageAdapter
from otaku_store.infrastructure.storage_account_repository import StorageAccountRepository


class InterleavingStorage(LocalStorageAdapter):
    """Runs a callback right before the first write to a key."""

    def __init__(self, key, before_write):
        super().__init__()
        self._key = key
        self._before_write = before_write

    def set(self, key, value):
        if key == self._key and self._before_write is not None:
            callback, self._before_write = self._before_write, None
            callback()
        super().set(key, value)


@pytest.fixture
def config():
    return Settings(auth_latency_seconds=0, bcrypt_rounds=4, storage_backend="memory")


def test_interleaved_registrations_lose_one_account():
    """Tab A reads the collection, tab B registers, tab A writes its stale copy."""
    hasher = BcryptSecretHasher(rounds=4)
    shared = InterleavingStorage("otaku_users", None)
    tab_a = StorageAccountRepository(storage=shared, hasher=hasher)
    tab_b = StorageAccountRepository(storage=shared, hasher=hasher)

    shared._before_write = lambda: tab_b.register("bob", "bob12345", "bob@x.com")
    alice = tab_a.register("alice", "alice123", "alice@x.com")

    usernames = [account.username for account in tab_b.list_accounts()]
    assert usernames == ["alice"]
    assert tab_a.get_account(alice.id).username == "alice"


def test_sequential_registrations_across_tabs_are_kept():
    """Without interleaving, each write starts from a fresh read."""
    hasher = BcryptSecretHasher(rounds=4)
    shared = LocalStorageAdapter()
    tab_a = StorageAccountRepository(storage=shared, hasher=hasher)
    tab_b = StorageAccountRepository(storage=shared, hasher=hasher)

    tab_a.register("alice", "alice123", "alice@x.com")
    tab_b.register("bob", "bob12345", "bob@x.com")

    assert sorted(account.username for account in tab_a.list_accounts()) == ["alice", "bob"]


@pytest.mark.asyncio
async def test_stale_session_overwrites_other_tab_favorites(config):
    """Two tabs logged into the same account: the stale tab drops the other's favorite."""
    shared = LocalStorageAdapter()
    tab_a = build_store(config, storage=shared)
    await tab_a.session.register("demo", "demo123", "demo@x.com")
    tab_b = build_store(config, storage=shared)
    assert tab_b.session.current.id == tab_a.session.current.id

    assert tab_a.favorites.add({"id": "m1"}) is True
    assert tab_b.favorites.add({"id": "m2"}) is True

    stored = tab_a.accounts.get_account(tab_a.session.current.id).favorites
    assert [entry.item_id for entry in stored] == ["m2"]
    # Tab A still believes m1 is a favorite until it logs in again
    assert tab_a.favorites.contains("m1") is True
    assert tab_b.favorites.contains("m1") is False


@pytest.mark.asyncio
async def test_relogin_resynchronizes_stale_tab(config):
    shared = LocalStorageAdapter()
    tab_a = build_store(config, storage=shared)
    await tab_a.session.register("demo", "demo123", "demo@x.com")
    tab_b = build_store(config, storage=shared)

    tab_b.watch_history.record({"id": "s1"}, episode=1)
    assert tab_a.watch_history.entries() == []

    result = await tab_a.session.login("demo", "demo123")

    assert result.success is True
    assert [event.key for event in tab_a.watch_history.entries()] == [("s1", 1)]
