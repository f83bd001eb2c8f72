"""Session controller managing the authenticated account view."""

import asyncio
import logging
from typing import Optional

from pydantic import ValidationError as PydanticValidationError

from ..entities.account import Account, FavoriteEntry, Session, WatchEvent
from ..entities.auth import AuthResult, SessionState
from ..errors import AccountStoreError, StorageCorruptionError
from ..interfaces.account_repository import AccountRepository
from ..interfaces.persistence_adapter import PersistenceAdapter

logger = logging.getLogger(__name__)


class SessionController:
    """
    Owns the lifecycle of the current session.

    The session is a secret-free projection of exactly one account. It is
    kept in memory and mirrored under its own storage key so it survives a
    restart without re-authenticating.

    States:
    - UNAUTHENTICATED -> AUTHENTICATED on successful login/register or restore
    - AUTHENTICATED -> UNAUTHENTICATED on logout
    - failed login/register leaves the state unchanged
    """

    def __init__(
        self,
        accounts: AccountRepository,
        storage: PersistenceAdapter,
        session_key: str = "otaku_user",
        latency_seconds: float = 1.0,
    ):
        """
        Initialize the controller.

        Args:
            accounts: Repository used to authenticate and register accounts
            storage: Persistence adapter holding the serialized session
            session_key: Storage key of the serialized session
            latency_seconds: Suspension before login/register touch the store
        """
        self.accounts = accounts
        self.storage = storage
        self.session_key = session_key
        self.latency_seconds = latency_seconds
        self._session: Optional[Session] = None

    @property
    def current(self) -> Optional[Session]:
        """The active session, or None when unauthenticated."""
        return self._session

    @property
    def is_authenticated(self) -> bool:
        return self._session is not None

    @property
    def state(self) -> SessionState:
        if self._session is None:
            return SessionState.UNAUTHENTICATED
        return SessionState.AUTHENTICATED

    def restore(self) -> Optional[Session]:
        """
        Restore the persisted session on startup.

        A corrupted value is discarded and treated as absent.

        Returns:
            The restored session, or None if nothing valid was persisted
        """
        try:
            session = self._read_session()
        except StorageCorruptionError as e:
            logger.warning(f"{e.message}; discarding persisted session")
            self._session = None
            self.storage.remove(self.session_key)
            return None

        self._session = session
        if session is not None:
            logger.info(f"Restored session for {session.username}")
        return session

    async def login(self, username: str, secret: str) -> AuthResult:
        """
        Authenticate and start a session.

        Args:
            username: The account username
            secret: The account secret

        Returns:
            AuthResult carrying the session, or the error on failure
        """
        await self._wait_for_backend()
        try:
            account = self.accounts.authenticate(username, secret)
        except AccountStoreError as e:
            logger.warning(f"Login failed for {username}: {e.message}")
            return AuthResult.failed(e)

        session = self._start(account)
        logger.info(f"User {session.username} logged in")
        return AuthResult.ok(session)

    async def register(self, username: str, secret: str, email: str) -> AuthResult:
        """
        Register a new account and start a session for it.

        Returns:
            AuthResult carrying the session, or the validation/conflict error
        """
        await self._wait_for_backend()
        try:
            account = self.accounts.register(username, secret, email)
        except AccountStoreError as e:
            logger.info(f"Registration rejected for {username}: {e.message}")
            return AuthResult.failed(e)

        session = self._start(account)
        logger.info(f"User {session.username} registered and logged in")
        return AuthResult.ok(session)

    def logout(self) -> None:
        """Clear the in-memory and persisted session. Safe to call repeatedly."""
        if self._session is not None:
            logger.info(f"User {self._session.username} logged out")
        self._session = None
        self.storage.remove(self.session_key)

    def refresh(
        self,
        favorites: Optional[list[FavoriteEntry]] = None,
        watch_history: Optional[list[WatchEvent]] = None,
    ) -> Optional[Session]:
        """
        Merge updated sub-records into the session without re-reading accounts.

        Args:
            favorites: New favorites, if they changed
            watch_history: New watch history, if it changed

        Returns:
            The updated session, or None when unauthenticated
        """
        if self._session is None:
            return None

        update = {}
        if favorites is not None:
            update["favorites"] = list(favorites)
        if watch_history is not None:
            update["watch_history"] = list(watch_history)

        self._session = self._session.model_copy(update=update)
        self._persist()
        return self._session

    def _start(self, account: Account) -> Session:
        self._session = account.to_session()
        self._persist()
        return self._session

    def _persist(self) -> None:
        self.storage.set(self.session_key, self._session.model_dump_json())

    def _read_session(self) -> Optional[Session]:
        raw = self.storage.get(self.session_key)
        if raw is None:
            return None
        try:
            return Session.model_validate_json(raw)
        except PydanticValidationError as e:
            raise StorageCorruptionError(self.session_key, f"{e.error_count()} validation error(s)") from e

    async def _wait_for_backend(self) -> None:
        # Stand-in for a future network round trip
        if self.latency_seconds > 0:
            await asyncio.sleep(self.latency_seconds)
