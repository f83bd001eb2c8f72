"""Composition root wiring the account store together."""

import logging
from dataclasses import dataclass
from typing import Optional

from .config import Settings, settings as default_settings
from ..domain.interfaces.account_repository import AccountRepository
from ..domain.interfaces.persistence_adapter import PersistenceAdapter
from ..domain.services import FavoritesService, SessionController, WatchHistoryService
from ..infrastructure.bcrypt_secret_hasher import BcryptSecretHasher
from ..infrastructure.dynamodb_storage_adapter import DynamoDBStorageAdapter
from ..infrastructure.local_storage_adapter import LocalStorageAdapter
from ..infrastructure.storage_account_repository import StorageAccountRepository

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@dataclass
class OtakuStore:
    """Everything the UI talks to, held by one explicit instance per process."""

    storage: PersistenceAdapter
    accounts: AccountRepository
    session: SessionController
    favorites: FavoritesService
    watch_history: WatchHistoryService

    def get_health_status(self) -> dict:
        """
        Describe the wiring of this store instance.

        Returns:
            Dict containing the provider types and session state
        """
        return {
            "status": "healthy",
            "session_state": self.session.state.value,
            "providers": {
                "storage": type(self.storage).__name__,
                "accounts": type(self.accounts).__name__,
            },
        }


def configure_logging(config: Optional[Settings] = None) -> None:
    """Configure root logging from settings."""
    config = config or default_settings
    logging.basicConfig(level=config.log_level.upper(), format=LOG_FORMAT)


def create_storage(config: Settings) -> PersistenceAdapter:
    """Create the persistence adapter selected by ``storage_backend``."""
    if config.storage_backend == "dynamodb":
        return DynamoDBStorageAdapter(
            table_name=config.storage_table_name,
            region_name=config.aws_region,
        )
    return LocalStorageAdapter()


def build_store(
    config: Optional[Settings] = None,
    storage: Optional[PersistenceAdapter] = None,
) -> OtakuStore:
    """
    Build a store and restore any persisted session.

    Args:
        config: Settings to use (defaults to the environment-loaded settings)
        storage: Adapter to use instead of the configured backend; passing the
            same adapter to two stores models two tabs sharing storage

    Returns:
        The wired OtakuStore
    """
    config = config or default_settings
    storage = storage if storage is not None else create_storage(config)

    accounts = StorageAccountRepository(
        storage=storage,
        hasher=BcryptSecretHasher(rounds=config.bcrypt_rounds),
        accounts_key=config.accounts_key,
    )
    session = SessionController(
        accounts=accounts,
        storage=storage,
        session_key=config.session_key,
        latency_seconds=config.auth_latency_seconds,
    )
    store = OtakuStore(
        storage=storage,
        accounts=accounts,
        session=session,
        favorites=FavoritesService(
            session=session,
            accounts=accounts,
            strict_removal=config.strict_favorite_removal,
        ),
        watch_history=WatchHistoryService(
            session=session,
            accounts=accounts,
            limit=config.history_limit,
        ),
    )

    session.restore()
    logger.info(f"{config.app_name} store ready ({type(storage).__name__}, {store.session.state.value})")
    return store
