"""Run a short demo session against the otaku account store."""

import asyncio
import logging

from otaku_store.application import build_store, configure_logging
from otaku_store.application.config import settings

logger = logging.getLogger(__name__)


async def main() -> None:
    configure_logging(settings)
    store = build_store(settings)

    if store.session.current is None:
        result = await store.session.register("demo", "demo123", "demo@x.com")
        if not result.success:
            result = await store.session.login("demo", "demo123")
        if not result.success:
            logger.error(f"Could not sign in: {result.message}")
            return

    store.favorites.add({"id": "m1", "title": "Spirited Away", "media_type": "movie"})
    for episode in range(1, 4):
        store.watch_history.record({"id": "s1", "title": "Cowboy Bebop", "media_type": "tv"}, episode=episode)

    session = store.session.current
    logger.info(f"{session.username}: {len(session.favorites)} favorite(s), {len(session.watch_history)} watch event(s)")
    logger.info(f"Health: {store.get_health_status()}")


if __name__ == "__main__":
    asyncio.run(main())
