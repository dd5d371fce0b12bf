"""Rebuild the search dictionary from the product catalog.

Same operation as POST /api/v1/search/update-dictionary, for cron or a
deploy hook. Delete and insert run in one transaction.

Usage:
    uv run python -m scripts.rebuild_search_dictionary

Requires: DATABASE_URL and SECRET_KEY (settings validation), migrated DB.
"""

from __future__ import annotations

import asyncio
import sys
from pathlib import Path

from dotenv import load_dotenv


def _project_root() -> Path:
    return Path(__file__).resolve().parent.parent


def _load_env() -> None:
    """Load .env from project root so get_settings() sees DATABASE_URL when run as script."""
    load_dotenv(_project_root() / ".env", override=True)


async def _run() -> int:
    from app.application.use_cases.search import RebuildSearchDictionaryUseCase
    from app.core.config import get_settings
    from app.infrastructure.persistence import database
    from app.infrastructure.persistence.repositories import (
        ProductRepository,
        SearchDictionaryRepository,
    )
    from app.shared.telemetry import setup_logging

    setup_logging()
    settings = get_settings()
    session_factory = database.get_session_factory()
    try:
        async with session_factory() as session:
            async with session.begin():
                use_case = RebuildSearchDictionaryUseCase(
                    catalog_repo=ProductRepository(session),
                    dictionary_repo=SearchDictionaryRepository(
                        session, batch_size=settings.search_dictionary_batch_size
                    ),
                )
                result = await use_case.execute()
    finally:
        if database.engine is not None:
            await database.engine.dispose()
    print(f"Search dictionary rebuilt: {result.word_count} words")
    return 0


def main() -> int:
    _load_env()
    return asyncio.run(_run())


if __name__ == "__main__":
    sys.exit(main())
