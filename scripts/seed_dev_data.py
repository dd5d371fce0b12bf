"""Seed dev products from docs/seed-products.json, then rebuild the search dictionary.

Products are matched by name; existing names are skipped so the script can be
re-run safely.

Usage:
    uv run python -m scripts.seed_dev_data [path/to/seed-products.json]

Default path: docs/seed-products.json (relative to project root).
Requires: DATABASE_URL, SECRET_KEY, migrated DB (alembic upgrade head).
"""

from __future__ import annotations

import asyncio
import json
import sys
from pathlib import Path
from typing import Any

from dotenv import load_dotenv
from sqlalchemy import select


def _project_root() -> Path:
    return Path(__file__).resolve().parent.parent


def _load_env() -> None:
    """Load .env from project root so get_settings() sees DATABASE_URL when run as script."""
    load_dotenv(_project_root() / ".env", override=True)


def _media(entries: list[dict[str, Any]]):
    from app.infrastructure.persistence.models import ProductMedia

    return [
        ProductMedia(url=m["url"], purpose=m["purpose"], priority=m.get("priority", 0))
        for m in entries
    ]


async def _seed(path: Path) -> int:
    from app.application.use_cases.search import RebuildSearchDictionaryUseCase
    from app.infrastructure.persistence import database
    from app.infrastructure.persistence.models import Product
    from app.infrastructure.persistence.repositories import (
        ProductRepository,
        SearchDictionaryRepository,
    )
    from app.shared.telemetry import setup_logging

    setup_logging()
    data = json.loads(path.read_text(encoding="utf-8"))
    session_factory = database.get_session_factory()
    created = 0
    try:
        async with session_factory() as session:
            async with session.begin():
                for raw in data.get("products", []):
                    item = dict(raw)
                    existing = await session.execute(
                        select(Product.id).where(Product.name == item["name"])
                    )
                    if existing.scalar_one_or_none():
                        continue
                    media = _media(item.pop("media", []))
                    product = Product(**item)
                    product.media = media
                    session.add(product)
                    created += 1
            async with session.begin():
                result = await RebuildSearchDictionaryUseCase(
                    ProductRepository(session), SearchDictionaryRepository(session)
                ).execute()
    finally:
        if database.engine is not None:
            await database.engine.dispose()
    print(f"Seeded {created} products; dictionary has {result.word_count} words")
    return 0


def main() -> int:
    _load_env()
    default = _project_root() / "docs" / "seed-products.json"
    path = Path(sys.argv[1]) if len(sys.argv) > 1 else default
    if not path.exists():
        print(f"Seed file not found: {path}", file=sys.stderr)
        return 1
    return asyncio.run(_seed(path))


if __name__ == "__main__":
    sys.exit(main())
