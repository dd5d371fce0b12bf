"""Search dictionary repository: wholesale replace and ordered read."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from sqlalchemy import delete, select
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.domain.exceptions import DictionaryRebuildException
from app.infrastructure.persistence.models.search_dictionary import SearchDictionaryWord

logger = logging.getLogger(__name__)


class SearchDictionaryRepository:
    """Dictionary words owned by search. Callers provide the transaction."""

    def __init__(self, db: AsyncSession, batch_size: int = 1000) -> None:
        self.db = db
        self.batch_size = max(1, batch_size)

    def _insert(self):
        if self.db.get_bind().dialect.name == "sqlite":
            return sqlite_insert(SearchDictionaryWord)
        return pg_insert(SearchDictionaryWord)

    async def replace_all(self, words: Sequence[str]) -> int:
        """Delete every entry, then insert words in batches (duplicates skipped).

        Returns the number of words attempted. An empty input is a no-op and
        keeps the current dictionary. Insert failures raise
        DictionaryRebuildException; the caller's transaction still holds the
        delete, so rolling it back restores the previous words.
        """
        if not words:
            logger.warning("No dictionary words extracted; keeping the current dictionary")
            return 0
        await self.db.execute(delete(SearchDictionaryWord))
        try:
            for start in range(0, len(words), self.batch_size):
                batch = words[start : start + self.batch_size]
                stmt = (
                    self._insert()
                    .values([{"word": w} for w in batch])
                    .on_conflict_do_nothing(index_elements=["word"])
                )
                await self.db.execute(stmt)
            await self.db.flush()
        except SQLAlchemyError as e:
            logger.exception("Error inserting words into dictionary")
            raise DictionaryRebuildException(str(e), len(words)) from e
        return len(words)

    async def list_words(self) -> list[str]:
        """Return every dictionary word, alphabetically."""
        result = await self.db.execute(
            select(SearchDictionaryWord.word).order_by(SearchDictionaryWord.word)
        )
        return list(result.scalars().all())
