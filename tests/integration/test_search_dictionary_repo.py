"""SearchDictionaryRepository against SQLite: wholesale replace, duplicates, batching, failures."""

import pytest
from sqlalchemy.exc import OperationalError

from app.domain.exceptions import DictionaryRebuildException
from app.infrastructure.persistence.repositories.search_dictionary_repo import (
    SearchDictionaryRepository,
)


async def test_replace_all_then_list_words_sorted(db_session) -> None:
    repo = SearchDictionaryRepository(db_session)

    count = await repo.replace_all(["phone", "galaxy", "samsung"])

    assert count == 3
    assert await repo.list_words() == ["galaxy", "phone", "samsung"]


async def test_replace_all_discards_previous_words(db_session) -> None:
    repo = SearchDictionaryRepository(db_session)
    await repo.replace_all(["oldword", "shared"])

    await repo.replace_all(["shared", "newword"])

    assert await repo.list_words() == ["newword", "shared"]


async def test_replace_all_is_idempotent(db_session) -> None:
    repo = SearchDictionaryRepository(db_session)
    words = ["alpha", "beta", "gamma"]

    await repo.replace_all(words)
    first = await repo.list_words()
    await repo.replace_all(words)

    assert await repo.list_words() == first


async def test_duplicate_words_are_ignored(db_session) -> None:
    repo = SearchDictionaryRepository(db_session)

    await repo.replace_all(["alpha", "alpha", "beta"])

    assert await repo.list_words() == ["alpha", "beta"]


async def test_empty_input_keeps_current_dictionary(db_session) -> None:
    repo = SearchDictionaryRepository(db_session)
    await repo.replace_all(["galaxy", "phone"])

    assert await repo.replace_all([]) == 0
    assert await repo.list_words() == ["galaxy", "phone"]


async def test_inserts_in_batches(db_session) -> None:
    repo = SearchDictionaryRepository(db_session, batch_size=2)
    words = [f"word{i}" for i in range(5)]

    assert await repo.replace_all(words) == 5
    assert await repo.list_words() == words


def _fail_inserts(session, monkeypatch) -> None:
    """Make every dictionary INSERT on session raise, leaving other statements alone."""
    execute = session.execute

    async def _execute(statement, *args, **kwargs):
        if getattr(statement, "is_insert", False):
            raise OperationalError("INSERT INTO search_dictionary", {}, Exception("disk I/O error"))
        return await execute(statement, *args, **kwargs)

    monkeypatch.setattr(session, "execute", _execute)


async def test_insert_failure_raises_rebuild_exception(db_session, monkeypatch) -> None:
    repo = SearchDictionaryRepository(db_session)
    _fail_inserts(db_session, monkeypatch)

    with pytest.raises(DictionaryRebuildException) as exc_info:
        await repo.replace_all(["galaxy", "phone"])

    assert exc_info.value.error_code == "DICTIONARY_REBUILD_ERROR"
    assert exc_info.value.details["words_attempted"] == 2
    assert "disk I/O error" in exc_info.value.details["reason"]


async def test_failed_rebuild_rolls_back_to_previous_words(session_factory, monkeypatch) -> None:
    async with session_factory() as session:
        async with session.begin():
            await SearchDictionaryRepository(session).replace_all(["galaxy", "phone"])

    async with session_factory() as session:
        _fail_inserts(session, monkeypatch)
        with pytest.raises(DictionaryRebuildException):
            async with session.begin():
                await SearchDictionaryRepository(session).replace_all(["tablet"])

    async with session_factory() as session:
        assert await SearchDictionaryRepository(session).list_words() == ["galaxy", "phone"]
