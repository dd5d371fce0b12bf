"""Background activity recorder (implements IActivityRecorder).

Each event is written by a detached asyncio task in its own transaction, so
the request that produced it never waits on, or fails because of, the write.
"""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.domain.enums import ActivityType
from app.infrastructure.persistence.repositories.user_activity_repo import (
    UserActivityRepository,
)
from app.shared.telemetry.logging import get_logger

logger = get_logger(__name__)


class BackgroundActivityRecorder:
    """Schedules activity writes as tasks; drain() awaits the pending ones (shutdown, tests)."""

    def __init__(
        self,
        session_factory: Callable[[], async_sessionmaker[AsyncSession]],
        max_recent: int = 10,
    ) -> None:
        self._session_factory = session_factory
        self._max_recent = max_recent
        self._tasks: set[asyncio.Task[None]] = set()

    def record(
        self, user_id: str, event_type: ActivityType, payload: dict[str, Any]
    ) -> None:
        task = asyncio.create_task(self._write(user_id, event_type, payload))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

    async def _write(
        self, user_id: str, event_type: ActivityType, payload: dict[str, Any]
    ) -> None:
        try:
            async with self._session_factory()() as session:
                async with session.begin():
                    repo = UserActivityRepository(session, max_recent=self._max_recent)
                    if event_type == ActivityType.SEARCH:
                        await repo.add_recent_search(user_id, str(payload.get("query", "")))
                    else:
                        logger.warning("Unhandled activity type %s", event_type)
        except Exception:
            logger.exception(
                "Failed to record %s activity for user %s", event_type.value, user_id
            )

    @property
    def pending(self) -> int:
        return len(self._tasks)

    async def drain(self) -> None:
        """Wait for every scheduled write to finish."""
        if self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)
