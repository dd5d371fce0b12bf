"""User activity repository: recent searches per user."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.infrastructure.persistence.models.user_activity import UserActivity


class UserActivityRepository:
    """Recent searches, most recent first, deduplicated and capped."""

    def __init__(self, db: AsyncSession, max_recent: int = 10) -> None:
        self.db = db
        self.max_recent = max_recent

    async def _get(self, user_id: str) -> UserActivity | None:
        result = await self.db.execute(
            select(UserActivity).where(UserActivity.user_id == user_id)
        )
        return result.scalar_one_or_none()

    async def add_recent_search(self, user_id: str, query: str) -> list[str]:
        """Move the normalized query to the front; create the activity row if missing."""
        normalized = query.strip().lower()
        activity = await self._get(user_id)
        if activity is None:
            activity = UserActivity(user_id=user_id, recent_searches=[])
            self.db.add(activity)
        if not normalized:
            return list(activity.recent_searches or [])
        previous = [s for s in (activity.recent_searches or []) if s != normalized]
        # Reassign so the JSON column is flagged dirty.
        activity.recent_searches = [normalized, *previous][: self.max_recent]
        await self.db.flush()
        return list(activity.recent_searches)

    async def get_recent_searches(self, user_id: str) -> list[str]:
        activity = await self._get(user_id)
        if activity is None:
            return []
        return list(activity.recent_searches or [])
