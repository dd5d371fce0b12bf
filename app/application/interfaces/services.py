"""Service interfaces (ports) for the application layer.

Protocols define contracts for application services (DIP).
"""

from __future__ import annotations

from typing import Any, Protocol

from app.domain.enums import ActivityType


# Activity recorder interface
class IActivityRecorder(Protocol):
    """Protocol for fire-and-forget user activity recording.

    record() returns immediately; the write happens later and its failures
    are logged by the implementation, never raised to the caller.
    """

    def record(
        self, user_id: str, event_type: ActivityType, payload: dict[str, Any]
    ) -> None:
        """Schedule an activity event for user_id."""
