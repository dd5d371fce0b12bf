"""Infrastructure implementations of application service interfaces."""

from app.infrastructure.services.activity_recorder import BackgroundActivityRecorder

__all__ = [
    "BackgroundActivityRecorder",
]
