"""Application lifespan: startup and shutdown.

Single place for startup/shutdown wiring: logging, activity recorder,
telemetry, DB engine dispose.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from app.core.config import get_settings
from app.infrastructure.persistence import database
from app.infrastructure.services import BackgroundActivityRecorder
from app.shared.telemetry import TelemetryConfig, get_telemetry, set_telemetry

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit run shutdown.

    Startup order: activity recorder, telemetry (if enabled). Shutdown order:
    drain pending activity writes, telemetry shutdown, SQL engine dispose.
    """
    settings = get_settings()

    # ---- Startup ----
    app.state.activity_recorder = BackgroundActivityRecorder(
        database.get_session_factory, max_recent=settings.recent_searches_max
    )

    if settings.telemetry_enabled:
        telemetry = TelemetryConfig.from_settings(settings)
        telemetry.setup_telemetry(
            exporter_type=settings.telemetry_exporter,
            otlp_endpoint=settings.telemetry_otlp_endpoint,
            sample_rate=settings.telemetry_sample_rate,
        )
        set_telemetry(telemetry)
        database.get_session_factory()
        telemetry.instrument(app, database.engine)

    yield

    # ---- Shutdown ----
    recorder: BackgroundActivityRecorder = app.state.activity_recorder
    if recorder.pending:
        logger.info("Waiting for %d pending activity writes", recorder.pending)
    await recorder.drain()

    telemetry_instance = get_telemetry()
    if telemetry_instance is not None:
        telemetry_instance.shutdown()
        set_telemetry(None)

    if database.engine is not None:
        await database.engine.dispose()
        logger.info("Database engine disposed")
