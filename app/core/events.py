"""
Application lifecycle events
Handles startup and shutdown tasks
"""

from fastapi import FastAPI
import logging
from contextlib import asynccontextmanager

from .config import settings
from .firebase import (
    get_firestore_async_client,
    get_firestore_client,
    initialize_firebase,
    load_service_account,
)
from .logging import setup_logging
from app.services.attendance_notification import AttendanceNotificationService
from app.services.change_watcher import ChangeWatcher
from app.services.fcm_dispatcher import FCMDispatcher
from app.services.message_composer import MessageComposer
from app.services.record_enricher import RecordEnricher
from app.services.token_provider import TokenProvider

logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager
    Handles startup and shutdown events
    """
    # Startup
    setup_logging()
    logger.info(f"Starting {settings.APP_NAME}...")

    # A missing or invalid key is fatal for the process
    account = load_service_account(settings)
    firebase_app = initialize_firebase(account)

    dispatcher = FCMDispatcher(account)
    service = AttendanceNotificationService(
        enricher=RecordEnricher(get_firestore_async_client(firebase_app)),
        composer=MessageComposer(),
        token_provider=TokenProvider(account, cache_token=settings.FCM_CACHE_ACCESS_TOKEN),
        dispatcher=dispatcher,
    )
    watcher = ChangeWatcher(get_firestore_client(firebase_app), service)

    app.state.notification_service = service
    app.state.change_watcher = watcher

    try:
        if settings.ENVIRONMENT == "test":
            logger.info("Test environment, notification watch not started")
        elif settings.WATCH_ENABLED:
            watcher.start()
        else:
            logger.warning("Notification watch disabled by configuration")

        logger.info(f"{settings.APP_NAME} running on port {settings.PORT}")

        yield

    finally:
        # Shutdown
        logger.info(f"Shutting down {settings.APP_NAME}...")
        watcher.stop()
        await watcher.wait_idle()
        await dispatcher.close()
        logger.info(f"{settings.APP_NAME} shutdown complete")
