"""Firestore listener for newly added notification records"""

from typing import Iterable, Optional, Set
import asyncio
import concurrent.futures
import logging

from app.core.config import settings
from app.schemas.notification import NotificationRecord
from app.services.attendance_notification import AttendanceNotificationService

logger = logging.getLogger(__name__)

ADDED = "ADDED"


class ChangeWatcher:
    """
    Subscribes to the notification collection and fans out one pipeline task
    per added document.

    Firestore invokes the snapshot callback on its own listener thread, so
    work is handed to the application's event loop. Tasks are independent and
    unbounded; a failing task never affects the others.
    """

    def __init__(
        self,
        db,
        service: AttendanceNotificationService,
        collection: str = settings.NOTIFICATION_COLLECTION,
        loop: Optional[asyncio.AbstractEventLoop] = None
    ):
        self.db = db
        self.service = service
        self.collection = collection
        self.loop = loop
        self._watch = None
        self._pending: Set = set()

    def start(self):
        """Subscribe to the collection; must be called from the event loop"""
        if self._watch is not None:
            return
        if self.loop is None:
            self.loop = asyncio.get_running_loop()

        self._watch = self.db.collection(self.collection).on_snapshot(self.on_snapshot)
        logger.info(f"Monitoring {self.collection} collection for new entries...")

    def stop(self):
        if self._watch is not None:
            self._watch.unsubscribe()
            self._watch = None
            logger.info(f"Stopped monitoring {self.collection} collection")

    def on_snapshot(self, col_snapshot, changes, read_time):
        """Firestore snapshot callback"""
        self.handle_changes(changes)

    def handle_changes(self, changes: Iterable):
        for change in changes:
            self.handle_change(change)

    def handle_change(self, change):
        if change.type.name != ADDED:
            return

        record = NotificationRecord.from_document(change.document.to_dict())
        if record is None:
            return

        logger.info(
            f"New notification for {record.recipient_id}: "
            f"{record.status} - {record.subject_id}"
        )
        self._schedule(record)

    def _schedule(self, record: NotificationRecord):
        coro = self.service.process(record)

        if self._on_loop_thread():
            future = self.loop.create_task(coro)
        else:
            future = asyncio.run_coroutine_threadsafe(coro, self.loop)

        self._pending.add(future)
        future.add_done_callback(self._on_done)

    def _on_done(self, future):
        self._pending.discard(future)
        if not future.cancelled() and future.exception() is not None:
            logger.error(f"Notification task failed: {future.exception()}")

    def _on_loop_thread(self) -> bool:
        try:
            return asyncio.get_running_loop() is self.loop
        except RuntimeError:
            return False

    @property
    def pending(self) -> int:
        return len(self._pending)

    async def wait_idle(self):
        """Wait for every scheduled pipeline task to finish"""
        while self._pending:
            futures = [
                asyncio.wrap_future(f) if isinstance(f, concurrent.futures.Future) else f
                for f in list(self._pending)
            ]
            await asyncio.gather(*futures, return_exceptions=True)
