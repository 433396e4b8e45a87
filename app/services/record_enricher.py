"""Resolve notification records into deliverable payloads"""

from typing import Callable, Optional
from datetime import datetime
from zoneinfo import ZoneInfo
import logging

from app.core.config import settings
from app.schemas.notification import (
    EnrichedNotification,
    NotificationRecord,
    RecipientProfile,
    SubjectProfile,
)

logger = logging.getLogger(__name__)

DATE_FORMAT = "%d %b %Y"


def format_notification_date(
    value: Optional[datetime],
    tz: Optional[ZoneInfo] = None,
    now: Optional[Callable[[], datetime]] = None
) -> str:
    """
    Format a record timestamp as '05 Mar 2024', falling back to the current time.

    Aware timestamps are shown in tz, or in the host's local timezone when tz
    is None. Naive timestamps are formatted as they are.
    """
    if value is None:
        value = now() if now else datetime.now().astimezone(tz)
    elif value.tzinfo is not None:
        value = value.astimezone(tz)
    return value.strftime(DATE_FORMAT)


class RecordEnricher:
    """Looks up the recipient and subject for a notification record"""

    def __init__(
        self,
        db,
        users_collection: str = settings.USERS_COLLECTION,
        subjects_collection: str = settings.SUBJECTS_COLLECTION,
        timezone: Optional[str] = settings.NOTIFICATION_TIMEZONE,
        clock: Optional[Callable[[], datetime]] = None
    ):
        self.db = db
        self.users_collection = users_collection
        self.subjects_collection = subjects_collection
        self.tz = ZoneInfo(timezone) if timezone else None
        self.clock = clock

    async def enrich(self, record: NotificationRecord) -> Optional[EnrichedNotification]:
        """Build the delivery payload, or None if the recipient cannot be notified"""
        uid = record.recipient_id

        recipient = await self.get_recipient(uid)
        if recipient is None:
            logger.info(f"User {uid} not found")
            return None

        if not recipient.push_token:
            logger.info(f"No FCM token for user {uid}")
            return None

        subject_name = await self.resolve_subject_name(uid, record.subject_id)

        return EnrichedNotification(
            recipient_id=uid,
            push_token=recipient.push_token,
            status=record.status,
            subject_name=subject_name,
            formatted_date=format_notification_date(record.occurred_at, self.tz, self.clock),
            image_url=recipient.image_url or "",
            click_link=recipient.click_link or "",
        )

    async def get_recipient(self, uid: str) -> Optional[RecipientProfile]:
        snapshot = await self.db.collection(self.users_collection).document(uid).get()
        if not snapshot.exists:
            return None
        return RecipientProfile.model_validate(snapshot.to_dict() or {})

    async def resolve_subject_name(self, uid: str, subject_id: str) -> str:
        """Subject display name, or the raw subject id when it has none"""
        snapshot = await (
            self.db.collection(self.users_collection)
            .document(uid)
            .collection(self.subjects_collection)
            .document(subject_id)
            .get()
        )
        if not snapshot.exists:
            return subject_id

        subject = SubjectProfile.model_validate(snapshot.to_dict() or {})
        return subject.display_name or subject_id
