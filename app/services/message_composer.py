"""Build FCM data messages for attendance updates"""

from typing import Optional
import logging

from app.schemas.notification import (
    ANDROID_PRIORITY_HIGH,
    NOTIFICATION_TITLE,
    ComposedMessage,
    EnrichedNotification,
)

logger = logging.getLogger(__name__)


class MessageComposer:

    def compose(self, enriched: EnrichedNotification) -> Optional[ComposedMessage]:
        """Compose the message, or None when there is no image to show"""
        # Notifications without an image are suppressed, not sent bare
        if not enriched.image_url:
            logger.info(f"No image available for user {enriched.recipient_id}, skipping notification")
            return None

        return ComposedMessage(
            push_token=enriched.push_token,
            title=NOTIFICATION_TITLE,
            body=self.build_body(enriched),
            image_url=enriched.image_url,
            click_link=enriched.click_link or "",
            priority=ANDROID_PRIORITY_HIGH,
        )

    @staticmethod
    def build_body(enriched: EnrichedNotification) -> str:
        return f"Marked {enriched.status} for {enriched.subject_name} on {enriched.formatted_date}"
