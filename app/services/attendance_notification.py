"""Attendance notification pipeline"""

import logging

from app.core.exceptions import TokenExchangeException
from app.schemas.notification import NotificationRecord
from app.services.fcm_dispatcher import FCMDispatcher
from app.services.message_composer import MessageComposer
from app.services.record_enricher import RecordEnricher
from app.services.token_provider import TokenProvider

logger = logging.getLogger(__name__)


class AttendanceNotificationService:
    """Drives enrich -> compose -> authenticate -> send for one record"""

    def __init__(
        self,
        enricher: RecordEnricher,
        composer: MessageComposer,
        token_provider: TokenProvider,
        dispatcher: FCMDispatcher
    ):
        self.enricher = enricher
        self.composer = composer
        self.token_provider = token_provider
        self.dispatcher = dispatcher

    async def process(self, record: NotificationRecord) -> bool:
        """
        Deliver the notification for one record.

        Returns True when FCM accepted the message. Skips and failures are
        logged and reported as False; nothing is raised to the caller.
        """
        uid = record.recipient_id

        try:
            enriched = await self.enricher.enrich(record)
            if enriched is None:
                return False

            message = self.composer.compose(enriched)
            if message is None:
                return False

            access_token = await self.token_provider.get_access_token()

            return await self.dispatcher.send(uid, message, access_token)

        except TokenExchangeException as e:
            logger.error(f"Error sending notification to {uid}: {e.detail}")
            return False
        except Exception as e:
            logger.exception(f"Error processing notification for {uid}: {str(e)}")
            return False
