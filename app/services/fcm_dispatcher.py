"""FCM HTTP v1 delivery"""

from typing import Optional
import logging

import httpx

from app.core.config import settings
from app.core.firebase import ServiceAccountInfo
from app.schemas.notification import ComposedMessage

logger = logging.getLogger(__name__)


class FCMDispatcher:
    """Sends composed messages to FCM; best-effort, never retries"""

    def __init__(
        self,
        account: ServiceAccountInfo,
        client: Optional[httpx.AsyncClient] = None,
        timeout: Optional[float] = settings.FCM_REQUEST_TIMEOUT
    ):
        self.account = account
        self.send_url = settings.fcm_send_url(account.project_id)
        self._owns_client = client is None
        if client is None:
            # Unset keeps the httpx default timeout
            client = httpx.AsyncClient(timeout=timeout) if timeout is not None else httpx.AsyncClient()
        self.client = client

    async def send(
        self,
        recipient_id: str,
        message: ComposedMessage,
        access_token: str
    ) -> bool:
        """POST one message; returns True only on HTTP 200"""
        logger.info(f"Sending data-only message with image: {message.image_url}")

        try:
            response = await self.client.post(
                self.send_url,
                json=message.to_fcm_payload(),
                headers={
                    "Authorization": f"Bearer {access_token}",
                    "Content-Type": "application/json",
                },
            )
        except httpx.HTTPError as e:
            logger.error(f"FCM request failed for {recipient_id}: {str(e)}")
            return False

        if response.status_code == 200:
            logger.info(f"Data message sent to {recipient_id}")
            return True

        logger.error(
            f"FCM error for {recipient_id} - Status: {response.status_code}, "
            f"Response: {response.text}"
        )
        return False

    async def close(self):
        if self._owns_client:
            await self.client.aclose()
