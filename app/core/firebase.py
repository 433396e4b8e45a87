"""Firebase configuration and initialization"""

import firebase_admin
from firebase_admin import credentials, firestore, firestore_async
from pydantic import BaseModel, ConfigDict, ValidationError
import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

from app.core.config import Settings
from app.core.exceptions import CredentialsException

logger = logging.getLogger(__name__)

DEFAULT_TOKEN_URI = "https://oauth2.googleapis.com/token"

class ServiceAccountInfo(BaseModel):
    """Service account key material, loaded once and shared read-only"""

    model_config = ConfigDict(frozen=True, extra="ignore")

    project_id: str
    client_email: str
    private_key: str
    private_key_id: Optional[str] = None
    token_uri: str = DEFAULT_TOKEN_URI

    def as_credentials_info(self) -> Dict[str, Any]:
        """Render the key in the service-account JSON layout google-auth expects"""
        info = {
            "type": "service_account",
            "project_id": self.project_id,
            "client_email": self.client_email,
            "private_key": self.private_key,
            "token_uri": self.token_uri,
        }
        if self.private_key_id:
            info["private_key_id"] = self.private_key_id
        return info

def load_service_account(settings: Settings) -> ServiceAccountInfo:
    """Load the service account from inline JSON or from the key file"""
    try:
        if settings.FIREBASE_CREDENTIALS_JSON:
            raw = settings.FIREBASE_CREDENTIALS_JSON
        else:
            raw = Path(settings.FIREBASE_CREDENTIALS_PATH).read_text(encoding="utf-8")
        account = ServiceAccountInfo.model_validate(json.loads(raw))
    except OSError as e:
        raise CredentialsException(
            f"Cannot read {settings.FIREBASE_CREDENTIALS_PATH}: {e}"
        ) from e
    except (json.JSONDecodeError, ValidationError) as e:
        raise CredentialsException(f"Invalid service account key: {e}") from e

    logger.info("Firebase service account loaded")
    return account

def initialize_firebase(account: ServiceAccountInfo) -> firebase_admin.App:
    """Initialize Firebase Admin SDK"""
    try:
        return firebase_admin.get_app()
    except ValueError:
        pass

    cred = credentials.Certificate(account.as_credentials_info())
    app = firebase_admin.initialize_app(cred)
    logger.info(f"Firebase Admin SDK initialized for project {account.project_id}")
    return app

def get_firestore_client(app: firebase_admin.App):
    """Sync Firestore client, required for on_snapshot listeners"""
    return firestore.client(app)

def get_firestore_async_client(app: firebase_admin.App):
    """Async Firestore client used for document lookups"""
    return firestore_async.client(app)
