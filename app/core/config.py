"""
Application configuration management using Pydantic Settings
Handles all environment variables and application settings
"""

from pydantic_settings import BaseSettings
from typing import Optional
from functools import lru_cache

class Settings(BaseSettings):
    """Main application settings"""

    # Application Settings
    APP_NAME: str = "Attendance Notifier"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"

    # Server Settings
    HOST: str = "0.0.0.0"
    PORT: int = 10000

    # Firebase Configuration
    FIREBASE_CREDENTIALS_JSON: Optional[str] = None
    FIREBASE_CREDENTIALS_PATH: str = "serviceAccountKey.json"

    # Firestore Collections
    NOTIFICATION_COLLECTION: str = "notification"
    USERS_COLLECTION: str = "users"
    SUBJECTS_COLLECTION: str = "subjects"
    WATCH_ENABLED: bool = True

    # FCM HTTP v1
    FCM_HOST: str = "fcm.googleapis.com"
    FCM_SCOPE: str = "https://www.googleapis.com/auth/firebase.messaging"
    FCM_REQUEST_TIMEOUT: Optional[float] = None
    FCM_CACHE_ACCESS_TOKEN: bool = False

    # Message Formatting
    NOTIFICATION_TIMEZONE: Optional[str] = None

    class Config:
        env_file = ".env"
        case_sensitive = True

    def fcm_send_url(self, project_id: str) -> str:
        """Build the per-project FCM send endpoint"""
        return f"https://{self.FCM_HOST}/v1/projects/{project_id}/messages:send"

@lru_cache()
def get_settings() -> Settings:
    """
    Create cached settings instance
    This ensures settings are loaded only once
    """
    return Settings()

# Global settings instance
settings = get_settings()
