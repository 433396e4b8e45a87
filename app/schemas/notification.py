"""Attendance notification schemas"""

from typing import Optional, Dict, Any
from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field, ValidationError

NOTIFICATION_TITLE = "Attendance Update"
ANDROID_PRIORITY_HIGH = "high"


class FirestoreDocument(BaseModel):
    """Base for documents read from Firestore with camelCase field names"""

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)


class NotificationRecord(FirestoreDocument):
    """
    A pending notification written when attendance is marked.

    Numeric ids and statuses are read as strings; any other non-string value
    (booleans, maps, lists) makes the record malformed.
    """

    model_config = ConfigDict(coerce_numbers_to_str=True)

    recipient_id: str = Field(..., alias="uid")
    subject_id: str = Field(..., alias="subjectId")
    status: str
    occurred_at: Optional[datetime] = Field(None, alias="dateTime")

    @classmethod
    def from_document(cls, data: Optional[Dict[str, Any]]) -> Optional["NotificationRecord"]:
        """Parse a raw document, or None if a required field is missing or empty"""
        if not data:
            return None
        if not data.get("uid") or not data.get("subjectId") or not data.get("status"):
            return None
        try:
            return cls.model_validate(data)
        except ValidationError:
            return None


class RecipientProfile(FirestoreDocument):
    push_token: Optional[str] = Field(None, alias="fcmToken")
    image_url: Optional[str] = Field(None, alias="image_1")
    click_link: Optional[str] = Field(None, alias="link_1")


class SubjectProfile(FirestoreDocument):
    display_name: Optional[str] = Field(None, alias="name")


class EnrichedNotification(BaseModel):
    """Everything needed to compose a message for one recipient"""

    model_config = ConfigDict(frozen=True)

    recipient_id: str
    push_token: str
    status: str
    subject_name: str
    formatted_date: str
    image_url: str = ""
    click_link: str = ""


class ComposedMessage(BaseModel):
    """A data-only FCM message ready to be sent"""

    model_config = ConfigDict(frozen=True)

    push_token: str
    title: str
    body: str
    image_url: str
    click_link: str = ""
    priority: str = ANDROID_PRIORITY_HIGH

    def to_fcm_payload(self) -> Dict[str, Any]:
        """Render the FCM HTTP v1 request body"""
        return {
            "message": {
                "token": self.push_token,
                "data": {
                    "title": self.title,
                    "body": self.body,
                    "image": self.image_url,
                    "link": self.click_link,
                },
                "android": {
                    "priority": self.priority,
                },
            }
        }
