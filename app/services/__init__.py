"""Services package"""

from .attendance_notification import AttendanceNotificationService
from .change_watcher import ChangeWatcher
from .fcm_dispatcher import FCMDispatcher
from .message_composer import MessageComposer
from .record_enricher import RecordEnricher
from .token_provider import TokenProvider

__all__ = [
    "AttendanceNotificationService",
    "ChangeWatcher",
    "FCMDispatcher",
    "MessageComposer",
    "RecordEnricher",
    "TokenProvider"
]
