"""
Custom exception classes
Failures raised by the notification pipeline and its startup
"""

from typing import Optional

class NotifierException(Exception):
    """Base exception class for the attendance notifier"""

    def __init__(self, detail: str, error_code: Optional[str] = None):
        super().__init__(detail)
        self.detail = detail
        self.error_code = error_code

class CredentialsException(NotifierException):
    """Service account key missing or unreadable"""

    def __init__(self, detail: str, error_code: str = "INVALID_CREDENTIALS"):
        super().__init__(detail=detail, error_code=error_code)

class TokenExchangeException(NotifierException):
    """OAuth2 access token could not be obtained"""

    def __init__(self, detail: str, error_code: str = "TOKEN_EXCHANGE_FAILED"):
        super().__init__(detail=detail, error_code=error_code)
