from __future__ import annotations

from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    AUTH = "auth"
    CONFIGURATION = "configuration"
    VALIDATION = "validation"
    CREDENTIAL = "credential"
    RATE_LIMIT = "rate_limit"
    UPSTREAM = "upstream"


class JournalAPIError(Exception):
    """Base for every failure the API turns into a `{"error": ...}` body."""

    kind: ErrorKind = ErrorKind.UPSTREAM
    status_code: int = 500
    default_message: str = "Failed to generate summary"

    def __init__(self, message: Optional[str] = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class AuthError(JournalAPIError):
    kind = ErrorKind.AUTH
    status_code = 401
    default_message = "Unauthorized"


class ConfigurationError(JournalAPIError):
    kind = ErrorKind.CONFIGURATION
    status_code = 400
    default_message = "Gemini API key not configured. Please add it in Settings."


class ValidationError(JournalAPIError):
    kind = ErrorKind.VALIDATION
    status_code = 400
    default_message = "Missing required fields"


class CredentialError(JournalAPIError):
    kind = ErrorKind.CREDENTIAL
    status_code = 401
    default_message = "Invalid Gemini API key. Please check your settings."


class RateLimitError(JournalAPIError):
    kind = ErrorKind.RATE_LIMIT
    status_code = 429
    default_message = "Gemini API rate limit exceeded. Please try again in a few moments."


class UpstreamError(JournalAPIError):
    kind = ErrorKind.UPSTREAM
    status_code = 500
