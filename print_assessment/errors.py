"""Error types surfaced by the assessment pipeline."""
from __future__ import annotations

from typing import Optional


class AssessmentError(Exception):
    """Base class: carries the HTTP status and a message safe to show users."""

    status_code = 500
    default_message = "Analysis failed"

    def __init__(self, message: Optional[str] = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class MissingFieldsError(AssessmentError):
    status_code = 400
    default_message = "Missing required fields"


class InvalidAssessmentError(AssessmentError):
    status_code = 400
    default_message = "Invalid assessment data"


class ServiceNotConfiguredError(AssessmentError):
    default_message = "AI service not configured"


class UpstreamAuthError(AssessmentError):
    default_message = "AI service authentication failed"


class UpstreamRateLimitedError(AssessmentError):
    status_code = 429
    default_message = "AI service rate limited. Please try again in a moment."


class UpstreamServiceError(AssessmentError):
    default_message = "AI service request failed"


class NoTextResponseError(AssessmentError):
    default_message = "Analysis failed"


class InvalidResponseFormatError(AssessmentError):
    default_message = "Invalid response format from AI"


class InvalidFormDataError(AssessmentError):
    status_code = 400
    default_message = "Invalid form data"
