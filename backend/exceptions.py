"""Exceptions raised by the optional model adapters.

Scorers catch these and fall back to their rule-based path; nothing here
should escape the analysis use case.
"""

from typing import Optional


class SpeechAnalysisError(Exception):
    """Base class for speech analysis errors."""


class ModelUnavailableError(SpeechAnalysisError):
    """Raised when an optional model is not configured or failed to load."""

    def __init__(self, capability: str, cause: Optional[Exception] = None):
        self.capability = capability
        self.cause = cause
        message = f"{capability} model is unavailable"
        if cause is not None:
            message += f": {cause}"
        super().__init__(message)


class ModelResponseError(SpeechAnalysisError):
    """Raised when a model call fails or returns an unexpected shape."""

    def __init__(self, capability: str, detail: str, cause: Optional[Exception] = None):
        self.capability = capability
        self.cause = cause
        super().__init__(f"{capability} model returned an invalid response: {detail}")
