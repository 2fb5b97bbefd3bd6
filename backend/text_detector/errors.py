"""
Error types raised by the remote classifier.

Every error carries a readable message and an error_code that the HTTP layer
passes through unchanged. None of them are retried internally.
"""
from typing import Optional


class ClassifierError(Exception):
    """Base class for remote classifier failures."""

    category = "Classifier Error"
    error_code = "CLASSIFIER_ERROR"
    retryable = False

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f"{self.category}: {self.message}"


class ConfigurationError(ClassifierError):
    """Credential missing; raised before any request is made."""
    category = "Config Error"
    error_code = "CONFIG_ERROR"


class NetworkError(ClassifierError):
    """Transport failure (DNS, connect, timeout)."""
    category = "Network Error"
    error_code = "NETWORK_ERROR"
    retryable = True


class ApiError(ClassifierError):
    """Remote service answered with a non-success status."""
    category = "API Error"
    error_code = "API_ERROR"

    def __init__(self, message: str, status_code: Optional[int] = None, body: str = ""):
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class ParseError(ClassifierError):
    """Response body is not JSON or does not match any known label layout."""
    category = "Parse Error"
    error_code = "PARSE_ERROR"
