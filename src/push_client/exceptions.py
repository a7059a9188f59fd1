"""Custom exception hierarchy for the push-notification client."""

from __future__ import annotations


class PushClientError(Exception):
    """Base exception for all push_client errors."""


class PushAPIError(PushClientError):
    """The push endpoint returned an error response or could not be reached."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class PushRateLimitError(PushAPIError):
    """HTTP 429 — too many requests."""

    def __init__(self, message: str = "Rate limited by push endpoint") -> None:
        super().__init__(message, status_code=429)
