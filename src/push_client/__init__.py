"""Push-notification client — all webhook network I/O lives here."""

from push_client.client import PushClient
from push_client.exceptions import PushAPIError, PushClientError, PushRateLimitError

__all__ = [
    "PushAPIError",
    "PushClient",
    "PushClientError",
    "PushRateLimitError",
]
