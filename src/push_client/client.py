"""Push-notification webhook client.

Posts ``{"title", "body", "badge"}`` JSON to a send-push endpoint, retrying
rate limits, server errors and dropped connections with exponential
backoff.
"""

from __future__ import annotations

import logging
import time
from typing import Any

import requests

from push_client.exceptions import PushAPIError, PushClientError, PushRateLimitError

logger = logging.getLogger(__name__)

_MAX_RETRIES = 3
_BASE_BACKOFF_S = 2
_DEFAULT_TIMEOUT_S = 10.0


class PushClient:
    """Facade for the send-push webhook."""

    def __init__(
        self,
        url: str,
        timeout: float = _DEFAULT_TIMEOUT_S,
        session: requests.Session | None = None,
        backoff_s: float = _BASE_BACKOFF_S,
    ) -> None:
        if not url:
            raise PushClientError("Push URL is not configured")
        self.url = url
        self.timeout = timeout
        self.backoff_s = backoff_s
        self._session = session or requests.Session()

    def send(self, title: str, body: str, badge: int = 1) -> dict[str, Any]:
        """Send one notification. Returns the endpoint's JSON reply."""
        payload = {"title": title, "body": body, "badge": badge}
        result = self._safe_post(payload)
        logger.info("Push sent: %s", title)
        return result

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _safe_post(self, payload: dict[str, Any]) -> dict[str, Any]:
        """POST *payload* with retry + exponential backoff on 429 / 5xx / network errors."""
        last_error = ""
        rate_limited = False
        for attempt in range(_MAX_RETRIES):
            try:
                resp = self._session.post(self.url, json=payload, timeout=self.timeout)
            except (requests.ConnectionError, requests.Timeout) as exc:
                last_error = str(exc)
                rate_limited = False
                self._wait(attempt, f"connection error: {exc}")
                continue

            if resp.status_code == 429 or resp.status_code >= 500:
                last_error = f"HTTP {resp.status_code}"
                rate_limited = resp.status_code == 429
                self._wait(attempt, last_error)
                continue

            if not resp.ok:
                raise PushAPIError(
                    f"Push endpoint rejected notification: HTTP {resp.status_code} {resp.text[:200]}",
                    status_code=resp.status_code,
                )

            try:
                return resp.json()
            except ValueError:
                return {"status": resp.status_code, "text": resp.text}

        if rate_limited:
            raise PushRateLimitError(f"Rate limited after {_MAX_RETRIES} retries")
        raise PushAPIError(f"Push failed after {_MAX_RETRIES} retries: {last_error}")

    def _wait(self, attempt: int, reason: str) -> None:
        if attempt == _MAX_RETRIES - 1:
            return
        wait = self.backoff_s * (2 ** attempt)
        logger.warning(
            "Push attempt %d/%d failed (%s), retrying in %ss",
            attempt + 1,
            _MAX_RETRIES,
            reason,
            wait,
        )
        time.sleep(wait)
