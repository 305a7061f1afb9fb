"""ntfy publish client. Fire-and-forget: failures are raised, never retried."""

import logging

import httpx

from rainalert.config.schema import DEFAULT_NTFY_SERVER
from rainalert.models.notification import NotificationMessage

logger = logging.getLogger(__name__)


class SendError(Exception):
    """Raised when a notification could not be delivered to ntfy."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class NtfyClient:
    def __init__(self, http: httpx.Client, server: str = DEFAULT_NTFY_SERVER):
        self.http = http
        self.server = server.rstrip("/")

    def publish(self, topic: str, message: NotificationMessage) -> None:
        """POST the message body as plain text to <server>/<topic>."""
        url = f"{self.server}/{topic}"
        headers = {
            "Title": message.title,
            "Priority": str(int(message.priority)),
        }
        try:
            resp = self.http.post(url, content=message.body.encode(), headers=headers)
        except httpx.RequestError as e:
            raise SendError(f"failed to publish to ntfy topic {topic}: {e}") from e

        if resp.status_code >= 400:
            logger.error("ntfy %s returned %d: %s", url, resp.status_code, resp.text)
            raise SendError(
                f"ntfy returned status {resp.status_code}", resp.status_code
            )
        logger.info("Published %r to ntfy topic %s", message.title, topic)
