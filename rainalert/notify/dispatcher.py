"""Formats the three rain alert variants and hands them to ntfy."""

from rainalert.config.schema import JobConfig
from rainalert.models.notification import NotificationMessage, Priority
from rainalert.notify.ntfy_client import NtfyClient

RAIN_TITLE = "Rain Alert"
NO_RAIN_TITLE = "No Rain Expected"
ERROR_TITLE = "Rain Alert Error"


def format_rain_alert(cfg: JobConfig, peak_precipitation_in: float) -> NotificationMessage:
    body = (
        f"Rain expected in {cfg.display_name} in the next "
        f"{cfg.forecast_range_hrs} hours, "
        f"peaking at {peak_precipitation_in:.2f} in/hr. Bring an umbrella!"
    )
    return NotificationMessage(title=RAIN_TITLE, priority=Priority.HIGH, body=body)


def format_no_rain_alert(cfg: JobConfig) -> NotificationMessage:
    body = (
        f"No rain expected in {cfg.display_name} in the next "
        f"{cfg.forecast_range_hrs} hours."
    )
    return NotificationMessage(title=NO_RAIN_TITLE, priority=Priority.LOW, body=body)


def format_error_alert(cfg: JobConfig, error_message: str) -> NotificationMessage:
    body = f"Could not check the forecast for {cfg.display_name}: {error_message}"
    return NotificationMessage(title=ERROR_TITLE, priority=Priority.DEFAULT, body=body)


class NotificationDispatcher:
    """Sends one message per call to the configured topic.

    Whether a no-rain message should be sent at all (ignore_no_rain) is up
    to the caller. SendError from the client propagates unchanged.
    """

    def __init__(self, config: JobConfig, ntfy: NtfyClient):
        self.config = config
        self.ntfy = ntfy

    def send_rain_alert(self, peak_precipitation_in: float) -> NotificationMessage:
        return self._send(format_rain_alert(self.config, peak_precipitation_in))

    def send_no_rain_alert(self) -> NotificationMessage:
        return self._send(format_no_rain_alert(self.config))

    def send_error_alert(self, error_message: str) -> NotificationMessage:
        return self._send(format_error_alert(self.config, error_message))

    def _send(self, message: NotificationMessage) -> NotificationMessage:
        self.ntfy.publish(self.config.ntfy_topic, message)
        return message
