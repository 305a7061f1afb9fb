"""Rain alert job: one forecast check and at most one notification per run."""

import logging
from collections.abc import Callable
from datetime import datetime
from pathlib import Path

import httpx

from rainalert.config.loader import ConfigError, load_config, resolve_config_path
from rainalert.config.schema import JobConfig
from rainalert.ingest.open_meteo_client import DEFAULT_TIMEOUT, FetchError, OpenMeteoClient
from rainalert.models.common import utc_now
from rainalert.models.run import RunResult, RunStatus
from rainalert.notify.dispatcher import NotificationDispatcher
from rainalert.notify.ntfy_client import NtfyClient, SendError
from rainalert.signal.rain_evaluator import evaluate

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


class RainAlertJob:
    def __init__(
        self,
        config: JobConfig,
        http: httpx.Client,
        clock: Clock = utc_now,
        force: bool = False,
    ):
        self.config = config
        self.clock = clock
        self.force = force
        self.forecasts = OpenMeteoClient(http)
        self.dispatcher = NotificationDispatcher(config, NtfyClient(http, config.ntfy_server))

    def run(self) -> RunResult:
        """Execute one check: hour gate, fetch, evaluate, notify."""
        cfg = self.config

        current_hour = self.clock().astimezone(cfg.zone).hour
        if not self.force and not cfg.notifies_at(current_hour):
            logger.info(
                "Current hour %d not in ntfy_times %s, exiting",
                current_hour, sorted(cfg.ntfy_times),
            )
            return RunResult(status=RunStatus.SKIPPED)

        try:
            forecast = self.forecasts.fetch_forecast(cfg)
        except FetchError as e:
            logger.error("Error getting forecast: %s", e)
            result = RunResult(status=RunStatus.FAILED, error=e)
            try:
                self.dispatcher.send_error_alert(str(e))
                result.notified = True
            except SendError as send_err:
                logger.warning("Could not send error alert: %s", send_err)
                result.notification_error = str(send_err)
            return result

        for hour in forecast.hours:
            logger.debug(
                "%s: %.2f inches of precipitation",
                hour.time.isoformat(), hour.precipitation_in,
            )
        decision = evaluate(forecast)
        logger.info(
            "Rain expected: %s, max precipitation: %.2f inches over %d hours",
            decision.rain_expected, decision.peak_precipitation_in, len(forecast),
        )

        result = RunResult(status=RunStatus.DONE, decision=decision)
        try:
            if decision.rain_expected:
                self.dispatcher.send_rain_alert(decision.peak_precipitation_in)
                result.notified = True
            elif not cfg.ignore_no_rain:
                self.dispatcher.send_no_rain_alert()
                result.notified = True
            else:
                logger.info("No rain and ignore_no_rain set, not notifying")
        except SendError as e:
            # The forecast check itself succeeded
            logger.warning("Notification failed: %s", e)
            result.notification_error = str(e)
        return result


def run_job(
    config_path: str | Path | None = None,
    force: bool = False,
    clock: Clock = utc_now,
) -> RunResult:
    """Full invocation: load config, own the HTTP client, run the job."""
    path = config_path if config_path is not None else resolve_config_path()
    try:
        config = load_config(path)
    except ConfigError as e:
        logger.error("Error loading config %s: %s", path, e)
        return RunResult(status=RunStatus.FAILED, error=e)

    with httpx.Client(timeout=DEFAULT_TIMEOUT) as http:
        return RainAlertJob(config, http, clock=clock, force=force).run()
