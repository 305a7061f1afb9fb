"""Open-Meteo hourly precipitation client. One attempt per call, no retry."""

import logging
from datetime import datetime

import httpx
from pydantic import BaseModel, ValidationError

from rainalert.config.schema import JobConfig
from rainalert.models.forecast import HourlyForecast, HourlyPrecipitation

logger = logging.getLogger(__name__)

OPEN_METEO_BASE_URL = "https://api.open-meteo.com/v1/forecast"
DEFAULT_TIMEOUT = httpx.Timeout(60.0, connect=10.0)


class FetchError(Exception):
    """Raised when the forecast cannot be retrieved or decoded."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class _HourlyBlock(BaseModel):
    time: list[str]
    precipitation: list[float | None]


class _ForecastResponse(BaseModel):
    timezone: str = ""
    hourly: _HourlyBlock


class OpenMeteoClient:
    def __init__(self, http: httpx.Client, base_url: str = OPEN_METEO_BASE_URL):
        self.http = http
        self.base_url = base_url

    def build_url(self, cfg: JobConfig) -> str:
        """Build the forecast request URL.

        Hourly rather than daily precipitation, so a window starting at noon
        covers noon to noon instead of midnight to midnight.
        """
        params = {
            "latitude": f"{cfg.latitude:.6f}",
            "longitude": f"{cfg.longitude:.6f}",
            "hourly": "precipitation",
            "timezone": cfg.timezone,
            "precipitation_unit": "inch",
            "forecast_hours": str(cfg.forecast_range_hrs),
        }
        return str(httpx.URL(self.base_url, params=params))

    def fetch_forecast(self, cfg: JobConfig) -> HourlyForecast:
        url = self.build_url(cfg)
        try:
            resp = self.http.get(url)
        except httpx.TimeoutException as e:
            raise FetchError(f"Open-Meteo request timed out: {e}") from e
        except httpx.RequestError as e:
            raise FetchError(f"failed to make request to Open-Meteo: {e}") from e

        if not resp.is_success:
            logger.error("Open-Meteo %s returned %d", url, resp.status_code)
            raise FetchError(
                f"Open-Meteo API returned status {resp.status_code}", resp.status_code
            )

        try:
            data = _ForecastResponse.model_validate_json(resp.content)
        except ValidationError as e:
            raise FetchError(f"failed to decode response: {e}") from e

        forecast = _to_forecast(data, cfg)
        if len(forecast) != cfg.forecast_range_hrs:
            logger.warning(
                "Requested %d hours, Open-Meteo returned %d",
                cfg.forecast_range_hrs, len(forecast),
            )
        return forecast


def _to_forecast(data: _ForecastResponse, cfg: JobConfig) -> HourlyForecast:
    times = data.hourly.time
    amounts = data.hourly.precipitation
    if len(times) != len(amounts):
        logger.warning(
            "Mismatched hourly arrays: %d times, %d precipitation values",
            len(times), len(amounts),
        )

    hours: list[HourlyPrecipitation] = []
    for stamp, amount in zip(times, amounts):
        if amount is None:
            logger.debug("No precipitation value for %s, skipping", stamp)
            continue
        try:
            when = datetime.fromisoformat(stamp)
        except ValueError as e:
            raise FetchError(f"failed to decode response: bad timestamp {stamp!r}") from e
        # Negative amounts would be API noise
        hours.append(HourlyPrecipitation(time=when, precipitation_in=max(amount, 0.0)))

    return HourlyForecast(timezone=data.timezone or cfg.timezone, hours=tuple(hours))
