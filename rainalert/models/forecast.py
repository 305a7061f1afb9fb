"""Open-Meteo hourly forecast models."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class HourlyPrecipitation:
    time: datetime  # local time in the requested timezone
    precipitation_in: float


@dataclass(frozen=True)
class HourlyForecast:
    timezone: str
    hours: tuple[HourlyPrecipitation, ...] = ()

    @property
    def amounts(self) -> list[float]:
        return [h.precipitation_in for h in self.hours]

    def __len__(self) -> int:
        return len(self.hours)


@dataclass(frozen=True)
class ForecastDecision:
    rain_expected: bool
    peak_precipitation_in: float
