"""Rain decision rule over an hourly precipitation series."""

from rainalert.models.forecast import ForecastDecision, HourlyForecast

RAIN_THRESHOLD_IN = 0.1


def evaluate(forecast: HourlyForecast) -> ForecastDecision:
    """Decide whether rain is expected anywhere in the forecast window.

    Rain is expected if any single hour reaches RAIN_THRESHOLD_IN (inclusive).

    Args:
        forecast: Hourly precipitation in inches, possibly empty.

    Returns:
        The decision and the peak hourly amount (0.0 for an empty series).
    """
    peak = max(forecast.amounts, default=0.0)
    return ForecastDecision(
        rain_expected=peak >= RAIN_THRESHOLD_IN,
        peak_precipitation_in=peak,
    )
