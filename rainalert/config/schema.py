"""Pydantic v2 job configuration schema with strict validation."""

from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import BaseModel, Field, StrictInt, field_serializer, field_validator

MAX_FORECAST_RANGE_HRS = 16 * 24
DEFAULT_NTFY_SERVER = "https://ntfy.sh"


class JobConfig(BaseModel):
    model_config = {"extra": "forbid", "frozen": True}

    latitude: float = Field(ge=-90.0, le=90.0)
    longitude: float = Field(ge=-180.0, le=180.0)
    location: str = ""
    timezone: str
    forecast_range_hrs: int = Field(ge=0, le=MAX_FORECAST_RANGE_HRS)
    ntfy_times: frozenset[StrictInt]
    ntfy_topic: str
    ignore_no_rain: bool = False
    ntfy_server: str = DEFAULT_NTFY_SERVER

    @field_validator("timezone")
    @classmethod
    def _known_timezone(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("timezone must be set")
        try:
            ZoneInfo(value)
        except (ZoneInfoNotFoundError, ValueError, OSError) as e:
            raise ValueError(f"invalid timezone {value!r}") from e
        return value

    @field_validator("ntfy_times", mode="before")
    @classmethod
    def _hours_as_list(cls, value):
        # A single hour is shorthand for a one-element list
        if isinstance(value, bool):
            raise ValueError("ntfy_times must be an int or a list of ints")
        if isinstance(value, int):
            return [value]
        return value

    @field_validator("ntfy_times")
    @classmethod
    def _hours_in_day(cls, value: frozenset[int]) -> frozenset[int]:
        if not value:
            raise ValueError("ntfy_times must not be empty")
        bad = sorted(h for h in value if h < 0 or h > 23)
        if bad:
            raise ValueError(f"ntfy_times must be between 0 and 23, got {bad}")
        return value

    @field_validator("ntfy_topic")
    @classmethod
    def _topic_set(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("ntfy_topic must be set")
        return value

    @field_validator("ntfy_server")
    @classmethod
    def _server_url(cls, value: str) -> str:
        if not value.startswith(("http://", "https://")):
            raise ValueError("ntfy_server must be an http(s) URL")
        return value.rstrip("/")

    @field_serializer("ntfy_times")
    def _sorted_hours(self, value: frozenset[int]) -> list[int]:
        return sorted(value)

    @property
    def zone(self) -> ZoneInfo:
        return ZoneInfo(self.timezone)

    @property
    def display_name(self) -> str:
        """Location label for messages, falling back to coordinates."""
        if self.location:
            return self.location
        return f"{self.latitude:.4f}, {self.longitude:.4f}"

    def notifies_at(self, hour: int) -> bool:
        return hour in self.ntfy_times
