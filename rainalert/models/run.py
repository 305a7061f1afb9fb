"""Outcome of a single job invocation."""

from dataclasses import dataclass
from enum import StrEnum

from rainalert.models.forecast import ForecastDecision


class RunStatus(StrEnum):
    DONE = "done"
    SKIPPED = "skipped"  # current hour is not a notification hour
    FAILED = "failed"


@dataclass
class RunResult:
    status: RunStatus
    error: Exception | None = None
    decision: ForecastDecision | None = None
    notified: bool = False
    notification_error: str | None = None

    @property
    def ok(self) -> bool:
        return self.status != RunStatus.FAILED
