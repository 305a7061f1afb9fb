"""Push notification models."""

from dataclasses import dataclass
from enum import IntEnum


class Priority(IntEnum):
    """ntfy priority scale, 5 being the most urgent."""

    MIN = 1
    LOW = 2
    DEFAULT = 3
    HIGH = 4
    MAX = 5


@dataclass(frozen=True)
class NotificationMessage:
    title: str
    priority: Priority
    body: str
