"""Common types and helpers shared across models."""

from datetime import UTC, datetime
from enum import StrEnum


class Region(StrEnum):
    NORTH = "north"
    CENTRAL = "central"
    SOUTH = "south"
    EAST = "east"
    OUTLYING = "outlying"
    OTHER = "other"


class Condition(StrEnum):
    SUNNY = "sunny"
    CLOUDY = "cloudy"
    RAINY = "rainy"


class ServiceStatus(StrEnum):
    IDLE = "idle"
    LOADING = "loading"
    READY = "ready"
    ERROR = "error"


ALL_REGIONS = "all"


def utc_now_iso() -> str:
    return datetime.now(UTC).isoformat()


def local_now() -> datetime:
    return datetime.now().astimezone()
