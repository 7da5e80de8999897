"""Pydantic v2 configuration schema with strict validation."""

from pydantic import BaseModel, Field, field_validator

from weatherboard.config.defaults import (
    CWA_BASE_URL,
    CWA_DATASET_ID,
    DEFAULT_USER_AGENT,
)
from weatherboard.models.common import ALL_REGIONS, Region


class FeedConfig(BaseModel):
    model_config = {"extra": "forbid"}

    base_url: str = CWA_BASE_URL
    dataset_id: str = CWA_DATASET_ID
    api_key: str = ""
    user_agent: str = DEFAULT_USER_AGENT
    timeout_seconds: float = Field(default=30.0, gt=0.0)
    max_retries: int = Field(default=0, ge=0, le=5)
    retry_base_delay: float = Field(default=5.0, ge=0.0)


class ScheduleConfig(BaseModel):
    model_config = {"extra": "forbid"}

    refresh_interval_minutes: int = Field(default=30, ge=1)
    refresh_on_start: bool = True


class DisplayConfig(BaseModel):
    model_config = {"extra": "forbid"}

    default_region: str = ALL_REGIONS

    @field_validator("default_region")
    @classmethod
    def _known_region(cls, v: str) -> str:
        if v != ALL_REGIONS and v not in {r.value for r in Region}:
            raise ValueError(f"unknown region: {v}")
        return v


class DashboardConfig(BaseModel):
    model_config = {"extra": "forbid"}

    host: str = "127.0.0.1"
    port: int = Field(default=8777, ge=1, le=65535)


class AppConfig(BaseModel):
    model_config = {"extra": "forbid"}

    feed: FeedConfig = FeedConfig()
    schedule: ScheduleConfig = ScheduleConfig()
    display: DisplayConfig = DisplayConfig()
    dashboard: DashboardConfig = DashboardConfig()
