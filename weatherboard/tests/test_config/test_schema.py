"""Tests for config schema validation."""

import pytest
from pydantic import ValidationError

from weatherboard.config.schema import (
    AppConfig,
    DisplayConfig,
    FeedConfig,
    ScheduleConfig,
)


class TestAppConfig:
    def test_defaults(self):
        config = AppConfig()
        assert config.feed.base_url == "https://opendata.cwa.gov.tw"
        assert config.feed.max_retries == 0
        assert config.schedule.refresh_interval_minutes == 30
        assert config.schedule.refresh_on_start is True
        assert config.dashboard.port == 8777

    def test_extra_fields_rejected(self):
        with pytest.raises(ValidationError, match="Extra inputs are not permitted"):
            AppConfig(unknown_field="bad")

    def test_nested_extra_fields_rejected(self):
        with pytest.raises(ValidationError, match="Extra inputs are not permitted"):
            FeedConfig(api_key="k", bogus=True)


class TestScheduleConfig:
    def test_interval_must_be_positive(self):
        with pytest.raises(ValidationError):
            ScheduleConfig(refresh_interval_minutes=0)


class TestFeedConfig:
    def test_timeout_must_be_positive(self):
        with pytest.raises(ValidationError):
            FeedConfig(timeout_seconds=0)

    def test_retry_bounds(self):
        with pytest.raises(ValidationError):
            FeedConfig(max_retries=-1)
        with pytest.raises(ValidationError):
            FeedConfig(max_retries=10)


class TestDisplayConfig:
    @pytest.mark.parametrize("region", ["all", "north", "outlying", "other"])
    def test_known_regions(self, region: str):
        assert DisplayConfig(default_region=region).default_region == region

    def test_unknown_region(self):
        with pytest.raises(ValidationError, match="unknown region"):
            DisplayConfig(default_region="west")
