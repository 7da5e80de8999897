"""Shared test fixtures."""

import json
import random
from datetime import datetime
from pathlib import Path

import pytest
import yaml

from weatherboard.models.forecast import (
    ForecastEntry,
    RawLocationRecord,
    WeatherElement,
)
from weatherboard.transform.estimation import EstimationEngine
from weatherboard.transform.transformer import ForecastTransformer

FIXTURE_DIR = Path(__file__).parent / "fixtures"


def _make_record(name: str, **elements: str) -> RawLocationRecord:
    """Build a one-window location record: make_record("臺北市", Wx="晴", MinT="22")."""
    return RawLocationRecord(
        location_name=name,
        weather_elements=tuple(
            WeatherElement(
                element_name=el,
                time=(ForecastEntry("", "", value),),
            )
            for el, value in elements.items()
        ),
    )


def _make_raw_location(name: str, **elements: str) -> dict:
    """Feed-shaped JSON for one location."""
    return {
        "locationName": name,
        "weatherElement": [
            {"elementName": el, "time": [{"parameter": {"parameterName": v}}]}
            for el, v in elements.items()
        ],
    }


@pytest.fixture
def cwa_forecast() -> dict:
    with open(FIXTURE_DIR / "cwa_forecast.json", encoding="utf-8") as f:
        return json.load(f)


@pytest.fixture
def seeded_estimator() -> EstimationEngine:
    return EstimationEngine(random.Random(1234))


@pytest.fixture
def transformer(seeded_estimator: EstimationEngine) -> ForecastTransformer:
    return ForecastTransformer(
        estimator=seeded_estimator,
        clock=lambda: datetime(2026, 10, 17, 14, 5),
    )


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    data = {
        "feed": {"api_key": "CWA-TEST-KEY", "timeout_seconds": 5.0},
        "schedule": {"refresh_interval_minutes": 15},
    }
    path = tmp_path / "test_config.yaml"
    with open(path, "w", encoding="utf-8") as f:
        yaml.dump(data, f)
    return path


@pytest.fixture
def make_record():
    return _make_record


@pytest.fixture
def make_raw_location():
    return _make_raw_location
