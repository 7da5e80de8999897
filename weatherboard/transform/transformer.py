"""Forecast transformer: raw CWA location records → per-city summaries."""

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from datetime import datetime

from weatherboard.errors import MalformedRecordError
from weatherboard.models.common import local_now
from weatherboard.models.forecast import CitySummary, RawLocationRecord
from weatherboard.transform.condition import classify
from weatherboard.transform.estimation import EstimationEngine
from weatherboard.transform.numbers import parse_leading_int, round_half_up
from weatherboard.transform.regions import region_of

logger = logging.getLogger(__name__)

# Element name → fallback used when the element, its first time entry or
# its parameter value is absent (or empty).
ELEMENT_DEFAULTS: dict[str, str] = {
    "Wx": "晴天",    # weather phenomenon
    "PoP": "0",      # probability of precipitation, %
    "MinT": "20",    # °C
    "MaxT": "30",    # °C
    "CI": "舒適",    # comfort index
}


@dataclass
class TransformResult:
    cities: list[CitySummary] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)


def first_value(record: RawLocationRecord, element_name: str) -> str:
    """Parameter of the nearest forecast window, or the element's default."""
    element = record.element(element_name)
    if element is not None and element.time:
        value = element.time[0].parameter_name
        if value:
            return value
    return ELEMENT_DEFAULTS[element_name]


def forecast_window(record: RawLocationRecord) -> tuple[str, str]:
    """Start and end of the nearest forecast window, taken from Wx when present."""
    candidates = [record.element("Wx"), *record.weather_elements]
    for element in candidates:
        if element is not None and element.time:
            entry = element.time[0]
            return entry.start_time, entry.end_time
    return "", ""


class ForecastTransformer:
    def __init__(
        self,
        estimator: EstimationEngine | None = None,
        clock: Callable[[], datetime] = local_now,
    ):
        self.estimator = estimator or EstimationEngine()
        self.clock = clock

    def transform(self, raw_locations: Iterable[RawLocationRecord]) -> list[CitySummary]:
        return self.transform_all(raw_locations).cities

    def transform_all(self, raw_locations: Iterable[RawLocationRecord]) -> TransformResult:
        """Build one summary per record, rejecting records with bad numbers."""
        result = TransformResult()
        update_time = self.clock().strftime("%H:%M")
        for record in raw_locations:
            logger.debug("Location record: %s", record)
            try:
                result.cities.append(self.summarize(record, update_time))
            except MalformedRecordError as e:
                logger.warning("Skipping location: %s", e)
                result.skipped.append(record.location_name)
        return result

    def summarize(self, record: RawLocationRecord, update_time: str) -> CitySummary:
        name = record.location_name
        condition_text = first_value(record, "Wx")
        pop = first_value(record, "PoP")
        min_temp = first_value(record, "MinT")
        max_temp = first_value(record, "MaxT")
        comfort = first_value(record, "CI")

        low = _parse_field(name, "MinT", min_temp)
        high = _parse_field(name, "MaxT", max_temp)
        _parse_field(name, "PoP", pop)
        start, end = forecast_window(record)

        return CitySummary(
            name=name,
            region=region_of(name),
            temperature=round_half_up((low + high) / 2),
            condition=classify(condition_text),
            humidity=self.estimator.estimate_humidity(condition_text, pop),
            wind_speed=self.estimator.estimate_wind_speed(condition_text),
            update_time=update_time,
            rain_probability=pop,
            comfort=comfort,
            min_temp=min_temp,
            max_temp=max_temp,
            forecast_start=start,
            forecast_end=end,
        )


def _parse_field(location_name: str, field_name: str, value: str) -> int:
    try:
        return parse_leading_int(value)
    except ValueError as e:
        raise MalformedRecordError(location_name, field_name, value) from e
