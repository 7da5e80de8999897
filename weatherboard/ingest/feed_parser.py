"""Decode the CWA `records.location[]` document into typed records."""

import logging
from typing import Any

from weatherboard.errors import DecodeError
from weatherboard.models.forecast import (
    ForecastEntry,
    RawLocationRecord,
    WeatherElement,
)

logger = logging.getLogger(__name__)


def parse_locations(raw: Any) -> list[RawLocationRecord]:
    """Extract every location record from a decoded feed body.

    The outer shape (records.location as a list of objects with a
    locationName) is mandatory. Inside a location, missing element lists,
    time lists and parameters are tolerated; the transformer applies
    defaults for them.
    """
    try:
        locations = raw["records"]["location"]
    except (KeyError, TypeError) as e:
        raise DecodeError(f"Feed is missing records.location: {e!r}") from e
    if not isinstance(locations, list):
        raise DecodeError(
            f"records.location must be a list, got {type(locations).__name__}"
        )

    records = [_parse_location(loc, i) for i, loc in enumerate(locations)]
    logger.debug("Parsed %d location records", len(records))
    return records


def _parse_location(loc: Any, index: int) -> RawLocationRecord:
    if not isinstance(loc, dict) or not isinstance(loc.get("locationName"), str):
        raise DecodeError(f"records.location[{index}] has no locationName")

    elements = tuple(
        WeatherElement(
            element_name=str(el.get("elementName", "")),
            time=tuple(_parse_entry(t) for t in _as_list(el.get("time"))),
        )
        for el in _as_list(loc.get("weatherElement"))
        if isinstance(el, dict)
    )
    return RawLocationRecord(
        location_name=loc["locationName"], weather_elements=elements
    )


def _parse_entry(t: Any) -> ForecastEntry:
    if not isinstance(t, dict):
        return ForecastEntry(start_time="", end_time="", parameter_name=None)
    parameter = t.get("parameter")
    name = parameter.get("parameterName") if isinstance(parameter, dict) else None
    return ForecastEntry(
        start_time=str(t.get("startTime", "")),
        end_time=str(t.get("endTime", "")),
        parameter_name=None if name is None else str(name),
    )


def _as_list(value: Any) -> list:
    return value if isinstance(value, list) else []
