"""Forecast feed records and the per-city display model."""

from dataclasses import dataclass

from weatherboard.models.common import Condition, Region


@dataclass(frozen=True)
class ForecastEntry:
    start_time: str
    end_time: str
    parameter_name: str | None


@dataclass(frozen=True)
class WeatherElement:
    element_name: str
    time: tuple[ForecastEntry, ...]


@dataclass(frozen=True)
class RawLocationRecord:
    location_name: str
    weather_elements: tuple[WeatherElement, ...]

    def element(self, name: str) -> WeatherElement | None:
        for el in self.weather_elements:
            if el.element_name == name:
                return el
        return None


@dataclass(frozen=True)
class CitySummary:
    name: str
    region: Region
    temperature: int
    condition: Condition
    humidity: int
    wind_speed: int
    update_time: str  # HH:MM, display only
    rain_probability: str
    comfort: str
    min_temp: str
    max_temp: str
    forecast_start: str = ""  # window of the first forecast entry
    forecast_end: str = ""
