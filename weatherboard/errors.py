"""Error types raised by the fetch and transform stages."""


class WeatherboardError(Exception):
    """Base class for all weatherboard failures."""


class TransportError(WeatherboardError):
    """Feed request failed: network error or non-2xx status."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class DecodeError(WeatherboardError):
    """Feed body was not JSON or did not have the expected shape."""


class MalformedRecordError(WeatherboardError):
    """A location record carried a value that could not be parsed."""

    def __init__(self, location_name: str, field: str, value: str):
        super().__init__(
            f"{location_name}: cannot parse {field}={value!r} as an integer"
        )
        self.location_name = location_name
        self.field = field
        self.value = value
