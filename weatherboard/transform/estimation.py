"""Humidity and wind speed estimates for a feed that reports neither.

Values are a base chosen from the condition text plus bounded random
jitter. The random source is injected so callers can seed it.
"""

import math
import random

from weatherboard.transform.numbers import parse_leading_int

RAIN_MARKER = "雨"
CLOUD_MARKER = "雲"

HUMIDITY_CEILING = 95
HUMIDITY_BASE = {"rain": 75, "cloud": 65, "clear": 55}
HUMIDITY_POP_FACTOR = 0.2
HUMIDITY_JITTER = 10

WIND_BASE = {"rain": 12, "cloud": 8, "clear": 6}
WIND_JITTER = 8


def _sky(condition_text: str) -> str:
    if RAIN_MARKER in condition_text:
        return "rain"
    if CLOUD_MARKER in condition_text:
        return "cloud"
    return "clear"


class EstimationEngine:
    def __init__(self, rng: random.Random | None = None):
        self.rng = rng or random.Random()

    def _jitter(self, span: int) -> int:
        return math.floor(self.rng.random() * span)

    def estimate_humidity(self, condition_text: str, rain_probability: str) -> int:
        """Relative humidity in percent, capped at 95.

        Raises ValueError if rain_probability is not numeric.
        """
        base = HUMIDITY_BASE[_sky(condition_text)]
        adjust = math.floor(parse_leading_int(rain_probability) * HUMIDITY_POP_FACTOR)
        return min(HUMIDITY_CEILING, base + adjust + self._jitter(HUMIDITY_JITTER))

    def estimate_wind_speed(self, condition_text: str) -> int:
        return WIND_BASE[_sky(condition_text)] + self._jitter(WIND_JITTER)
