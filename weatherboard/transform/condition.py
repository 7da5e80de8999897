"""Free-text weather description → condition category."""

from weatherboard.models.common import Condition

# Checked in order; the first group with a marker present wins.
RAIN_MARKERS = ("雨", "雷", "陣雨")
CLOUD_MARKERS = ("雲", "陰")
CLEAR_MARKERS = ("晴", "高溫")

_PRECEDENCE: tuple[tuple[tuple[str, ...], Condition], ...] = (
    (RAIN_MARKERS, Condition.RAINY),
    (CLOUD_MARKERS, Condition.CLOUDY),
    (CLEAR_MARKERS, Condition.SUNNY),
)


def classify(text: str) -> Condition:
    """Simplify a CWA Wx description such as "多雲時陣雨" to one category.

    Text with no known marker falls back to cloudy.
    """
    for markers, condition in _PRECEDENCE:
        if any(m in text for m in markers):
            return condition
    return Condition.CLOUDY
