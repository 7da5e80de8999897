"""Static city → region catalog. Insertion order is the display order."""

from types import MappingProxyType

from weatherboard.models.common import Region

REGION_CATALOG = MappingProxyType({
    "基隆市": Region.NORTH,
    "臺北市": Region.NORTH,
    "新北市": Region.NORTH,
    "桃園市": Region.NORTH,
    "新竹縣": Region.NORTH,
    "新竹市": Region.NORTH,
    "苗栗縣": Region.CENTRAL,
    "臺中市": Region.CENTRAL,
    "彰化縣": Region.CENTRAL,
    "南投縣": Region.CENTRAL,
    "雲林縣": Region.CENTRAL,
    "嘉義市": Region.SOUTH,
    "嘉義縣": Region.SOUTH,
    "臺南市": Region.SOUTH,
    "高雄市": Region.SOUTH,
    "屏東縣": Region.SOUTH,
    "宜蘭縣": Region.EAST,
    "花蓮縣": Region.EAST,
    "臺東縣": Region.EAST,
    "澎湖縣": Region.OUTLYING,
    "金門縣": Region.OUTLYING,
    "連江縣": Region.OUTLYING,
})

_CANONICAL_ORDER: tuple[str, ...] = tuple(REGION_CATALOG)


def region_of(name: str) -> Region:
    """Region for a city name, Region.OTHER when the name is not catalogued."""
    return REGION_CATALOG.get(name, Region.OTHER)


def canonical_order() -> tuple[str, ...]:
    return _CANONICAL_ORDER
