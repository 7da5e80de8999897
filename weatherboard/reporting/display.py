"""Display lookups per condition category: icon, CSS class, label."""

from weatherboard.models.common import Condition

ICONS = {
    Condition.SUNNY: "fas fa-sun",
    Condition.CLOUDY: "fas fa-cloud",
    Condition.RAINY: "fas fa-cloud-rain",
}

ICON_CLASSES = {
    Condition.SUNNY: "sunny",
    Condition.CLOUDY: "cloudy",
    Condition.RAINY: "rainy",
}

LABELS = {
    Condition.SUNNY: "晴天",
    Condition.CLOUDY: "多雲",
    Condition.RAINY: "雨天",
}

REGION_LABELS = {
    "all": "全部",
    "north": "北部",
    "central": "中部",
    "south": "南部",
    "east": "東部",
    "outlying": "離島",
    "other": "其他",
}


def weather_icon(condition: str) -> str:
    return ICONS.get(condition, ICONS[Condition.SUNNY])


def weather_icon_class(condition: str) -> str:
    return ICON_CLASSES.get(condition, ICON_CLASSES[Condition.SUNNY])


def condition_label(condition: str) -> str:
    return LABELS.get(condition, LABELS[Condition.SUNNY])
