"""Sort city summaries into catalog display order."""

from collections.abc import Iterable, Sequence

from weatherboard.models.forecast import CitySummary


def order(
    cities: Iterable[CitySummary], canonical_order: Sequence[str]
) -> list[CitySummary]:
    """Stable sort by position in canonical_order; unlisted cities go last."""
    index = {name: i for i, name in enumerate(canonical_order)}
    missing = len(index)
    return sorted(cities, key=lambda c: index.get(c.name, missing))
