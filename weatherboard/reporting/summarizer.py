"""Refresh summarizer: aggregates one cycle's outputs into a RefreshSummary."""

from collections import Counter

from weatherboard.models.forecast import CitySummary
from weatherboard.models.reporting import RefreshSummary


class RefreshSummarizer:
    def __init__(self, cycle_id: str):
        self.summary = RefreshSummary(cycle_id=cycle_id)

    def record_received(self, locations: int) -> None:
        self.summary.locations_received = locations

    def record_cities(self, cities: list[CitySummary], skipped: list[str]) -> None:
        self.summary.status = "ready"
        self.summary.cities_published = len(cities)
        self.summary.region_counts = dict(Counter(c.region.value for c in cities))
        self.summary.skipped = list(skipped)

    def record_error(self, error: str) -> None:
        self.summary.status = "error"
        self.summary.error = error

    def record_duration(self, seconds: float) -> None:
        self.summary.duration_seconds = seconds

    def finalize(self) -> RefreshSummary:
        return self.summary
