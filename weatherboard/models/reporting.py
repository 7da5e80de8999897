"""Refresh cycle reporting models."""

from dataclasses import dataclass, field


@dataclass
class RefreshSummary:
    cycle_id: str
    status: str = "pending"
    locations_received: int = 0
    cities_published: int = 0
    region_counts: dict[str, int] = field(default_factory=dict)
    skipped: list[str] = field(default_factory=list)
    duration_seconds: float = 0.0
    error: str | None = None
