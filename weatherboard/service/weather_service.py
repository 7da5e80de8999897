"""Weather service: owns the city list and drives fetch → transform → order."""

import asyncio
import logging
import time
import uuid
from collections.abc import Callable
from dataclasses import dataclass, field, replace

from weatherboard.ingest.cwa_client import CwaClient
from weatherboard.ingest.feed_parser import parse_locations
from weatherboard.models.common import (
    ALL_REGIONS,
    Region,
    ServiceStatus,
    utc_now_iso,
)
from weatherboard.models.forecast import CitySummary
from weatherboard.models.reporting import RefreshSummary
from weatherboard.reporting.summarizer import RefreshSummarizer
from weatherboard.transform.ordering import order
from weatherboard.transform.regions import canonical_order
from weatherboard.transform.transformer import ForecastTransformer

logger = logging.getLogger(__name__)

REGION_FILTERS = (ALL_REGIONS, *(r.value for r in Region))


@dataclass(frozen=True)
class WeatherState:
    status: ServiceStatus = ServiceStatus.IDLE
    cities: tuple[CitySummary, ...] = field(default_factory=tuple)
    error: str | None = None
    selected_region: str = ALL_REGIONS
    updated_at: str | None = None

    @property
    def is_loading(self) -> bool:
        return self.status == ServiceStatus.LOADING


StateListener = Callable[[WeatherState], None]


def filtered_view(
    cities: tuple[CitySummary, ...], region_filter: str
) -> tuple[CitySummary, ...]:
    """Cities in the given region, or all of them for "all". Order is kept."""
    if region_filter == ALL_REGIONS:
        return cities
    return tuple(c for c in cities if c.region == region_filter)


def _check_region(region: str) -> str:
    if region not in REGION_FILTERS:
        raise ValueError(
            f"Unknown region {region!r}; expected one of {', '.join(REGION_FILTERS)}"
        )
    return region


class WeatherService:
    """Single-flight refresh orchestrator.

    Overlapping refresh() calls share the cycle already in flight instead
    of starting another fetch. A failed cycle keeps the previous cities
    and records the error message.
    """

    def __init__(
        self,
        client: CwaClient,
        transformer: ForecastTransformer | None = None,
        default_region: str = ALL_REGIONS,
    ):
        self.client = client
        self.transformer = transformer or ForecastTransformer()
        self.state = WeatherState(selected_region=_check_region(default_region))
        self.last_summary: RefreshSummary | None = None
        self._listeners: list[StateListener] = []
        self._inflight: asyncio.Task | None = None

    # ── Outbound view ─────────────────────────────────────────

    @property
    def cities(self) -> tuple[CitySummary, ...]:
        return self.state.cities

    @property
    def filtered_cities(self) -> tuple[CitySummary, ...]:
        return filtered_view(self.state.cities, self.state.selected_region)

    @property
    def is_loading(self) -> bool:
        return self.state.is_loading

    @property
    def error(self) -> str | None:
        return self.state.error

    @property
    def selected_region(self) -> str:
        return self.state.selected_region

    @selected_region.setter
    def selected_region(self, region: str) -> None:
        self._publish(selected_region=_check_region(region))

    def filtered_view(self, region_filter: str) -> tuple[CitySummary, ...]:
        return filtered_view(self.state.cities, _check_region(region_filter))

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """Register a state listener. Returns a function that unregisters it."""
        self._listeners.append(listener)
        return lambda: self._listeners.remove(listener)

    # ── Refresh cycle ─────────────────────────────────────────

    async def refresh(self) -> WeatherState:
        if self._inflight is not None and not self._inflight.done():
            logger.info("Refresh already in flight, joining it")
        else:
            self._inflight = asyncio.ensure_future(self._run_cycle())
        return await asyncio.shield(self._inflight)

    async def refresh_weather(self) -> WeatherState:
        """Manual refresh trigger."""
        return await self.refresh()

    async def aclose(self) -> None:
        """Cancel the cycle in flight, if any, and wait for it to unwind.

        The state goes back to what it was before that cycle started.
        """
        task = self._inflight
        if task is None or task.done():
            return
        task.cancel()
        try:
            await task
        except asyncio.CancelledError:
            pass
        logger.info("Weather service closed with a refresh in flight")

    async def _run_cycle(self) -> WeatherState:
        start = time.monotonic()
        summarizer = RefreshSummarizer(str(uuid.uuid4()))
        previous = self.state
        self._publish(status=ServiceStatus.LOADING, error=None)

        try:
            raw = await self.client.get_forecast()
            records = parse_locations(raw)
            summarizer.record_received(len(records))
            result = self.transformer.transform_all(records)
            cities = order(result.cities, canonical_order())
        except asyncio.CancelledError:
            logger.info("Refresh cancelled")
            summarizer.record_error("cancelled")
            self._publish(status=previous.status, error=previous.error)
            raise
        except Exception as e:
            logger.exception("取得天氣資料錯誤")
            summarizer.record_error(str(e))
            self._publish(status=ServiceStatus.ERROR, error=str(e))
        else:
            summarizer.record_cities(cities, result.skipped)
            self._publish(
                status=ServiceStatus.READY,
                cities=tuple(cities),
                updated_at=utc_now_iso(),
            )
            logger.info(
                "Refresh OK: %d cities (%d skipped)",
                len(cities), len(result.skipped),
            )
        finally:
            summarizer.record_duration(time.monotonic() - start)
            self.last_summary = summarizer.finalize()

        return self.state

    def _publish(self, **changes) -> None:
        self.state = replace(self.state, **changes)
        for listener in list(self._listeners):
            try:
                listener(self.state)
            except Exception:
                logger.exception("State listener %r failed", listener)
