"""Periodic refresh: one cycle on start, then one per interval."""

import asyncio
import logging

from weatherboard.service.weather_service import WeatherService

logger = logging.getLogger(__name__)


class RefreshScheduler:
    def __init__(
        self,
        service: WeatherService,
        interval_seconds: float,
        refresh_on_start: bool = True,
    ):
        self.service = service
        self.interval_seconds = interval_seconds
        self.refresh_on_start = refresh_on_start
        self._task: asyncio.Task | None = None
        self.cycles = 0

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> None:
        if self.running:
            return
        self._task = asyncio.get_running_loop().create_task(self._loop())
        logger.info(
            "Refresh scheduler started, interval=%.0fs", self.interval_seconds
        )

    async def stop(self) -> None:
        """Stop the loop and cancel any refresh it left running."""
        if self._task is not None:
            self._task.cancel()
            try:
                await self._task
            except asyncio.CancelledError:
                pass
            self._task = None
            logger.info("Refresh scheduler stopped after %d cycles", self.cycles)
        await self.service.aclose()

    async def _loop(self) -> None:
        if self.refresh_on_start:
            await self._tick()
        while True:
            await asyncio.sleep(self.interval_seconds)
            await self._tick()

    async def _tick(self) -> None:
        self.cycles += 1
        await self.service.refresh()
