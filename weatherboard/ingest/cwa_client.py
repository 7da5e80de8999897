"""CWA open-data forecast client."""

import asyncio
import logging

import httpx

from weatherboard.config.defaults import (
    CWA_BASE_URL,
    CWA_DATASET_ID,
    DEFAULT_USER_AGENT,
)
from weatherboard.config.schema import FeedConfig
from weatherboard.errors import DecodeError, TransportError

logger = logging.getLogger(__name__)

RETRYABLE_STATUS = (429, 503)


class CwaClient:
    def __init__(
        self,
        api_key: str,
        base_url: str = CWA_BASE_URL,
        dataset_id: str = CWA_DATASET_ID,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = 30.0,
        max_retries: int = 0,
        retry_base_delay: float = 5.0,
    ):
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.dataset_id = dataset_id
        self.user_agent = user_agent
        self.timeout = timeout
        self.max_retries = max_retries
        self.retry_base_delay = retry_base_delay

    @classmethod
    def from_config(cls, feed: FeedConfig) -> "CwaClient":
        return cls(
            api_key=feed.api_key,
            base_url=feed.base_url,
            dataset_id=feed.dataset_id,
            user_agent=feed.user_agent,
            timeout=feed.timeout_seconds,
            max_retries=feed.max_retries,
            retry_base_delay=feed.retry_base_delay,
        )

    @property
    def url(self) -> str:
        return f"{self.base_url}/api/v1/rest/datastore/{self.dataset_id}"

    async def get_forecast(self) -> dict:
        """Fetch the county/city forecast document.

        Any non-2xx status raises TransportError. With max_retries > 0,
        429/503 responses and network errors are retried with exponential
        backoff.
        """
        params = {"Authorization": self.api_key}
        headers = {"User-Agent": self.user_agent, "Accept": "application/json"}

        last_error: httpx.RequestError | None = None
        async with httpx.AsyncClient(timeout=self.timeout) as client:
            for attempt in range(self.max_retries + 1):
                try:
                    resp = await client.get(self.url, params=params, headers=headers)
                except httpx.RequestError as e:
                    last_error = e
                    if attempt < self.max_retries:
                        delay = self.retry_base_delay * (2**attempt)
                        logger.warning(
                            "CWA request error, retrying in %.1fs: %s", delay, e
                        )
                        await asyncio.sleep(delay)
                        continue
                    break

                if resp.status_code in RETRYABLE_STATUS and attempt < self.max_retries:
                    delay = self.retry_base_delay * (2**attempt)
                    logger.warning(
                        "CWA %s returned %d, retrying in %.1fs (attempt %d/%d)",
                        self.dataset_id, resp.status_code, delay,
                        attempt + 1, self.max_retries,
                    )
                    await asyncio.sleep(delay)
                    continue

                if not resp.is_success:
                    raise TransportError(
                        f"無法取得天氣資料 (HTTP {resp.status_code})",
                        status_code=resp.status_code,
                    )

                try:
                    return resp.json()
                except ValueError as e:
                    raise DecodeError(f"Feed body is not valid JSON: {e}") from e

        assert last_error is not None
        raise TransportError(f"無法取得天氣資料: {last_error}") from last_error
