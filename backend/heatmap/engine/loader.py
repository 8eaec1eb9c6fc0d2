"""
Dataset loader.

Fetches the monthly temperature variance document over HTTP and validates it
into a Dataset. Any failure (network, HTTP status, JSON decoding, unexpected
shape, no records) surfaces as DataUnavailable; there is no retry.
"""

import asyncio
import json
import logging
from typing import Any, Optional

import aiohttp
from pydantic import ValidationError

from heatmap.config import DATA_URL, HTTP_USER_AGENT
from heatmap.models.dataset import Dataset

logger = logging.getLogger(__name__)


class DataUnavailable(ValueError):
    """The dataset could not be loaded or holds nothing to draw."""


def parse_dataset(payload: Any) -> Dataset:
    """
    Validate a decoded JSON document into a Dataset.

    Raises DataUnavailable if the document does not have the
    {baseTemperature, monthlyVariance: [...]} shape or has no records.
    """
    if not isinstance(payload, dict):
        raise DataUnavailable(
            f"Expected a JSON object, got {type(payload).__name__}"
        )

    try:
        dataset = Dataset.model_validate(payload)
    except ValidationError as exc:
        raise DataUnavailable(f"Malformed dataset: {exc.error_count()} validation error(s)") from exc

    if not dataset.records:
        raise DataUnavailable("Dataset has no monthly variance records")

    return dataset


class HeatMapDataClient:
    """Fetch the variance dataset (no API key)."""

    def __init__(self, session: Optional[aiohttp.ClientSession] = None) -> None:
        self._session = session
        self._owns_session = session is None

    async def _ensure_session(self) -> aiohttp.ClientSession:
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(
                headers={"User-Agent": HTTP_USER_AGENT}
            )
            self._owns_session = True
        return self._session

    async def close(self) -> None:
        if self._owns_session and self._session and not self._session.closed:
            await self._session.close()

    async def fetch_dataset(self, url: str = DATA_URL) -> Dataset:
        """GET the dataset once and parse it."""
        session = await self._ensure_session()

        try:
            async with session.get(url) as resp:
                if resp.status != 200:
                    logger.warning("Dataset fetch failed for %s: HTTP %d", url, resp.status)
                    raise DataUnavailable(f"HTTP {resp.status} from {url}")
                # raw.githubusercontent.com serves JSON as text/plain
                payload = await resp.json(content_type=None)
        except (aiohttp.ClientError, asyncio.TimeoutError) as exc:
            logger.warning("Dataset fetch error for %s: %s", url, exc)
            raise DataUnavailable(f"Could not fetch {url}: {exc}") from exc
        except json.JSONDecodeError as exc:
            logger.warning("Dataset at %s is not valid JSON: %s", url, exc)
            raise DataUnavailable(f"Invalid JSON from {url}") from exc

        dataset = parse_dataset(payload)
        logger.info(
            "Loaded %d variance records (base %.3f°C) from %s",
            len(dataset.records), dataset.base_temperature, url,
        )
        return dataset


async def fetch_dataset(url: str = DATA_URL) -> Dataset:
    """Fetch the dataset with a short-lived client session."""
    client = HeatMapDataClient()
    try:
        return await client.fetch_dataset(url)
    finally:
        await client.close()
