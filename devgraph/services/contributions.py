import asyncio
import logging
from datetime import date
from typing import Optional

import httpx

from ..models import AggregationConfig, ContributionDataset, Platform
from .aggregator import merge_contributions
from .filters import DateRangeFilter, default_window
from .providers import DEFAULT_PROVIDERS, ContributionProvider

logger = logging.getLogger(__name__)


class ContributionService:
    """Fans out to every configured platform and merges what comes back.

    A platform that fails is logged and contributes nothing; the others are
    still merged and filtered.
    """

    def __init__(
        self,
        providers: Optional[dict[Platform, ContributionProvider]] = None,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self.providers = DEFAULT_PROVIDERS if providers is None else providers
        self.client = client

    async def get_contributions(
        self,
        config: AggregationConfig,
        today: Optional[date] = None,
    ) -> ContributionDataset:
        # 1. Launch every supported platform at once
        platforms: list[Platform] = []
        tasks = []
        for platform, credential in config.platforms():
            provider = self.providers.get(platform)
            if provider is None:
                logger.warning(f"No provider for {platform.value}; skipping")
                continue
            platforms.append(platform)
            tasks.append(provider.fetch_contributions(credential, client=self.client))

        # 2. Settle all of them; failures come back as values
        results = await asyncio.gather(*tasks, return_exceptions=True)

        datasets: list[ContributionDataset] = []
        for platform, result in zip(platforms, results):
            if isinstance(result, BaseException):
                logger.error(f"Failed to fetch {platform.value} contributions: {result}")
                continue
            datasets.append(result)

        # 3. Merge and apply the window
        merged = merge_contributions(*datasets)
        window = config.date_range or default_window(today)
        return DateRangeFilter.from_window(window).apply(merged)


async def get_contributions(config: AggregationConfig) -> ContributionDataset:
    """Fetch and merge contributions from all configured platforms."""
    return await ContributionService().get_contributions(config)
