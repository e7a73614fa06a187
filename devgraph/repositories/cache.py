import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Awaitable, Callable, Optional

from ..models import AggregationConfig, ContributionDataset

logger = logging.getLogger(__name__)

CACHE_TTL = timedelta(minutes=30)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _copy(dataset: ContributionDataset) -> ContributionDataset:
    return [entry.model_copy() for entry in dataset]


@dataclass
class CacheEntry:
    result: ContributionDataset
    produced_at: datetime


class ContributionCache:
    """In-memory, per-process memo of aggregated results keyed by config.

    Entries are never evicted, only overwritten by a fresh fetch once stale.
    There is no in-flight de-duplication: concurrent misses on one key each
    fetch, and the last one to finish wins.
    """

    def __init__(
        self,
        fetch: Callable[[AggregationConfig], Awaitable[ContributionDataset]],
        ttl: timedelta = CACHE_TTL,
        clock: Callable[[], datetime] = _utcnow,
    ):
        self.fetch = fetch
        self.ttl = ttl
        self.clock = clock
        self._entries: dict[str, CacheEntry] = {}

    def __len__(self) -> int:
        return len(self._entries)

    def get(self, key: str) -> Optional[ContributionDataset]:
        """Get a fresh cached result, or None when missing or stale."""
        cached = self._entries.get(key)
        if cached and self.clock() - cached.produced_at < self.ttl:
            return _copy(cached.result)
        return None

    def set(self, key: str, result: ContributionDataset) -> None:
        self._entries[key] = CacheEntry(result=_copy(result), produced_at=self.clock())

    def clear(self) -> None:
        self._entries.clear()

    async def get_cached_contributions(self, config: AggregationConfig) -> ContributionDataset:
        key = config.cache_key()
        cached = self.get(key)
        if cached is not None:
            logger.debug("Contribution cache hit")
            return cached

        logger.debug("Contribution cache miss; fetching")
        # A failed fetch raises here and leaves any previous entry untouched
        result = await self.fetch(config)
        self.set(key, result)
        return _copy(result)
