from .cache import CACHE_TTL, CacheEntry, ContributionCache

__all__ = ["CACHE_TTL", "CacheEntry", "ContributionCache"]
