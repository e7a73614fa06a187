from .contribution import (
    AggregationConfig,
    BitbucketCredential,
    ContributionDataset,
    ContributionEntry,
    DateWindow,
    GitHubCredential,
    GitLabCredential,
    Platform,
    PlatformCredential,
)

__all__ = [
    "AggregationConfig",
    "BitbucketCredential",
    "ContributionDataset",
    "ContributionEntry",
    "DateWindow",
    "GitHubCredential",
    "GitLabCredential",
    "Platform",
    "PlatformCredential",
]
