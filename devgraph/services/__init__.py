from .aggregator import merge_contributions, summarize_contributions
from .contributions import ContributionService, get_contributions
from .errors import (
    ContributionFetchError,
    NotFoundError,
    ProtocolError,
    TransportError,
    UnsupportedPlatformError,
)
from .filters import (
    DateRangeFilter,
    FillGapsFilter,
    default_window,
    fill_gaps,
    filter_range,
    last_n_days,
    parse_period,
)
from .github import fetch_github_contributions
from .gitlab import fetch_gitlab_contributions
from .providers import ContributionProvider, GitHubProvider, GitLabProvider, get_provider

__all__ = [
    "ContributionFetchError",
    "ContributionProvider",
    "ContributionService",
    "DateRangeFilter",
    "FillGapsFilter",
    "GitHubProvider",
    "GitLabProvider",
    "NotFoundError",
    "ProtocolError",
    "TransportError",
    "UnsupportedPlatformError",
    "default_window",
    "fetch_github_contributions",
    "fetch_gitlab_contributions",
    "fill_gaps",
    "filter_range",
    "get_contributions",
    "get_provider",
    "last_n_days",
    "merge_contributions",
    "parse_period",
    "summarize_contributions",
]
