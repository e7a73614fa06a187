"""Merge GitHub and GitLab activity into one contribution calendar."""

from .models import AggregationConfig, ContributionEntry, DateWindow, Platform
from .repositories import ContributionCache
from .services import (
    ContributionService,
    fill_gaps,
    filter_range,
    get_contributions,
    merge_contributions,
)

__version__ = "0.1.0"

__all__ = [
    "AggregationConfig",
    "ContributionCache",
    "ContributionEntry",
    "ContributionService",
    "DateWindow",
    "Platform",
    "fill_gaps",
    "filter_range",
    "get_contributions",
    "merge_contributions",
]
