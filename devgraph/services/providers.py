from abc import ABC, abstractmethod
from typing import Optional

import httpx

from ..models import (
    ContributionDataset,
    GitHubCredential,
    GitLabCredential,
    Platform,
    PlatformCredential,
)
from .errors import UnsupportedPlatformError
from .github import fetch_github_contributions
from .gitlab import fetch_gitlab_contributions


class ContributionProvider(ABC):
    """Fetches one platform's contributions from its credential."""

    platform: Platform

    @abstractmethod
    async def fetch_contributions(
        self,
        credential: PlatformCredential,
        client: Optional[httpx.AsyncClient] = None,
    ) -> ContributionDataset:
        """Fetch normalized, platform-tagged daily counts."""
        pass


class GitHubProvider(ContributionProvider):
    """GitHub specific data fetching."""

    platform = Platform.GITHUB

    async def fetch_contributions(
        self,
        credential: GitHubCredential,
        client: Optional[httpx.AsyncClient] = None,
    ) -> ContributionDataset:
        return await fetch_github_contributions(credential.username, credential.token, client=client)


class GitLabProvider(ContributionProvider):
    """GitLab specific data fetching, including self-hosted instances."""

    platform = Platform.GITLAB

    async def fetch_contributions(
        self,
        credential: GitLabCredential,
        client: Optional[httpx.AsyncClient] = None,
    ) -> ContributionDataset:
        return await fetch_gitlab_contributions(
            credential.username,
            credential.token,
            base_url=credential.base_url,
            client=client,
        )


DEFAULT_PROVIDERS: dict[Platform, ContributionProvider] = {
    Platform.GITHUB: GitHubProvider(),
    Platform.GITLAB: GitLabProvider(),
}


def get_provider(
    platform: Platform,
    providers: Optional[dict[Platform, ContributionProvider]] = None,
) -> ContributionProvider:
    registry = DEFAULT_PROVIDERS if providers is None else providers
    try:
        return registry[platform]
    except KeyError:
        raise UnsupportedPlatformError(platform) from None
