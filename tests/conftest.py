"""Shared fixtures: sample datasets, a controllable clock and fake providers."""

from __future__ import annotations

import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from devgraph.models import ContributionEntry, Platform  # noqa: E402
from devgraph.services.errors import NotFoundError  # noqa: E402
from devgraph.services.providers import ContributionProvider  # noqa: E402


def entries(platform: Platform | None = None, **counts: int) -> list[ContributionEntry]:
    """Build a dataset from keyword dates like d2024_01_03=1."""
    return [
        ContributionEntry(date=key[1:].replace("_", "-"), count=count, platform=platform)
        for key, count in counts.items()
    ]


class FakeClock:
    def __init__(self, start: datetime | None = None) -> None:
        self.now = start or datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs: float) -> None:
        self.now += timedelta(**kwargs)


class StaticProvider(ContributionProvider):
    def __init__(self, platform: Platform, dataset: list[ContributionEntry]) -> None:
        self.platform = platform
        self.dataset = dataset
        self.calls = []

    async def fetch_contributions(self, credential, client=None):
        self.calls.append(credential)
        return list(self.dataset)


class FailingProvider(ContributionProvider):
    def __init__(self, platform: Platform) -> None:
        self.platform = platform
        self.calls = 0

    async def fetch_contributions(self, credential, client=None):
        self.calls += 1
        raise NotFoundError(self.platform, credential.username)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def github_days() -> list[ContributionEntry]:
    return entries(Platform.GITHUB, d2024_01_01=2, d2024_01_02=0, d2024_01_05=4)


@pytest.fixture
def gitlab_days() -> list[ContributionEntry]:
    return entries(Platform.GITLAB, d2024_01_01=5, d2024_01_03=1)
