import json
from datetime import date, datetime
from enum import Enum
from typing import Iterator, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class Platform(str, Enum):
    GITHUB = "github"
    GITLAB = "gitlab"
    BITBUCKET = "bitbucket"


class ContributionEntry(BaseModel):
    """Activity count for a single calendar day."""

    date: str
    count: int = Field(ge=0)
    platform: Optional[Platform] = None

    @field_validator("date")
    @classmethod
    def _check_date(cls, value: str) -> str:
        # Must be a real day (no 2024-02-30) written zero-padded (no 2024-1-5)
        parsed = datetime.strptime(value, "%Y-%m-%d")
        if parsed.strftime("%Y-%m-%d") != value:
            raise ValueError(f"date must be YYYY-MM-DD, got {value!r}")
        return value


ContributionDataset = list[ContributionEntry]


class GitHubCredential(BaseModel):
    model_config = ConfigDict(frozen=True)

    username: str
    token: Optional[str] = None


class GitLabCredential(BaseModel):
    model_config = ConfigDict(frozen=True)

    username: str
    token: Optional[str] = None
    base_url: str = "https://gitlab.com"

    @field_validator("base_url")
    @classmethod
    def _strip_slash(cls, value: str) -> str:
        return value.rstrip("/")


class BitbucketCredential(BaseModel):
    model_config = ConfigDict(frozen=True)

    username: str
    token: Optional[str] = None


PlatformCredential = Union[GitHubCredential, GitLabCredential, BitbucketCredential]


class DateWindow(BaseModel):
    """Inclusive date window."""

    model_config = ConfigDict(frozen=True)

    start: date
    end: date

    @model_validator(mode="after")
    def _check_order(self) -> "DateWindow":
        if self.start > self.end:
            raise ValueError(f"start {self.start} is after end {self.end}")
        return self


class AggregationConfig(BaseModel):
    """Which accounts to aggregate, and over which window."""

    model_config = ConfigDict(frozen=True)

    github: Optional[GitHubCredential] = None
    gitlab: Optional[GitLabCredential] = None
    bitbucket: Optional[BitbucketCredential] = None
    date_range: Optional[DateWindow] = None

    def platforms(self) -> Iterator[tuple[Platform, PlatformCredential]]:
        for platform in Platform:
            credential = getattr(self, platform.value)
            if credential is not None:
                yield platform, credential

    def cache_key(self) -> str:
        return json.dumps(self.model_dump(mode="json"), sort_keys=True, separators=(",", ":"))
