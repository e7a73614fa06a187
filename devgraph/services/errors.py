from typing import Any, Optional

from ..models import Platform


class ContributionFetchError(Exception):
    """Base class for failures while fetching one platform's contributions."""

    def __init__(self, platform: Platform, message: str):
        super().__init__(message)
        self.platform = platform
        self.message = message


class NotFoundError(ContributionFetchError):
    """The username does not resolve on the platform."""

    def __init__(self, platform: Platform, username: str):
        super().__init__(platform, f"{platform.value} user not found: {username}")
        self.username = username


class TransportError(ContributionFetchError):
    """Non-success HTTP status, or the request never completed."""

    def __init__(
        self,
        platform: Platform,
        message: str,
        status_code: Optional[int] = None,
        reason: Optional[str] = None,
    ):
        super().__init__(platform, message)
        self.status_code = status_code
        self.reason = reason


class ProtocolError(ContributionFetchError):
    """The API answered successfully but reported a query-level error."""

    def __init__(self, platform: Platform, errors: list[Any]):
        super().__init__(platform, f"{platform.value} API error: {errors}")
        self.errors = errors


class UnsupportedPlatformError(ContributionFetchError):
    def __init__(self, platform: Platform):
        super().__init__(platform, f"No contribution provider for {platform.value}")
