import logging
from typing import Optional

import httpx

from ..models import ContributionDataset, ContributionEntry, Platform
from .errors import NotFoundError, ProtocolError
from .http import client_session, request_json

logger = logging.getLogger(__name__)

GITHUB_GRAPHQL_URL = "https://api.github.com/graphql"
GITHUB_EVENTS_URL = "https://api.github.com/users/{username}/events/public"
EVENTS_PER_PAGE = 100
# The public events feed only goes back ~300 events.
MAX_EVENT_PAGES = 3
USER_AGENT = "devgraph"

CALENDAR_QUERY = """
query($username: String!) {
    user(login: $username) {
        contributionsCollection {
            contributionCalendar {
                weeks {
                    contributionDays { date contributionCount }
                }
            }
        }
    }
}
"""


async def fetch_github_contributions(
    username: str,
    token: Optional[str] = None,
    client: Optional[httpx.AsyncClient] = None,
) -> ContributionDataset:
    """Fetch a user's daily contributions from GitHub.

    With a token the GraphQL contribution calendar is used. Without one, the
    public events feed is counted per day instead, which only covers the most
    recent events.
    """
    async with client_session(client) as session:
        if token:
            return await fetch_with_graphql(session, username, token)
        return await fetch_with_rest_api(session, username)


async def fetch_with_graphql(
    client: httpx.AsyncClient,
    username: str,
    token: str,
) -> ContributionDataset:
    """Fetch contributions using GraphQL API (requires token)."""
    result = await request_json(
        client,
        Platform.GITHUB,
        "POST",
        GITHUB_GRAPHQL_URL,
        username,
        headers={
            "Authorization": f"Bearer {token}",
            "Content-Type": "application/json",
            "User-Agent": USER_AGENT,
        },
        json={"query": CALENDAR_QUERY, "variables": {"username": username}},
    )

    if result.get("errors"):
        raise ProtocolError(Platform.GITHUB, result["errors"])

    user = (result.get("data") or {}).get("user")
    if user is None:
        raise NotFoundError(Platform.GITHUB, username)

    calendar = (user.get("contributionsCollection") or {}).get("contributionCalendar") or {}

    contributions: ContributionDataset = []
    for week in calendar.get("weeks", []):
        for day in week.get("contributionDays", []):
            contributions.append(
                ContributionEntry(
                    date=day["date"],
                    count=day["contributionCount"],
                    platform=Platform.GITHUB,
                )
            )

    logger.info(f"Fetched {len(contributions)} GitHub calendar days for {username}")
    return contributions


async def fetch_with_rest_api(client: httpx.AsyncClient, username: str) -> ContributionDataset:
    """Approximate contributions from the public events feed (one per event)."""
    daily_map: dict[str, int] = {}
    url = GITHUB_EVENTS_URL.format(username=username)

    for page in range(1, MAX_EVENT_PAGES + 1):
        events = await request_json(
            client,
            Platform.GITHUB,
            "GET",
            url,
            username,
            params={"per_page": EVENTS_PER_PAGE, "page": page},
            headers={"Accept": "application/vnd.github+json", "User-Agent": USER_AGENT},
        )
        logger.debug(f"GitHub events page {page} for {username}: {len(events)} events")
        if not events:
            break

        for event in events:
            date_str = event["created_at"][:10]
            daily_map[date_str] = daily_map.get(date_str, 0) + 1

    logger.info(f"Counted {sum(daily_map.values())} public GitHub events for {username}")
    return [
        ContributionEntry(date=d, count=c, platform=Platform.GITHUB)
        for d, c in sorted(daily_map.items())
    ]
