import logging
from typing import Optional

import httpx

from ..models import ContributionDataset, ContributionEntry, Platform
from .errors import NotFoundError
from .http import client_session, request_json

logger = logging.getLogger(__name__)

GITLAB_DEFAULT_URL = "https://gitlab.com"
EVENTS_PER_PAGE = 100
MAX_EVENT_PAGES = 10


async def fetch_gitlab_contributions(
    username: str,
    token: Optional[str] = None,
    base_url: str = GITLAB_DEFAULT_URL,
    client: Optional[httpx.AsyncClient] = None,
) -> ContributionDataset:
    """Approximate GitLab contributions by counting the user's events per day.

    GitLab has no contribution calendar API, so the username is resolved to
    a user id and up to ``MAX_EVENT_PAGES`` pages of events are counted.
    """
    api_url = f"{base_url.rstrip('/')}/api/v4"
    headers = {"Content-Type": "application/json"}
    if token:
        headers["PRIVATE-TOKEN"] = token

    async with client_session(client) as session:
        users = await request_json(
            session,
            Platform.GITLAB,
            "GET",
            f"{api_url}/users",
            username,
            params={"username": username},
            headers=headers,
        )
        if not users:
            raise NotFoundError(Platform.GITLAB, username)
        user_id = users[0]["id"]

        daily_map: dict[str, int] = {}
        for page in range(1, MAX_EVENT_PAGES + 1):
            events = await request_json(
                session,
                Platform.GITLAB,
                "GET",
                f"{api_url}/users/{user_id}/events",
                username,
                params={"per_page": EVENTS_PER_PAGE, "page": page},
                headers=headers,
            )
            logger.debug(f"GitLab events page {page} for {username}: {len(events)} events")

            for event in events:
                date_str = event["created_at"][:10]
                daily_map[date_str] = daily_map.get(date_str, 0) + 1

            # A short page is the last one
            if len(events) < EVENTS_PER_PAGE:
                break

    logger.info(f"Counted {sum(daily_map.values())} GitLab events for {username} on {base_url}")
    return [
        ContributionEntry(date=d, count=c, platform=Platform.GITLAB)
        for d, c in sorted(daily_map.items())
    ]
