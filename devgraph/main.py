import argparse
import asyncio
import json
import logging
import sys
from typing import Optional

import yaml

from devgraph.repositories import ContributionCache
from devgraph.services import (
    ContributionService,
    default_window,
    fill_gaps,
    parse_period,
    summarize_contributions,
)
from devgraph.utils import load_config

logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="devgraph",
        description="Merge GitHub and GitLab activity into one contribution calendar.",
    )
    parser.add_argument("--config", default="config/settings.yaml", help="YAML file with platform credentials")
    parser.add_argument("--period", help="YYYY, pastyear, pastmonth or pastweek; overrides date_range")
    parser.add_argument("--fill", action="store_true", help="emit a zero entry for every day without activity")
    parser.add_argument("--output", help="write the JSON result here instead of stdout")
    return parser.parse_args(argv)


async def run(args: argparse.Namespace) -> list[dict]:
    config = load_config(args.config)
    if args.period:
        config = config.model_copy(update={"date_range": parse_period(args.period)})

    service = ContributionService()
    cache = ContributionCache(service.get_contributions)
    contributions = await cache.get_cached_contributions(config)

    if args.fill:
        window = config.date_range or default_window()
        contributions = fill_gaps(contributions, window.start, window.end)

    summary = summarize_contributions(contributions)
    logger.info(
        f"{summary['totalContributions']} contributions over {summary['activeDays']} active days "
        f"(longest streak {summary['longestStreak']}, current streak {summary['currentStreak']})"
    )
    return [entry.model_dump(exclude_none=True, mode="json") for entry in contributions]


def main(argv: Optional[list[str]] = None) -> int:
    logger.info("Starting devgraph")
    args = parse_args(argv)

    try:
        records = asyncio.run(run(args))
    except (OSError, ValueError, yaml.YAMLError) as e:
        logger.error(f"devgraph failed: {e}")
        return 1

    payload = json.dumps(records, indent=2)
    if args.output:
        with open(args.output, "w") as f:
            f.write(payload + "\n")
        logger.info(f"Wrote {len(records)} days to {args.output}")
    else:
        print(payload)
    return 0


if __name__ == "__main__":
    sys.exit(main())
