from datetime import date, timedelta
from typing import Any

from ..models import ContributionDataset, ContributionEntry


def merge_contributions(*datasets: ContributionDataset) -> ContributionDataset:
    """Sum counts per date across datasets.

    The platform tag is dropped; the result holds one entry per date, sorted
    ascending. Merging nothing yields an empty list.
    """
    merged_map: dict[str, int] = {}
    for dataset in datasets:
        for day in dataset:
            merged_map[day.date] = merged_map.get(day.date, 0) + day.count

    return [ContributionEntry(date=d, count=c) for d, c in sorted(merged_map.items())]


def summarize_contributions(dataset: ContributionDataset) -> dict[str, Any]:
    """Totals and streaks for a merged dataset."""
    daily_map: dict[str, int] = {}
    for day in dataset:
        daily_map[day.date] = daily_map.get(day.date, 0) + day.count

    active = sorted(d for d, c in daily_map.items() if c > 0)

    longest_streak = 0
    streak = 0
    prev_date = None
    for d in active:
        cur_date = date.fromisoformat(d)
        if prev_date and (cur_date - prev_date).days == 1:
            streak += 1
        else:
            streak = 1
        longest_streak = max(longest_streak, streak)
        prev_date = cur_date

    # Current streak runs backwards from the last active date
    current_streak = 0
    if active:
        curr = date.fromisoformat(active[-1])
        while daily_map.get(curr.isoformat(), 0) > 0:
            current_streak += 1
            curr -= timedelta(days=1)

    return {
        "totalContributions": sum(daily_map.values()),
        "activeDays": len(active),
        "longestStreak": longest_streak,
        "currentStreak": current_streak,
    }
