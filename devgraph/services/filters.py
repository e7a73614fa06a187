from abc import ABC, abstractmethod
from datetime import date, timedelta
from typing import Optional, Union

from ..models import ContributionDataset, ContributionEntry, DateWindow

DateLike = Union[date, str]


def _as_date(value: DateLike) -> date:
    if isinstance(value, str):
        return date.fromisoformat(value)
    return value


def filter_range(dataset: ContributionDataset, start: DateLike, end: DateLike) -> ContributionDataset:
    """Keep entries dated within [start, end]; entries outside are dropped."""
    # YYYY-MM-DD strings sort the same way the dates do
    start_str = _as_date(start).isoformat()
    end_str = _as_date(end).isoformat()
    return [day for day in dataset if start_str <= day.date <= end_str]


def fill_gaps(dataset: ContributionDataset, start: DateLike, end: DateLike) -> ContributionDataset:
    """Emit one entry for every day in [start, end], zero where the dataset has none."""
    counts: dict[str, int] = {}
    for day in dataset:
        counts[day.date] = counts.get(day.date, 0) + day.count

    current = _as_date(start)
    last = _as_date(end)
    filled: ContributionDataset = []
    while current <= last:
        date_str = current.isoformat()
        filled.append(ContributionEntry(date=date_str, count=counts.get(date_str, 0)))
        current += timedelta(days=1)
    return filled


def last_n_days(days: int, today: Optional[date] = None) -> DateWindow:
    end = today or date.today()
    return DateWindow(start=end - timedelta(days=days), end=end)


def default_window(today: Optional[date] = None) -> DateWindow:
    """Today minus exactly 365 days, through today."""
    return last_n_days(365, today)


def parse_period(period: str, today: Optional[date] = None) -> DateWindow:
    """Parse period string into an inclusive window."""
    if period == "pastyear":
        return last_n_days(365, today)
    elif period == "pastmonth":
        return last_n_days(30, today)
    elif period == "pastweek":
        return last_n_days(7, today)
    elif period.isdigit() and len(period) == 4:
        year = int(period)
        return DateWindow(start=date(year, 1, 1), end=date(year, 12, 31))
    else:
        raise ValueError("Invalid period. Use YYYY, 'pastyear', 'pastmonth', or 'pastweek'.")


class FilterStrategy(ABC):
    """Interface for dataset transformations over a date window."""

    def __init__(self, start: DateLike, end: DateLike):
        self.start = _as_date(start)
        self.end = _as_date(end)

    @classmethod
    def from_window(cls, window: DateWindow) -> "FilterStrategy":
        return cls(window.start, window.end)

    @abstractmethod
    def apply(self, dataset: ContributionDataset) -> ContributionDataset:
        pass


class DateRangeFilter(FilterStrategy):
    """Filters contributions to strictly match a start and end date."""

    def apply(self, dataset: ContributionDataset) -> ContributionDataset:
        return filter_range(dataset, self.start, self.end)


class FillGapsFilter(FilterStrategy):
    """Densifies contributions so every day of the window is present."""

    def apply(self, dataset: ContributionDataset) -> ContributionDataset:
        return fill_gaps(dataset, self.start, self.end)
