from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Iterable

from .date_logic import DEFAULT_LEAP_DAY_RULE, days_until_next_occurrence
from .models import BirthdayEntity

UPCOMING_WINDOW_DAYS = 7


# PUBLIC_INTERFACE
@dataclass(frozen=True)
class BirthdayStats:
    """
    Summary counts over the whole record set for a given day.
    """
    total_records: int = 0
    upcoming_birthdays: int = 0
    records_without_year: int = 0
    this_month_birthdays: int = 0


# PUBLIC_INTERFACE
def compute_stats(
    records: Iterable[BirthdayEntity],
    today: date,
    leap_day_rule: str = DEFAULT_LEAP_DAY_RULE,
) -> BirthdayStats:
    """
    Fold the records into BirthdayStats.

    - upcoming: next occurrence within UPCOMING_WINDOW_DAYS days, today included
    - without year: undated birthdays
    - this month: birth month equals today's month
    """
    total = upcoming = without_year = this_month = 0
    for record in records:
        birth_date = record["birth_date"]
        total += 1
        if not birth_date.has_year:
            without_year += 1
        if birth_date.month == today.month:
            this_month += 1
        if days_until_next_occurrence(birth_date, today, leap_day_rule) <= UPCOMING_WINDOW_DAYS:
            upcoming += 1

    return BirthdayStats(
        total_records=total,
        upcoming_birthdays=upcoming,
        records_without_year=without_year,
        this_month_birthdays=this_month,
    )
