from __future__ import annotations

from datetime import date
from typing import Optional

from .birth_date import BirthdayDate, DatedBirthday

LEAP_DAY_RULES = ("feb28", "mar1")
DEFAULT_LEAP_DAY_RULE = "feb28"

SUPPORTED_LOCALES = ("ru", "en")
DEFAULT_LOCALE = "ru"

# Genitive forms, as used in "15 марта".
_RU_MONTHS = (
    "января", "февраля", "марта", "апреля", "мая", "июня",
    "июля", "августа", "сентября", "октября", "ноября", "декабря",
)
_EN_MONTHS = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)


def is_leap_year(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def _check_locale(locale: str) -> None:
    if locale not in SUPPORTED_LOCALES:
        raise ValueError(f"Unsupported locale: {locale}")


# PUBLIC_INTERFACE
def occurrence_in_year(value: BirthdayDate, year: int, leap_day_rule: str = DEFAULT_LEAP_DAY_RULE) -> date:
    """
    Return the calendar date on which the birthday falls in the given year.

    A Feb 29 birthday in a year without Feb 29 is moved according to
    leap_day_rule: 'feb28' (Feb 28) or 'mar1' (Mar 1).
    """
    if value.month == 2 and value.day == 29 and not is_leap_year(year):
        if leap_day_rule == "feb28":
            return date(year, 2, 28)
        if leap_day_rule == "mar1":
            return date(year, 3, 1)
        raise ValueError(f"Unsupported leap day rule: {leap_day_rule}")
    return date(year, value.month, value.day)


# PUBLIC_INTERFACE
def next_occurrence(value: BirthdayDate, today: date, leap_day_rule: str = DEFAULT_LEAP_DAY_RULE) -> date:
    """Return the first occurrence on or after today. The birth year is ignored."""
    this_year = occurrence_in_year(value, today.year, leap_day_rule)
    if this_year >= today:
        return this_year
    return occurrence_in_year(value, today.year + 1, leap_day_rule)


# PUBLIC_INTERFACE
def days_until_next_occurrence(value: BirthdayDate, today: date, leap_day_rule: str = DEFAULT_LEAP_DAY_RULE) -> int:
    """Whole days from today to the next occurrence; 0 on the birthday itself."""
    return (next_occurrence(value, today, leap_day_rule) - today).days


# PUBLIC_INTERFACE
def age_in_years(value: BirthdayDate, today: date, leap_day_rule: str = DEFAULT_LEAP_DAY_RULE) -> Optional[int]:
    """
    Return the number of whole years elapsed since birth, or None when the
    birthday has no year.

    The age increments on this year's occurrence of the birthday, so a Feb 29
    birthday ages on Feb 28 (or Mar 1) in non-leap years. Birth dates in the
    future yield 0.
    """
    if not isinstance(value, DatedBirthday):
        return None
    age = today.year - value.year
    if today < occurrence_in_year(value, today.year, leap_day_rule):
        age -= 1
    return max(age, 0)


# PUBLIC_INTERFACE
def format_for_display(value: BirthdayDate, locale: str = DEFAULT_LOCALE) -> str:
    """
    Long-form rendering of the birthday. The year is included only for dated
    birthdays.

    ru: '15 марта 1990 г.' / '4 июля'
    en: 'March 15, 1990' / 'July 4'
    """
    _check_locale(locale)
    dated = isinstance(value, DatedBirthday)
    if locale == "ru":
        text = f"{value.day} {_RU_MONTHS[value.month - 1]}"
        return f"{text} {value.year} г." if dated else text
    text = f"{_EN_MONTHS[value.month - 1]} {value.day}"
    return f"{text}, {value.year}" if dated else text


# PUBLIC_INTERFACE
def pluralize_age_label(age: int, locale: str = DEFAULT_LOCALE) -> str:
    """
    Return '<age> <noun>' with the noun pluralized for the locale.

    ru follows the three-way Slavic rule: 'год' when age ends in 1 (but not
    11), 'года' when it ends in 2-4 (but not 12-14), otherwise 'лет'.
    en uses 'year' for exactly 1 and 'years' otherwise.
    """
    _check_locale(locale)
    if locale == "en":
        return f"{age} year" if age == 1 else f"{age} years"
    if age % 10 == 1 and age % 100 != 11:
        noun = "год"
    elif age % 10 in (2, 3, 4) and age % 100 not in (12, 13, 14):
        noun = "года"
    else:
        noun = "лет"
    return f"{age} {noun}"
