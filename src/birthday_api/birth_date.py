from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date
from typing import Union

from .errors import MalformedDateError

_DATED_RE = re.compile(r"^([0-9]{4})-([0-9]{2})-([0-9]{2})$")
_UNDATED_RE = re.compile(r"^--([0-9]{2})-([0-9]{2})$")

# Any leap year works; only used to check that a month/day pair can exist.
_LEAP_REFERENCE_YEAR = 2000


# PUBLIC_INTERFACE
@dataclass(frozen=True)
class DatedBirthday:
    """
    A birthday whose year is known.
    """
    year: int
    month: int
    day: int

    @property
    def has_year(self) -> bool:
        return True


# PUBLIC_INTERFACE
@dataclass(frozen=True)
class UndatedBirthday:
    """
    A birthday with only a month and day; age cannot be computed for it.
    """
    month: int
    day: int

    @property
    def has_year(self) -> bool:
        return False


BirthdayDate = Union[DatedBirthday, UndatedBirthday]


def _check_calendar(year: int, month: int, day: int, text: str) -> None:
    try:
        date(year, month, day)
    except ValueError as e:
        raise MalformedDateError(f"Invalid birthday date: {text!r}") from e


# PUBLIC_INTERFACE
def parse_birth_date(text: str) -> BirthdayDate:
    """
    Parse the canonical birthday text form.

    - 'YYYY-MM-DD' produces a DatedBirthday
    - '--MM-DD' (no year) produces an UndatedBirthday

    Raises:
        MalformedDateError if the text matches neither shape or names a day
        that does not exist (e.g. '2023-02-29', '--13-01').
    """
    if not isinstance(text, str):
        raise MalformedDateError(f"Birthday date must be a string, got {type(text).__name__}")
    s = text.strip()

    m = _UNDATED_RE.match(s)
    if m:
        month, day = int(m.group(1)), int(m.group(2))
        _check_calendar(_LEAP_REFERENCE_YEAR, month, day, s)
        return UndatedBirthday(month=month, day=day)

    m = _DATED_RE.match(s)
    if m:
        year, month, day = int(m.group(1)), int(m.group(2)), int(m.group(3))
        _check_calendar(year, month, day, s)
        return DatedBirthday(year=year, month=month, day=day)

    raise MalformedDateError(f"Birthday date must look like YYYY-MM-DD or --MM-DD, got {s!r}")


# PUBLIC_INTERFACE
def serialize_birth_date(value: BirthdayDate) -> str:
    """Return the canonical text form; inverse of parse_birth_date."""
    if isinstance(value, DatedBirthday):
        return f"{value.year:04d}-{value.month:02d}-{value.day:02d}"
    return f"--{value.month:02d}-{value.day:02d}"


# PUBLIC_INTERFACE
def has_year(value: BirthdayDate) -> bool:
    """Return True when the birthday carries a year."""
    return value.has_year
