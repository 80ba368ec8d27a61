from datetime import date, timedelta

import pytest

from birthday_api.birth_date import DatedBirthday, UndatedBirthday
from birthday_api.date_logic import (
    age_in_years,
    days_until_next_occurrence,
    format_for_display,
    next_occurrence,
    occurrence_in_year,
    pluralize_age_label,
)

LEAP_BIRTHDAY = DatedBirthday(year=2000, month=2, day=29)


class TestAge:
    def test_before_birthday_this_year(self):
        assert age_in_years(DatedBirthday(1990, 3, 15), date(2024, 3, 10)) == 33

    def test_on_and_after_birthday(self):
        birthday = DatedBirthday(1990, 3, 15)
        assert age_in_years(birthday, date(2024, 3, 14)) == 33
        assert age_in_years(birthday, date(2024, 3, 15)) == 34
        assert age_in_years(birthday, date(2024, 12, 31)) == 34

    def test_undated_has_no_age(self):
        assert age_in_years(UndatedBirthday(7, 4), date(2024, 7, 4)) is None

    def test_born_today(self):
        assert age_in_years(DatedBirthday(2024, 7, 4), date(2024, 7, 4)) == 0

    def test_future_birth_date_is_zero(self):
        assert age_in_years(DatedBirthday(2030, 1, 1), date(2024, 7, 4)) == 0

    def test_leap_day_feb28_rule(self):
        assert age_in_years(LEAP_BIRTHDAY, date(2001, 2, 27)) == 0
        assert age_in_years(LEAP_BIRTHDAY, date(2001, 2, 28)) == 1
        assert age_in_years(LEAP_BIRTHDAY, date(2004, 2, 28)) == 3
        assert age_in_years(LEAP_BIRTHDAY, date(2004, 2, 29)) == 4

    def test_leap_day_mar1_rule(self):
        assert age_in_years(LEAP_BIRTHDAY, date(2001, 2, 28), "mar1") == 0
        assert age_in_years(LEAP_BIRTHDAY, date(2001, 3, 1), "mar1") == 1

    def test_increases_exactly_on_anniversary(self):
        birthday = DatedBirthday(1985, 7, 4)
        day = date(2020, 1, 1)
        previous = age_in_years(birthday, day)
        while day < date(2022, 1, 1):
            day += timedelta(days=1)
            current = age_in_years(birthday, day)
            if (day.month, day.day) == (7, 4):
                assert current == previous + 1
            else:
                assert current == previous
            previous = current


class TestDaysUntil:
    def test_later_this_year(self):
        assert days_until_next_occurrence(DatedBirthday(1990, 3, 15), date(2024, 3, 10)) == 5

    def test_on_the_day(self):
        assert days_until_next_occurrence(UndatedBirthday(7, 4), date(2024, 7, 4)) == 0

    def test_already_passed_rolls_to_next_year(self):
        today = date(2026, 6, 1)
        assert days_until_next_occurrence(UndatedBirthday(1, 2), today) == (date(2027, 1, 2) - today).days

    def test_year_is_ignored(self):
        today = date(2024, 3, 10)
        assert days_until_next_occurrence(DatedBirthday(1900, 3, 11), today) == 1
        assert days_until_next_occurrence(UndatedBirthday(3, 11), today) == 1

    def test_leap_day_in_non_leap_year(self):
        today = date(2025, 2, 27)
        assert next_occurrence(LEAP_BIRTHDAY, today) == date(2025, 2, 28)
        assert days_until_next_occurrence(LEAP_BIRTHDAY, today) == 1
        assert next_occurrence(LEAP_BIRTHDAY, today, "mar1") == date(2025, 3, 1)

    def test_leap_day_kept_in_leap_year(self):
        assert next_occurrence(LEAP_BIRTHDAY, date(2028, 2, 27)) == date(2028, 2, 29)

    def test_always_within_a_year(self):
        birthdays = [UndatedBirthday(1, 1), UndatedBirthday(12, 31), UndatedBirthday(2, 29), UndatedBirthday(6, 15)]
        day = date(2023, 1, 1)
        while day < date(2025, 1, 1):
            for birthday in birthdays:
                days = days_until_next_occurrence(birthday, day)
                assert 0 <= days <= 366
                on_day = (day.month, day.day) == (birthday.month, birthday.day)
                if on_day:
                    assert days == 0
            day += timedelta(days=1)

    def test_unknown_leap_rule(self):
        with pytest.raises(ValueError):
            occurrence_in_year(LEAP_BIRTHDAY, 2025, "mar2")


class TestFormatForDisplay:
    def test_russian(self):
        assert format_for_display(DatedBirthday(1990, 3, 15), "ru") == "15 марта 1990 г."
        assert format_for_display(UndatedBirthday(7, 4), "ru") == "4 июля"

    def test_english(self):
        assert format_for_display(DatedBirthday(1990, 3, 15), "en") == "March 15, 1990"
        assert format_for_display(UndatedBirthday(7, 4), "en") == "July 4"

    def test_unknown_locale(self):
        with pytest.raises(ValueError):
            format_for_display(UndatedBirthday(7, 4), "de")


class TestPluralizeAgeLabel:
    @pytest.mark.parametrize(
        "age,expected",
        [
            (0, "0 лет"),
            (1, "1 год"),
            (2, "2 года"),
            (4, "4 года"),
            (5, "5 лет"),
            (11, "11 лет"),
            (12, "12 лет"),
            (14, "14 лет"),
            (21, "21 год"),
            (22, "22 года"),
            (33, "33 года"),
            (101, "101 год"),
            (111, "111 лет"),
            (112, "112 лет"),
            (122, "122 года"),
        ],
    )
    def test_russian(self, age, expected):
        assert pluralize_age_label(age, "ru") == expected

    def test_english(self):
        assert pluralize_age_label(1, "en") == "1 year"
        assert pluralize_age_label(0, "en") == "0 years"
        assert pluralize_age_label(21, "en") == "21 years"
