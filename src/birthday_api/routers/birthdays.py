from __future__ import annotations

from datetime import date
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response, status

from ..date_logic import age_in_years, days_until_next_occurrence, format_for_display, pluralize_age_label
from ..dependencies import get_app_settings, get_repository, get_today
from ..models import BirthdayEntity
from ..repositories import BirthdayRepository
from ..schemas import BirthdayCreate, BirthdayOut, BirthdayStatsOut
from ..settings import Settings
from ..stats import compute_stats

router = APIRouter(
    prefix="/api/birthdays",
    tags=["birthdays"],
)


def to_out(entity: BirthdayEntity, today: date, settings: Settings) -> BirthdayOut:
    """
    Combine a stored record with the values derived from it for the given day.
    """
    birth_date = entity["birth_date"]
    age = age_in_years(birth_date, today, settings.leap_day_rule)
    return BirthdayOut(
        id=entity["id"],
        first_name=entity["first_name"],
        last_name=entity["last_name"],
        birth_date=birth_date,
        has_year=birth_date.has_year,
        comment=entity["comment"],
        created_at=entity["created_at"],
        age=age,
        age_label=None if age is None else pluralize_age_label(age, settings.display_locale),
        days_until=days_until_next_occurrence(birth_date, today, settings.leap_day_rule),
        display_date=format_for_display(birth_date, settings.display_locale),
    )


# PUBLIC_INTERFACE
@router.get(
    "",
    response_model=List[BirthdayOut],
    summary="List Birthdays",
    description=(
        "List all birthday records ordered by month and day (the birth year is ignored; "
        "ties keep insertion order). Each record carries age, days until the next "
        "occurrence and a display date computed for today."
    ),
    responses={200: {"description": "List retrieved successfully"}},
)
def list_birthdays(
    repo: BirthdayRepository = Depends(get_repository),
    today: date = Depends(get_today),
    settings: Settings = Depends(get_app_settings),
) -> List[BirthdayOut]:
    """
    List birthdays in calendar order.
    """
    return [to_out(b, today, settings) for b in repo.list()]


# PUBLIC_INTERFACE
@router.post(
    "",
    response_model=BirthdayOut,
    status_code=status.HTTP_201_CREATED,
    summary="Create Birthday",
    description="Create a new birthday record and return it.",
    responses={
        201: {"description": "Birthday created successfully"},
        400: {"description": "Validation error"},
    },
)
def create_birthday(
    payload: BirthdayCreate,
    repo: BirthdayRepository = Depends(get_repository),
    today: date = Depends(get_today),
    settings: Settings = Depends(get_app_settings),
) -> BirthdayOut:
    """
    Create a new birthday record.
    """
    created = repo.create(payload)
    return to_out(created, today, settings)


# PUBLIC_INTERFACE
@router.get(
    "/stats",
    response_model=BirthdayStatsOut,
    summary="Birthday Statistics",
    description=(
        "Totals over all records: number of records, birthdays in the next 7 days "
        "(today included), records without a year, and birthdays this month."
    ),
    responses={200: {"description": "Statistics computed"}},
)
def birthday_stats(
    repo: BirthdayRepository = Depends(get_repository),
    today: date = Depends(get_today),
    settings: Settings = Depends(get_app_settings),
) -> BirthdayStatsOut:
    stats = compute_stats(repo.list(), today, settings.leap_day_rule)
    return BirthdayStatsOut(
        total_records=stats.total_records,
        upcoming_birthdays=stats.upcoming_birthdays,
        records_without_year=stats.records_without_year,
        this_month_birthdays=stats.this_month_birthdays,
    )


# PUBLIC_INTERFACE
@router.get(
    "/{birthday_id}",
    response_model=BirthdayOut,
    summary="Get Birthday",
    description="Get a single birthday record by ID.",
    responses={
        200: {"description": "Birthday found"},
        400: {"description": "Invalid ID"},
        404: {"description": "Birthday not found"},
    },
)
def get_birthday(
    birthday_id: int,
    repo: BirthdayRepository = Depends(get_repository),
    today: date = Depends(get_today),
    settings: Settings = Depends(get_app_settings),
) -> BirthdayOut:
    item = repo.get(birthday_id)
    if item is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Birthday not found")
    return to_out(item, today, settings)


# PUBLIC_INTERFACE
@router.put(
    "/{birthday_id}",
    response_model=BirthdayOut,
    summary="Replace Birthday",
    description=(
        "Replace an existing birthday record. Omitted optional fields (comment) are cleared; "
        "id and createdAt are kept."
    ),
    responses={
        200: {"description": "Birthday updated"},
        400: {"description": "Invalid ID or validation error"},
        404: {"description": "Birthday not found"},
    },
)
def put_birthday(
    birthday_id: int,
    payload: BirthdayCreate,
    repo: BirthdayRepository = Depends(get_repository),
    today: date = Depends(get_today),
    settings: Settings = Depends(get_app_settings),
) -> BirthdayOut:
    """
    Full update (replace) of a birthday record. A missing id raises NotFoundError,
    which the application maps to 404.
    """
    updated = repo.update(birthday_id, payload)
    return to_out(updated, today, settings)


# PUBLIC_INTERFACE
@router.delete(
    "/{birthday_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete Birthday",
    description="Delete a birthday record by ID. Deleting an absent ID is a no-op and also returns 204.",
    responses={
        204: {"description": "Birthday deleted or already absent"},
        400: {"description": "Invalid ID"},
    },
)
def delete_birthday(birthday_id: int, repo: BirthdayRepository = Depends(get_repository)) -> Response:
    repo.delete(birthday_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
