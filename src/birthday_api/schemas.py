from __future__ import annotations

from datetime import datetime
from typing import Annotated, Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer, PlainValidator, WithJsonSchema, field_validator, model_validator
from pydantic.alias_generators import to_camel

from .birth_date import BirthdayDate, DatedBirthday, UndatedBirthday, parse_birth_date, serialize_birth_date

TimeOfDay = Literal["09:00", "10:00", "12:00", "15:00", "18:00", "20:00"]
NotificationService = Literal["telegram", "email", "vk"]


def _coerce_birth_date(value: Any) -> BirthdayDate:
    """
    Accept canonical text ('1990-03-15' or '--03-15') or an already parsed value.
    MalformedDateError is a ValueError, so pydantic reports it as a validation error.
    """
    if isinstance(value, (DatedBirthday, UndatedBirthday)):
        return value
    return parse_birth_date(value)


BirthDateField = Annotated[
    BirthdayDate,
    PlainValidator(_coerce_birth_date),
    PlainSerializer(serialize_birth_date, return_type=str),
    WithJsonSchema(
        {
            "type": "string",
            "pattern": r"^([0-9]{4}|-)-[0-9]{2}-[0-9]{2}$",
            "description": "YYYY-MM-DD, or --MM-DD when the year is unknown",
            "examples": ["1990-03-15", "--07-04"],
        }
    ),
]


def _strip_name(v: str, field: str) -> str:
    s = v.strip()
    if not (1 <= len(s) <= 100):
        raise ValueError(f"{field} length must be between 1 and 100 characters")
    return s


class _CamelModel(BaseModel):
    """Models exchanged as camelCase JSON; snake_case names are accepted on input too."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# PUBLIC_INTERFACE
class BirthdayCreate(_CamelModel):
    """
    Schema for creating or replacing a birthday record.
    """

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "firstName": "Anna",
                "lastName": "Lee",
                "birthDate": "1990-03-15",
                "hasYear": True,
                "comment": "Likes tulips",
            }
        }
    )

    first_name: str = Field(..., description="Given name", min_length=1)
    last_name: str = Field(..., description="Family name", min_length=1)
    birth_date: BirthDateField = Field(..., description="Birthday in canonical text form")
    has_year: Optional[bool] = Field(
        default=None,
        description="Optional; when given it must agree with whether birthDate carries a year",
    )
    comment: Optional[str] = Field(default=None, description="Optional free-text note")

    @field_validator("first_name")
    @classmethod
    def validate_first_name(cls, v: str) -> str:
        """
        Strip whitespace and enforce 1..100 length.
        """
        return _strip_name(v, "firstName")

    @field_validator("last_name")
    @classmethod
    def validate_last_name(cls, v: str) -> str:
        return _strip_name(v, "lastName")

    @model_validator(mode="after")
    def check_has_year(self) -> "BirthdayCreate":
        if self.has_year is not None and self.has_year != self.birth_date.has_year:
            raise ValueError("hasYear does not match birthDate; use --MM-DD for birthdays without a year")
        return self


# PUBLIC_INTERFACE
class BirthdayOut(_CamelModel):
    """
    Schema returned by the API for a birthday record, with values derived for the current day.
    """

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": 1,
                "firstName": "Anna",
                "lastName": "Lee",
                "birthDate": "1990-03-15",
                "hasYear": True,
                "comment": None,
                "createdAt": "2024-03-01T10:15:30.123456",
                "age": 33,
                "ageLabel": "33 года",
                "daysUntil": 5,
                "displayDate": "15 марта 1990 г.",
            }
        }
    )

    id: int = Field(..., description="Unique identifier of the record")
    first_name: str = Field(..., description="Given name")
    last_name: str = Field(..., description="Family name")
    birth_date: BirthDateField = Field(..., description="Birthday in canonical text form")
    has_year: bool = Field(..., description="Whether the birth year is known")
    comment: Optional[str] = Field(default=None, description="Optional free-text note")
    created_at: datetime = Field(..., description="Creation timestamp")
    age: Optional[int] = Field(default=None, description="Whole years elapsed; null when the year is unknown")
    age_label: Optional[str] = Field(default=None, description="Age with a pluralized noun")
    days_until: int = Field(..., description="Days until the next occurrence; 0 on the day")
    display_date: str = Field(..., description="Long-form date for display")


# PUBLIC_INTERFACE
class BirthdayStatsOut(_CamelModel):
    """
    Summary statistics over all records.
    """

    total_records: int = Field(..., description="Number of records")
    upcoming_birthdays: int = Field(..., description="Birthdays within the next 7 days, today included")
    records_without_year: int = Field(..., description="Records whose birth year is unknown")
    this_month_birthdays: int = Field(..., description="Birthdays in the current month")


# PUBLIC_INTERFACE
class ReminderSettingsUpdate(_CamelModel):
    """
    Reminder schedule changes. Omitted fields keep their current value.
    """

    model_config = ConfigDict(
        json_schema_extra={"example": {"oneWeekBefore": True, "onBirthday": True, "timeOfDay": "09:00"}}
    )

    one_month_before: Optional[bool] = Field(default=None, description="Remind one month before")
    one_week_before: Optional[bool] = Field(default=None, description="Remind one week before")
    three_days_before: Optional[bool] = Field(default=None, description="Remind three days before")
    one_day_before: Optional[bool] = Field(default=None, description="Remind one day before")
    on_birthday: Optional[bool] = Field(default=None, description="Remind on the day")
    time_of_day: Optional[TimeOfDay] = Field(default=None, description="24-hour HH:MM reminder time")

    @field_validator(
        "one_month_before",
        "one_week_before",
        "three_days_before",
        "one_day_before",
        "on_birthday",
        "time_of_day",
    )
    @classmethod
    def reject_null(cls, v: Any) -> Any:
        """
        Fields may be omitted but not set to null.
        """
        if v is None:
            raise ValueError("must not be null")
        return v


# PUBLIC_INTERFACE
class ReminderSettingsOut(_CamelModel):
    """
    Current reminder schedule.
    """

    one_month_before: bool
    one_week_before: bool
    three_days_before: bool
    one_day_before: bool
    on_birthday: bool
    time_of_day: TimeOfDay


# PUBLIC_INTERFACE
class NotificationSettingsUpdate(_CamelModel):
    """
    Notification channel changes. Omitted fields keep their current value; an
    explicit null clears a credential. Credentials of channels other than the
    selected service are stored as given and not cross-checked.
    """

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"service": "telegram", "telegramBotToken": "123:abc", "telegramChatId": "42"}
        }
    )

    service: Optional[NotificationService] = Field(default=None, description="Selected delivery channel")
    telegram_bot_token: Optional[str] = Field(default=None, description="Telegram bot token")
    telegram_chat_id: Optional[str] = Field(default=None, description="Telegram chat id")
    email_address: Optional[str] = Field(default=None, description="Email recipient address")
    vk_access_token: Optional[str] = Field(default=None, description="VK access token")
    vk_user_id: Optional[str] = Field(default=None, description="VK user id")

    @field_validator("service")
    @classmethod
    def reject_null_service(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            raise ValueError("service must not be null")
        return v


# PUBLIC_INTERFACE
class NotificationSettingsOut(_CamelModel):
    """
    Current notification channel configuration.
    """

    service: NotificationService
    telegram_bot_token: Optional[str] = None
    telegram_chat_id: Optional[str] = None
    email_address: Optional[str] = None
    vk_access_token: Optional[str] = None
    vk_user_id: Optional[str] = None
