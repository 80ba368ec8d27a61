from __future__ import annotations

from datetime import datetime
from typing import Optional, TypedDict

from .birth_date import BirthdayDate


# PUBLIC_INTERFACE
class BirthdayEntity(TypedDict):
    """
    A tracked person as held by the record store.

    Fields:
    - id: Unique integer identifier, never reused within the process
    - first_name: Given name (trimmed, non-empty via schemas)
    - last_name: Family name (trimmed, non-empty via schemas)
    - birth_date: DatedBirthday or UndatedBirthday value
    - comment: Optional free text
    - created_at: Local insertion timestamp (datetime)
    """

    id: int
    first_name: str
    last_name: str
    birth_date: BirthdayDate
    comment: Optional[str]
    created_at: datetime


# PUBLIC_INTERFACE
class ReminderSettingsEntity(TypedDict):
    """When reminders should fire relative to a birthday, and at what time of day."""

    one_month_before: bool
    one_week_before: bool
    three_days_before: bool
    one_day_before: bool
    on_birthday: bool
    time_of_day: str


# PUBLIC_INTERFACE
class NotificationSettingsEntity(TypedDict):
    """Selected delivery channel and the credentials for each channel."""

    service: str
    telegram_bot_token: Optional[str]
    telegram_chat_id: Optional[str]
    email_address: Optional[str]
    vk_access_token: Optional[str]
    vk_user_id: Optional[str]
