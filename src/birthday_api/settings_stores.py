from __future__ import annotations

import logging
from threading import RLock
from typing import Any, Dict, Generic, Mapping, Optional, TypeVar

from .models import NotificationSettingsEntity, ReminderSettingsEntity

logger = logging.getLogger(__name__)

T = TypeVar("T", ReminderSettingsEntity, NotificationSettingsEntity)

DEFAULT_REMINDER_SETTINGS: ReminderSettingsEntity = {
    "one_month_before": False,
    "one_week_before": True,
    "three_days_before": False,
    "one_day_before": True,
    "on_birthday": True,
    "time_of_day": "10:00",
}

DEFAULT_NOTIFICATION_SETTINGS: NotificationSettingsEntity = {
    "service": "telegram",
    "telegram_bot_token": None,
    "telegram_chat_id": None,
    "email_address": None,
    "vk_access_token": None,
    "vk_user_id": None,
}


class _SingleRecordStore(Generic[T]):
    """
    Holds exactly one settings record behind a lock.

    replace() merges the supplied fields over the current record; keys the
    record does not know are ignored.
    """

    name = "settings"

    def __init__(self, initial: T) -> None:
        self._lock = RLock()
        self._current: Dict[str, Any] = dict(initial)

    def get(self) -> T:
        with self._lock:
            return self._current.copy()  # type: ignore[return-value]

    def replace(self, changes: Optional[Mapping[str, Any]] = None) -> T:
        with self._lock:
            known = {k: v for k, v in (changes or {}).items() if k in self._current}
            self._current = {**self._current, **known}
            result = self._current.copy()
        logger.info("Replaced %s fields: %s", self.name, sorted(known))
        return result  # type: ignore[return-value]


# PUBLIC_INTERFACE
class ReminderSettingsStore(_SingleRecordStore[ReminderSettingsEntity]):
    """Process-wide reminder schedule, seeded with the default schedule."""

    name = "reminder settings"

    def __init__(self, initial: Optional[ReminderSettingsEntity] = None) -> None:
        super().__init__(initial or DEFAULT_REMINDER_SETTINGS)


# PUBLIC_INTERFACE
class NotificationSettingsStore(_SingleRecordStore[NotificationSettingsEntity]):
    """
    Process-wide notification channel settings.

    Credentials are stored and echoed back only; nothing is sent anywhere, and
    selecting a service without its credentials is accepted.
    """

    name = "notification settings"

    def __init__(self, initial: Optional[NotificationSettingsEntity] = None) -> None:
        super().__init__(initial or DEFAULT_NOTIFICATION_SETTINGS)
