from __future__ import annotations

from datetime import date

from fastapi import Request

from .repositories import BirthdayRepository
from .settings import Settings
from .settings_stores import NotificationSettingsStore, ReminderSettingsStore


# PUBLIC_INTERFACE
def get_today() -> date:
    """
    The reference day for age, countdown and statistics.

    Read from the host's local calendar; tests override this dependency to pin a day.
    """
    return date.today()


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_repository(request: Request) -> BirthdayRepository:
    """Return the record store built for this application instance."""
    return request.app.state.birthdays


def get_reminder_store(request: Request) -> ReminderSettingsStore:
    return request.app.state.reminder_settings


def get_notification_store(request: Request) -> NotificationSettingsStore:
    return request.app.state.notification_settings
