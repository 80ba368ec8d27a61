from __future__ import annotations

from fastapi import APIRouter, Depends

from ..dependencies import get_notification_store, get_reminder_store
from ..schemas import (
    NotificationSettingsOut,
    NotificationSettingsUpdate,
    ReminderSettingsOut,
    ReminderSettingsUpdate,
)
from ..settings_stores import NotificationSettingsStore, ReminderSettingsStore

router = APIRouter(
    prefix="/api",
    tags=["settings"],
)


# PUBLIC_INTERFACE
@router.get(
    "/reminder-settings",
    response_model=ReminderSettingsOut,
    summary="Get Reminder Settings",
    description="Return the process-wide reminder schedule.",
)
def get_reminder_settings(store: ReminderSettingsStore = Depends(get_reminder_store)) -> ReminderSettingsOut:
    return ReminderSettingsOut(**store.get())


# PUBLIC_INTERFACE
@router.put(
    "/reminder-settings",
    response_model=ReminderSettingsOut,
    summary="Update Reminder Settings",
    description="Merge the supplied fields over the current reminder schedule and return the result.",
    responses={
        200: {"description": "Reminder settings updated"},
        400: {"description": "Validation error"},
    },
)
def put_reminder_settings(
    payload: ReminderSettingsUpdate,
    store: ReminderSettingsStore = Depends(get_reminder_store),
) -> ReminderSettingsOut:
    """
    Only fields present in the request body are changed.
    """
    updated = store.replace(payload.model_dump(exclude_unset=True))
    return ReminderSettingsOut(**updated)


# PUBLIC_INTERFACE
@router.get(
    "/notification-settings",
    response_model=NotificationSettingsOut,
    summary="Get Notification Settings",
    description="Return the selected notification channel and stored credentials.",
)
def get_notification_settings(
    store: NotificationSettingsStore = Depends(get_notification_store),
) -> NotificationSettingsOut:
    return NotificationSettingsOut(**store.get())


# PUBLIC_INTERFACE
@router.put(
    "/notification-settings",
    response_model=NotificationSettingsOut,
    summary="Update Notification Settings",
    description=(
        "Merge the supplied fields over the current notification settings. An explicit null "
        "clears a credential. Credentials are not validated against the selected service."
    ),
    responses={
        200: {"description": "Notification settings updated"},
        400: {"description": "Validation error"},
    },
)
def put_notification_settings(
    payload: NotificationSettingsUpdate,
    store: NotificationSettingsStore = Depends(get_notification_store),
) -> NotificationSettingsOut:
    updated = store.replace(payload.model_dump(exclude_unset=True))
    return NotificationSettingsOut(**updated)
