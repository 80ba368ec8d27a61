from __future__ import annotations


# PUBLIC_INTERFACE
class MalformedDateError(ValueError):
    """Raised when birthday date text is neither YYYY-MM-DD nor --MM-DD, or names an impossible date."""


# PUBLIC_INTERFACE
class NotFoundError(LookupError):
    """Raised when a birthday record id is not present in the store."""

    def __init__(self, birthday_id: int) -> None:
        super().__init__(f"Birthday {birthday_id} not found")
        self.birthday_id = birthday_id
