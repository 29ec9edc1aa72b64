from __future__ import annotations


class StoreError(Exception):
    """Raised when a storage call cannot be completed."""


class EventNotFoundError(StoreError):
    def __init__(self, event_id: str) -> None:
        super().__init__(f"Event {event_id} not found")
        self.event_id = event_id


class AlreadyRegisteredError(StoreError):
    def __init__(self, event_id: str, user_id: str) -> None:
        super().__init__(f"User {user_id} is already registered for event {event_id}")
        self.event_id = event_id
        self.user_id = user_id


class RegistrationClosedError(StoreError):
    """The event exists but no longer accepts registrations."""

    def __init__(self, event_id: str, message: str) -> None:
        super().__init__(message)
        self.event_id = event_id


class EventFullError(RegistrationClosedError):
    def __init__(self, event_id: str) -> None:
        super().__init__(event_id, "Sorry, this event is full")


class EventPastError(RegistrationClosedError):
    def __init__(self, event_id: str) -> None:
        super().__init__(event_id, "This event has already taken place")


class ProfileFieldError(StoreError):
    def __init__(self, role: str, fields: list[str]) -> None:
        super().__init__(f"Fields not editable for {role} accounts: {', '.join(fields)}")
        self.role = role
        self.fields = fields
