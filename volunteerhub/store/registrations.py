from __future__ import annotations

import threading
import time
import uuid

from ..recommendations.models import Registration, RegistrationRequest
from .errors import AlreadyRegisteredError


class RegistrationStore:
    def __init__(self) -> None:
        self._registrations: list[Registration] = []
        self._lock = threading.Lock()

    def is_registered(self, event_id: str, user_id: str) -> bool:
        return any(r.event_id == event_id and r.user_id == user_id for r in self._registrations)

    def register(
        self,
        event_id: str,
        user_id: str,
        details: RegistrationRequest | None = None,
    ) -> Registration:
        details = details or RegistrationRequest()
        with self._lock:
            if self.is_registered(event_id, user_id):
                raise AlreadyRegisteredError(event_id, user_id)
            registration = Registration(
                id=uuid.uuid4().hex,
                event_id=event_id,
                user_id=user_id,
                registration_time=time.time(),
                **details.model_dump(),
            )
            self._registrations.append(registration)
        return registration

    def event_ids_for(self, user_id: str) -> list[str]:
        return [r.event_id for r in self._registrations if r.user_id == user_id]

    def for_event(self, event_id: str) -> list[Registration]:
        return [r for r in self._registrations if r.event_id == event_id]

    def clear(self) -> None:
        with self._lock:
            self._registrations.clear()
