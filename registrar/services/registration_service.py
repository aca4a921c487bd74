"""Registration service - seat bookings across events and registrations.

Every booking change saves events first, then registrations.
"""

import logging
from collections.abc import Callable
from datetime import datetime

from django.utils import timezone

from registrar.domain import Event, Registration
from registrar.domain.errors import DomainError, NotFoundError
from registrar.services import event_registry, registration_ledger
from registrar.stores.interfaces import EventStore, RegistrationStore

logger = logging.getLogger(__name__)

TIMESTAMP_FORMAT = "%d-%m-%Y %H:%M"


class RegistrationService:
    """Service for registering students to events."""

    def __init__(
        self,
        events: EventStore,
        registrations: RegistrationStore,
        clock: Callable[[], datetime] = timezone.localtime,
    ) -> None:
        self._events = events
        self._registrations = registrations
        self._clock = clock

    def register(self, student: str, event_name: str) -> Registration:
        """Register ``student`` for the event named exactly ``event_name``.

        Raises:
            NotFoundError: If the event does not exist.
            ValidationError: If the username contains the field delimiter.
            DuplicateError: If the student is already registered.
            CapacityError: If the event is full.
        """
        events = self._events.load_all()
        registrations = self._registrations.load_all()

        position = event_registry.find_event(events, event_name)
        if position is None:
            raise NotFoundError(f"Event '{event_name}' not found")

        try:
            registrations, events[position], registration = registration_ledger.register(
                registrations,
                events[position],
                student,
                self._clock().strftime(TIMESTAMP_FORMAT),
            )
        except DomainError as exc:
            logger.warning("Registration of %s for %r rejected: %s", student, event_name, exc)
            raise

        self._events.save_all(events)
        self._registrations.save_all(registrations)
        logger.info("%s registered for %s", student, event_name)
        return registration

    def unregister(self, student: str, event_name: str) -> Registration:
        """Remove the registration and release its seat.

        Raises:
            NotFoundError: If the student has no registration for the event.
        """
        events = self._events.load_all()
        registrations = self._registrations.load_all()

        registrations, removed = registration_ledger.unregister(registrations, student, event_name)
        position = event_registry.find_event(events, event_name)
        if position is not None:
            events[position] = events[position].unregister_student()

        self._events.save_all(events)
        self._registrations.save_all(registrations)
        logger.info("%s unregistered from %s", student, event_name)
        return removed

    def registrations_for(self, student: str) -> list[Registration]:
        return registration_ledger.for_student(self._registrations.load_all(), student)

    def participants(self, event_name: str) -> list[Registration]:
        return registration_ledger.participants(self._registrations.load_all(), event_name)

    def summary(self) -> list[tuple[Event, int]]:
        """Registration rows counted per event."""
        return registration_ledger.summary(
            self._registrations.load_all(), self._events.load_all()
        )
