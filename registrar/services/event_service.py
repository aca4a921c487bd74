"""Event service - load, apply registry rules, save.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants through the registry and ledger rules
- Perform orchestration and logging
- Return domain models or raise domain errors

Operations that touch both collections save events first, then
registrations. A failure between the two saves leaves the files out of step;
there is no recovery step.
"""

import logging

from registrar.domain import Event, EventField
from registrar.domain.errors import DomainError
from registrar.services import event_registry, registration_ledger
from registrar.services.event_registry import EventStatistics
from registrar.stores.interfaces import EventStore, RegistrationStore

logger = logging.getLogger(__name__)


class EventService:
    """Service for event catalog operations."""

    def __init__(self, events: EventStore, registrations: RegistrationStore) -> None:
        self._events = events
        self._registrations = registrations

    def list_events(self) -> list[Event]:
        """Return all events in stored order."""
        return self._events.load_all()

    def get_event(self, index: int) -> Event:
        """Return the event at a zero-based position.

        Raises:
            NotFoundError: If no event exists at ``index``.
        """
        events = self._events.load_all()
        return events[event_registry.checked_index(events, index)]

    def add_event(self, name: str, date: str, venue: str, capacity: int | str) -> Event:
        events = self._events.load_all()
        try:
            events, event = event_registry.add_event(events, name, date, venue, capacity)
        except DomainError as exc:
            logger.warning("Rejected new event %r: %s", name, exc)
            raise
        self._events.save_all(events)
        logger.info("Event added: %s on %s at %s", event.name, event.date, event.venue)
        return event

    def edit_event(self, index: int, field: EventField, new_value: str | int) -> Event:
        """Change one field of the event at ``index``.

        A rename is carried over to the event's registrations so they keep
        pointing at it.
        """
        events = self._events.load_all()
        before = events[event_registry.checked_index(events, index)]
        events, updated = event_registry.edit_event(events, index, field, new_value)
        self._events.save_all(events)

        if updated.name != before.name:
            registrations = self._registrations.load_all()
            self._registrations.save_all(
                registration_ledger.rename_event(registrations, before.name, updated.name)
            )
        logger.info("Event %r updated: %s", before.name, field.value)
        return updated

    def delete_event(self, index: int) -> tuple[Event, int]:
        """Delete the event at ``index`` and every registration for it.

        Returns the deleted event and the number of registrations removed.
        """
        events = self._events.load_all()
        events, removed = event_registry.delete_event(events, index)
        self._events.save_all(events)

        registrations = self._registrations.load_all()
        registrations, purged = registration_ledger.cascade_delete_by_event(
            registrations, removed.name
        )
        self._registrations.save_all(registrations)
        logger.info("Event deleted: %s (%d registrations removed)", removed.name, purged)
        return removed, purged

    def search_by_name(self, term: str) -> list[Event]:
        return event_registry.search_by_name(self._events.load_all(), term)

    def filter_by_date(self, date: str) -> list[Event]:
        return event_registry.filter_by_date(self._events.load_all(), date)

    def statistics(self) -> EventStatistics:
        return event_registry.statistics(self._events.load_all())
