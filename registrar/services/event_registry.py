"""Event registry rules over an in-memory event list.

Functions take the current events and return a new list plus the affected
event. The input list is never mutated. Name uniqueness is case-insensitive.
"""

from collections.abc import Sequence
from dataclasses import dataclass, replace

from registrar.domain import Capacity, Event, EventDate, EventField
from registrar.domain.errors import DuplicateError, NotFoundError, ValidationError
from registrar.domain.text import to_lower, trim

FIELD_DELIMITER = "|"


@dataclass(frozen=True)
class EventStatistics:
    """Totals across all events plus the per-event breakdown."""

    total_events: int
    total_capacity: int
    total_registered: int
    events: tuple[Event, ...] = ()

    @property
    def occupancy(self) -> float:
        if self.total_capacity <= 0:
            return 0.0
        return self.total_registered * 100.0 / self.total_capacity


def _required_text(value: str, label: str) -> str:
    value = trim(value)
    if not value:
        raise ValidationError(f"{label} cannot be empty")
    if FIELD_DELIMITER in value:
        raise ValidationError(f"{label} cannot contain '{FIELD_DELIMITER}'")
    return value


def _valid_date(value: str) -> str:
    try:
        return str(EventDate.from_string(value))
    except ValueError as exc:
        raise ValidationError(str(exc)) from None


def _valid_capacity(value: int | str) -> int:
    try:
        return Capacity.parse(value).value
    except ValueError as exc:
        raise ValidationError(str(exc)) from None


def _check_unique(events: Sequence[Event], name: str, skip: int | None = None) -> None:
    wanted = to_lower(name)
    for position, event in enumerate(events):
        if position != skip and to_lower(event.name) == wanted:
            raise DuplicateError(f"Event with name '{name}' already exists")


def checked_index(events: Sequence[Event], index: int) -> int:
    if not 0 <= index < len(events):
        raise NotFoundError(f"No event at position {index + 1}")
    return index


def find_event(events: Sequence[Event], name: str) -> int | None:
    """Return the position of the event with exactly ``name``."""
    for position, event in enumerate(events):
        if event.name == name:
            return position
    return None


def add_event(
    events: Sequence[Event], name: str, date: str, venue: str, capacity: int | str
) -> tuple[list[Event], Event]:
    """Append a new event with no registrations.

    Raises:
        ValidationError: If a field is empty, the date is invalid or the
            capacity is not a positive integer.
        DuplicateError: If an event with the same name exists, ignoring case.
    """
    name = _required_text(name, "Event name")
    _check_unique(events, name)
    event = Event(
        name=name,
        date=_valid_date(date),
        venue=_required_text(venue, "Venue"),
        capacity=_valid_capacity(capacity),
        registered_count=0,
    )
    return [*events, event], event


def edit_event(
    events: Sequence[Event], index: int, field: EventField, new_value: str | int
) -> tuple[list[Event], Event]:
    """Change one field of the event at ``index``.

    Raises:
        NotFoundError: If ``index`` is out of range.
        ValidationError: If the new value breaks a field rule, including a
            capacity below the current registered count.
        DuplicateError: If a new name clashes with another event.
    """
    index = checked_index(events, index)
    event = events[index]

    if field is EventField.NAME:
        name = _required_text(str(new_value), "Event name")
        _check_unique(events, name, skip=index)
        updated = replace(event, name=name)
    elif field is EventField.DATE:
        updated = replace(event, date=_valid_date(str(new_value)))
    elif field is EventField.VENUE:
        updated = replace(event, venue=_required_text(str(new_value), "Venue"))
    elif field is EventField.CAPACITY:
        capacity = _valid_capacity(new_value)
        if capacity < event.registered_count:
            raise ValidationError(
                "New capacity cannot be less than registered count "
                f"({event.registered_count})"
            )
        updated = replace(event, capacity=capacity)
    else:
        raise ValidationError(f"Unknown event field: {field}")

    result = list(events)
    result[index] = updated
    return result, updated


def delete_event(events: Sequence[Event], index: int) -> tuple[list[Event], Event]:
    """Remove the event at ``index``. The caller purges its registrations."""
    index = checked_index(events, index)
    result = list(events)
    removed = result.pop(index)
    return result, removed


def search_by_name(events: Sequence[Event], term: str) -> list[Event]:
    """Events whose name contains ``term``, ignoring case."""
    needle = to_lower(trim(term))
    if not needle:
        raise ValidationError("Search term cannot be empty")
    return [event for event in events if needle in to_lower(event.name)]


def filter_by_date(events: Sequence[Event], date: str) -> list[Event]:
    wanted = _valid_date(date)
    return [event for event in events if event.date == wanted]


def statistics(events: Sequence[Event]) -> EventStatistics:
    return EventStatistics(
        total_events=len(events),
        total_capacity=sum(event.capacity for event in events),
        total_registered=sum(event.registered_count for event in events),
        events=tuple(events),
    )
