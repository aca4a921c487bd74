"""Registration ledger rules over an in-memory registration list.

A (student_username, event_name) pair appears at most once. Queries keep the
stored order.
"""

from collections.abc import Sequence
from dataclasses import replace

from registrar.domain import Event, Registration
from registrar.domain.errors import (
    CapacityError,
    DuplicateError,
    NotFoundError,
    ValidationError,
)

FIELD_DELIMITER = "|"


def find_registration(
    registrations: Sequence[Registration], student: str, event_name: str
) -> int | None:
    for position, registration in enumerate(registrations):
        if registration.student_username == student and registration.event_name == event_name:
            return position
    return None


def register(
    registrations: Sequence[Registration], event: Event, student: str, registered_at: str
) -> tuple[list[Registration], Event, Registration]:
    """Record ``student`` for ``event`` and take one seat.

    Returns the new ledger, the event with its count incremented, and the
    created registration. Both must be persisted together.

    Raises:
        ValidationError: If the username contains the field delimiter.
        DuplicateError: If the student is already registered for the event.
        CapacityError: If the event has no available seats.
    """
    if FIELD_DELIMITER in student:
        raise ValidationError(f"Username cannot contain '{FIELD_DELIMITER}'")
    if find_registration(registrations, student, event.name) is not None:
        raise DuplicateError(f"Already registered for '{event.name}'")
    if not event.has_available_seats():
        raise CapacityError(event.name)

    registration = Registration(
        student_username=student,
        event_name=event.name,
        registration_date=registered_at,
    )
    return [*registrations, registration], event.register_student(), registration


def unregister(
    registrations: Sequence[Registration], student: str, event_name: str
) -> tuple[list[Registration], Registration]:
    """Remove the student's registration. The caller releases the seat.

    Raises:
        NotFoundError: If no matching registration exists.
    """
    position = find_registration(registrations, student, event_name)
    if position is None:
        raise NotFoundError(f"No registration for '{event_name}'")
    result = list(registrations)
    removed = result.pop(position)
    return result, removed


def cascade_delete_by_event(
    registrations: Sequence[Registration], event_name: str
) -> tuple[list[Registration], int]:
    """Drop every registration for ``event_name``; returns the kept list and removed count."""
    kept = [r for r in registrations if r.event_name != event_name]
    return kept, len(registrations) - len(kept)


def rename_event(
    registrations: Sequence[Registration], old_name: str, new_name: str
) -> list[Registration]:
    return [
        replace(r, event_name=new_name) if r.event_name == old_name else r
        for r in registrations
    ]


def for_student(registrations: Sequence[Registration], student: str) -> list[Registration]:
    return [r for r in registrations if r.student_username == student]


def participants(registrations: Sequence[Registration], event_name: str) -> list[Registration]:
    return [r for r in registrations if r.event_name == event_name]


def count_for_event(registrations: Sequence[Registration], event_name: str) -> int:
    return len(participants(registrations, event_name))


def summary(
    registrations: Sequence[Registration], events: Sequence[Event]
) -> list[tuple[Event, int]]:
    """Registration row count for every event, in event order."""
    return [(event, count_for_event(registrations, event.name)) for event in events]
