"""Domain models representing persisted state.

These are pure domain objects with no input parsing rules.
Text-file encoding lives in registrar/stores/codecs.py.
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Self


class Role(Enum):
    """Role tag deciding which operations a user may run."""

    ADMIN = "admin"
    STUDENT = "student"


class EventField(Enum):
    """Editable event attributes."""

    NAME = "name"
    DATE = "date"
    VENUE = "venue"
    CAPACITY = "capacity"


@dataclass(frozen=True)
class Event:
    """Domain representation of an Event."""

    name: str
    date: str
    venue: str
    capacity: int
    registered_count: int = 0

    @property
    def available_seats(self) -> int:
        return self.capacity - self.registered_count

    @property
    def occupancy(self) -> float:
        """Percentage of seats taken."""
        if self.capacity <= 0:
            return 0.0
        return self.registered_count * 100.0 / self.capacity

    def has_available_seats(self) -> bool:
        return self.registered_count < self.capacity

    def register_student(self) -> Self:
        """Return a copy with one more seat taken, unchanged if full."""
        if not self.has_available_seats():
            return self
        return replace(self, registered_count=self.registered_count + 1)

    def unregister_student(self) -> Self:
        """Return a copy with one seat released, unchanged if none taken."""
        if self.registered_count <= 0:
            return self
        return replace(self, registered_count=self.registered_count - 1)


@dataclass(frozen=True)
class Registration:
    """Domain representation of a student's registration for an event."""

    student_username: str
    event_name: str
    registration_date: str


@dataclass(frozen=True)
class User:
    """Domain representation of a stored user account."""

    username: str
    password: str
    full_name: str
    role: Role


@dataclass(frozen=True)
class Identity:
    """Authenticated session identity. Never carries the password."""

    username: str
    full_name: str
    role: Role

    @classmethod
    def of(cls, user: User) -> Self:
        return cls(username=user.username, full_name=user.full_name, role=user.role)
