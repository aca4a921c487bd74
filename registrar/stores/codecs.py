"""Line codecs for the three text collections.

Each codec turns one entity into one delimited line and back. Decoding trims
every field and raises ParseError for lines that cannot form an entity; the
store skips those lines.
"""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from registrar.domain.models import Event, Registration, Role, User
from registrar.domain.text import split, trim

T = TypeVar("T")


class ParseError(ValueError):
    """Raised when a line cannot be decoded into an entity."""


class RecordCodec(ABC, Generic[T]):
    """Interface for encoding entities to lines."""

    delimiter: str

    @abstractmethod
    def decode(self, line: str) -> T:
        """Return the entity for a line, or raise ParseError."""
        ...

    @abstractmethod
    def encode(self, entity: T) -> str:
        """Return the line for an entity, without the newline."""
        ...

    def fields(self, line: str) -> list[str]:
        return [trim(part) for part in split(line, self.delimiter)]


def _parse_int(value: str, field: str) -> int:
    try:
        return int(value)
    except ValueError:
        raise ParseError(f"{field} is not an integer: {value!r}") from None


class EventCodec(RecordCodec[Event]):
    """name|date|venue|capacity|registered_count"""

    delimiter = "|"

    def decode(self, line: str) -> Event:
        parts = self.fields(line)
        if len(parts) < 4:
            raise ParseError(f"Expected at least 4 event fields, got {len(parts)}")

        registered = _parse_int(parts[4], "registered count") if len(parts) > 4 else 0
        return Event(
            name=parts[0],
            date=parts[1],
            venue=parts[2],
            capacity=_parse_int(parts[3], "capacity"),
            registered_count=registered,
        )

    def encode(self, entity: Event) -> str:
        return self.delimiter.join(
            [
                entity.name,
                entity.date,
                entity.venue,
                str(entity.capacity),
                str(entity.registered_count),
            ]
        )


class RegistrationCodec(RecordCodec[Registration]):
    """student_username|event_name|registration_date"""

    delimiter = "|"

    def decode(self, line: str) -> Registration:
        parts = self.fields(line)
        if len(parts) != 3:
            raise ParseError(f"Expected 3 registration fields, got {len(parts)}")
        return Registration(
            student_username=parts[0],
            event_name=parts[1],
            registration_date=parts[2],
        )

    def encode(self, entity: Registration) -> str:
        return self.delimiter.join(
            [entity.student_username, entity.event_name, entity.registration_date]
        )


class UserCodec(RecordCodec[User]):
    """username,password,full_name,role"""

    delimiter = ","

    def decode(self, line: str) -> User:
        parts = self.fields(line)
        if len(parts) < 4:
            raise ParseError(f"Expected at least 4 user fields, got {len(parts)}")
        try:
            role = Role(parts[3])
        except ValueError:
            raise ParseError(f"Unknown role: {parts[3]!r}") from None
        return User(username=parts[0], password=parts[1], full_name=parts[2], role=role)

    def encode(self, entity: User) -> str:
        return self.delimiter.join(
            [entity.username, entity.password, entity.full_name, entity.role.value]
        )
