"""Store interfaces (repository pattern).

Stores must be swappable and return domain models. Every save replaces the
whole collection.
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Generic, TypeVar

from registrar.domain import Event, Registration, User

T = TypeVar("T")


class RecordStore(ABC, Generic[T]):
    """Interface for whole-collection persistence operations."""

    @abstractmethod
    def load_all(self) -> list[T]:
        """Return every record in stored order."""
        ...

    @abstractmethod
    def save_all(self, records: Sequence[T]) -> None:
        """Replace the stored collection with ``records``, keeping their order."""
        ...


EventStore = RecordStore[Event]
RegistrationStore = RecordStore[Registration]
UserStore = RecordStore[User]
