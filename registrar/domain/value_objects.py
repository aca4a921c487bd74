"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from typing import Self

from registrar.domain.text import is_numeric, is_valid_date, trim


@dataclass(frozen=True)
class EventDate:
    """Event date in DD-MM-YYYY form."""

    value: str

    def __post_init__(self) -> None:
        if not is_valid_date(self.value):
            raise ValueError("Invalid date format! Use DD-MM-YYYY format")

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=trim(value))

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Capacity:
    """Positive integer representing event capacity."""

    value: int

    def __post_init__(self) -> None:
        if self.value <= 0:
            raise ValueError("Capacity must be greater than 0")

    @classmethod
    def from_string(cls, value: str) -> Self:
        value = trim(value)
        if not is_numeric(value):
            raise ValueError("Capacity must be a whole number")
        return cls(value=int(value))

    @classmethod
    def parse(cls, value: int | str) -> Self:
        """Accept either an int or its decimal string form."""
        if isinstance(value, str):
            return cls.from_string(value)
        return cls(value=value)
