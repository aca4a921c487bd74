from registrar.domain.models import Event, EventField, Identity, Registration, Role, User
from registrar.domain.value_objects import Capacity, EventDate

__all__ = [
    "Event",
    "EventField",
    "Identity",
    "Registration",
    "Role",
    "User",
    "Capacity",
    "EventDate",
]
