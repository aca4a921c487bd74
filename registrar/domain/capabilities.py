"""Role capability table.

Each role maps to the set of operations it may invoke. Callers check the
table explicitly before running an operation.
"""

from enum import Enum

from registrar.domain.errors import PermissionDeniedError
from registrar.domain.models import Identity, Role


class Operation(Enum):
    """Operations exposed to an authenticated session."""

    MANAGE_EVENTS = "manage events"
    VIEW_EVENTS = "view events"
    VIEW_STATISTICS = "view event statistics"
    VIEW_REPORTS = "view registration reports"
    MANAGE_USERS = "manage users"
    REGISTER = "register for events"
    UNREGISTER = "unregister from events"
    VIEW_OWN_REGISTRATIONS = "view own registrations"
    SEARCH_EVENTS = "search events"


CAPABILITIES: dict[Role, frozenset[Operation]] = {
    Role.ADMIN: frozenset(
        {
            Operation.MANAGE_EVENTS,
            Operation.VIEW_EVENTS,
            Operation.VIEW_STATISTICS,
            Operation.VIEW_REPORTS,
            Operation.MANAGE_USERS,
        }
    ),
    Role.STUDENT: frozenset(
        {
            Operation.VIEW_EVENTS,
            Operation.REGISTER,
            Operation.UNREGISTER,
            Operation.VIEW_OWN_REGISTRATIONS,
            Operation.SEARCH_EVENTS,
        }
    ),
}


def can(identity: Identity, operation: Operation) -> bool:
    return operation in CAPABILITIES.get(identity.role, frozenset())


def ensure_allowed(identity: Identity, operation: Operation) -> None:
    """Raise PermissionDeniedError unless the identity's role allows the operation."""
    if not can(identity, operation):
        raise PermissionDeniedError(operation.value)
