from dataclasses import dataclass
from pathlib import Path

from registrar.services.event_service import EventService
from registrar.services.identity_service import IdentityService
from registrar.services.registration_service import RegistrationService
from registrar.stores import event_store, registration_store, user_store

__all__ = [
    "EventService",
    "IdentityService",
    "RegistrationService",
    "Services",
    "build_services",
]


@dataclass(frozen=True)
class Services:
    """Service bundle sharing one set of stores."""

    events: EventService
    registrations: RegistrationService
    identity: IdentityService


def build_services(data_dir: Path | None = None) -> Services:
    """Wire the services to the text-file stores under ``data_dir`` (default from settings)."""
    events = event_store(data_dir)
    registrations = registration_store(data_dir)
    return Services(
        events=EventService(events, registrations),
        registrations=RegistrationService(events, registrations),
        identity=IdentityService(user_store(data_dir)),
    )
