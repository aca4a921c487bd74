"""Pytest configuration and shared fixtures."""

from datetime import datetime
from pathlib import Path

import pytest

from registrar.domain import Identity, Role
from registrar.handlers import RecordActions
from registrar.services import EventService, IdentityService, RegistrationService, Services
from registrar.stores import event_store, registration_store, user_store

USERS = (
    "admin,admin123,System Administrator,admin\n"
    "john,pass123,John Doe,student\n"
    "alice,alice456,Alice Smith,student\n"
    "bob,bob789,Bob Johnson,student\n"
)

FIXED_NOW = datetime(2025, 3, 1, 9, 30)


@pytest.fixture
def data_dir(tmp_path: Path, settings) -> Path:
    """Empty data directory with the default user accounts."""
    settings.REGISTRAR = {**settings.REGISTRAR, "DATA_DIR": tmp_path}
    (tmp_path / "users.txt").write_text(USERS, encoding="utf-8")
    return tmp_path


@pytest.fixture
def write_events(data_dir: Path):
    def write(*lines: str) -> None:
        (data_dir / "events.txt").write_text("".join(f"{line}\n" for line in lines))

    return write


@pytest.fixture
def services(data_dir: Path) -> Services:
    events = event_store(data_dir)
    registrations = registration_store(data_dir)
    return Services(
        events=EventService(events, registrations),
        registrations=RegistrationService(events, registrations, clock=lambda: FIXED_NOW),
        identity=IdentityService(user_store(data_dir)),
    )


@pytest.fixture
def actions(services: Services) -> RecordActions:
    return RecordActions(services)


@pytest.fixture
def admin() -> Identity:
    return Identity(username="admin", full_name="System Administrator", role=Role.ADMIN)


@pytest.fixture
def student() -> Identity:
    return Identity(username="john", full_name="John Doe", role=Role.STUDENT)
