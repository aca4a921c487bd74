"""Session actions - the boundary between a shell and the services.

Actions:
- Parse raw caller input with serializers
- Check the caller's role against the capability table
- Call services for business logic
- Map domain errors to failure outcomes; nothing propagates past here
- Never contain business logic

Event numbers are the 1-based positions shown to the user.
"""

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any, Self

from rest_framework import serializers

from registrar.domain import Identity
from registrar.domain.capabilities import Operation, ensure_allowed
from registrar.domain.errors import DomainError, ErrorCode, NotFoundError, ValidationError
from registrar.handlers.serializers import (
    CredentialsSerializer,
    EventEditSerializer,
    EventInputSerializer,
    EventSerializer,
    RegistrationSerializer,
    StatisticsSerializer,
    StudentInputSerializer,
    UserSerializer,
)
from registrar.services import Services, build_services

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Outcome:
    """Result of one action as seen by the shell."""

    ok: bool
    message: str
    data: Any = None
    code: ErrorCode | None = None

    @classmethod
    def success(cls, message: str, data: Any = None) -> Self:
        return cls(ok=True, message=message, data=data)

    @classmethod
    def failure(cls, error: DomainError) -> Self:
        return cls(ok=False, message=error.message, code=error.code)


def _parse(serializer_class: type[serializers.Serializer], payload: Mapping[str, Any]) -> dict:
    serializer = serializer_class(data=dict(payload))
    if not serializer.is_valid():
        field, details = next(iter(serializer.errors.items()))
        raise ValidationError(f"{field}: {details[0]}")
    return serializer.validated_data


class RecordActions:
    """Role-checked operations for one shell session."""

    def __init__(self, services: Services | None = None) -> None:
        self.services = services or build_services()

    def _run(
        self, identity: Identity, operation: Operation, action: Callable[[], Outcome]
    ) -> Outcome:
        try:
            ensure_allowed(identity, operation)
            return action()
        except DomainError as exc:
            logger.debug("%s failed for %s: %s", operation.value, identity.username, exc)
            return Outcome.failure(exc)

    def login(self, username: str, password: str) -> Outcome:
        try:
            credentials = _parse(
                CredentialsSerializer, {"username": username, "password": password}
            )
            identity = self.services.identity.authenticate(
                credentials["username"], credentials["password"]
            )
        except DomainError as exc:
            return Outcome.failure(exc)
        if identity is None:
            return Outcome(ok=False, message="Invalid credentials", code=ErrorCode.NOT_FOUND)
        return Outcome.success(f"{identity.role.value.capitalize()} access granted", identity)

    # Events

    def list_events(self, identity: Identity) -> Outcome:
        def action() -> Outcome:
            events = self.services.events.list_events()
            return Outcome.success(
                f"Total events: {len(events)}", EventSerializer(events, many=True).data
            )

        return self._run(identity, Operation.VIEW_EVENTS, action)

    def event_detail(self, identity: Identity, event_name: str) -> Outcome:
        def action() -> Outcome:
            for event in self.services.events.list_events():
                if event.name == event_name:
                    return Outcome.success(event.name, EventSerializer(event).data)
            raise NotFoundError(f"Event '{event_name}' not found")

        return self._run(identity, Operation.VIEW_EVENTS, action)

    def add_event(self, identity: Identity, payload: Mapping[str, Any]) -> Outcome:
        def action() -> Outcome:
            data = _parse(EventInputSerializer, payload)
            event = self.services.events.add_event(
                data["name"], data["date"], data["venue"], data["capacity"]
            )
            return Outcome.success(
                f"Event '{event.name}' added successfully", EventSerializer(event).data
            )

        return self._run(identity, Operation.MANAGE_EVENTS, action)

    def edit_event(self, identity: Identity, number: int, payload: Mapping[str, Any]) -> Outcome:
        def action() -> Outcome:
            data = _parse(EventEditSerializer, payload)
            event = self.services.events.edit_event(number - 1, data["field"], data["value"])
            return Outcome.success("Changes saved successfully", EventSerializer(event).data)

        return self._run(identity, Operation.MANAGE_EVENTS, action)

    def delete_event(self, identity: Identity, number: int) -> Outcome:
        def action() -> Outcome:
            event, purged = self.services.events.delete_event(number - 1)
            return Outcome.success(
                f"Event '{event.name}' deleted with {purged} registration(s)",
                EventSerializer(event).data,
            )

        return self._run(identity, Operation.MANAGE_EVENTS, action)

    def statistics(self, identity: Identity) -> Outcome:
        def action() -> Outcome:
            stats = self.services.events.statistics()
            return Outcome.success(
                f"Overall occupancy: {stats.occupancy:.1f}%", StatisticsSerializer(stats).data
            )

        return self._run(identity, Operation.VIEW_STATISTICS, action)

    def search_events(self, identity: Identity, term: str) -> Outcome:
        def action() -> Outcome:
            events = self.services.events.search_by_name(term)
            return Outcome.success(
                f"Found {len(events)} event(s)", EventSerializer(events, many=True).data
            )

        return self._run(identity, Operation.SEARCH_EVENTS, action)

    def filter_events(self, identity: Identity, date: str) -> Outcome:
        def action() -> Outcome:
            events = self.services.events.filter_by_date(date)
            return Outcome.success(
                f"Found {len(events)} event(s)", EventSerializer(events, many=True).data
            )

        return self._run(identity, Operation.SEARCH_EVENTS, action)

    # Registrations

    def register(self, identity: Identity, number: int) -> Outcome:
        def action() -> Outcome:
            event = self.services.events.get_event(number - 1)
            registration = self.services.registrations.register(identity.username, event.name)
            return Outcome.success(
                f"You have been registered for '{event.name}'",
                RegistrationSerializer(registration).data,
            )

        return self._run(identity, Operation.REGISTER, action)

    def unregister(self, identity: Identity, event_name: str) -> Outcome:
        def action() -> Outcome:
            registration = self.services.registrations.unregister(identity.username, event_name)
            return Outcome.success(
                f"You have been unregistered from '{event_name}'",
                RegistrationSerializer(registration).data,
            )

        return self._run(identity, Operation.UNREGISTER, action)

    def my_registrations(self, identity: Identity) -> Outcome:
        def action() -> Outcome:
            registrations = self.services.registrations.registrations_for(identity.username)
            return Outcome.success(
                f"You are registered for {len(registrations)} event(s)",
                RegistrationSerializer(registrations, many=True).data,
            )

        return self._run(identity, Operation.VIEW_OWN_REGISTRATIONS, action)

    def registration_report(self, identity: Identity, number: int | None = None) -> Outcome:
        """Per-event summary, or the participant list of one event."""

        def action() -> Outcome:
            if number is None:
                rows = [
                    {"event_name": event.name, "registrations": count}
                    for event, count in self.services.registrations.summary()
                ]
                return Outcome.success("Registration summary", rows)

            event = self.services.events.get_event(number - 1)
            participants = self.services.registrations.participants(event.name)
            return Outcome.success(
                f"Total participants for '{event.name}': {len(participants)}",
                RegistrationSerializer(participants, many=True).data,
            )

        return self._run(identity, Operation.VIEW_REPORTS, action)

    # Users

    def add_student(self, identity: Identity, payload: Mapping[str, Any]) -> Outcome:
        def action() -> Outcome:
            data = _parse(StudentInputSerializer, payload)
            user = self.services.identity.add_student(
                data["username"], data["password"], data["full_name"]
            )
            return Outcome.success("Student account created successfully", UserSerializer(user).data)

        return self._run(identity, Operation.MANAGE_USERS, action)

    def list_users(self, identity: Identity) -> Outcome:
        def action() -> Outcome:
            users = self.services.identity.list_users()
            return Outcome.success(f"Total users: {len(users)}", UserSerializer(users, many=True).data)

        return self._run(identity, Operation.MANAGE_USERS, action)
