"""Serializers for raw caller input and for rendering domain models.

Input serializers only parse shape (presence, integers, choices). Business
rules such as date format and uniqueness stay in the services.
"""

from rest_framework import serializers

from registrar.domain import EventField


class CredentialsSerializer(serializers.Serializer):
    username = serializers.CharField()
    password = serializers.CharField(trim_whitespace=False)


class EventInputSerializer(serializers.Serializer):
    """Fields for a new event."""

    name = serializers.CharField()
    date = serializers.CharField()
    venue = serializers.CharField()
    capacity = serializers.IntegerField()


class EventEditSerializer(serializers.Serializer):
    """One field change on an existing event."""

    field = serializers.ChoiceField(choices=[field.value for field in EventField])
    value = serializers.CharField(allow_blank=True)

    def validate_field(self, value: str) -> EventField:
        return EventField(value)


class StudentInputSerializer(serializers.Serializer):
    username = serializers.CharField()
    password = serializers.CharField(trim_whitespace=False)
    full_name = serializers.CharField()


class EventSerializer(serializers.Serializer):
    """Serializer for Event domain model."""

    name = serializers.CharField()
    date = serializers.CharField()
    venue = serializers.CharField()
    capacity = serializers.IntegerField()
    registered_count = serializers.IntegerField()
    available_seats = serializers.IntegerField()
    occupancy = serializers.FloatField()


class RegistrationSerializer(serializers.Serializer):
    """Serializer for Registration domain model."""

    student_username = serializers.CharField()
    event_name = serializers.CharField()
    registration_date = serializers.CharField()


class UserSerializer(serializers.Serializer):
    """Serializer for User domain model. The password is never rendered."""

    username = serializers.CharField()
    full_name = serializers.CharField()
    role = serializers.CharField(source="role.value")


class StatisticsSerializer(serializers.Serializer):
    total_events = serializers.IntegerField()
    total_capacity = serializers.IntegerField()
    total_registered = serializers.IntegerField()
    occupancy = serializers.FloatField()
    events = EventSerializer(many=True)
