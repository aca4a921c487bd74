"""Unit tests for domain primitives and helpers.

These test invariants that must hold at construction time.
Run with: pytest tests/test_domain.py -v
"""

import pytest

from registrar.domain import Capacity, Event, EventDate, Identity, Role
from registrar.domain.capabilities import Operation, can, ensure_allowed
from registrar.domain.errors import ErrorCode, PermissionDeniedError, ValidationError
from registrar.domain.text import is_numeric, is_valid_date, split, to_lower, trim


class TestTextHelpers:
    """Tests for split, trim, to_lower and is_numeric."""

    def test_trim_strips_surrounding_whitespace(self):
        """trim removes spaces from both ends."""
        assert trim("  hi ") == "hi"

    def test_trim_all_whitespace_is_empty(self):
        """trim of only whitespace returns an empty string."""
        assert trim("   ") == ""
        assert trim("\t\r\n") == ""

    def test_split_keeps_empty_inner_segments(self):
        """Empty fields between delimiters are preserved."""
        assert split("a,,b", ",") == ["a", "", "b"]

    def test_split_trailing_delimiter_adds_nothing(self):
        """A trailing delimiter does not produce an extra empty field."""
        assert split("a|b|", "|") == ["a", "b"]
        assert split("a||", "|") == ["a", ""]

    def test_split_empty_string(self):
        """Splitting an empty string yields no fields."""
        assert split("", "|") == []

    def test_to_lower_is_ascii_only(self):
        """Only ASCII letters are lower-cased."""
        assert to_lower("Tech FEST") == "tech fest"
        assert to_lower("ÉCOLE") == "École"

    def test_is_numeric(self):
        """Digits only; empty is not numeric."""
        assert is_numeric("2025")
        assert not is_numeric("")
        assert not is_numeric("12a")


class TestIsValidDate:
    """Tests for the DD-MM-YYYY date rule."""

    @pytest.mark.parametrize("value", ["15-03-2025", "31-02-2025", "01-12-2099"])
    def test_accepts_valid_dates(self, value):
        """Well-formed dates from 2025 onwards are accepted, without month-length checks."""
        assert is_valid_date(value)

    @pytest.mark.parametrize(
        "value",
        [
            "32-13-2020",
            "2025-03-15",
            "15/03/2025",
            "1-3-2025",
            "00-03-2025",
            "15-00-2025",
            "15-03-2024",
            "aa-03-2025",
            "",
        ],
    )
    def test_rejects_invalid_dates(self, value):
        """Wrong layout, out-of-range parts and years before 2025 are rejected."""
        assert not is_valid_date(value)


class TestEventDate:
    """Tests for EventDate value object."""

    def test_from_string_trims(self):
        """EventDate.from_string trims before validating."""
        assert EventDate.from_string(" 15-03-2025 ").value == "15-03-2025"

    def test_rejects_invalid_date(self):
        """EventDate raises ValueError for a bad date."""
        with pytest.raises(ValueError):
            EventDate("2025-03-15")


class TestCapacity:
    """Tests for Capacity value object."""

    def test_capacity_accepts_positive_value(self):
        """Capacity can be created with positive value."""
        assert Capacity(10).value == 10

    def test_capacity_rejects_zero(self):
        """Capacity raises ValueError for zero."""
        with pytest.raises(ValueError):
            Capacity(0)

    def test_capacity_rejects_negative_value(self):
        """Capacity raises ValueError for negative value."""
        with pytest.raises(ValueError):
            Capacity(-5)

    def test_parse_accepts_strings(self):
        """Capacity.parse converts decimal strings."""
        assert Capacity.parse(" 40 ").value == 40
        assert Capacity.parse(40).value == 40

    def test_from_string_rejects_non_integer(self):
        """Capacity.from_string raises ValueError for non-numeric input."""
        with pytest.raises(ValueError):
            Capacity.from_string("forty")

    @pytest.mark.parametrize("raw", ["1_0", "٥", "5.0", "+5", "-3", ""])
    def test_from_string_accepts_ascii_digits_only(self, raw):
        """Underscores, signs, decimals and non-ASCII digits are not capacities."""
        with pytest.raises(ValueError):
            Capacity.from_string(raw)


class TestEvent:
    """Tests for Event seat bookkeeping."""

    def test_register_student_takes_a_seat(self):
        """register_student increments the count."""
        event = Event("Tech Fest", "15-03-2025", "Hall A", 2, 1)
        assert event.register_student().registered_count == 2

    def test_register_student_on_full_event_is_noop(self):
        """A full event is returned unchanged."""
        event = Event("Tech Fest", "15-03-2025", "Hall A", 2, 2)
        assert event.register_student() == event

    def test_unregister_student_never_goes_negative(self):
        """Releasing a seat with none taken leaves the count at 0."""
        event = Event("Tech Fest", "15-03-2025", "Hall A", 2, 0)
        assert event.unregister_student().registered_count == 0

    def test_available_seats_and_occupancy(self):
        """Derived values follow capacity and count."""
        event = Event("Tech Fest", "15-03-2025", "Hall A", 4, 1)
        assert event.available_seats == 3
        assert event.occupancy == 25.0
        assert event.has_available_seats()


class TestCapabilities:
    """Tests for the role capability table."""

    def test_admin_can_manage_events_but_not_register(self):
        """Admins manage the catalog; they do not book seats."""
        admin = Identity("admin", "Admin", Role.ADMIN)
        assert can(admin, Operation.MANAGE_EVENTS)
        assert not can(admin, Operation.REGISTER)

    def test_student_cannot_manage_users(self):
        """ensure_allowed raises PermissionDeniedError for a forbidden operation."""
        student = Identity("john", "John Doe", Role.STUDENT)
        with pytest.raises(PermissionDeniedError) as excinfo:
            ensure_allowed(student, Operation.MANAGE_USERS)
        assert excinfo.value.code is ErrorCode.PERMISSION_DENIED


class TestDomainError:
    """Tests for domain error formatting."""

    def test_str_includes_code_and_message(self):
        """Errors render as CODE: message."""
        assert str(ValidationError("Venue cannot be empty")) == (
            "VALIDATION_ERROR: Venue cannot be empty"
        )
