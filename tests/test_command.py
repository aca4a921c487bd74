"""Tests for the eventdesk shell.

Run with: pytest tests/test_command.py -v
"""

from io import StringIO

import pytest
from django.core.management import call_command
from django.core.management.base import CommandError


@pytest.fixture
def answers(monkeypatch):
    """Feed scripted lines to input()."""

    def feed(*lines: str) -> None:
        replies = iter(lines)

        def fake_input(prompt: str = "") -> str:
            try:
                return next(replies)
            except StopIteration:
                raise EOFError from None

        monkeypatch.setattr("builtins.input", fake_input)

    return feed


class TestEventdesk:
    """Tests for the login loop and menus."""

    def test_three_failed_logins_deny_access(self, data_dir, answers):
        """The session ends after the third failed attempt."""
        answers("john", "x", "john", "y", "john", "z", "admin", "admin123")
        with pytest.raises(CommandError, match="Access denied"):
            call_command("eventdesk", stdout=StringIO(), stderr=StringIO())

    def test_login_ceiling_from_settings(self, data_dir, settings, answers):
        """MAX_LOGIN_ATTEMPTS controls the retry ceiling."""
        settings.REGISTRAR = {**settings.REGISTRAR, "MAX_LOGIN_ATTEMPTS": 1}
        answers("john", "x", "john", "pass123")
        with pytest.raises(CommandError):
            call_command("eventdesk", stdout=StringIO(), stderr=StringIO())

    def test_admin_adds_event_then_logs_out(self, data_dir, answers):
        """An admin session writes through to events.txt."""
        answers(
            "admin", "admin123",
            "1",
            "1", "Tech Fest", "15-03-2025", "Hall A", "2",
            "4",
            "6",
        )
        out = StringIO()
        call_command("eventdesk", stdout=out, stderr=StringIO())

        assert "LOGIN SUCCESSFUL" in out.getvalue()
        assert "Event 'Tech Fest' added successfully" in out.getvalue()
        assert (data_dir / "events.txt").read_text() == "Tech Fest|15-03-2025|Hall A|2|0\n"

    def test_student_registers(self, data_dir, write_events, answers):
        """A student browses and registers for the first event."""
        write_events("Tech Fest|15-03-2025|Hall A|2|0")
        answers("john", "pass123", "1", "yes", "1", "4")

        call_command("eventdesk", stdout=StringIO(), stderr=StringIO())

        rows = (data_dir / "registrations.txt").read_text().splitlines()
        assert [row.split("|")[:2] for row in rows] == [["john", "Tech Fest"]]
        assert (data_dir / "events.txt").read_text() == "Tech Fest|15-03-2025|Hall A|2|1\n"

    def test_end_of_input_ends_session(self, data_dir, answers):
        """Running out of input after login closes the session cleanly."""
        answers("john", "pass123")
        out = StringIO()
        call_command("eventdesk", stdout=out, stderr=StringIO())
        assert "SESSION ENDED" in out.getvalue()
