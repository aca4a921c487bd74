"""Tests for the line codecs and the text-file stores.

Run with: pytest tests/test_stores.py -v
"""

import os

import pytest

from registrar.domain import Event, Registration, Role, User
from registrar.domain.errors import StorageError
from registrar.stores import event_store, registration_store, user_store
from registrar.stores.codecs import EventCodec, ParseError, RegistrationCodec, UserCodec


class TestEventCodec:
    """Tests for event lines."""

    def test_round_trip(self):
        """Decoding an encoded event returns the same event."""
        codec = EventCodec()
        event = Event("Tech Fest", "15-03-2025", "Hall A", 100, 45)
        assert codec.encode(event) == "Tech Fest|15-03-2025|Hall A|100|45"
        assert codec.decode(codec.encode(event)) == event

    def test_registered_count_defaults_to_zero(self):
        """A four-field line has no registrations."""
        event = EventCodec().decode("Tech Fest|15-03-2025|Hall A|100")
        assert event.registered_count == 0

    def test_fields_are_trimmed(self):
        """Whitespace around fields and the line ending are removed."""
        event = EventCodec().decode("  Tech Fest | 15-03-2025 |Hall A| 100 | 3 \r\n")
        assert event == Event("Tech Fest", "15-03-2025", "Hall A", 100, 3)

    @pytest.mark.parametrize("line", ["Tech Fest|15-03-2025|Hall A", "a|b|c|many|0", "a|b|c|1|x"])
    def test_malformed_lines_raise(self, line):
        """Short lines and non-integer counts raise ParseError."""
        with pytest.raises(ParseError):
            EventCodec().decode(line)


class TestRegistrationCodec:
    """Tests for registration lines."""

    def test_decode(self):
        """Three fields form a registration."""
        registration = RegistrationCodec().decode("john|Tech Fest|15-03-2025 14:30")
        assert registration == Registration("john", "Tech Fest", "15-03-2025 14:30")

    @pytest.mark.parametrize("line", ["john|Tech Fest", "john|Tech Fest|date|extra"])
    def test_requires_exactly_three_fields(self, line):
        """Any other field count raises ParseError."""
        with pytest.raises(ParseError):
            RegistrationCodec().decode(line)


class TestUserCodec:
    """Tests for user lines."""

    def test_decode_and_encode(self):
        """Users use commas and carry a role."""
        codec = UserCodec()
        user = codec.decode("john, pass123 ,John Doe,student")
        assert user == User("john", "pass123", "John Doe", Role.STUDENT)
        assert codec.encode(user) == "john,pass123,John Doe,student"

    def test_unknown_role_raises(self):
        """Only admin and student roles decode."""
        with pytest.raises(ParseError):
            UserCodec().decode("root,toor,Root,superuser")

    def test_short_line_raises(self):
        """Fewer than four fields raise ParseError."""
        with pytest.raises(ParseError):
            UserCodec().decode("john,pass123,John Doe")


class TestTextFileStore:
    """Tests for loading and saving whole collections."""

    def test_missing_events_file_is_empty(self, tmp_path):
        """An absent events file is an empty collection."""
        assert event_store(tmp_path).load_all() == []

    def test_missing_registrations_file_is_empty(self, tmp_path):
        """An absent registrations file is an empty collection."""
        assert registration_store(tmp_path).load_all() == []

    def test_missing_users_file_raises(self, tmp_path):
        """The users file is required."""
        with pytest.raises(StorageError):
            user_store(tmp_path).load_all()

    def test_blank_and_malformed_lines_are_skipped(self, tmp_path):
        """Bad lines are skipped without aborting the load."""
        (tmp_path / "events.txt").write_text(
            "Tech Fest|15-03-2025|Hall A|2|0\n"
            "\n"
            "broken line\n"
            "Expo|16-03-2025|Hall B|five|0\n"
            "Cultural Night|22-03-2025|Open Air|200\n"
        )
        names = [event.name for event in event_store(tmp_path).load_all()]
        assert names == ["Tech Fest", "Cultural Night"]

    def test_save_all_replaces_file_in_order(self, tmp_path):
        """Saving rewrites every line in sequence order."""
        store = event_store(tmp_path)
        (tmp_path / "events.txt").write_text("Old|15-03-2025|Hall A|5|0\n")
        store.save_all(
            [
                Event("B", "16-03-2025", "Hall B", 3, 1),
                Event("A", "15-03-2025", "Hall A", 2, 0),
            ]
        )
        assert (tmp_path / "events.txt").read_text() == (
            "B|16-03-2025|Hall B|3|1\nA|15-03-2025|Hall A|2|0\n"
        )

    def test_save_all_creates_data_dir(self, tmp_path):
        """The data directory is created on first save."""
        store = registration_store(tmp_path / "nested")
        store.save_all([Registration("john", "Tech Fest", "01-03-2025 09:30")])
        assert store.load_all() == [Registration("john", "Tech Fest", "01-03-2025 09:30")]

    def test_failed_replace_keeps_original(self, tmp_path, monkeypatch):
        """A failed save leaves the previous content and no temp file behind."""
        path = tmp_path / "events.txt"
        path.write_text("Tech Fest|15-03-2025|Hall A|2|0\n")

        def fail(*args, **kwargs):
            raise OSError("disk full")

        monkeypatch.setattr("registrar.stores.text_store.os.replace", fail)

        with pytest.raises(StorageError):
            event_store(tmp_path).save_all([])

        assert path.read_text() == "Tech Fest|15-03-2025|Hall A|2|0\n"
        assert os.listdir(tmp_path) == ["events.txt"]
