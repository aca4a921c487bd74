"""Interactive menu shell over RecordActions.

Run with: python manage.py eventdesk
"""

from collections.abc import Callable
from pathlib import Path

from django.conf import settings
from django.core.management.base import BaseCommand, CommandError

from registrar.domain import Identity, Role
from registrar.handlers import Outcome, RecordActions
from registrar.services import build_services

RULE = "=" * 96


class Command(BaseCommand):
    help = "Log in and manage events, registrations and student accounts."

    def add_arguments(self, parser):
        parser.add_argument(
            "--data-dir",
            type=Path,
            default=None,
            help="Directory holding events.txt, registrations.txt and users.txt.",
        )

    def handle(self, *args, **options):
        self.actions = RecordActions(build_services(options["data_dir"]))
        self.stdout.write("=== COLLEGE EVENT MANAGEMENT SYSTEM ===")

        identity = self.login(settings.REGISTRAR["MAX_LOGIN_ATTEMPTS"])
        self.stdout.write(self.style.SUCCESS("*** LOGIN SUCCESSFUL ***"))
        self.stdout.write(f"Welcome, {identity.full_name}!")

        menu = self.admin_menu(identity) if identity.role is Role.ADMIN else self.student_menu(identity)
        try:
            self.run_menu(menu)
        except EOFError:
            pass
        self.stdout.write("=== SESSION ENDED ===")

    def login(self, max_attempts: int) -> Identity:
        for attempt in range(1, max_attempts + 1):
            try:
                username = self.prompt("Username")
                password = self.prompt("Password")
            except EOFError:
                break
            outcome = self.actions.login(username, password)
            if outcome.ok:
                self.stdout.write(outcome.message)
                return outcome.data
            self.stderr.write(f"{outcome.message}!")
            if attempt < max_attempts:
                self.stdout.write(f"Attempts remaining: {max_attempts - attempt}")
        raise CommandError("Maximum login attempts exceeded. Access denied!")

    # Input and output

    def prompt(self, label: str) -> str:
        return input(f"{label}: ")

    def ask_number(self, label: str) -> int | None:
        try:
            return int(self.prompt(label).strip())
        except ValueError:
            return None

    def report(self, outcome: Outcome) -> bool:
        if outcome.ok:
            self.stdout.write(self.style.SUCCESS(outcome.message))
        else:
            self.stderr.write(f"Error: {outcome.message}")
        return outcome.ok

    def show_events(self, outcome: Outcome) -> None:
        if not self.report(outcome):
            return
        self.stdout.write(RULE)
        self.stdout.write(
            f"  {'#':<3} {'EVENT NAME':<25} | {'DATE':<12} | {'VENUE':<20} | "
            f"{'CAP':<4} | {'REG':<4} | AVL"
        )
        self.stdout.write(RULE)
        for number, event in enumerate(outcome.data, start=1):
            self.stdout.write(
                f"  {number:<3} {event['name']:<25} | {event['date']:<12} | "
                f"{event['venue']:<20} | {event['capacity']:<4} | "
                f"{event['registered_count']:<4} | {event['available_seats']}"
            )
        self.stdout.write(RULE)

    def show_registrations(self, outcome: Outcome) -> None:
        if not self.report(outcome):
            return
        for number, row in enumerate(outcome.data, start=1):
            self.stdout.write(
                f"  {number}. {row['student_username']} -> {row['event_name']} "
                f"(Registered: {row['registration_date']})"
            )

    def run_menu(self, entries: list[tuple[str, Callable[[], None] | None]]) -> None:
        """Loop over a numbered menu; an entry without an action leaves it."""
        while True:
            for number, (label, _) in enumerate(entries, start=1):
                self.stdout.write(f"{number}. {label}")
            choice = self.ask_number("Choose an option")
            if choice is None or not 1 <= choice <= len(entries):
                self.stderr.write(f"Invalid choice! Please select 1-{len(entries)}.")
                continue
            action = entries[choice - 1][1]
            if action is None:
                return
            action()

    # Admin

    def admin_menu(self, identity: Identity) -> list:
        actions = self.actions

        def add_event() -> None:
            payload = {
                "name": self.prompt("Event Name"),
                "date": self.prompt("Date (DD-MM-YYYY)"),
                "venue": self.prompt("Venue"),
                "capacity": self.prompt("Capacity"),
            }
            self.report(actions.add_event(identity, payload))

        def edit_event() -> None:
            self.show_events(actions.list_events(identity))
            number = self.ask_number("Enter event number to edit")
            if number is None:
                return
            field = self.prompt("Field (name/date/venue/capacity)").strip().lower()
            value = self.prompt("New value")
            self.report(actions.edit_event(identity, number, {"field": field, "value": value}))

        def delete_event() -> None:
            self.show_events(actions.list_events(identity))
            number = self.ask_number("Enter event number to delete")
            if number is None:
                return
            self.stdout.write("This will also remove all registrations for this event!")
            if self.prompt("Are you sure? (yes/no)").strip().lower() == "yes":
                self.report(actions.delete_event(identity, number))
            else:
                self.stdout.write("Deletion cancelled!")

        def statistics() -> None:
            outcome = actions.statistics(identity)
            if not self.report(outcome):
                return
            stats = outcome.data
            self.stdout.write(f"Total Events: {stats['total_events']}")
            self.stdout.write(f"Total Capacity: {stats['total_capacity']}")
            self.stdout.write(f"Total Registrations: {stats['total_registered']}")
            for event in stats["events"]:
                self.stdout.write(
                    f"{event['name']}: {event['registered_count']}/{event['capacity']} "
                    f"({event['occupancy']:.1f}%)"
                )

        def reports() -> None:
            self.show_events(actions.list_events(identity))
            number = self.ask_number("Enter event number (0 to view all)")
            if number == 0:
                outcome = actions.registration_report(identity)
                if self.report(outcome):
                    for row in outcome.data:
                        self.stdout.write(f"{row['event_name']}: {row['registrations']} registrations")
            elif number is not None:
                self.show_registrations(actions.registration_report(identity, number))

        def add_student() -> None:
            payload = {
                "username": self.prompt("Username"),
                "password": self.prompt("Password"),
                "full_name": self.prompt("Full Name"),
            }
            self.report(actions.add_student(identity, payload))

        def list_users() -> None:
            outcome = actions.list_users(identity)
            if self.report(outcome):
                for number, user in enumerate(outcome.data, start=1):
                    self.stdout.write(
                        f"{number}. Username: {user['username']} | Name: {user['full_name']} "
                        f"| Type: {user['role']}"
                    )

        return [
            (
                "Manage Events",
                lambda: self.run_menu(
                    [
                        ("Add New Event", add_event),
                        ("Edit Event", edit_event),
                        ("Delete Event", delete_event),
                        ("Back to Dashboard", None),
                    ]
                ),
            ),
            ("View All Events", lambda: self.show_events(actions.list_events(identity))),
            ("View Event Statistics", statistics),
            ("View Registration Reports", reports),
            (
                "Manage Users",
                lambda: self.run_menu(
                    [("Add New Student", add_student), ("View All Users", list_users), ("Back", None)]
                ),
            ),
            ("Logout", None),
        ]

    # Student

    def student_menu(self, identity: Identity) -> list:
        actions = self.actions

        def browse() -> None:
            self.show_events(actions.list_events(identity))
            if self.prompt("Would you like to register for an event? (yes/no)").strip().lower() != "yes":
                return
            number = self.ask_number("Enter event number to register")
            if number is not None:
                self.report(actions.register(identity, number))

        def my_registrations() -> None:
            outcome = actions.my_registrations(identity)
            self.show_registrations(outcome)
            if not outcome.ok or not outcome.data:
                return
            choice = self.ask_number("1. View Event Details  2. Unregister  3. Back")
            if choice not in (1, 2):
                return
            number = self.ask_number("Enter event number")
            if number is None or not 1 <= number <= len(outcome.data):
                self.stderr.write("Invalid selection!")
                return
            event_name = outcome.data[number - 1]["event_name"]
            if choice == 1:
                detail = actions.event_detail(identity, event_name)
                if self.report(detail):
                    for key, value in detail.data.items():
                        self.stdout.write(f"{key}: {value}")
            else:
                self.report(actions.unregister(identity, event_name))

        def search() -> None:
            choice = self.ask_number("1. Search by Name  2. Filter by Date")
            if choice == 1:
                self.show_events(actions.search_events(identity, self.prompt("Event name")))
            elif choice == 2:
                self.show_events(actions.filter_events(identity, self.prompt("Date (DD-MM-YYYY)")))
            else:
                self.stderr.write("Invalid choice!")

        return [
            ("Browse Available Events", browse),
            ("My Registrations", my_registrations),
            ("Search Events", search),
            ("Logout", None),
        ]
