"""Identity service - authentication and student accounts.

Authentication is a pure lookup over the current users file and may be
called any number of times.
"""

import logging

from registrar.domain import Identity, Role, User
from registrar.domain.errors import DuplicateError, ValidationError
from registrar.domain.text import trim
from registrar.stores.interfaces import UserStore

logger = logging.getLogger(__name__)

USER_DELIMITER = ","
REGISTRATION_DELIMITER = "|"


class IdentityService:
    """Service for logging in and managing user accounts."""

    def __init__(self, users: UserStore) -> None:
        self._users = users

    def authenticate(self, username: str, password: str) -> Identity | None:
        """Return the identity of the first user matching both credentials.

        Raises:
            StorageError: If the users file is missing or unreadable.
        """
        for user in self._users.load_all():
            if user.username == username and user.password == password:
                logger.info("%s logged in as %s", user.username, user.role.value)
                return Identity.of(user)

        logger.warning("Failed login attempt for %r", username)
        return None

    def add_student(self, username: str, password: str, full_name: str) -> User:
        """Create a student account.

        Raises:
            ValidationError: If a field is blank or contains a comma, or the
                username contains a pipe.
            DuplicateError: If the username is taken.
            StorageError: If the users file cannot be read or written.
        """
        username = trim(username)
        full_name = trim(full_name)
        for label, value in (("Username", username), ("Password", password), ("Full name", full_name)):
            if not trim(value):
                raise ValidationError(f"{label} cannot be empty")
            if USER_DELIMITER in value:
                raise ValidationError(f"{label} cannot contain '{USER_DELIMITER}'")
        if REGISTRATION_DELIMITER in username:
            raise ValidationError(f"Username cannot contain '{REGISTRATION_DELIMITER}'")

        users = self._users.load_all()
        if any(user.username == username for user in users):
            logger.warning("Student account %r already exists", username)
            raise DuplicateError(f"Username '{username}' already exists")

        student = User(username=username, password=password, full_name=full_name, role=Role.STUDENT)
        self._users.save_all([*users, student])
        logger.info("Student account created: %s", username)
        return student

    def list_users(self) -> list[User]:
        return self._users.load_all()
