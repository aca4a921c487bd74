"""Delimited text-file implementation of the record stores.

Each collection lives in one file under ``settings.REGISTRAR["DATA_DIR"]``.
Saves write a temporary file next to the target and move it into place with
``os.replace``, so a failed save never truncates the previous content.
"""

import contextlib
import logging
import os
import shutil
import tempfile
from collections.abc import Sequence
from enum import Enum
from pathlib import Path
from typing import TypeVar

from django.conf import settings

from registrar.domain import Event, Registration, User
from registrar.domain.errors import StorageError
from registrar.domain.text import trim
from registrar.stores.codecs import (
    EventCodec,
    ParseError,
    RecordCodec,
    RegistrationCodec,
    UserCodec,
)
from registrar.stores.interfaces import RecordStore

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Collection(Enum):
    """The three persisted collections."""

    EVENTS = "events"
    REGISTRATIONS = "registrations"
    USERS = "users"

    @property
    def filename(self) -> str:
        return f"{self.value}.txt"


class TextFileStore(RecordStore[T]):
    """Whole-file store for one collection."""

    def __init__(self, path: Path, codec: RecordCodec[T], required: bool = False) -> None:
        self.path = Path(path)
        self.codec = codec
        # A required collection must exist before it can be loaded.
        self.required = required

    def load_all(self) -> list[T]:
        try:
            with self.path.open(encoding="utf-8") as fh:
                lines = list(fh)
        except FileNotFoundError:
            if self.required:
                logger.error("Required file %s is missing", self.path)
                raise StorageError(f"Could not open {self.path.name}") from None
            return []
        except OSError as exc:
            logger.error("Could not read %s: %s", self.path, exc)
            raise StorageError(f"Could not open {self.path.name}") from exc

        records: list[T] = []
        for lineno, line in enumerate(lines, start=1):
            if not trim(line):
                continue
            try:
                records.append(self.codec.decode(line))
            except ParseError as exc:
                logger.warning("Skipping %s line %d: %s", self.path.name, lineno, exc)
        return records

    def save_all(self, records: Sequence[T]) -> None:
        tmp_path = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(
                dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp"
            )
            with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as fh:
                for record in records:
                    fh.write(self.codec.encode(record))
                    fh.write("\n")
                fh.flush()
                os.fsync(fh.fileno())
            if self.path.exists():
                shutil.copymode(self.path, tmp_path)
            os.replace(tmp_path, self.path)
        except OSError as exc:
            if tmp_path is not None:
                with contextlib.suppress(FileNotFoundError):
                    os.unlink(tmp_path)
            logger.error("Could not write %s: %s", self.path, exc)
            raise StorageError(f"Could not open {self.path.name} for writing") from exc

        logger.debug("Saved %d records to %s", len(records), self.path)


def data_dir() -> Path:
    return Path(settings.REGISTRAR["DATA_DIR"])


def event_store(directory: Path | None = None) -> TextFileStore[Event]:
    directory = data_dir() if directory is None else directory
    return TextFileStore(directory / Collection.EVENTS.filename, EventCodec())


def registration_store(directory: Path | None = None) -> TextFileStore[Registration]:
    directory = data_dir() if directory is None else directory
    return TextFileStore(directory / Collection.REGISTRATIONS.filename, RegistrationCodec())


def user_store(directory: Path | None = None) -> TextFileStore[User]:
    directory = data_dir() if directory is None else directory
    return TextFileStore(directory / Collection.USERS.filename, UserCodec(), required=True)
