from registrar.stores.interfaces import EventStore, RecordStore, RegistrationStore, UserStore
from registrar.stores.text_store import (
    Collection,
    TextFileStore,
    event_store,
    registration_store,
    user_store,
)

__all__ = [
    "Collection",
    "EventStore",
    "RecordStore",
    "RegistrationStore",
    "TextFileStore",
    "UserStore",
    "event_store",
    "registration_store",
    "user_store",
]
