"""
Contact book core: clean-architecture layout.

- domain: Contact entity and the normalized name key. No outer dependencies.
- application: use cases (ContactService), ports (ContactRepository, ContactStorage), DTOs.
- infrastructure: adapters (InMemoryContactRepository, FlatFileContactStorage).
"""

from contactbook.application import (
    ContactAdded,
    ContactRepository,
    ContactService,
    ContactStorage,
    Invalid,
    NotFound,
    SaveFailed,
    Saved,
)
from contactbook.domain import Contact, normalize_name
from contactbook.infrastructure import (
    DEFAULT_CONTACTS_FILE,
    FlatFileContactStorage,
    InMemoryContactRepository,
)

__all__ = [
    "DEFAULT_CONTACTS_FILE",
    "Contact",
    "ContactAdded",
    "ContactRepository",
    "ContactService",
    "ContactStorage",
    "FlatFileContactStorage",
    "InMemoryContactRepository",
    "Invalid",
    "NotFound",
    "SaveFailed",
    "Saved",
    "normalize_name",
]
