"""Infrastructure layer: concrete implementations of application ports."""

from contactbook.infrastructure.memory_repository import InMemoryContactRepository
from contactbook.infrastructure.persistence import (
    DEFAULT_CONTACTS_FILE,
    FlatFileContactStorage,
)

__all__ = [
    "DEFAULT_CONTACTS_FILE",
    "FlatFileContactStorage",
    "InMemoryContactRepository",
]
