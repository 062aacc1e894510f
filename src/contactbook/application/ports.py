"""Application ports (interfaces). Implemented by infrastructure adapters."""

from collections.abc import Iterable
from pathlib import Path
from typing import Protocol

from contactbook.domain import Contact


class ContactRepository(Protocol):
    """Holds contacts keyed by normalized name. One contact per key."""

    def put(self, contact: Contact) -> None:
        """Store a contact under contact.key, replacing any existing one."""
        ...

    def get(self, key: str) -> Contact | None:
        """Return the contact stored under key, or None."""
        ...

    def list_all(self) -> list[Contact]:
        """Return all contacts in the repository's iteration order."""
        ...

    def replace_all(self, contacts: Iterable[Contact]) -> None:
        """Drop current contents and store the given contacts (later keys win)."""
        ...

    def __len__(self) -> int:
        ...


class ContactStorage(Protocol):
    """Reads and writes the full set of contacts to durable storage."""

    path: Path

    def load(self) -> list[Contact]:
        """Return stored contacts. Missing storage yields an empty list."""
        ...

    def save(self, contacts: Iterable[Contact]) -> None:
        """Overwrite storage with the given contacts. Raises OSError on failure."""
        ...
