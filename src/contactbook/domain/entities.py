"""Domain entity: Contact, and the normalized name key used to store it."""

from dataclasses import dataclass


def normalize_name(name: str) -> str:
    """Return the lookup key for a name typed by the user (trimmed, lowercased)."""
    return (name or "").strip().lower()


@dataclass(frozen=True)
class Contact:
    """
    A person in the contact book: name, phone and email.
    Fields are kept verbatim; required-field checks happen when a contact is added,
    not when one is read back from storage.
    """

    name: str
    phone: str
    email: str

    @property
    def key(self) -> str:
        """Unique store key: the stored name, lowercased."""
        return self.name.lower()

    def __str__(self) -> str:
        return f"Name: {self.name}, Phone: {self.phone}, Email: {self.email}"
