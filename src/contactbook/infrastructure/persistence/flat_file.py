"""Flat-file implementation of ContactStorage.
One contact per line: name,phone,email. No quoting or escaping, so a comma
inside a field splits it and the line no longer parses as a contact.
"""

import logging
from collections.abc import Iterable
from pathlib import Path

from contactbook.domain import Contact

logger = logging.getLogger(__name__)

DEFAULT_CONTACTS_FILE = "contacts.txt"
FIELD_SEPARATOR = ","
FIELD_COUNT = 3


def parse_line(line: str) -> Contact | None:
    """Parse one stored line into a Contact, or None if it is malformed.

    Trailing empty fields are dropped before counting, so "a,b," has two fields
    and is rejected, while "a,,c" has three and is kept with an empty phone.
    """
    parts = line.rstrip("\r\n").split(FIELD_SEPARATOR)
    while parts and parts[-1] == "":
        parts.pop()
    if len(parts) != FIELD_COUNT:
        return None
    name, phone, email = parts
    return Contact(name=name, phone=phone, email=email)


def format_line(contact: Contact) -> str:
    return FIELD_SEPARATOR.join((contact.name, contact.phone, contact.email))


class FlatFileContactStorage:
    """Reads and rewrites a comma-separated text file, whole file at a time."""

    def __init__(self, path: str | Path = DEFAULT_CONTACTS_FILE) -> None:
        self.path = Path(path)

    def load(self) -> list[Contact]:
        if not self.path.exists():
            logger.info("No contacts file at %s; starting empty", self.path)
            return []
        contacts: list[Contact] = []
        try:
            with self.path.open("r", encoding="utf-8", errors="replace") as f:
                for lineno, line in enumerate(f, start=1):
                    contact = parse_line(line)
                    if contact is None:
                        logger.debug("Skipping malformed line %d in %s", lineno, self.path)
                        continue
                    contacts.append(contact)
        except OSError:
            logger.warning("Could not read %s; starting empty", self.path, exc_info=True)
            return []
        return contacts

    def save(self, contacts: Iterable[Contact]) -> None:
        with self.path.open("w", encoding="utf-8", newline="\n") as f:
            for contact in contacts:
                f.write(format_line(contact) + "\n")
