"""Contact add, search and list over a repository; load/save through a storage port."""

import logging

from contactbook.application.dto import (
    ContactAdded,
    Invalid,
    NotFound,
    SaveFailed,
    Saved,
)
from contactbook.application.ports import ContactRepository, ContactStorage
from contactbook.domain import Contact, normalize_name

logger = logging.getLogger(__name__)

REQUIRED_FIELDS_REASON = "All fields are required."


class ContactService:
    """Core flow: load at startup -> add / search / list -> save on exit."""

    def __init__(
        self,
        repository: ContactRepository,
        storage: ContactStorage,
    ) -> None:
        self._repo = repository
        self._storage = storage

    def add(self, name: str, phone: str, email: str) -> ContactAdded | Invalid:
        """Store a contact. All three fields must be non-empty after trimming.

        A contact whose name matches an existing one case-insensitively replaces it.
        """
        name = (name or "").strip()
        phone = (phone or "").strip()
        email = (email or "").strip()
        if not name or not phone or not email:
            return Invalid(reason=REQUIRED_FIELDS_REASON)

        contact = Contact(name=name, phone=phone, email=email)
        if self._repo.get(contact.key) is not None:
            logger.debug("Replacing contact stored under %r", contact.key)
        self._repo.put(contact)
        return ContactAdded(name=contact.name)

    def search(self, name: str) -> Contact | NotFound:
        """Exact, case-insensitive lookup by name."""
        contact = self._repo.get(normalize_name(name))
        if contact is None:
            return NotFound(name=(name or "").strip())
        return contact

    def list_contacts(self) -> list[Contact]:
        """Return all contacts (no sort guarantee)."""
        return self._repo.list_all()

    def load(self) -> int:
        """Replace the repository contents with what storage holds. Returns the count."""
        self._repo.replace_all(self._storage.load())
        count = len(self._repo)
        logger.info("Loaded %d contacts from %s", count, self._storage.path)
        return count

    def save(self) -> Saved | SaveFailed:
        """Write every contact to storage. I/O errors are returned, not raised."""
        contacts = self._repo.list_all()
        try:
            self._storage.save(contacts)
        except OSError as exc:
            logger.exception("Could not save contacts to %s", self._storage.path)
            return SaveFailed(reason=str(exc))
        logger.info("Saved %d contacts to %s", len(contacts), self._storage.path)
        return Saved(path=self._storage.path, count=len(contacts))
