"""In-memory implementation of ContactRepository (dict keyed by normalized name)."""

from collections.abc import Iterable

from contactbook.domain import Contact


class InMemoryContactRepository:
    """Stores contacts in memory. Order is that of first insertion of each key."""

    def __init__(self) -> None:
        self._by_key: dict[str, Contact] = {}

    def put(self, contact: Contact) -> None:
        self._by_key[contact.key] = contact

    def get(self, key: str) -> Contact | None:
        return self._by_key.get(key)

    def list_all(self) -> list[Contact]:
        return list(self._by_key.values())

    def replace_all(self, contacts: Iterable[Contact]) -> None:
        self._by_key = {}
        for contact in contacts:
            self.put(contact)

    def __len__(self) -> int:
        return len(self._by_key)
