"""Result types returned by ContactService."""

from dataclasses import dataclass
from pathlib import Path

# --- add results ---


@dataclass(frozen=True)
class ContactAdded:
    """Contact was stored (new, or replacing one with the same name key)."""

    name: str


@dataclass(frozen=True)
class Invalid:
    """Input rejected (e.g. a required field is empty)."""

    reason: str


# --- search results ---


@dataclass(frozen=True)
class NotFound:
    """No contact stored under the searched name."""

    name: str


# --- save results ---


@dataclass(frozen=True)
class Saved:
    """Contacts were written to storage."""

    path: Path
    count: int


@dataclass(frozen=True)
class SaveFailed:
    """Storage could not be written. reason is the underlying I/O error message."""

    reason: str
