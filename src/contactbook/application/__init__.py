"""Application layer: use cases, ports, and DTOs. Depends only on domain."""

from contactbook.application.contact_service import ContactService
from contactbook.application.dto import (
    ContactAdded,
    Invalid,
    NotFound,
    SaveFailed,
    Saved,
)
from contactbook.application.ports import ContactRepository, ContactStorage

__all__ = [
    "ContactAdded",
    "ContactRepository",
    "ContactService",
    "ContactStorage",
    "Invalid",
    "NotFound",
    "SaveFailed",
    "Saved",
]
