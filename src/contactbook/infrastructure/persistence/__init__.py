"""Durable storage adapters."""

from contactbook.infrastructure.persistence.flat_file import (
    DEFAULT_CONTACTS_FILE,
    FlatFileContactStorage,
)

__all__ = ["DEFAULT_CONTACTS_FILE", "FlatFileContactStorage"]
