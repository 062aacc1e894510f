"""Domain layer: entities and value objects. No dependencies on outer layers."""

from contactbook.domain.entities import Contact, normalize_name

__all__ = ["Contact", "normalize_name"]
