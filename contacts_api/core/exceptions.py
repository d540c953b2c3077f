from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable


@dataclass(frozen=True)
class FieldError:
    field: str
    reason: str

    def as_dict(self) -> dict[str, str]:
        return {"field": self.field, "reason": self.reason}


class ContactValidationError(ValueError):
    """One or more contact fields failed a constraint."""

    def __init__(self, errors: Iterable[FieldError]) -> None:
        self.errors = list(errors)
        super().__init__("; ".join(f"{error.field}: {error.reason}" for error in self.errors))

    def as_detail(self) -> list[dict[str, str]]:
        return [error.as_dict() for error in self.errors]


class ContactConflictError(ContactValidationError):
    """A unique constraint fired at commit time."""


class ContactNotFoundError(LookupError):
    def __init__(self, contact_id: int) -> None:
        self.contact_id = contact_id
        super().__init__(f"Contact {contact_id} not found")


def duplicate_error(field: str) -> FieldError:
    return FieldError(field, f"The {field} has already been taken.")
