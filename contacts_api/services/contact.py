from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any

from sqlmodel import Session

from contacts_api.core.config import settings
from contacts_api.core.exceptions import (
    ContactNotFoundError,
    ContactValidationError,
    FieldError,
    duplicate_error,
)
from contacts_api.core.logging_setup import logger
from contacts_api.models.contact import Contact
from contacts_api.repositories.contact import ContactRepository
from contacts_api.schemas.contact import ContactCreate, ContactUpdate
from contacts_api.utils.cpf import normalize_cpf


@dataclass
class ContactPageResult:
    items: list[Contact]
    total: int
    page: int
    per_page: int

    @property
    def last_page(self) -> int:
        return max(1, math.ceil(self.total / self.per_page))

    @property
    def first_item(self) -> int | None:
        if not self.items:
            return None
        return (self.page - 1) * self.per_page + 1

    @property
    def last_item(self) -> int | None:
        if not self.items:
            return None
        return (self.page - 1) * self.per_page + len(self.items)


class ContactService:
    def __init__(self, session: Session) -> None:
        self.session = session
        self.repository = ContactRepository(session)

    def list_contacts(self, page: int = 1, per_page: int | None = None) -> ContactPageResult:
        page = max(page, 1)
        per_page = min(max(per_page or settings.default_page_size, 1), settings.max_page_size)
        items, total = self.repository.list_page_descending(page, per_page)
        return ContactPageResult(items=items, total=total, page=page, per_page=per_page)

    def get_contact(self, contact_id: int) -> Contact:
        contact = self.repository.find_by_id(contact_id)
        if not contact:
            raise ContactNotFoundError(contact_id)
        return contact

    def create_contact(self, payload: ContactCreate) -> Contact:
        values = payload.model_dump()
        values["cpf"] = normalize_cpf(values["cpf"])
        self._ensure_unique(values)

        contact = self.repository.insert(values)
        logger.info("Contato criado id=%s", contact.id)
        return contact

    def update_contact(self, contact_id: int, payload: ContactUpdate) -> Contact:
        self.get_contact(contact_id)

        changes = payload.model_dump(exclude_unset=True)
        if "cpf" in changes:
            changes["cpf"] = normalize_cpf(changes["cpf"])
        self._ensure_unique(changes, exclude_id=contact_id)

        contact = self.repository.update_by_id(contact_id, changes)
        if not contact:
            raise ContactNotFoundError(contact_id)
        logger.info("Contato atualizado id=%s campos=%s", contact_id, sorted(changes))
        return contact

    def delete_contact(self, contact_id: int) -> None:
        if not self.repository.delete_by_id(contact_id):
            raise ContactNotFoundError(contact_id)
        logger.info("Contato removido id=%s", contact_id)

    def _ensure_unique(self, values: dict[str, Any], exclude_id: int | None = None) -> None:
        errors: list[FieldError] = []
        if "email" in values and self.repository.find_by_email(values["email"], exclude_id):
            errors.append(duplicate_error("email"))
        if "cpf" in values and self.repository.find_by_cpf(values["cpf"], exclude_id):
            errors.append(duplicate_error("cpf"))
        if errors:
            logger.info("Contato rejeitado por duplicidade: %s", ", ".join(e.field for e in errors))
            raise ContactValidationError(errors)
