from __future__ import annotations

from typing import Any

from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, func, select

from contacts_api.core.exceptions import ContactConflictError, FieldError, duplicate_error
from contacts_api.core.logging_setup import logger
from contacts_api.models.base import MAX_DB_INTEGER, utcnow
from contacts_api.models.contact import Contact

_UNIQUE_FIELDS = ("email", "cpf")


class ContactRepository:
    """Data access for the ``contacts`` table. Every write commits on its own."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def find_by_id(self, contact_id: int) -> Contact | None:
        # ids outside the column range cannot exist and would overflow the driver
        if not 0 < contact_id <= MAX_DB_INTEGER:
            return None
        return self.session.get(Contact, contact_id)

    def find_by_email(self, email: str, exclude_id: int | None = None) -> Contact | None:
        statement = select(Contact).where(Contact.email == email)
        if exclude_id is not None:
            statement = statement.where(Contact.id != exclude_id)
        return self.session.exec(statement).first()

    def find_by_cpf(self, cpf: str, exclude_id: int | None = None) -> Contact | None:
        statement = select(Contact).where(Contact.cpf == cpf)
        if exclude_id is not None:
            statement = statement.where(Contact.id != exclude_id)
        return self.session.exec(statement).first()

    def list_page_descending(self, page: int, per_page: int) -> tuple[list[Contact], int]:
        total = self.session.exec(select(func.count()).select_from(Contact)).one()
        offset = (page - 1) * per_page
        # past the last row; the offset may not even fit a database integer
        if offset >= total:
            return [], total
        statement = (
            select(Contact)
            .order_by(Contact.id.desc())
            .offset(offset)
            .limit(per_page)
        )
        return list(self.session.exec(statement).all()), total

    def insert(self, values: dict[str, Any]) -> Contact:
        now = utcnow()
        contact = Contact(**values, created_at=now, updated_at=now)
        self.session.add(contact)
        self._commit()
        self.session.refresh(contact)
        return contact

    def update_by_id(self, contact_id: int, changes: dict[str, Any]) -> Contact | None:
        contact = self.find_by_id(contact_id)
        if not contact:
            return None
        for field, value in changes.items():
            setattr(contact, field, value)
        contact.updated_at = utcnow()
        self.session.add(contact)
        self._commit()
        self.session.refresh(contact)
        return contact

    def delete_by_id(self, contact_id: int) -> bool:
        contact = self.find_by_id(contact_id)
        if not contact:
            return False
        self.session.delete(contact)
        self._commit()
        return True

    def _commit(self) -> None:
        try:
            self.session.commit()
        except IntegrityError as exc:
            self.session.rollback()
            errors = _conflicting_fields(exc)
            logger.warning("Violação de unicidade em contacts: %s", ", ".join(e.field for e in errors))
            raise ContactConflictError(errors) from exc


def _conflicting_fields(exc: IntegrityError) -> list[FieldError]:
    # postgres drivers expose the constraint name; sqlite only says "... failed: contacts.email"
    diag = getattr(exc.orig, "diag", None)
    constraint = getattr(diag, "constraint_name", None)
    if constraint:
        fields = [field for field in _UNIQUE_FIELDS if constraint == f"uq_contacts_{field}"]
    else:
        message = str(exc.orig).lower()
        fields = [field for field in _UNIQUE_FIELDS if f"contacts.{field}" in message]
    return [duplicate_error(field) for field in fields or _UNIQUE_FIELDS]
