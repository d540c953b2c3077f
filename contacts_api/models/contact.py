from __future__ import annotations

from sqlalchemy import UniqueConstraint
from sqlmodel import Field

from contacts_api.models.base import IntIDModel, TimestampedModel

NAME_MAX_LENGTH = 255
EMAIL_MAX_LENGTH = 255
CPF_MAX_LENGTH = 20


class Contact(IntIDModel, TimestampedModel, table=True):
    __tablename__ = "contacts"
    __table_args__ = (
        UniqueConstraint("email", name="uq_contacts_email"),
        UniqueConstraint("cpf", name="uq_contacts_cpf"),
        # ids are never reused after a delete
        {"sqlite_autoincrement": True},
    )

    name: str = Field(max_length=NAME_MAX_LENGTH)
    email: str = Field(max_length=EMAIL_MAX_LENGTH)
    cpf: str = Field(max_length=CPF_MAX_LENGTH)
