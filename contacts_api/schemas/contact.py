from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from contacts_api.models.contact import CPF_MAX_LENGTH, EMAIL_MAX_LENGTH, NAME_MAX_LENGTH
from contacts_api.schemas.common import IDModel, Timestamped
from contacts_api.utils.cpf import has_only_cpf_characters
from contacts_api.utils.email_validation import normalize_email


def _require(value: Any, field: str) -> Any:
    if value is None or (isinstance(value, str) and not value.strip()):
        raise ValueError(f"The {field} field is required.")
    return value


def _check_cpf_characters(value: str) -> str:
    if not has_only_cpf_characters(value):
        raise ValueError("The cpf field may only contain digits and punctuation (. - /).")
    return value


class ContactCreate(BaseModel):
    """Payload for a new contact. ``cpf`` is kept raw here; the service normalizes it."""

    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(max_length=NAME_MAX_LENGTH)
    email: str = Field(max_length=EMAIL_MAX_LENGTH)
    cpf: str = Field(max_length=CPF_MAX_LENGTH)

    @field_validator("name", "email", "cpf", mode="before")
    @classmethod
    def require_value(cls, value: Any, info: ValidationInfo) -> Any:
        return _require(value, info.field_name)

    @field_validator("email")
    @classmethod
    def validate_email_syntax(cls, value: str) -> str:
        return normalize_email(value)

    @field_validator("cpf")
    @classmethod
    def validate_cpf_characters(cls, value: str) -> str:
        return _check_cpf_characters(value)


class ContactUpdate(BaseModel):
    """Partial update: absent keys are left alone, present ones must carry a value."""

    model_config = ConfigDict(str_strip_whitespace=True)

    name: str | None = Field(default=None, max_length=NAME_MAX_LENGTH)
    email: str | None = Field(default=None, max_length=EMAIL_MAX_LENGTH)
    cpf: str | None = Field(default=None, max_length=CPF_MAX_LENGTH)

    @field_validator("name", "email", "cpf", mode="before")
    @classmethod
    def require_update_value(cls, value: Any, info: ValidationInfo) -> Any:
        return _require(value, info.field_name)

    @field_validator("email")
    @classmethod
    def validate_update_email(cls, value: str | None) -> str | None:
        if value is None:
            return value
        return normalize_email(value)

    @field_validator("cpf")
    @classmethod
    def validate_update_cpf(cls, value: str | None) -> str | None:
        if value is None:
            return value
        return _check_cpf_characters(value)


class ContactRead(IDModel, Timestamped):
    name: str
    email: str
    cpf: str


class ContactPage(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    data: list[ContactRead]
    current_page: int
    per_page: int
    total: int
    last_page: int
    from_: int | None = Field(default=None, alias="from")
    to: int | None = None
