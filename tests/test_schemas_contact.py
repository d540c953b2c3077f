import pytest
from pydantic import ValidationError

from contacts_api.schemas.contact import ContactCreate, ContactUpdate


def _fields(exc: ValidationError) -> set[str]:
    return {str(error["loc"][0]) for error in exc.errors()}


def test_create_requires_every_field() -> None:
    with pytest.raises(ValidationError) as exc_info:
        ContactCreate.model_validate({})
    assert _fields(exc_info.value) == {"name", "email", "cpf"}


def test_create_rejects_blank_and_null_values() -> None:
    with pytest.raises(ValidationError) as exc_info:
        ContactCreate.model_validate({"name": "   ", "email": None, "cpf": ""})
    assert _fields(exc_info.value) == {"name", "email", "cpf"}
    messages = {str(error["loc"][0]): str(error["ctx"]["error"]) for error in exc_info.value.errors()}
    assert messages["name"] == "The name field is required."


def test_create_keeps_raw_cpf_and_normalizes_email() -> None:
    payload = ContactCreate(name="  Maria Silva ", email="Maria@Example.COM", cpf="123.456.789-00")
    assert payload.name == "Maria Silva"
    assert payload.email == "maria@example.com"
    assert payload.cpf == "123.456.789-00"


def test_create_rejects_malformed_email() -> None:
    with pytest.raises(ValidationError) as exc_info:
        ContactCreate(name="Maria", email="not-an-email", cpf="12345678900")
    assert _fields(exc_info.value) == {"email"}


def test_create_rejects_cpf_with_letters() -> None:
    with pytest.raises(ValidationError) as exc_info:
        ContactCreate(name="Maria", email="maria@example.com", cpf="123.456.789-AB")
    error = exc_info.value.errors()[0]
    assert error["loc"] == ("cpf",)
    assert "only contain digits" in str(error["ctx"]["error"])


def test_length_limits() -> None:
    with pytest.raises(ValidationError) as exc_info:
        ContactCreate(name="x" * 256, email="maria@example.com", cpf="1" * 21)
    assert _fields(exc_info.value) == {"name", "cpf"}

    ContactCreate(name="x" * 255, email="maria@example.com", cpf="1" * 20)


def test_update_accepts_partial_payload() -> None:
    payload = ContactUpdate.model_validate({"name": "Novo Nome"})
    assert payload.model_dump(exclude_unset=True) == {"name": "Novo Nome"}


def test_update_rejects_explicit_null() -> None:
    with pytest.raises(ValidationError) as exc_info:
        ContactUpdate.model_validate({"email": None})
    assert _fields(exc_info.value) == {"email"}


def test_update_uses_same_cpf_length_bound_as_create() -> None:
    ContactUpdate(cpf="1" * 20)
    with pytest.raises(ValidationError):
        ContactUpdate(cpf="1" * 21)
