from fastapi import APIRouter, Body, Depends, HTTPException, Query, status
from fastapi.responses import Response

from contacts_api.api.deps import get_contact_service
from contacts_api.api.errors import validate_body
from contacts_api.core.config import settings
from contacts_api.core.exceptions import ContactNotFoundError, ContactValidationError
from contacts_api.schemas.contact import ContactCreate, ContactPage, ContactRead, ContactUpdate
from contacts_api.services.contact import ContactPageResult, ContactService

router = APIRouter(prefix="/contacts", tags=["contacts"])


def _not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Contact not found")


def _unprocessable(exc: ContactValidationError) -> HTTPException:
    return HTTPException(status_code=422, detail=exc.as_detail())


def _serialize_page(result: ContactPageResult) -> ContactPage:
    return ContactPage(
        data=[ContactRead.model_validate(contact, from_attributes=True) for contact in result.items],
        current_page=result.page,
        per_page=result.per_page,
        total=result.total,
        last_page=result.last_page,
        from_=result.first_item,
        to=result.last_item,
    )


@router.get("", response_model=ContactPage)
def list_contacts(
    page: int = Query(1, ge=1),
    per_page: int = Query(settings.default_page_size, ge=1, le=settings.max_page_size),
    service: ContactService = Depends(get_contact_service),
) -> ContactPage:
    return _serialize_page(service.list_contacts(page, per_page))


@router.post("", response_model=ContactRead, status_code=status.HTTP_201_CREATED)
def create_contact(
    payload: ContactCreate | None = Body(default=None),
    service: ContactService = Depends(get_contact_service),
) -> ContactRead:
    # no body at all fails the same way as an empty object
    if payload is None:
        payload = validate_body(ContactCreate, {})
    try:
        contact = service.create_contact(payload)
    except ContactValidationError as exc:
        raise _unprocessable(exc) from exc
    return ContactRead.model_validate(contact, from_attributes=True)


@router.get("/{contact_id}", response_model=ContactRead)
def get_contact(
    contact_id: int,
    service: ContactService = Depends(get_contact_service),
) -> ContactRead:
    try:
        contact = service.get_contact(contact_id)
    except ContactNotFoundError as exc:
        raise _not_found() from exc
    return ContactRead.model_validate(contact, from_attributes=True)


@router.api_route("/{contact_id}", methods=["PUT", "PATCH"], response_model=ContactRead)
def update_contact(
    contact_id: int,
    payload: ContactUpdate | None = Body(default=None),
    service: ContactService = Depends(get_contact_service),
) -> ContactRead:
    try:
        contact = service.update_contact(contact_id, payload if payload is not None else ContactUpdate())
    except ContactNotFoundError as exc:
        raise _not_found() from exc
    except ContactValidationError as exc:
        raise _unprocessable(exc) from exc
    return ContactRead.model_validate(contact, from_attributes=True)


@router.delete("/{contact_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
def delete_contact(
    contact_id: int,
    service: ContactService = Depends(get_contact_service),
) -> Response:
    try:
        service.delete_contact(contact_id)
    except ContactNotFoundError as exc:
        raise _not_found() from exc
    return Response(status_code=status.HTTP_204_NO_CONTENT)
