from typing import Annotated, Generator

from fastapi import Depends
from sqlmodel import Session

from contacts_api.db.session import get_session
from contacts_api.services.contact import ContactService


def get_db() -> Generator[Session, None, None]:
    yield from get_session()


def get_contact_service(session: Annotated[Session, Depends(get_db)]) -> ContactService:
    return ContactService(session)
