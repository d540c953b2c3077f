from fastapi import status

from contacts_api.core.config import settings


def test_root_reports_service_name(client) -> None:
    response = client.get("/")
    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {"service": settings.project_name}


def test_live(client) -> None:
    assert client.get("/health/live").json() == {"status": "ok"}


def test_ready_checks_database(client) -> None:
    response = client.get("/health/ready")
    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {"status": "ready"}
