from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from drivedesk.app.core.security import get_password_hash
from drivedesk.app.db.base import Base
from drivedesk.app.db.session import SessionLocal, engine
from drivedesk.app.main import app
from drivedesk.app.models.license_price import LicensePrice
from drivedesk.app.models.office import Office
from drivedesk.app.models.user import User


@pytest.fixture(autouse=True)
def setup_db():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


def seed_two_offices():
    db = SessionLocal()
    try:
        office_a = Office(name="Downtown")
        office_b = Office(name="Westside")
        db.add_all([office_a, office_b, LicensePrice(category="B", price=Decimal("500.00"))])
        db.commit()
        db.add_all(
            [
                User(email="sec.a@example.com", hashed_password=get_password_hash("secret"), role="secretary", office_id=office_a.id),
                User(email="sec.b@example.com", hashed_password=get_password_hash("secret"), role="secretary", office_id=office_b.id),
            ]
        )
        db.commit()
    finally:
        db.close()


def login(client: TestClient, email: str) -> dict:
    resp = client.post("/auth/login", json={"email": email, "password": "secret"})
    assert resp.status_code == 200
    return {"Authorization": f"Bearer {resp.json()['access_token']}"}


def complete_exams_with_balance_due(client: TestClient, headers: dict) -> int:
    resp = client.post("/students/", json={"name": "Alice Johnson", "license_category": "B"}, headers=headers)
    student_id = resp.json()["id"]
    for exam_type in ("theory", "practical"):
        client.post(
            "/exams/",
            json={"student_id": student_id, "exam_type": exam_type, "result": "passed", "exam_date": "2024-04-01"},
            headers=headers,
        )
    return student_id


def test_notifications_are_scoped_to_office():
    seed_two_offices()
    client = TestClient(app)
    headers_a = login(client, "sec.a@example.com")
    headers_b = login(client, "sec.b@example.com")
    complete_exams_with_balance_due(client, headers_a)

    items = client.get("/notifications/", headers=headers_a).json()
    assert {n["notification_type"] for n in items} == {"completion", "payment_due"}
    assert all(n["read"] is False for n in items)
    assert client.get("/notifications/", headers=headers_b).json() == []


def test_mark_one_and_all_read():
    seed_two_offices()
    client = TestClient(app)
    headers = login(client, "sec.a@example.com")
    complete_exams_with_balance_due(client, headers)
    items = client.get("/notifications/", headers=headers).json()

    resp = client.post(f"/notifications/{items[0]['id']}/read", headers=headers)
    assert resp.status_code == 200
    assert resp.json()["read"] is True
    unread = client.get("/notifications/", params={"unread_only": True}, headers=headers).json()
    assert len(unread) == 1

    resp = client.post("/notifications/read-all", headers=headers)
    assert resp.json() == {"success": True, "updated": 1}
    assert client.get("/notifications/", params={"unread_only": True}, headers=headers).json() == []


def test_cannot_mark_other_office_notification():
    seed_two_offices()
    client = TestClient(app)
    headers_a = login(client, "sec.a@example.com")
    headers_b = login(client, "sec.b@example.com")
    complete_exams_with_balance_due(client, headers_a)
    notification_id = client.get("/notifications/", headers=headers_a).json()[0]["id"]

    resp = client.post(f"/notifications/{notification_id}/read", headers=headers_b)
    assert resp.status_code == 404
