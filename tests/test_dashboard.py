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


def seed():
    db = SessionLocal()
    try:
        office_a = Office(name="Downtown", subscription_plan="enterprise")
        office_b = Office(name="Westside", subscription_plan="basic")
        office_c = Office(name="North End", subscription_plan="basic")
        db.add_all([office_a, office_b, office_c, LicensePrice(category="B", price=Decimal("500.00"))])
        db.commit()
        db.add_all(
            [
                User(email="root@example.com", hashed_password=get_password_hash("secret"), role="superadmin"),
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


def add_student(client, headers, name):
    return client.post("/students/", json={"name": name, "license_category": "B"}, headers=headers).json()["id"]


def test_office_dashboard_stats():
    seed()
    client = TestClient(app)
    headers = login(client, "sec.a@example.com")
    other = login(client, "sec.b@example.com")

    finished = add_student(client, headers, "Finished")
    learning = add_student(client, headers, "Learning")
    add_student(client, other, "Elsewhere")

    client.post("/payments/", json={"student_id": finished, "amount": "500.00"}, headers=headers)
    for exam_type in ("theory", "practical"):
        client.post(
            "/exams/",
            json={"student_id": finished, "exam_type": exam_type, "result": "passed", "exam_date": "2024-01-01"},
            headers=headers,
        )
    client.post("/payments/", json={"student_id": learning, "amount": "100.00"}, headers=headers)
    client.post("/payments/", json={"student_id": learning, "amount": "50.00", "status": "pending"}, headers=headers)
    trainer_id = client.post("/trainers/", json={"name": "John Davis"}, headers=headers).json()["id"]
    car = {"vehicle_type": "car", "make": "Toyota", "model": "Corolla", "year": 2021}
    car_id = client.post("/vehicles/", json={**car, "license_plate": "CAR-1"}, headers=headers).json()["id"]
    spare_id = client.post("/vehicles/", json={**car, "license_plate": "CAR-2"}, headers=headers).json()["id"]
    client.post("/vehicles/", json={**car, "license_plate": "WEST-1"}, headers=other)
    client.post(
        "/vehicles/",
        json={"vehicle_type": "motorcycle", "make": "Honda", "model": "CBR", "year": 2022, "license_plate": "MOTO-1", "engine_displacement": 500},
        headers=headers,
    )
    client.post(f"/vehicles/{spare_id}/maintenance", json={"maintenance_date": "2024-02-01", "description": "Oil change"}, headers=headers)
    resp = client.post(
        "/lessons/",
        json={
            "student_id": learning,
            "trainer_id": trainer_id,
            "vehicle_id": car_id,
            "lesson_date": "2024-02-01",
            "start_time": "09:00:00",
            "end_time": "10:00:00",
        },
        headers=headers,
    )
    assert resp.status_code == 201

    for name, presence in (("Reception", "present"), ("Accountant", "absent")):
        member = client.post("/staff/", json={"name": name, "role": name}, headers=headers).json()
        if presence == "absent":
            client.put(f"/staff/{member['id']}", json={"status": "absent"}, headers=headers)
    client.post("/staff/", json={"name": "Elsewhere", "role": "Reception"}, headers=other)
    client.post("/charges/", json={"category": "salary", "amount": "3000.00", "beneficiary": "Reception"}, headers=headers)
    client.post("/charges/", json={"category": "water", "amount": "150.00", "beneficiary": "City"}, headers=headers)
    client.post("/charges/", json={"category": "water", "amount": "99.00", "beneficiary": "City"}, headers=other)

    resp = client.get("/dashboard/stats", headers=headers)
    assert resp.status_code == 200
    data = resp.json()
    assert data["total_students"] == 1
    assert data["archived_students"] == 1
    assert data["active_lessons"] == 1
    assert Decimal(data["revenue"]) == Decimal("100.00")
    assert data["unread_notifications"] == 2
    assert data["available_cars"] == 1
    assert Decimal(data["total_charges"]) == Decimal("3150.00")
    assert Decimal(data["staff_charges"]) == Decimal("3000.00")
    assert data["total_staff"] == 2
    assert data["present_staff"] == 1
    assert data["absent_staff"] == 1


def test_superadmin_stats_and_guard():
    seed()
    client = TestClient(app)
    secretary = login(client, "sec.a@example.com")
    add_student(client, secretary, "One")
    student_id = add_student(client, secretary, "Two")
    client.post("/payments/", json={"student_id": student_id, "amount": "75.00"}, headers=secretary)
    client.post("/trainers/", json={"name": "John Davis"}, headers=secretary)

    assert client.get("/dashboard/superadmin", headers=secretary).status_code == 403

    resp = client.get("/dashboard/superadmin", headers=login(client, "root@example.com"))
    assert resp.status_code == 200
    data = resp.json()
    assert data["total_offices"] == 3
    assert data["total_students"] == 2
    assert data["total_trainers"] == 1
    assert Decimal(data["total_revenue"]) == Decimal("75.00")
    assert data["subscriptions"] == {"basic": 2, "business": 0, "enterprise": 1}
