import pytest
from fastapi.testclient import TestClient

from drivedesk.app.core.security import get_password_hash
from drivedesk.app.db.base import Base
from drivedesk.app.db.session import SessionLocal, engine
from drivedesk.app.main import app
from drivedesk.app.models.office import Office
from drivedesk.app.models.user import User


@pytest.fixture(autouse=True)
def setup_db():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


def seed_secretaries():
    db = SessionLocal()
    try:
        office = Office(name="Downtown")
        other = Office(name="Westside")
        db.add_all([office, other])
        db.commit()
        db.add_all(
            [
                User(email="sec@example.com", hashed_password=get_password_hash("secret"), role="secretary", office_id=office.id),
                User(email="west@example.com", hashed_password=get_password_hash("secret"), role="secretary", office_id=other.id),
            ]
        )
        db.commit()
    finally:
        db.close()


def login(client: TestClient, email: str = "sec@example.com") -> dict:
    resp = client.post("/auth/login", json={"email": email, "password": "secret"})
    assert resp.status_code == 200
    return {"Authorization": f"Bearer {resp.json()['access_token']}"}


def create_student(client: TestClient, headers: dict) -> int:
    resp = client.post("/students/", json={"name": "Student", "license_category": "B"}, headers=headers)
    assert resp.status_code == 201
    return resp.json()["id"]


def create_trainer(client: TestClient, headers: dict, name: str = "John Davis") -> int:
    resp = client.post("/trainers/", json={"name": name, "license_types": ["B"]}, headers=headers)
    assert resp.status_code == 201
    return resp.json()["id"]


def create_car(client: TestClient, headers: dict, plate: str = "ABC-123") -> int:
    resp = client.post(
        "/vehicles/",
        json={"vehicle_type": "car", "make": "Toyota", "model": "Corolla", "year": 2021, "license_plate": plate},
        headers=headers,
    )
    assert resp.status_code == 201
    return resp.json()["id"]


def setup_lesson_parties(client, headers):
    return create_student(client, headers), create_trainer(client, headers), create_car(client, headers)


def create_lesson(client, headers, student_id, trainer_id, vehicle_id, lesson_date="2024-01-10", start="10:00:00", end="11:00:00"):
    return client.post(
        "/lessons/",
        json={
            "student_id": student_id,
            "trainer_id": trainer_id,
            "vehicle_id": vehicle_id,
            "lesson_date": lesson_date,
            "start_time": start,
            "end_time": end,
        },
        headers=headers,
    )


def test_create_lesson_is_scheduled_and_names_trainer_and_car():
    seed_secretaries()
    client = TestClient(app)
    headers = login(client)
    student_id, trainer_id, vehicle_id = setup_lesson_parties(client, headers)

    resp = create_lesson(client, headers, student_id, trainer_id, vehicle_id)
    assert resp.status_code == 201
    data = resp.json()
    assert data["status"] == "scheduled"
    assert data["trainer_id"] == trainer_id
    assert data["trainer_name"] == "John Davis"
    assert data["vehicle_name"] == "Toyota Corolla"
    assert data["student_name"] == "Student"


def test_lesson_requires_trainer_and_vehicle():
    seed_secretaries()
    client = TestClient(app)
    headers = login(client)
    student_id = create_student(client, headers)

    resp = client.post(
        "/lessons/",
        json={"student_id": student_id, "lesson_date": "2024-01-10", "start_time": "10:00:00", "end_time": "11:00:00"},
        headers=headers,
    )
    assert resp.status_code == 422

    resp = create_lesson(client, headers, student_id, 999, 999)
    assert resp.status_code == 404
    assert resp.json()["detail"] == "Trainer not found"


def test_lesson_cannot_use_another_office_trainer_or_car():
    seed_secretaries()
    client = TestClient(app)
    headers = login(client)
    west = login(client, "west@example.com")
    student_id = create_student(client, headers)
    foreign_trainer = create_trainer(client, west, name="Mike Wilson")
    foreign_car = create_car(client, west, plate="WEST-1")

    resp = create_lesson(client, headers, student_id, foreign_trainer, foreign_car)
    assert resp.status_code == 404


def test_car_under_maintenance_cannot_be_booked():
    seed_secretaries()
    client = TestClient(app)
    headers = login(client)
    student_id, trainer_id, vehicle_id = setup_lesson_parties(client, headers)

    resp = client.post(
        f"/vehicles/{vehicle_id}/maintenance",
        json={"maintenance_date": "2024-01-09", "description": "Brake pads"},
        headers=headers,
    )
    assert resp.status_code == 201

    resp = create_lesson(client, headers, student_id, trainer_id, vehicle_id)
    assert resp.status_code == 400
    assert resp.json()["detail"] == "Vehicle is under maintenance"


def test_lesson_end_must_follow_start():
    seed_secretaries()
    client = TestClient(app)
    headers = login(client)
    student_id, trainer_id, vehicle_id = setup_lesson_parties(client, headers)

    resp = create_lesson(client, headers, student_id, trainer_id, vehicle_id, start="11:00:00", end="10:00:00")
    assert resp.status_code == 422


def test_complete_lesson_and_lock_it():
    seed_secretaries()
    client = TestClient(app)
    headers = login(client)
    student_id, trainer_id, vehicle_id = setup_lesson_parties(client, headers)
    lesson_id = create_lesson(client, headers, student_id, trainer_id, vehicle_id).json()["id"]

    resp = client.patch(f"/lessons/{lesson_id}", json={"status": "completed"}, headers=headers)
    assert resp.status_code == 200
    assert resp.json()["status"] == "completed"

    resp = client.patch(f"/lessons/{lesson_id}", json={"status": "cancelled"}, headers=headers)
    assert resp.status_code == 400

    progress = client.get(f"/students/{student_id}/progress", headers=headers).json()
    assert progress["progress"]["completed_lessons"] == 1
    assert progress["progress"]["percent"] == 6


def test_list_lessons_filters_by_status_date_and_trainer():
    seed_secretaries()
    client = TestClient(app)
    headers = login(client)
    student_id, trainer_id, vehicle_id = setup_lesson_parties(client, headers)
    other_trainer = create_trainer(client, headers, name="Mike Wilson")
    first = create_lesson(client, headers, student_id, trainer_id, vehicle_id, lesson_date="2024-01-10").json()["id"]
    create_lesson(client, headers, student_id, trainer_id, vehicle_id, lesson_date="2024-02-10")
    third = create_lesson(client, headers, student_id, other_trainer, vehicle_id, lesson_date="2024-03-10").json()["id"]
    client.patch(f"/lessons/{first}", json={"status": "cancelled"}, headers=headers)

    scheduled = client.get("/lessons/", params={"lesson_status": "scheduled"}, headers=headers).json()
    assert [l["lesson_date"] for l in scheduled] == ["2024-03-10", "2024-02-10"]

    january = client.get("/lessons/", params={"to_date": "2024-01-31"}, headers=headers).json()
    assert [l["id"] for l in january] == [first]

    mike = client.get("/lessons/", params={"trainer_id": other_trainer}, headers=headers).json()
    assert [l["id"] for l in mike] == [third]


def test_unknown_lesson_is_404():
    seed_secretaries()
    client = TestClient(app)
    headers = login(client)
    resp = client.patch("/lessons/404", json={"status": "completed"}, headers=headers)
    assert resp.status_code == 404
