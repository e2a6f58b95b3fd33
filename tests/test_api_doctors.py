from datetime import datetime, timedelta, timezone

from conftest import doctor_payload, seed_doctor


def test_list_empty(client):
    response = client.get("/api/doctors")
    assert response.status_code == 200
    assert response.json() == {"success": True, "data": []}


def test_create_returns_full_record(client):
    response = client.post("/api/doctors", json=doctor_payload())
    assert response.status_code == 201
    payload = response.json()
    assert payload["message"] == "Doctor added successfully"
    data = payload["data"]
    assert data["_id"]
    assert data["experience"] == 12
    assert data["imageUrl"] is None
    assert data["createdAt"] == data["updatedAt"]


def test_create_with_zero_experience_succeeds(client):
    response = client.post("/api/doctors", json=doctor_payload(experience=0))
    assert response.status_code == 201
    assert response.json()["data"]["experience"] == 0


def test_create_coerces_string_experience(client):
    response = client.post("/api/doctors", json=doctor_payload(experience="9"))
    assert response.json()["data"]["experience"] == 9


def test_create_missing_experience_is_400(client, doctor_repo):
    body = doctor_payload()
    del body["experience"]
    response = client.post("/api/doctors", json=body)
    assert response.status_code == 400
    assert response.json()["message"] == "All fields required"
    assert doctor_repo.docs == {}


def test_create_duplicate_email_is_409(client, doctor_repo):
    assert client.post("/api/doctors", json=doctor_payload()).status_code == 201
    second = client.post("/api/doctors", json=doctor_payload(name="Other"))
    assert second.status_code == 409
    assert second.json()["message"] == "Doctor with this email already exists"
    assert len(doctor_repo.docs) == 1


def test_latest_returns_six_newest_first(client, doctor_repo):
    base = datetime(2024, 1, 1, tzinfo=timezone.utc)
    for i in range(10):
        seed_doctor(doctor_repo, base + timedelta(hours=i), email=f"doc{i}@hospital.test")
    response = client.get("/api/doctors/latest")
    assert response.status_code == 200
    emails = [d["email"] for d in response.json()["data"]]
    assert emails == [f"doc{i}@hospital.test" for i in range(9, 3, -1)]


def test_latest_with_fewer_than_six(client, doctor_repo):
    seed_doctor(doctor_repo, datetime.now(timezone.utc))
    assert len(client.get("/api/doctors/latest").json()["data"]) == 1


def test_get_by_id(client, doctor_repo):
    doctor_id = seed_doctor(doctor_repo, datetime.now(timezone.utc))
    response = client.get(f"/api/doctors/{doctor_id}")
    assert response.status_code == 200
    assert response.json()["data"]["_id"] == doctor_id


def test_get_unknown_and_malformed_ids_are_404(client):
    assert client.get("/api/doctors/65f1c2a9e4b0a1b2c3d4e5f6").status_code == 404
    response = client.get("/api/doctors/not-an-object-id")
    assert response.status_code == 404
    assert response.json() == {"success": False, "message": "Doctor not found"}


def test_update_changes_only_supplied_field(client, doctor_repo):
    created = datetime(2024, 1, 1, tzinfo=timezone.utc)
    doctor_id = seed_doctor(doctor_repo, created)
    before = client.get(f"/api/doctors/{doctor_id}").json()["data"]

    response = client.put(f"/api/doctors/{doctor_id}", json={"bio": "new"})
    assert response.status_code == 200
    assert response.json() == {"success": True, "message": "Doctor updated successfully"}

    after = client.get(f"/api/doctors/{doctor_id}").json()["data"]
    assert after["bio"] == "new"
    assert after["updatedAt"] != before["updatedAt"]
    unchanged = {k: v for k, v in before.items() if k not in ("bio", "updatedAt")}
    assert {k: after[k] for k in unchanged} == unchanged


def test_update_missing_is_404(client):
    response = client.put("/api/doctors/65f1c2a9e4b0a1b2c3d4e5f6", json={"bio": "new"})
    assert response.status_code == 404


def test_delete_twice(client, doctor_repo):
    doctor_id = seed_doctor(doctor_repo, datetime.now(timezone.utc))
    first = client.delete(f"/api/doctors/{doctor_id}")
    assert first.status_code == 200
    assert first.json()["message"] == "Doctor deleted successfully"
    assert client.delete(f"/api/doctors/{doctor_id}").status_code == 404


def test_specialty_is_exact_and_case_sensitive(client, doctor_repo):
    now = datetime.now(timezone.utc)
    seed_doctor(doctor_repo, now, email="a@hospital.test", specialty="Cardiology")
    seed_doctor(doctor_repo, now, email="b@hospital.test", specialty="cardiology")
    seed_doctor(doctor_repo, now, email="c@hospital.test", specialty="Neurology")
    response = client.get("/api/doctors/specialty/Cardiology")
    assert response.status_code == 200
    data = response.json()["data"]
    assert [d["email"] for d in data] == ["a@hospital.test"]


def test_specialty_route_not_shadowed_by_id_route(client):
    response = client.get("/api/doctors/specialty/Dermatology")
    assert response.status_code == 200
    assert response.json()["data"] == []


def test_create_accepts_numeric_phone(client):
    response = client.post("/api/doctors", json=doctor_payload(phone=8801700000000))
    assert response.status_code == 201
    assert response.json()["data"]["phone"] == 8801700000000


def test_create_empty_required_field_is_400(client):
    response = client.post("/api/doctors", json=doctor_payload(phone=""))
    assert response.status_code == 400
    assert response.json()["error"] == "phone"


def test_update_sets_arbitrary_fields_and_returns_them_on_read(client, doctor_repo):
    doctor_id = seed_doctor(doctor_repo, datetime(2024, 1, 1, tzinfo=timezone.utc))
    response = client.put(f"/api/doctors/{doctor_id}", json={"department": "ICU", "phone": 5551234})
    assert response.status_code == 200
    data = client.get(f"/api/doctors/{doctor_id}").json()["data"]
    assert data["department"] == "ICU"
    assert data["phone"] == 5551234


def test_update_ignores_identifier_in_body(client, doctor_repo):
    doctor_id = seed_doctor(doctor_repo, datetime(2024, 1, 1, tzinfo=timezone.utc))
    response = client.put(f"/api/doctors/{doctor_id}", json={"_id": "65f1c2a9e4b0a1b2c3d4e5f6", "bio": "b"})
    assert response.status_code == 200
    assert client.get(f"/api/doctors/{doctor_id}").json()["data"]["_id"] == doctor_id
