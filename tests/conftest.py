from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

import pytest
from bson import ObjectId
from fastapi.testclient import TestClient

from hospital_api.application.ports.user_repo import UserDto
from hospital_api.main import create_app
from hospital_api.routers.auth_router import get_user_repo
from hospital_api.routers.doctors_router import get_doctor_repo


class FakeUserRepo:
    def __init__(self):
        self.users: List[UserDto] = []

    def get_by_email(self, email: str) -> Optional[UserDto]:
        return next((u for u in self.users if u.email == email), None)

    def create(self, name, email, password, role, created_at) -> UserDto:
        user = UserDto(str(ObjectId()), name, email, password, role, created_at)
        self.users.append(user)
        return user


class FakeDoctorRepo:
    def __init__(self):
        self.docs: Dict[str, Dict[str, Any]] = {}

    def _document(self, doc_id: str) -> Dict[str, Any]:
        return {"_id": doc_id, **self.docs[doc_id]}

    def list_all(self):
        return [self._document(i) for i in self.docs]

    def list_latest(self, limit: int):
        ordered = sorted(self.docs, key=lambda i: self.docs[i]["createdAt"], reverse=True)
        return [self._document(i) for i in ordered[:limit]]

    def list_by_specialty(self, specialty: str):
        return [self._document(i) for i, d in self.docs.items() if d.get("specialty") == specialty]

    def get_by_id(self, doctor_id: str):
        return self._document(doctor_id) if doctor_id in self.docs else None

    def get_by_email(self, email: str):
        return next((self._document(i) for i, d in self.docs.items() if d.get("email") == email), None)

    def create(self, fields):
        doc_id = str(ObjectId())
        self.docs[doc_id] = dict(fields)
        return self._document(doc_id)

    def update(self, doctor_id, fields) -> bool:
        if doctor_id not in self.docs:
            return False
        self.docs[doctor_id].update(fields)
        return True

    def delete(self, doctor_id) -> bool:
        return self.docs.pop(doctor_id, None) is not None


class RecordingAuditLogger:
    def __init__(self):
        self.entries = []

    def log(self, action, email, user_id=None, ip_address=None, success=True, details=None):
        self.entries.append((action, email, user_id, success))


def doctor_payload(**overrides) -> Dict[str, Any]:
    payload = {
        "name": "Dr. Ayesha Rahman",
        "specialty": "Cardiology",
        "email": "ayesha@hospital.test",
        "phone": "+8801700000000",
        "experience": 12,
        "bio": "Interventional cardiologist.",
    }
    payload.update(overrides)
    return payload


def seed_doctor(repo: FakeDoctorRepo, created_at: datetime, **overrides) -> str:
    fields = doctor_payload(**overrides)
    fields.update({"imageUrl": None, "createdAt": created_at, "updatedAt": created_at})
    return repo.create(fields)["_id"]


@pytest.fixture
def user_repo():
    return FakeUserRepo()


@pytest.fixture
def doctor_repo():
    return FakeDoctorRepo()


@pytest.fixture
def client(user_repo, doctor_repo):
    app = create_app()
    app.dependency_overrides[get_user_repo] = lambda: user_repo
    app.dependency_overrides[get_doctor_repo] = lambda: doctor_repo
    # Lifespan is not entered, so no MongoDB connection is attempted.
    return TestClient(app)


@pytest.fixture
def now():
    return datetime.now(timezone.utc)
