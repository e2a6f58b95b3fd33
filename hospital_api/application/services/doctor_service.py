import logging
import re
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, List, Optional

from ..ports.doctor_repo import DoctorRepository, DoctorDocument
from ...exceptions import ConflictError, NotFoundError
from ...schemas.doctors.doctor import DoctorCreate, DoctorUpdate

logger = logging.getLogger(__name__)

DOCTOR_NOT_FOUND = "Doctor not found"

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def coerce_experience(value: Any) -> Optional[int]:
    """Parse the leading integer of the input ("12 years" -> 12, 7.9 -> 7).

    Input with no leading integer yields None, which is what gets stored.
    """
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if value != value or value in (float("inf"), float("-inf")):
            return None
        return int(value)
    match = _LEADING_INT.match(str(value))
    return int(match.group(1)) if match else None


@dataclass
class DoctorService:
    repo: DoctorRepository
    latest_limit: int = 6

    def __post_init__(self):
        if self.latest_limit < 1:
            raise ValueError(f"latest_limit must be at least 1, got {self.latest_limit}")

    def list_all(self) -> List[DoctorDocument]:
        return self.repo.list_all()

    def list_latest(self) -> List[DoctorDocument]:
        return self.repo.list_latest(self.latest_limit)

    def list_by_specialty(self, specialty: str) -> List[DoctorDocument]:
        return self.repo.list_by_specialty(specialty)

    def get(self, doctor_id: str) -> DoctorDocument:
        doctor = self.repo.get_by_id(doctor_id)
        if not doctor:
            raise NotFoundError(DOCTOR_NOT_FOUND)
        return doctor

    def create(self, data: DoctorCreate) -> DoctorDocument:
        if self.repo.get_by_email(data.email):
            logger.warning("Doctor create rejected: duplicate email")
            raise ConflictError("Doctor with this email already exists")
        now = datetime.now(timezone.utc)
        return self.repo.create({
            "name": data.name,
            "specialty": data.specialty,
            "email": data.email,
            "phone": data.phone,
            "experience": coerce_experience(data.experience),
            "bio": data.bio,
            "imageUrl": data.imageUrl,
            "createdAt": now,
            "updatedAt": now,
        })

    def update(self, doctor_id: str, data: DoctorUpdate) -> None:
        # Neither required fields nor email uniqueness are re-checked here.
        changes = data.changes()
        changes["updatedAt"] = datetime.now(timezone.utc)
        if not self.repo.update(doctor_id, changes):
            raise NotFoundError(DOCTOR_NOT_FOUND)

    def delete(self, doctor_id: str) -> None:
        if not self.repo.delete(doctor_id):
            raise NotFoundError(DOCTOR_NOT_FOUND)
