from typing import Any, Dict, List, Optional

# Stored doctor document with "_id" in string form. Fields beyond the ones
# create writes are kept, since update may set any key.
DoctorDocument = Dict[str, Any]


class DoctorRepository:
    def list_all(self) -> List[DoctorDocument]:
        ...

    def list_latest(self, limit: int) -> List[DoctorDocument]:
        ...

    def list_by_specialty(self, specialty: str) -> List[DoctorDocument]:
        ...

    def get_by_id(self, doctor_id: str) -> Optional[DoctorDocument]:
        ...

    def get_by_email(self, email: Any) -> Optional[DoctorDocument]:
        ...

    def create(self, fields: Dict[str, Any]) -> DoctorDocument:
        ...

    def update(self, doctor_id: str, fields: Dict[str, Any]) -> bool:
        """Apply a partial $set; False when no document matched."""
        ...

    def delete(self, doctor_id: str) -> bool:
        ...
