from typing import Any, Dict, List, Optional

from pymongo import DESCENDING
from pymongo.collection import Collection
from pymongo.errors import PyMongoError

from .....application.ports.doctor_repo import DoctorRepository, DoctorDocument
from .....exceptions import StoreError
from .object_ids import parse_object_id


class MongoDoctorRepository(DoctorRepository):
    def __init__(self, collection: Collection):
        self.collection = collection

    def _to_document(self, doc: dict) -> DoctorDocument:
        out = dict(doc)
        out["_id"] = str(doc["_id"])
        return out

    def _find(self, query: Dict[str, Any], sort=None, limit: Optional[int] = None) -> List[DoctorDocument]:
        try:
            cursor = self.collection.find(query)
            if sort:
                cursor = cursor.sort(sort)
            if limit is not None:
                if limit < 1:
                    raise ValueError(f"limit must be at least 1, got {limit}")
                cursor = cursor.limit(limit)
            return [self._to_document(d) for d in cursor]
        except PyMongoError as e:
            raise StoreError(error=str(e)) from e

    def list_all(self) -> List[DoctorDocument]:
        return self._find({})

    def list_latest(self, limit: int) -> List[DoctorDocument]:
        return self._find({}, sort=[("createdAt", DESCENDING)], limit=limit)

    def list_by_specialty(self, specialty: str) -> List[DoctorDocument]:
        return self._find({"specialty": specialty})

    def get_by_id(self, doctor_id: str) -> Optional[DoctorDocument]:
        oid = parse_object_id(doctor_id)
        if oid is None:
            return None
        try:
            doc = self.collection.find_one({"_id": oid})
        except PyMongoError as e:
            raise StoreError(error=str(e)) from e
        return self._to_document(doc) if doc else None

    def get_by_email(self, email: Any) -> Optional[DoctorDocument]:
        try:
            doc = self.collection.find_one({"email": email})
        except PyMongoError as e:
            raise StoreError(error=str(e)) from e
        return self._to_document(doc) if doc else None

    def create(self, fields: Dict[str, Any]) -> DoctorDocument:
        doc = dict(fields)
        try:
            result = self.collection.insert_one(doc)
        except PyMongoError as e:
            raise StoreError(error=str(e)) from e
        doc["_id"] = result.inserted_id
        return self._to_document(doc)

    def update(self, doctor_id: str, fields: Dict[str, Any]) -> bool:
        oid = parse_object_id(doctor_id)
        if oid is None:
            return False
        try:
            result = self.collection.update_one({"_id": oid}, {"$set": fields})
        except PyMongoError as e:
            raise StoreError(error=str(e)) from e
        return result.matched_count > 0

    def delete(self, doctor_id: str) -> bool:
        oid = parse_object_id(doctor_id)
        if oid is None:
            return False
        try:
            result = self.collection.delete_one({"_id": oid})
        except PyMongoError as e:
            raise StoreError(error=str(e)) from e
        return result.deleted_count > 0
