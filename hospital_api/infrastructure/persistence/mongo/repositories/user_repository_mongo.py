from datetime import datetime
from typing import Any, Optional

from pymongo.collection import Collection
from pymongo.errors import PyMongoError

from .....application.ports.user_repo import UserRepository, UserDto
from .....exceptions import StoreError

class MongoUserRepository(UserRepository):
    def __init__(self, collection: Collection):
        self.collection = collection

    def _to_dto(self, doc: dict) -> UserDto:
        return UserDto(
            id=str(doc["_id"]),
            name=doc.get("name"),
            email=doc.get("email"),
            password=doc.get("password"),
            role=doc.get("role"),
            created_at=doc.get("createdAt"),
        )

    def get_by_email(self, email: Any) -> Optional[UserDto]:
        try:
            doc = self.collection.find_one({"email": email})
        except PyMongoError as e:
            raise StoreError(error=str(e)) from e
        return self._to_dto(doc) if doc else None

    def create(self, name: Any, email: Any, password: Any, role: str, created_at: datetime) -> UserDto:
        doc = {
            "name": name,
            "email": email,
            "password": password,
            "role": role,
            "createdAt": created_at,
        }
        try:
            result = self.collection.insert_one(doc)
        except PyMongoError as e:
            raise StoreError(error=str(e)) from e
        doc["_id"] = result.inserted_id
        return self._to_dto(doc)
