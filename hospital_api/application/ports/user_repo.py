from typing import Any, Protocol, Optional
from datetime import datetime

class UserDto:
    def __init__(self, id: str, name: Any, email: Any, password: Any,
                 role: str, created_at: Optional[datetime]):
        self.id = id
        self.name = name
        self.email = email
        self.password = password
        self.role = role
        self.created_at = created_at

class UserRepository(Protocol):
    def get_by_email(self, email: Any) -> Optional[UserDto]:
        ...

    def create(self, name: Any, email: Any, password: Any, role: str, created_at: datetime) -> UserDto:
        ...
