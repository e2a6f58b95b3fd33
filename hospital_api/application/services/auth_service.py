import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Optional

from ..ports.user_repo import UserRepository, UserDto
from ..ports.audit_logger import AuditLogger
from ...exceptions import AuthError, ConflictError

logger = logging.getLogger(__name__)

DEFAULT_ROLE = "admin"
INVALID_CREDENTIALS = "Invalid email or password"


def issue_token(user_id: str, prefix: str = "token-") -> str:
    """Placeholder bearer token: the prefix followed by the user id. Not signed."""
    return f"{prefix}{user_id}"


@dataclass
class AuthService:
    user_repo: UserRepository
    audit_logger: Optional[AuditLogger] = None
    token_prefix: str = "token-"

    def _audit(self, action: str, email: Any, user_id: Optional[str] = None, ip_address: Optional[str] = None, success: bool = True, reason: Optional[str] = None) -> None:
        if self.audit_logger is None:
            return
        details = {"reason": reason} if reason else None
        self.audit_logger.log(action, email, user_id=user_id, ip_address=ip_address, success=success, details=details)

    def register(self, name: Any, email: Any, password: Any, ip_address: Optional[str] = None) -> UserDto:
        if self.user_repo.get_by_email(email):
            logger.warning("Registration rejected: email already registered")
            self._audit("register", email, ip_address=ip_address, success=False, reason="duplicate_email")
            raise ConflictError("User already exists")
        user = self.user_repo.create(
            name=name,
            email=email,
            password=password,
            role=DEFAULT_ROLE,
            created_at=datetime.now(timezone.utc),
        )
        self._audit("register", email, user_id=user.id, ip_address=ip_address)
        return user

    def login(self, email: Any, password: Any, ip_address: Optional[str] = None) -> UserDto:
        user = self.user_repo.get_by_email(email)
        # Same error for unknown email and wrong password
        if not user or user.password != password:
            self._audit("login", email, ip_address=ip_address, success=False)
            raise AuthError(INVALID_CREDENTIALS)
        self._audit("login", email, user_id=user.id, ip_address=ip_address)
        return user

    def token_for(self, user: UserDto) -> str:
        return issue_token(user.id, self.token_prefix)
