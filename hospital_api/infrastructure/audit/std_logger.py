import hashlib
import json
import logging
from datetime import datetime, timezone
from typing import Optional, Dict, Any

from ...application.ports.audit_logger import AuditLogger

AUDIT_LOGGER_NAME = "hospital_api.audit"


def email_fingerprint(email: Any) -> str:
    """Stable SHA-256 of the normalized email, so the raw address never reaches the logs."""
    normalized = str(email).strip().lower()
    return hashlib.sha256(normalized.encode()).hexdigest()


class StdAuditLogger(AuditLogger):
    """One JSON line per auth event; rejected attempts are logged at WARNING."""

    def __init__(self, logger: Optional[logging.Logger] = None) -> None:
        self._logger = logger or logging.getLogger(AUDIT_LOGGER_NAME)

    def log(self, action: str, email: Any, user_id: Optional[str] = None, ip_address: Optional[str] = None, success: bool = True, details: Optional[Dict[str, Any]] = None) -> None:
        entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "event": f"auth.{action}",
            "outcome": "success" if success else "rejected",
            "email_sha256": email_fingerprint(email),
            "user_id": user_id,
            "ip_address": ip_address,
        }
        if details:
            entry.update(details)
        level = logging.INFO if success else logging.WARNING
        self._logger.log(level, f"AUDIT: {json.dumps(entry, default=str)}")
