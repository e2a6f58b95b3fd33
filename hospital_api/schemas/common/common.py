# hospital_api/schemas/common/common.py
from pydantic import BaseModel
from typing import Any, Optional

def is_present(value: Any) -> bool:
    """Truthiness check used for required body fields: null, "", 0 and false count as missing."""
    if value is None or value is False:
        return False
    if isinstance(value, str):
        return value != ""
    if isinstance(value, (int, float)):
        return value != 0
    return True

def require_present(value: Any) -> Any:
    if not is_present(value):
        raise ValueError("Field is required")
    return value

class ErrorResponse(BaseModel):
    success: bool = False
    message: str
    error: Optional[str] = None

class MessageResponse(BaseModel):
    success: bool = True
    message: str

class DataResponse(BaseModel):
    success: bool = True
    message: Optional[str] = None
    data: Any = None
