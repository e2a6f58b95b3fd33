# hospital_api/schemas/auth/auth.py
from pydantic import BaseModel, Field, field_validator
from typing import Any, Optional

from ..common.common import require_present

class RegisterRequest(BaseModel):
    # Presence only; values are stored as sent.
    name: Any = Field(..., description="User's full name")
    email: Any = Field(..., description="Login email, unique across users")
    password: Any = Field(..., description="Stored as provided")

    @field_validator('name', 'email', 'password')
    @classmethod
    def must_be_present(cls, v):
        return require_present(v)

class LoginRequest(BaseModel):
    email: Any = Field(...)
    password: Any = Field(...)

    @field_validator('email', 'password')
    @classmethod
    def must_be_present(cls, v):
        return require_present(v)

class AuthUserData(BaseModel):
    id: str
    name: Any
    email: Any
    role: str

class AuthResponse(BaseModel):
    success: bool
    message: str
    data: AuthUserData
    token: Optional[str] = None
