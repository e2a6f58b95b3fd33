# hospital_api/schemas/doctors/doctor.py
from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Any, Dict

from ..common.common import require_present

class DoctorCreate(BaseModel):
    name: Any = Field(...)
    specialty: Any = Field(...)
    email: Any = Field(...)
    phone: Any = Field(...)
    # Presence only: 0 and other falsy values are accepted, coerced later.
    experience: Any = Field(...)
    bio: Any = Field(...)
    imageUrl: Any = None

    @field_validator('name', 'specialty', 'email', 'phone', 'bio')
    @classmethod
    def must_be_present(cls, v):
        return require_present(v)

    @field_validator('imageUrl')
    @classmethod
    def empty_image_url_is_null(cls, v):
        return v or None

class DoctorUpdate(BaseModel):
    """Partial update. Any key in the body is written as sent, without validation."""
    model_config = ConfigDict(extra='allow')

    name: Any = None
    specialty: Any = None
    email: Any = None
    phone: Any = None
    experience: Any = None
    bio: Any = None
    imageUrl: Any = None

    def changes(self) -> Dict[str, Any]:
        fields = self.model_dump(exclude_unset=True)
        fields.update(self.model_extra or {})
        # The store identifier is immutable.
        fields.pop("_id", None)
        return fields
