# attendance_app/backend/api/schemas/student.py
from pydantic import BaseModel, ConfigDict, Field
from datetime import datetime
from typing import Any, Optional

class StudentWriteRequest(BaseModel):
    """Request body for creating or replacing a student.

    ``name`` is optional here so that a missing or non-text name is reported as
    400 by the service instead of a 422 validation error.
    """
    name: Optional[Any] = Field(None, description="Display name of the student, required.")
    roll_no: Optional[Any] = Field(None, description="Free-form roll number.")

class StudentResponse(BaseModel):
    id: int
    name: str
    roll_no: Optional[str] = None
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)

class MessageResponse(BaseModel):
    message: str
