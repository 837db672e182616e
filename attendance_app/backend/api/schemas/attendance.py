from pydantic import BaseModel, ConfigDict, Field
import datetime as dt
from typing import Any, List, Optional

from ...models.db_models import AttendanceStatus

class AttendanceMarkRequest(BaseModel):
    """Request body for marking a student present or absent on a day.

    Fields are loosely typed so that wrong values reach the service and are
    reported as 400 rather than as a 422 validation error.
    """
    date: Optional[Any] = Field(None, description="YYYY-MM-DD or an ISO-8601 timestamp. Defaults to today (UTC).")
    status: Optional[Any] = Field(None, description="Either 'present' or 'absent'.")
    note: Optional[Any] = Field(None, description="Optional free-text note.")

class AttendanceMarkResponse(BaseModel):
    message: str = "Attendance recorded"
    date: dt.date
    status: AttendanceStatus

class AttendanceHistoryItem(BaseModel):
    date: dt.date
    status: AttendanceStatus
    note: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)

class ClassAttendanceItem(BaseModel):
    student_id: int
    name: str
    roll_no: Optional[str] = None
    date: dt.date
    status: AttendanceStatus

    model_config = ConfigDict(from_attributes=True)

class ClassAttendanceResponse(BaseModel):
    date: dt.date
    attendance: List[ClassAttendanceItem]

    model_config = ConfigDict(from_attributes=True)
