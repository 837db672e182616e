# attendance_app/backend/models/db_models.py

from enum import Enum
from pydantic import BaseModel, Field
from datetime import date, datetime
from typing import Optional


class AttendanceStatus(str, Enum):
    """The two statuses an attendance row can hold."""
    PRESENT = "present"
    ABSENT = "absent"


class Student(BaseModel):
    """
    Represents a student, mapping to the 'students' table.
    """
    id: int = Field(..., description="Surrogate key generated by the database")
    name: str
    roll_no: Optional[str] = None
    created_at: Optional[datetime] = None


class AttendanceEntry(BaseModel):
    """
    One row of a student's attendance history, mapping to the 'attendance' table
    without its key columns.
    """
    date: date
    status: AttendanceStatus
    note: Optional[str] = None


class ClassAttendanceEntry(BaseModel):
    """
    An attendance row for a given day joined with the owning student.
    """
    student_id: int
    name: str
    roll_no: Optional[str] = None
    date: date
    status: AttendanceStatus
