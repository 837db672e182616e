from abc import ABC, abstractmethod
from datetime import date
from typing import List, Optional

from ..models.db_models import AttendanceEntry, AttendanceStatus, ClassAttendanceEntry, Student


class AttendanceStorage(ABC):
    """
    Operations the services need from a persistence backend.

    Any backend that can perform an atomic insert-or-update keyed on
    (student_id, date) and cascade student deletion to attendance rows can
    implement this.
    """

    # --- Students ---

    @abstractmethod
    async def list_students(self) -> List[Student]:
        """All students, newest first."""

    @abstractmethod
    async def create_student(self, name: str, roll_no: Optional[str]) -> Student:
        ...

    @abstractmethod
    async def update_student(self, student_id: int, name: str, roll_no: Optional[str]) -> bool:
        """Returns False when no student has this id."""

    @abstractmethod
    async def delete_student(self, student_id: int) -> bool:
        """Deletes the student and all its attendance rows. Returns False when no student has this id."""

    @abstractmethod
    async def student_exists(self, student_id: int) -> bool:
        ...

    # --- Attendance ---

    @abstractmethod
    async def upsert_attendance(
        self, student_id: int, attendance_date: date, status: AttendanceStatus, note: Optional[str]
    ) -> bool:
        """
        Atomically inserts the (student_id, attendance_date) row or overwrites its
        status, note and timestamp. Returns False, writing nothing, when the
        student does not exist.
        """

    @abstractmethod
    async def get_attendance_history(
        self, student_id: int, start: Optional[date] = None, end: Optional[date] = None
    ) -> List[AttendanceEntry]:
        """Rows of one student within the inclusive bounds, most recent first."""

    @abstractmethod
    async def get_class_attendance(self, attendance_date: date) -> List[ClassAttendanceEntry]:
        ...
