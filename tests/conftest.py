# tests/conftest.py
import asyncio
import sys
from datetime import date, datetime, timezone
from typing import Dict, List, Optional, Tuple

import httpx
import pytest
import pytest_asyncio

from attendance_app.backend.api.dependencies import get_storage
from attendance_app.backend.api.utilities.limiter import limiter
from attendance_app.backend.db.storage import AttendanceStorage
from attendance_app.backend.main import app
from attendance_app.backend.models.db_models import (
    AttendanceEntry, AttendanceStatus, ClassAttendanceEntry, Student
)

# This is the crucial fix for Windows asyncio issues with pytest.
if sys.platform == "win32":
    asyncio.set_event_loop_policy(asyncio.WindowsSelectorEventLoopPolicy())


class InMemoryStorage(AttendanceStorage):
    """
    Dict-backed stand-in for the PostgreSQL client.

    Every method finishes without awaiting in between, so under a single event
    loop each upsert is as atomic as the ON CONFLICT statement it replaces.
    """
    def __init__(self):
        self.students: Dict[int, Student] = {}
        self.attendance: Dict[Tuple[int, date], Tuple[AttendanceStatus, Optional[str], datetime]] = {}
        self._next_id = 1

    async def list_students(self) -> List[Student]:
        return sorted(self.students.values(), key=lambda s: (s.created_at, s.id), reverse=True)

    async def create_student(self, name: str, roll_no: Optional[str]) -> Student:
        student = Student(id=self._next_id, name=name, roll_no=roll_no, created_at=datetime.now(timezone.utc))
        self.students[student.id] = student
        self._next_id += 1
        return student

    async def update_student(self, student_id: int, name: str, roll_no: Optional[str]) -> bool:
        if student_id not in self.students:
            return False
        self.students[student_id] = self.students[student_id].model_copy(update={"name": name, "roll_no": roll_no})
        return True

    async def delete_student(self, student_id: int) -> bool:
        if self.students.pop(student_id, None) is None:
            return False
        for key in [key for key in self.attendance if key[0] == student_id]:
            del self.attendance[key]
        return True

    async def student_exists(self, student_id: int) -> bool:
        return student_id in self.students

    async def upsert_attendance(self, student_id, attendance_date, status, note) -> bool:
        if student_id not in self.students:
            return False
        self.attendance[(student_id, attendance_date)] = (AttendanceStatus(status), note, datetime.now(timezone.utc))
        return True

    async def get_attendance_history(self, student_id, start=None, end=None) -> List[AttendanceEntry]:
        entries = [
            AttendanceEntry(date=day, status=status, note=note)
            for (owner, day), (status, note, _) in self.attendance.items()
            if owner == student_id
            and (start is None or day >= start)
            and (end is None or day <= end)
        ]
        return sorted(entries, key=lambda entry: entry.date, reverse=True)

    async def get_class_attendance(self, attendance_date) -> List[ClassAttendanceEntry]:
        return [
            ClassAttendanceEntry(
                student_id=owner,
                name=self.students[owner].name,
                roll_no=self.students[owner].roll_no,
                date=day,
                status=status,
            )
            for (owner, day), (status, _, _) in self.attendance.items()
            if day == attendance_date
        ]


@pytest.fixture
def storage() -> InMemoryStorage:
    return InMemoryStorage()


@pytest_asyncio.fixture
async def api_client(storage):
    """An httpx client talking to the ASGI app in-process, backed by the in-memory storage."""
    limiter.reset()
    app.dependency_overrides[get_storage] = lambda: storage
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as client:
        yield client
    app.dependency_overrides.clear()
