import logging
from datetime import date
from typing import List, Optional
import asyncpg

from ..models.db_models import AttendanceEntry, AttendanceStatus, ClassAttendanceEntry, Student
from .storage import AttendanceStorage

logger = logging.getLogger(__name__)

# students.id is a SERIAL (int4) column
_ID_MIN = -2_147_483_648
_ID_MAX = 2_147_483_647


def _affected_rows(status_message: str) -> int:
    """Turns an asyncpg command tag such as 'DELETE 1' into the row count."""
    try:
        return int(status_message.split()[-1])
    except (AttributeError, IndexError, ValueError):
        return 0


def _is_storable_id(student_id: int) -> bool:
    """Ids outside the int4 range cannot match any row; asyncpg would reject them."""
    return _ID_MIN <= student_id <= _ID_MAX


class AsyncPostgresClient(AttendanceStorage):
    """
    PostgreSQL client that runs every student and attendance query.
    """
    def __init__(self, pool: asyncpg.Pool):
        self._pool = pool

    async def list_students(self) -> List[Student]:
        query = "SELECT id, name, roll_no, created_at FROM students ORDER BY created_at DESC, id DESC;"
        async with self._pool.acquire() as connection:
            records = await connection.fetch(query)
            return [Student(**record) for record in records]

    async def create_student(self, name: str, roll_no: Optional[str]) -> Student:
        query = """
            INSERT INTO students (name, roll_no)
            VALUES ($1, $2)
            RETURNING id, name, roll_no, created_at;
        """
        async with self._pool.acquire() as connection:
            record = await connection.fetchrow(query, name, roll_no)
            return Student(**record)

    async def update_student(self, student_id: int, name: str, roll_no: Optional[str]) -> bool:
        if not _is_storable_id(student_id):
            return False
        query = "UPDATE students SET name = $2, roll_no = $3 WHERE id = $1;"
        async with self._pool.acquire() as connection:
            status_message = await connection.execute(query, student_id, name, roll_no)
            return _affected_rows(status_message) > 0

    async def delete_student(self, student_id: int) -> bool:
        """The attendance rows go with it through ON DELETE CASCADE."""
        if not _is_storable_id(student_id):
            return False
        query = "DELETE FROM students WHERE id = $1;"
        async with self._pool.acquire() as connection:
            status_message = await connection.execute(query, student_id)
            return _affected_rows(status_message) > 0

    async def student_exists(self, student_id: int) -> bool:
        if not _is_storable_id(student_id):
            return False
        query = "SELECT EXISTS (SELECT 1 FROM students WHERE id = $1);"
        async with self._pool.acquire() as connection:
            return bool(await connection.fetchval(query, student_id))

    async def upsert_attendance(
        self, student_id: int, attendance_date: date, status: AttendanceStatus, note: Optional[str]
    ) -> bool:
        """
        Single INSERT ... ON CONFLICT statement, so two concurrent calls for the
        same (student_id, date) never produce a duplicate-key error: the last one
        to commit wins. A missing student surfaces as a foreign key violation.
        """
        if not _is_storable_id(student_id):
            return False
        query = """
            INSERT INTO attendance (student_id, date, status, note)
            VALUES ($1, $2, $3, $4)
            ON CONFLICT (student_id, date) DO UPDATE SET
                status = EXCLUDED.status,
                note = EXCLUDED.note,
                updated_at = NOW();
        """
        async with self._pool.acquire() as connection:
            try:
                await connection.execute(query, student_id, attendance_date, AttendanceStatus(status).value, note)
            except asyncpg.exceptions.ForeignKeyViolationError:
                logger.info(f"Attendance upsert rejected, student {student_id} does not exist.")
                return False
        return True

    async def get_attendance_history(
        self, student_id: int, start: Optional[date] = None, end: Optional[date] = None
    ) -> List[AttendanceEntry]:
        if not _is_storable_id(student_id):
            return []
        query = """
            SELECT date, status, note
            FROM attendance
            WHERE student_id = $1
              AND ($2::date IS NULL OR date >= $2::date)
              AND ($3::date IS NULL OR date <= $3::date)
            ORDER BY date DESC;
        """
        async with self._pool.acquire() as connection:
            records = await connection.fetch(query, student_id, start, end)
            return [AttendanceEntry(**record) for record in records]

    async def get_class_attendance(self, attendance_date: date) -> List[ClassAttendanceEntry]:
        query = """
            SELECT a.student_id, s.name, s.roll_no, a.date, a.status
            FROM attendance a
            JOIN students s ON s.id = a.student_id
            WHERE a.date = $1;
        """
        async with self._pool.acquire() as connection:
            records = await connection.fetch(query, attendance_date)
            return [ClassAttendanceEntry(**record) for record in records]
