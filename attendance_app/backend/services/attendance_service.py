import logging
from datetime import date
from typing import List, Optional
from pydantic import BaseModel

from ..db.storage import AttendanceStorage
from ..models.db_models import AttendanceEntry, AttendanceStatus, ClassAttendanceEntry
from ..metrics.counters import AttendanceEventCounter
from ..common.datetime_utils import to_calendar_date
from .errors import ServiceError, InvalidArgumentError, NotFoundError, StorageError

logger = logging.getLogger(__name__)

# --- Result models returned to the API layer ---
class RecordedAttendance(BaseModel):
    """The normalized date and accepted status of a successful upsert."""
    date: date
    status: AttendanceStatus

class ClassAttendance(BaseModel):
    """Every attendance row of one day, joined with its student."""
    date: date
    attendance: List[ClassAttendanceEntry]


def _parse_status(status) -> AttendanceStatus:
    try:
        if not isinstance(status, str):
            raise ValueError(status)
        return AttendanceStatus(status)
    except ValueError:
        raise InvalidArgumentError("Status must be 'present' or 'absent'")

def _parse_date(value, field_name: str = "date") -> date:
    try:
        if value is not None and not isinstance(value, (str, date)):
            raise TypeError(value)
        return to_calendar_date(value)
    except (TypeError, ValueError):
        raise InvalidArgumentError(f"Invalid {field_name}, expected YYYY-MM-DD or an ISO-8601 timestamp")

def _parse_note(note) -> Optional[str]:
    if note is not None and not isinstance(note, str):
        raise InvalidArgumentError("Note must be text")
    return note or None


class AttendanceService:
    """
    Business logic of daily attendance: one status per student per calendar date.
    """
    def __init__(self, storage: AttendanceStorage, metrics: Optional[AttendanceEventCounter] = None):
        self.storage = storage
        self.metrics = metrics or AttendanceEventCounter()

    async def record_attendance(self, student_id: int, status: Optional[str],
                                attendance_date=None, note: Optional[str] = None) -> RecordedAttendance:
        """
        Marks a student present or absent for a day, overwriting any earlier
        mark for the same day. A missing date means today in UTC.
        """
        parsed_status = _parse_status(status)
        parsed_date = _parse_date(attendance_date)
        parsed_note = _parse_note(note)
        logger.info(f"Recording '{parsed_status.value}' for student {student_id} on {parsed_date.isoformat()}.")

        try:
            written = await self.storage.upsert_attendance(student_id, parsed_date, parsed_status, parsed_note)
        except Exception as e:
            logger.error(f"Database error while recording attendance for student {student_id}.", exc_info=True)
            raise StorageError("Failed to record attendance") from e

        if not written:
            logger.warning(f"Attendance recorded for a student that does not exist ({student_id}).")
            raise NotFoundError("Student not found")

        result = RecordedAttendance(date=parsed_date, status=parsed_status)
        self.metrics.increment(parsed_status.value)
        return result

    async def get_attendance_history(self, student_id: int, start=None, end=None) -> List[AttendanceEntry]:
        """
        Returns a student's attendance, most recent first, within the optional
        inclusive bounds. An inverted range simply yields an empty list.
        """
        start_date = _parse_date(start, "start") if start else None
        end_date = _parse_date(end, "end") if end else None

        try:
            if not await self.storage.student_exists(student_id):
                raise NotFoundError("Student not found")
            return await self.storage.get_attendance_history(student_id, start_date, end_date)
        except ServiceError:
            raise
        except Exception as e:
            logger.error(f"Database error while fetching attendance history of student {student_id}.", exc_info=True)
            raise StorageError("Failed to fetch attendance history") from e

    async def get_class_attendance(self, attendance_date=None) -> ClassAttendance:
        """Returns the marked students of a day. Students without a mark are not listed."""
        parsed_date = _parse_date(attendance_date)
        try:
            entries = await self.storage.get_class_attendance(parsed_date)
        except Exception as e:
            logger.error(f"Database error while fetching class attendance for {parsed_date.isoformat()}.", exc_info=True)
            raise StorageError("Failed to fetch class attendance") from e
        return ClassAttendance(date=parsed_date, attendance=entries)
