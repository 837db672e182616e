import logging
from typing import List, Optional

from ..db.storage import AttendanceStorage
from ..models.db_models import Student
from .errors import InvalidArgumentError, NotFoundError, StorageError

logger = logging.getLogger(__name__)


def _require_name(name) -> str:
    if name is None or (isinstance(name, str) and not name.strip()):
        raise InvalidArgumentError("Name is required")
    if not isinstance(name, str):
        raise InvalidArgumentError("Name must be text")
    return name.strip()


def _optional_roll_no(roll_no) -> Optional[str]:
    if roll_no is not None and not isinstance(roll_no, str):
        raise InvalidArgumentError("Roll number must be text")
    return roll_no or None


class StudentService:
    """
    Student directory: plain CRUD over the students table.
    """
    def __init__(self, storage: AttendanceStorage):
        self.storage = storage

    async def list_students(self) -> List[Student]:
        try:
            return await self.storage.list_students()
        except Exception as e:
            logger.error("Database error while listing students.", exc_info=True)
            raise StorageError("Failed to fetch students") from e

    async def create_student(self, name: Optional[str], roll_no: Optional[str] = None) -> Student:
        clean_name = _require_name(name)
        clean_roll_no = _optional_roll_no(roll_no)
        try:
            student = await self.storage.create_student(clean_name, clean_roll_no)
        except Exception as e:
            logger.error(f"Database error while creating student '{clean_name}'.", exc_info=True)
            raise StorageError("Failed to create student") from e
        logger.info(f"Student {student.id} created.")
        return student

    async def update_student(self, student_id: int, name: Optional[str], roll_no: Optional[str] = None) -> None:
        """Replaces both the name and the roll number; a missing roll number clears it."""
        clean_name = _require_name(name)
        clean_roll_no = _optional_roll_no(roll_no)
        try:
            updated = await self.storage.update_student(student_id, clean_name, clean_roll_no)
        except Exception as e:
            logger.error(f"Database error while updating student {student_id}.", exc_info=True)
            raise StorageError("Failed to update student") from e
        if not updated:
            raise NotFoundError("Student not found")
        logger.info(f"Student {student_id} updated.")

    async def delete_student(self, student_id: int) -> None:
        try:
            deleted = await self.storage.delete_student(student_id)
        except Exception as e:
            logger.error(f"Database error while deleting student {student_id}.", exc_info=True)
            raise StorageError("Failed to delete student") from e
        if not deleted:
            raise NotFoundError("Student not found")
        logger.info(f"Student {student_id} and its attendance history deleted.")
