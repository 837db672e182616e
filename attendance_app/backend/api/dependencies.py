#attendance_app/backend/api/dependencies.py
from fastapi import Request, Depends
import asyncpg

from ..db.db_client import AsyncPostgresClient
from ..db.storage import AttendanceStorage
from ..services.attendance_service import AttendanceService
from ..services.student_service import StudentService


def get_postgres_pool(request: Request) -> asyncpg.Pool:
    """
    Returns the PostgreSQL pool created in the application lifespan.
    """
    return request.app.state.postgres_pool


def get_storage(postgres_pool: asyncpg.Pool = Depends(get_postgres_pool)) -> AttendanceStorage:
    """
    Wraps the shared pool in a storage handle for the current request.

    Tests replace this dependency through ``app.dependency_overrides`` to run
    the services against an in-memory double.
    """
    return AsyncPostgresClient(pool=postgres_pool)


def get_student_service(storage: AttendanceStorage = Depends(get_storage)) -> StudentService:
    return StudentService(storage=storage)


def get_attendance_service(storage: AttendanceStorage = Depends(get_storage)) -> AttendanceService:
    return AttendanceService(storage=storage)
