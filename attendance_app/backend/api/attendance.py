from fastapi import APIRouter, Body, Depends, Request
from typing import List, Optional

from ..config.config import settings
from ..services.attendance_service import AttendanceService
from ..services.errors import ServiceError
from .schemas.attendance import (
    AttendanceMarkRequest,
    AttendanceMarkResponse,
    AttendanceHistoryItem,
    ClassAttendanceResponse
)
from .dependencies import get_attendance_service
from .utilities.errors import to_http_exception
from .utilities.limiter import limiter

router = APIRouter(tags=["Attendance"])


@router.post(
    "/students/{student_id}/attendance",
    response_model=AttendanceMarkResponse,
    summary="Mark a student present or absent for a day"
)
@limiter.limit(settings.WRITE_RATE_LIMIT)
async def record_attendance(
    request: Request,
    student_id: int,
    mark_request: Optional[AttendanceMarkRequest] = Body(None),
    service: AttendanceService = Depends(get_attendance_service)
):
    """
    Creates the attendance row of the day or overwrites its status and note.
    `date` defaults to today's UTC date.
    """
    mark_request = mark_request or AttendanceMarkRequest()
    try:
        recorded = await service.record_attendance(
            student_id,
            status=mark_request.status,
            attendance_date=mark_request.date,
            note=mark_request.note
        )
    except ServiceError as e:
        raise to_http_exception(e)
    return AttendanceMarkResponse(date=recorded.date, status=recorded.status)


@router.get(
    "/students/{student_id}/attendance",
    response_model=List[AttendanceHistoryItem],
    summary="Attendance history of a student, most recent first"
)
@limiter.limit(settings.READ_RATE_LIMIT)
async def get_attendance_history(
    request: Request,
    student_id: int,
    start: Optional[str] = None,
    end: Optional[str] = None,
    service: AttendanceService = Depends(get_attendance_service)
):
    try:
        return await service.get_attendance_history(student_id, start=start, end=end)
    except ServiceError as e:
        raise to_http_exception(e)


@router.get(
    "/attendance",
    response_model=ClassAttendanceResponse,
    summary="Class attendance for one day"
)
@limiter.limit(settings.READ_RATE_LIMIT)
async def get_class_attendance(
    request: Request,
    date: Optional[str] = None,
    service: AttendanceService = Depends(get_attendance_service)
):
    try:
        return await service.get_class_attendance(date)
    except ServiceError as e:
        raise to_http_exception(e)
