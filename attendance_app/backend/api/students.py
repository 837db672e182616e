from fastapi import APIRouter, Body, Depends, Request, status
from typing import List, Optional

from ..config.config import settings
from ..services.student_service import StudentService
from ..services.errors import ServiceError
from .schemas.student import StudentWriteRequest, StudentResponse, MessageResponse
from .dependencies import get_student_service
from .utilities.errors import to_http_exception
from .utilities.limiter import limiter

router = APIRouter(prefix="/students", tags=["Students"])


@router.get("", response_model=List[StudentResponse], summary="List all students, newest first")
@limiter.limit(settings.READ_RATE_LIMIT)
async def list_students(request: Request, service: StudentService = Depends(get_student_service)):
    try:
        return await service.list_students()
    except ServiceError as e:
        raise to_http_exception(e)


@router.post("", response_model=StudentResponse, status_code=status.HTTP_201_CREATED, summary="Create a student")
@limiter.limit(settings.WRITE_RATE_LIMIT)
async def create_student(request: Request, student_request: Optional[StudentWriteRequest] = Body(None), service: StudentService = Depends(get_student_service)):
    student_request = student_request or StudentWriteRequest()
    try:
        return await service.create_student(name=student_request.name, roll_no=student_request.roll_no)
    except ServiceError as e:
        raise to_http_exception(e)


@router.put("/{student_id}", response_model=MessageResponse, summary="Replace a student's name and roll number")
@limiter.limit(settings.WRITE_RATE_LIMIT)
async def update_student(request: Request, student_id: int, student_request: Optional[StudentWriteRequest] = Body(None), service: StudentService = Depends(get_student_service)):
    student_request = student_request or StudentWriteRequest()
    try:
        await service.update_student(student_id, name=student_request.name, roll_no=student_request.roll_no)
    except ServiceError as e:
        raise to_http_exception(e)
    return MessageResponse(message="Student updated")


@router.delete("/{student_id}", response_model=MessageResponse, summary="Delete a student and its attendance history")
@limiter.limit(settings.WRITE_RATE_LIMIT)
async def delete_student(request: Request, student_id: int, service: StudentService = Depends(get_student_service)):
    try:
        await service.delete_student(student_id)
    except ServiceError as e:
        raise to_http_exception(e)
    return MessageResponse(message="Student deleted")
