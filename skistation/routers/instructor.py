from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from skistation.db.session import get_db
from skistation.routers.responses import empty_response, not_found
from skistation.schemas import InstructorSchema
from skistation.services.errors import NotFoundError
from skistation.services.instructor_service import InstructorService

router = APIRouter(prefix="/instructor", tags=["instructor"])


def _get_instructor_service(db: Session = Depends(get_db)) -> InstructorService:
    return InstructorService.from_session(db)


@router.post("/add", response_model=InstructorSchema)
def add_instructor(payload: InstructorSchema, svc: InstructorService = Depends(_get_instructor_service)):
    return svc.add_instructor(payload.to_model())


@router.post("/addAndAssignToCourse/{numCourse}", response_model=InstructorSchema)
def add_and_assign_to_course(
    numCourse: int,
    payload: InstructorSchema,
    svc: InstructorService = Depends(_get_instructor_service),
):
    try:
        return svc.add_instructor_and_assign_to_course(payload.to_model(), numCourse)
    except NotFoundError as exc:
        raise not_found(exc)


@router.get("/all", response_model=List[InstructorSchema])
def get_all_instructors(svc: InstructorService = Depends(_get_instructor_service)):
    return svc.retrieve_all_instructors()


@router.put("/update", response_model=InstructorSchema)
def update_instructor(payload: InstructorSchema, svc: InstructorService = Depends(_get_instructor_service)):
    try:
        return svc.update_instructor(payload.to_model())
    except NotFoundError as exc:
        raise not_found(exc)


@router.get("/get/{numInstructor}", response_model=InstructorSchema)
def get_by_id(numInstructor: int, svc: InstructorService = Depends(_get_instructor_service)):
    instructor = svc.retrieve_instructor(numInstructor)
    if instructor is None:
        return empty_response()
    return instructor
