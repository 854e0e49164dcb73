from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from skistation.db.session import get_db
from skistation.routers.responses import empty_response, not_found
from skistation.schemas import CourseSchema
from skistation.services.course_service import CourseService
from skistation.services.errors import NotFoundError

router = APIRouter(prefix="/course", tags=["course"])


def _get_course_service(db: Session = Depends(get_db)) -> CourseService:
    return CourseService.from_session(db)


@router.post("/add", response_model=CourseSchema)
def add_course(payload: CourseSchema, svc: CourseService = Depends(_get_course_service)):
    return svc.add_course(payload.to_model())


@router.get("/all", response_model=List[CourseSchema])
def get_all_courses(svc: CourseService = Depends(_get_course_service)):
    return svc.retrieve_all_courses()


@router.put("/update", response_model=CourseSchema)
def update_course(payload: CourseSchema, svc: CourseService = Depends(_get_course_service)):
    try:
        return svc.update_course(payload.to_model())
    except NotFoundError as exc:
        raise not_found(exc)


@router.get("/get/{numCourse}", response_model=CourseSchema)
def get_by_id(numCourse: int, svc: CourseService = Depends(_get_course_service)):
    course = svc.retrieve_course(numCourse)
    if course is None:
        return empty_response()
    return course
