from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from skistation.db.session import get_db
from skistation.domain.enums import Support
from skistation.routers.responses import not_found
from skistation.schemas import RegistrationSchema
from skistation.services.errors import NotFoundError, RegistrationError
from skistation.services.registration_service import RegistrationService

router = APIRouter(prefix="/registration", tags=["registration"])


def _get_registration_service(db: Session = Depends(get_db)) -> RegistrationService:
    return RegistrationService.from_session(db)


@router.put("/addAndAssignToSkier/{numSkieur}", response_model=RegistrationSchema)
def add_and_assign_to_skier(
    numSkieur: int,
    payload: RegistrationSchema,
    svc: RegistrationService = Depends(_get_registration_service),
):
    try:
        return svc.add_registration_and_assign_to_skier(payload.to_model(keep_id=False), numSkieur)
    except NotFoundError as exc:
        raise not_found(exc)


@router.put("/assignToCourse/{numRegis}/{numCourse}", response_model=RegistrationSchema)
def assign_to_course(numRegis: int, numCourse: int, svc: RegistrationService = Depends(_get_registration_service)):
    try:
        return svc.assign_registration_to_course(numRegis, numCourse)
    except NotFoundError as exc:
        raise not_found(exc)


@router.put("/addAndAssignToSkierAndCourse/{numSkieur}/{numCourse}", response_model=RegistrationSchema)
def add_and_assign_to_skier_and_course(
    numSkieur: int,
    numCourse: int,
    payload: RegistrationSchema,
    svc: RegistrationService = Depends(_get_registration_service),
):
    try:
        return svc.add_registration_and_assign_to_skier_and_course(
            payload.to_model(keep_id=False), numSkieur, numCourse
        )
    except NotFoundError as exc:
        raise not_found(exc)
    except RegistrationError as exc:
        raise HTTPException(400, str(exc))


@router.get("/numWeeks/{numInstructor}/{support}", response_model=List[int])
def num_weeks_course_of_instructor_by_support(
    numInstructor: int,
    support: Support,
    svc: RegistrationService = Depends(_get_registration_service),
):
    return svc.num_weeks_course_of_instructor_by_support(numInstructor, support)
