from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from skistation.db.session import get_db
from skistation.domain.enums import TypeSubscription
from skistation.domain.subscriptions import UnknownSubscriptionTypeError
from skistation.routers.responses import empty_response, not_found
from skistation.schemas import SkierSchema
from skistation.services.errors import NotFoundError
from skistation.services.skier_service import SkierService

router = APIRouter(prefix="/skier", tags=["skier"])


def _get_skier_service(db: Session = Depends(get_db)) -> SkierService:
    return SkierService.from_session(db)


@router.post("/add", response_model=SkierSchema)
def add_skier(payload: SkierSchema, svc: SkierService = Depends(_get_skier_service)):
    try:
        return svc.add_skier(payload.to_model())
    except UnknownSubscriptionTypeError as exc:
        raise HTTPException(400, str(exc))


@router.post("/addAndAssign/{numCourse}", response_model=SkierSchema)
def add_skier_and_assign_to_course(
    numCourse: int,
    payload: SkierSchema,
    svc: SkierService = Depends(_get_skier_service),
):
    try:
        return svc.add_skier_and_assign_to_course(payload.to_model(), numCourse)
    except NotFoundError as exc:
        raise not_found(exc)
    except UnknownSubscriptionTypeError as exc:
        raise HTTPException(400, str(exc))


@router.put("/assignToSub/{numSkier}/{numSub}", response_model=SkierSchema)
def assign_to_subscription(numSkier: int, numSub: int, svc: SkierService = Depends(_get_skier_service)):
    try:
        return svc.assign_skier_to_subscription(numSkier, numSub)
    except NotFoundError as exc:
        raise not_found(exc)


@router.put("/assignToPiste/{numSkier}/{numPiste}", response_model=SkierSchema)
def assign_to_piste(numSkier: int, numPiste: int, svc: SkierService = Depends(_get_skier_service)):
    try:
        return svc.assign_skier_to_piste(numSkier, numPiste)
    except NotFoundError as exc:
        raise not_found(exc)


@router.get("/getSkiersBySubscription", response_model=List[SkierSchema])
def retrieve_skiers_by_subscription_type(
    typeSubscription: TypeSubscription = Query(...),
    svc: SkierService = Depends(_get_skier_service),
):
    return svc.retrieve_skiers_by_subscription_type(typeSubscription)


@router.get("/get/{numSkier}", response_model=SkierSchema)
def get_by_id(numSkier: int, svc: SkierService = Depends(_get_skier_service)):
    skier = svc.retrieve_skier(numSkier)
    if skier is None:
        return empty_response()
    return skier


@router.get("/all", response_model=List[SkierSchema])
def get_all_skiers(svc: SkierService = Depends(_get_skier_service)):
    return svc.retrieve_all_skiers()


@router.delete("/delete/{numSkier}")
def delete_by_id(numSkier: int, svc: SkierService = Depends(_get_skier_service)):
    svc.remove_skier(numSkier)
    return empty_response()
