from __future__ import annotations

from datetime import date
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from skistation.db.session import get_db
from skistation.domain.enums import TypeSubscription
from skistation.domain.subscriptions import UnknownSubscriptionTypeError
from skistation.routers.responses import empty_response, not_found
from skistation.schemas import SubscriptionSchema
from skistation.services.errors import NotFoundError
from skistation.services.subscription_service import SubscriptionService

router = APIRouter(prefix="/subscription", tags=["subscription"])


def _get_subscription_service(db: Session = Depends(get_db)) -> SubscriptionService:
    return SubscriptionService.from_session(db)


@router.post("/add", response_model=SubscriptionSchema)
def add_subscription(payload: SubscriptionSchema, svc: SubscriptionService = Depends(_get_subscription_service)):
    try:
        return svc.add_subscription(payload.to_model())
    except UnknownSubscriptionTypeError as exc:
        raise HTTPException(400, str(exc))


@router.get("/get/{numSub}", response_model=SubscriptionSchema)
def get_by_id(numSub: int, svc: SubscriptionService = Depends(_get_subscription_service)):
    subscription = svc.retrieve_subscription_by_id(numSub)
    if subscription is None:
        return empty_response()
    return subscription


@router.get("/sub/{typeSub}", response_model=List[SubscriptionSchema])
def get_subscriptions_by_type(typeSub: TypeSubscription, svc: SubscriptionService = Depends(_get_subscription_service)):
    return svc.get_subscription_by_type(typeSub)


@router.put("/update", response_model=SubscriptionSchema)
def update_subscription(payload: SubscriptionSchema, svc: SubscriptionService = Depends(_get_subscription_service)):
    try:
        return svc.update_subscription(payload.to_model())
    except NotFoundError as exc:
        raise not_found(exc)
    except UnknownSubscriptionTypeError as exc:
        raise HTTPException(400, str(exc))


@router.get("/all/{date1}/{date2}", response_model=List[SubscriptionSchema])
def get_subscriptions_by_dates(
    date1: date,
    date2: date,
    svc: SubscriptionService = Depends(_get_subscription_service),
):
    return svc.retrieve_subscriptions_by_dates(date1, date2)
