from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from skistation.db.session import get_db
from skistation.routers.responses import empty_response
from skistation.schemas import PisteSchema
from skistation.services.piste_service import PisteService

router = APIRouter(prefix="/piste", tags=["piste"])


def _get_piste_service(db: Session = Depends(get_db)) -> PisteService:
    return PisteService.from_session(db)


@router.post("/add", response_model=PisteSchema)
def add_piste(payload: PisteSchema, svc: PisteService = Depends(_get_piste_service)):
    return svc.add_piste(payload.to_model())


@router.get("/all", response_model=List[PisteSchema])
def get_all_pistes(svc: PisteService = Depends(_get_piste_service)):
    return svc.retrieve_all_pistes()


@router.get("/get/{numPiste}", response_model=PisteSchema)
def get_by_id(numPiste: int, svc: PisteService = Depends(_get_piste_service)):
    piste = svc.retrieve_piste(numPiste)
    if piste is None:
        return empty_response()
    return piste


@router.delete("/delete/{numPiste}")
def delete_by_id(numPiste: int, svc: PisteService = Depends(_get_piste_service)):
    svc.remove_piste(numPiste)
    return empty_response()
