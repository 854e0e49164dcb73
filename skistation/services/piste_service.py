"""Piste use cases."""
from __future__ import annotations

import logging
from typing import Optional

from sqlalchemy.orm import Session

from skistation.db.models import Piste
from skistation.repositories import PisteRepository

logger = logging.getLogger(__name__)


class PisteService:
    def __init__(self, pistes: PisteRepository) -> None:
        self.pistes = pistes

    @classmethod
    def from_session(cls, session: Session) -> "PisteService":
        return cls(PisteRepository(session))

    def add_piste(self, piste: Piste) -> Piste:
        saved = self.pistes.save(piste)
        logger.info("Piste %s added (%s)", saved.num_piste, saved.name_piste)
        return saved

    def retrieve_piste(self, num_piste: int) -> Optional[Piste]:
        return self.pistes.find_by_id(num_piste)

    def retrieve_all_pistes(self) -> list[Piste]:
        return self.pistes.find_all()

    def remove_piste(self, num_piste: int) -> None:
        self.pistes.delete_by_id(num_piste)
        logger.info("Piste %s removed", num_piste)
