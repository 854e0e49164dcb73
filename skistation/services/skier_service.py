"""Skier use cases: creation, assignments and lookups."""
from __future__ import annotations

import logging
from typing import Optional

from sqlalchemy.orm import Session

from skistation.db.models import Registration, Skier
from skistation.domain.enums import TypeSubscription
from skistation.domain.subscriptions import apply_end_date
from skistation.repositories import (
    CourseRepository,
    PisteRepository,
    RegistrationRepository,
    SkierRepository,
    SubscriptionRepository,
)
from skistation.services.errors import (
    CourseNotFoundError,
    PisteNotFoundError,
    SkierNotFoundError,
    SubscriptionNotFoundError,
)

logger = logging.getLogger(__name__)


class SkierService:
    """Provides skier creation, assignment and retrieval helpers."""

    def __init__(
        self,
        skiers: SkierRepository,
        subscriptions: SubscriptionRepository,
        pistes: PisteRepository,
        courses: CourseRepository,
        registrations: RegistrationRepository,
    ) -> None:
        self.skiers = skiers
        self.subscriptions = subscriptions
        self.pistes = pistes
        self.courses = courses
        self.registrations = registrations

    @classmethod
    def from_session(cls, session: Session) -> "SkierService":
        return cls(
            SkierRepository(session),
            SubscriptionRepository(session),
            PisteRepository(session),
            CourseRepository(session),
            RegistrationRepository(session),
        )

    def add_skier(self, skier: Skier) -> Skier:
        if skier.subscription is not None:
            apply_end_date(skier.subscription)
        saved = self.skiers.save(skier)
        logger.info("Skier %s added", saved.num_skier)
        return saved

    def add_skier_and_assign_to_course(self, skier: Skier, num_course: int) -> Skier:
        """Persist ``skier`` and enroll it in course ``num_course``.

        Every registration carried by the skier is linked to the course; a
        skier without registrations gets a single one for week 0.
        """
        course = self.courses.find_by_id(num_course)
        if course is None:
            logger.warning("Course %s not found, skier not added", num_course)
            raise CourseNotFoundError(num_course)
        if not skier.registrations:
            skier.registrations = [Registration(num_week=0)]
        for registration in skier.registrations:
            registration.course_id = course.num_course
        saved = self.add_skier(skier)
        logger.info(
            "Skier %s registered to course %s (%d week(s))",
            saved.num_skier,
            course.num_course,
            len(saved.registrations),
        )
        return saved

    def assign_skier_to_subscription(self, num_skier: int, num_sub: int) -> Skier:
        skier = self.skiers.find_by_id(num_skier)
        if skier is None:
            logger.warning("Skier %s not found", num_skier)
            raise SkierNotFoundError(num_skier)
        subscription = self.subscriptions.find_by_id(num_sub)
        if subscription is None:
            logger.warning("Subscription %s not found", num_sub)
            raise SubscriptionNotFoundError(num_sub)
        skier.subscription = subscription
        saved = self.skiers.save(skier)
        logger.info("Skier %s assigned to subscription %s", num_skier, num_sub)
        return saved

    def assign_skier_to_piste(self, num_skier: int, num_piste: int) -> Skier:
        skier = self.skiers.find_by_id(num_skier)
        if skier is None:
            logger.warning("Skier %s not found", num_skier)
            raise SkierNotFoundError(num_skier)
        piste = self.pistes.find_by_id(num_piste)
        if piste is None:
            logger.warning("Piste %s not found", num_piste)
            raise PisteNotFoundError(num_piste)
        if piste not in skier.pistes:
            skier.pistes.append(piste)
        saved = self.skiers.save(skier)
        logger.info("Skier %s assigned to piste %s", num_skier, num_piste)
        return saved

    def retrieve_skier(self, num_skier: int) -> Optional[Skier]:
        return self.skiers.find_by_id(num_skier)

    def retrieve_all_skiers(self) -> list[Skier]:
        return self.skiers.find_all()

    def retrieve_skiers_by_subscription_type(self, type_sub: TypeSubscription) -> list[Skier]:
        return self.skiers.find_by_subscription_type(type_sub)

    def remove_skier(self, num_skier: int) -> None:
        self.skiers.delete_by_id(num_skier)
        logger.info("Skier %s removed", num_skier)
