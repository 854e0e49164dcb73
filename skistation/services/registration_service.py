"""Registration use cases (enrolling skiers in courses week by week)."""
from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from skistation.db.models import Registration
from skistation.domain.enums import Support
from skistation.repositories import (
    CourseRepository,
    RegistrationRepository,
    SkierRepository,
)
from skistation.services.errors import (
    CourseNotFoundError,
    RegistrationError,
    RegistrationNotFoundError,
    SkierNotFoundError,
)

logger = logging.getLogger(__name__)


class RegistrationService:
    def __init__(
        self,
        registrations: RegistrationRepository,
        skiers: SkierRepository,
        courses: CourseRepository,
    ) -> None:
        self.registrations = registrations
        self.skiers = skiers
        self.courses = courses

    @classmethod
    def from_session(cls, session: Session) -> "RegistrationService":
        return cls(RegistrationRepository(session), SkierRepository(session), CourseRepository(session))

    def _require_skier(self, num_skier: int) -> None:
        if not self.skiers.exists(num_skier):
            logger.warning("Skier %s not found", num_skier)
            raise SkierNotFoundError(num_skier)

    def _require_course(self, num_course: int) -> None:
        if not self.courses.exists(num_course):
            logger.warning("Course %s not found", num_course)
            raise CourseNotFoundError(num_course)

    def add_registration_and_assign_to_skier(self, registration: Registration, num_skier: int) -> Registration:
        self._require_skier(num_skier)
        registration.skier_id = num_skier
        saved = self.registrations.save(registration)
        logger.info("Registration %s: skier %s, week %s", saved.num_registration, num_skier, saved.num_week)
        return saved

    def assign_registration_to_course(self, num_registration: int, num_course: int) -> Registration:
        registration = self.registrations.find_by_id(num_registration)
        if registration is None:
            logger.warning("Registration %s not found", num_registration)
            raise RegistrationNotFoundError(num_registration)
        self._require_course(num_course)
        registration.course_id = num_course
        saved = self.registrations.save(registration)
        logger.info("Registration %s assigned to course %s", num_registration, num_course)
        return saved

    def add_registration_and_assign_to_skier_and_course(
        self, registration: Registration, num_skier: int, num_course: int
    ) -> Registration:
        self._require_skier(num_skier)
        self._require_course(num_course)
        week = registration.num_week or 0
        if self.registrations.count_by_week_skier_and_course(week, num_skier, num_course):
            logger.warning(
                "Skier %s already registered to course %s for week %s", num_skier, num_course, week
            )
            raise RegistrationError(
                f"Skier {num_skier} is already registered to course {num_course} for week {week}"
            )
        registration.num_week = week
        registration.skier_id = num_skier
        registration.course_id = num_course
        saved = self.registrations.save(registration)
        logger.info("Registration %s: skier %s, course %s, week %s", saved.num_registration, num_skier, num_course, week)
        return saved

    def num_weeks_course_of_instructor_by_support(self, num_instructor: int, support: Support) -> list[int]:
        return self.registrations.weeks_for_instructor_and_support(num_instructor, support)
