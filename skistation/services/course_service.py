"""Course use cases."""
from __future__ import annotations

import logging
from typing import Optional

from sqlalchemy.orm import Session

from skistation.db.models import Course
from skistation.repositories import CourseRepository
from skistation.services.errors import CourseNotFoundError

logger = logging.getLogger(__name__)

_UPDATABLE_FIELDS = ("level", "type_course", "support", "price", "time_slot")


class CourseService:
    def __init__(self, courses: CourseRepository) -> None:
        self.courses = courses

    @classmethod
    def from_session(cls, session: Session) -> "CourseService":
        return cls(CourseRepository(session))

    def add_course(self, course: Course) -> Course:
        saved = self.courses.save(course)
        logger.info("Course %s added (%s, %s)", saved.num_course, saved.type_course, saved.support)
        return saved

    def update_course(self, course: Course) -> Course:
        current = self.courses.find_by_id(course.num_course)
        if current is None:
            logger.warning("Course %s not found", course.num_course)
            raise CourseNotFoundError(course.num_course)
        for field in _UPDATABLE_FIELDS:
            setattr(current, field, getattr(course, field))
        saved = self.courses.save(current)
        logger.info("Course %s updated", saved.num_course)
        return saved

    def retrieve_course(self, num_course: int) -> Optional[Course]:
        return self.courses.find_by_id(num_course)

    def retrieve_all_courses(self) -> list[Course]:
        return self.courses.find_all()
