"""Instructor use cases."""
from __future__ import annotations

import logging
from typing import Optional

from sqlalchemy.orm import Session

from skistation.db.models import Instructor
from skistation.repositories import CourseRepository, InstructorRepository
from skistation.services.errors import CourseNotFoundError, InstructorNotFoundError

logger = logging.getLogger(__name__)

_UPDATABLE_FIELDS = ("first_name", "last_name", "date_of_hire")


class InstructorService:
    def __init__(self, instructors: InstructorRepository, courses: CourseRepository) -> None:
        self.instructors = instructors
        self.courses = courses

    @classmethod
    def from_session(cls, session: Session) -> "InstructorService":
        return cls(InstructorRepository(session), CourseRepository(session))

    def add_instructor(self, instructor: Instructor) -> Instructor:
        saved = self.instructors.save(instructor)
        logger.info("Instructor %s added", saved.num_instructor)
        return saved

    def add_instructor_and_assign_to_course(self, instructor: Instructor, num_course: int) -> Instructor:
        course = self.courses.find_by_id(num_course)
        if course is None:
            logger.warning("Course %s not found, instructor not added", num_course)
            raise CourseNotFoundError(num_course)
        instructor.courses = [course]
        saved = self.instructors.save(instructor)
        logger.info("Instructor %s now teaches course %s", saved.num_instructor, num_course)
        return saved

    def update_instructor(self, instructor: Instructor) -> Instructor:
        current = self.instructors.find_by_id(instructor.num_instructor)
        if current is None:
            logger.warning("Instructor %s not found", instructor.num_instructor)
            raise InstructorNotFoundError(instructor.num_instructor)
        for field in _UPDATABLE_FIELDS:
            setattr(current, field, getattr(instructor, field))
        saved = self.instructors.save(current)
        logger.info("Instructor %s updated", saved.num_instructor)
        return saved

    def retrieve_instructor(self, num_instructor: int) -> Optional[Instructor]:
        return self.instructors.find_by_id(num_instructor)

    def retrieve_all_instructors(self) -> list[Instructor]:
        return self.instructors.find_all()
