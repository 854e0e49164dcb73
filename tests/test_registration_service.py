from __future__ import annotations

import logging

import pytest

from factories import make_course, make_skier
from skistation.db.models import Instructor, Registration
from skistation.domain.enums import Support
from skistation.repositories import CourseRepository, InstructorRepository, SkierRepository
from skistation.services.errors import (
    CourseNotFoundError,
    RegistrationError,
    RegistrationNotFoundError,
    SkierNotFoundError,
)
from skistation.services.course_service import CourseService
from skistation.services.instructor_service import InstructorService
from skistation.services.registration_service import RegistrationService


@pytest.fixture()
def svc(session):
    return RegistrationService.from_session(session)


def test_add_registration_to_skier_then_course(svc, session):
    skier = SkierRepository(session).save(make_skier())
    course = CourseRepository(session).save(make_course())

    registration = svc.add_registration_and_assign_to_skier(Registration(num_week=4), skier.num_skier)
    assert registration.skier_id == skier.num_skier
    assert registration.course_id is None

    registration = svc.assign_registration_to_course(registration.num_registration, course.num_course)
    assert registration.course_id == course.num_course


def test_missing_ids_raise(svc, session):
    course = CourseRepository(session).save(make_course())
    skier = SkierRepository(session).save(make_skier())

    with pytest.raises(SkierNotFoundError):
        svc.add_registration_and_assign_to_skier(Registration(num_week=1), 999)
    with pytest.raises(RegistrationNotFoundError):
        svc.assign_registration_to_course(999, course.num_course)
    with pytest.raises(CourseNotFoundError):
        svc.add_registration_and_assign_to_skier_and_course(Registration(num_week=1), skier.num_skier, 999)


def test_same_week_registration_is_rejected(svc, session):
    skier = SkierRepository(session).save(make_skier())
    course = CourseRepository(session).save(make_course())

    first = svc.add_registration_and_assign_to_skier_and_course(
        Registration(num_week=2), skier.num_skier, course.num_course
    )
    assert first.num_registration is not None

    with pytest.raises(RegistrationError):
        svc.add_registration_and_assign_to_skier_and_course(
            Registration(num_week=2), skier.num_skier, course.num_course
        )

    other_week = svc.add_registration_and_assign_to_skier_and_course(
        Registration(num_week=3), skier.num_skier, course.num_course
    )
    assert other_week.num_week == 3


def test_num_weeks_of_instructor_by_support(svc, session):
    ski = CourseRepository(session).save(make_course(support=Support.SKI))
    board = CourseRepository(session).save(make_course(support=Support.SNOWBOARD))
    instructors = InstructorService.from_session(session)
    instructor = instructors.add_instructor_and_assign_to_course(
        Instructor(first_name="Sami", last_name="Ben"), ski.num_course
    )
    other = instructors.add_instructor_and_assign_to_course(
        Instructor(first_name="Lina", last_name="Kh"), board.num_course
    )
    skier = SkierRepository(session).save(make_skier())
    for week, course in [(5, ski), (1, ski), (9, board)]:
        svc.add_registration_and_assign_to_skier_and_course(
            Registration(num_week=week), skier.num_skier, course.num_course
        )

    assert svc.num_weeks_course_of_instructor_by_support(instructor.num_instructor, Support.SKI) == [1, 5]
    assert svc.num_weeks_course_of_instructor_by_support(instructor.num_instructor, Support.SNOWBOARD) == []
    assert svc.num_weeks_course_of_instructor_by_support(other.num_instructor, Support.SNOWBOARD) == [9]


def test_registration_and_course_changes_are_logged(svc, session, caplog):
    caplog.set_level(logging.INFO, logger="skistation.services")
    skier = SkierRepository(session).save(make_skier())
    courses = CourseService.from_session(session)
    course = courses.add_course(make_course())

    registration = svc.add_registration_and_assign_to_skier(Registration(num_week=2), skier.num_skier)
    svc.assign_registration_to_course(registration.num_registration, course.num_course)
    course.level = 4
    courses.update_course(course)
    with pytest.raises(RegistrationNotFoundError):
        svc.assign_registration_to_course(999, course.num_course)

    messages = [(r.levelname, r.getMessage()) for r in caplog.records]
    assert ("INFO", f"Course {course.num_course} updated") in messages
    assert (
        "INFO",
        f"Registration {registration.num_registration} assigned to course {course.num_course}",
    ) in messages
    assert ("WARNING", "Registration 999 not found") in messages
