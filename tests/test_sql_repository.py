"""
Smoke tests for the repositories against a temporary SQLite database.
"""
from __future__ import annotations

from datetime import date

from factories import make_course, make_piste, make_skier, make_subscription
from skistation.db.models import Instructor, Registration, Skier
from skistation.domain.enums import Support, TypeSubscription
from skistation.repositories import (
    CourseRepository,
    InstructorRepository,
    PisteRepository,
    RegistrationRepository,
    SkierRepository,
    SubscriptionRepository,
)


def test_skier_crud_flow(session):
    repo = SkierRepository(session)
    saved = repo.save(make_skier(subscription=make_subscription()))
    assert saved.num_skier is not None
    assert saved.subscription.num_sub is not None

    found = repo.find_by_id(saved.num_skier)
    assert found is not None
    assert found.first_name == "John"
    assert found.city == "Tunis"

    repo.save(make_skier(first="Jane", last="Smith", city="Sfax"))
    assert sorted(s.first_name for s in repo.find_all()) == ["Jane", "John"]

    repo.delete_by_id(saved.num_skier)
    assert repo.find_by_id(saved.num_skier) is None
    assert not repo.exists(saved.num_skier)


def test_find_by_id_on_missing_row_returns_none(session):
    repo = SkierRepository(session)
    assert repo.find_by_id(999) is None
    assert repo.find_by_id(None) is None
    repo.delete_by_id(999)


def test_save_with_known_id_updates_row(session):
    repo = SkierRepository(session)
    saved = repo.save(make_skier())
    num = saved.num_skier
    session.expunge_all()

    repo.save(Skier(num_skier=num, first_name="Johnny", last_name="Doe", city="Sousse"))

    session.expire_all()
    assert len(repo.find_all()) == 1
    assert repo.find_by_id(num).first_name == "Johnny"
    assert repo.find_by_id(num).city == "Sousse"


def test_find_skiers_by_subscription_type(session):
    repo = SkierRepository(session)
    annual = make_subscription(TypeSubscription.ANNUAL)
    monthly = make_subscription(TypeSubscription.MONTHLY, price=100.0)
    repo.save(make_skier(first="John", subscription=annual))
    repo.save(make_skier(first="Jane", subscription=monthly))
    repo.save(make_skier(first="Ali", subscription=annual))
    repo.save(make_skier(first="Nour"))

    annual_names = {s.first_name for s in repo.find_by_subscription_type(TypeSubscription.ANNUAL)}
    monthly_names = {s.first_name for s in repo.find_by_subscription_type(TypeSubscription.MONTHLY)}

    assert annual_names == {"John", "Ali"}
    assert monthly_names == {"Jane"}
    assert repo.find_by_subscription_type(TypeSubscription.SEMESTRIEL) == []


def test_subscription_queries(session):
    repo = SubscriptionRepository(session)
    late = repo.save(make_subscription(TypeSubscription.MONTHLY, start=date(2024, 3, 1)))
    early = repo.save(make_subscription(TypeSubscription.MONTHLY, start=date(2024, 1, 1)))
    repo.save(make_subscription(TypeSubscription.ANNUAL, start=date(2024, 2, 1)))

    by_type = repo.find_by_type(TypeSubscription.MONTHLY)
    assert [s.num_sub for s in by_type] == [early.num_sub, late.num_sub]

    in_range = repo.find_by_start_date_between(date(2024, 1, 1), date(2024, 2, 1))
    assert [s.start_date for s in in_range] == [date(2024, 1, 1), date(2024, 2, 1)]


def test_courses_by_instructor(session):
    instructor = InstructorRepository(session).save(Instructor(first_name="Sami", last_name="Ben"))
    courses = CourseRepository(session)
    owned = make_course()
    owned.instructor_id = instructor.num_instructor
    courses.save(owned)
    courses.save(make_course(support=Support.SNOWBOARD))

    assert [c.num_course for c in courses.find_by_instructor(instructor.num_instructor)] == [owned.num_course]


def test_registration_queries(session):
    instructor = InstructorRepository(session).save(Instructor(first_name="Sami", last_name="Ben"))
    courses = CourseRepository(session)
    ski = make_course(support=Support.SKI)
    ski.instructor_id = instructor.num_instructor
    board = make_course(support=Support.SNOWBOARD)
    board.instructor_id = instructor.num_instructor
    courses.save(ski)
    courses.save(board)
    john = SkierRepository(session).save(make_skier())
    jane = SkierRepository(session).save(make_skier(first="Jane"))

    repo = RegistrationRepository(session)
    for skier, course, week in [
        (john, ski, 3),
        (jane, ski, 3),
        (john, ski, 1),
        (jane, board, 7),
    ]:
        repo.save(Registration(num_week=week, skier_id=skier.num_skier, course_id=course.num_course))

    assert repo.count_by_week_skier_and_course(3, john.num_skier, ski.num_course) == 1
    assert repo.count_by_week_skier_and_course(7, john.num_skier, ski.num_course) == 0
    assert len(repo.find_by_skier(john.num_skier)) == 2
    assert len(repo.find_by_course(ski.num_course)) == 3
    assert repo.weeks_for_instructor_and_support(instructor.num_instructor, Support.SKI) == [1, 3]
    assert repo.weeks_for_instructor_and_support(instructor.num_instructor, Support.SNOWBOARD) == [7]


def test_deleting_piste_unlinks_skiers(session):
    pistes = PisteRepository(session)
    skiers = SkierRepository(session)
    piste = pistes.save(make_piste())
    skier = make_skier()
    skier.pistes.append(piste)
    skier = skiers.save(skier)
    num_piste = piste.num_piste

    assert [s.num_skier for s in skiers.find_by_piste(num_piste)] == [skier.num_skier]

    pistes.delete_by_id(num_piste)

    assert pistes.find_by_id(num_piste) is None
    assert skiers.find_by_piste(num_piste) == []
