"""High-level data access helpers backed by SQLAlchemy."""
from __future__ import annotations

from datetime import date
from typing import Any, Generic, Optional, TypeVar

from sqlalchemy import delete, func, inspect, select
from sqlalchemy.orm import Session

from skistation.db.models import (
    Course,
    Instructor,
    Piste,
    Registration,
    Skier,
    Subscription,
    skier_pistes,
)
from skistation.domain.enums import Support, TypeSubscription

ModelT = TypeVar("ModelT")


class SQLRepository(Generic[ModelT]):
    """CRUD helpers wrapping an injected SQLAlchemy session."""

    model: type[ModelT]

    def __init__(self, session: Session) -> None:
        self.session = session

    def _primary_key(self, entity: ModelT) -> Any:
        identity = inspect(self.model).primary_key[0].key
        return getattr(entity, identity)

    def find_by_id(self, pk: Any) -> Optional[ModelT]:
        if pk is None:
            return None
        return self.session.get(self.model, pk)

    def find_all(self) -> list[ModelT]:
        return list(self.session.execute(select(self.model)).scalars().all())

    def exists(self, pk: Any) -> bool:
        return self.find_by_id(pk) is not None

    def save(self, entity: ModelT) -> ModelT:
        """Insert ``entity`` or, when it carries a known id, update the stored row."""
        state = inspect(entity)
        if state.transient and self._primary_key(entity) is not None:
            entity = self.session.merge(entity)
        else:
            self.session.add(entity)
        self.session.commit()
        self.session.refresh(entity)
        return entity

    def delete_by_id(self, pk: Any) -> None:
        entity = self.find_by_id(pk)
        if entity is None:
            return
        self.session.delete(entity)
        self.session.commit()


class SkierRepository(SQLRepository[Skier]):
    model = Skier

    def find_by_subscription_type(self, type_sub: TypeSubscription) -> list[Skier]:
        stmt = (
            select(Skier)
            .join(Subscription, Skier.subscription_id == Subscription.num_sub)
            .where(Subscription.type_sub == type_sub)
        )
        return list(self.session.execute(stmt).unique().scalars().all())

    def find_by_piste(self, num_piste: int) -> list[Skier]:
        stmt = (
            select(Skier)
            .join(skier_pistes, skier_pistes.c.skier_id == Skier.num_skier)
            .where(skier_pistes.c.piste_id == num_piste)
        )
        return list(self.session.execute(stmt).unique().scalars().all())


class SubscriptionRepository(SQLRepository[Subscription]):
    model = Subscription

    def find_by_type(self, type_sub: TypeSubscription) -> list[Subscription]:
        stmt = (
            select(Subscription)
            .where(Subscription.type_sub == type_sub)
            .order_by(Subscription.start_date, Subscription.num_sub)
        )
        return list(self.session.execute(stmt).scalars().all())

    def find_by_start_date_between(self, start: date, end: date) -> list[Subscription]:
        stmt = (
            select(Subscription)
            .where(Subscription.start_date >= start, Subscription.start_date <= end)
            .order_by(Subscription.start_date, Subscription.num_sub)
        )
        return list(self.session.execute(stmt).scalars().all())


class InstructorRepository(SQLRepository[Instructor]):
    model = Instructor


class CourseRepository(SQLRepository[Course]):
    model = Course

    def find_by_instructor(self, num_instructor: int) -> list[Course]:
        stmt = select(Course).where(Course.instructor_id == num_instructor)
        return list(self.session.execute(stmt).scalars().all())


class PisteRepository(SQLRepository[Piste]):
    model = Piste

    def delete_by_id(self, pk: Any) -> None:
        # SQLite does not enforce ON DELETE CASCADE without a pragma.
        self.session.execute(delete(skier_pistes).where(skier_pistes.c.piste_id == pk))
        super().delete_by_id(pk)
        self.session.commit()


class RegistrationRepository(SQLRepository[Registration]):
    model = Registration

    def find_by_skier(self, num_skier: int) -> list[Registration]:
        stmt = select(Registration).where(Registration.skier_id == num_skier)
        return list(self.session.execute(stmt).scalars().all())

    def find_by_course(self, num_course: int) -> list[Registration]:
        stmt = select(Registration).where(Registration.course_id == num_course)
        return list(self.session.execute(stmt).scalars().all())

    def count_by_week_skier_and_course(self, num_week: int, num_skier: int, num_course: int) -> int:
        stmt = select(func.count(Registration.num_registration)).where(
            Registration.num_week == num_week,
            Registration.skier_id == num_skier,
            Registration.course_id == num_course,
        )
        return int(self.session.execute(stmt).scalar_one())

    def weeks_for_instructor_and_support(self, num_instructor: int, support: Support) -> list[int]:
        stmt = (
            select(Registration.num_week)
            .join(Course, Registration.course_id == Course.num_course)
            .where(Course.instructor_id == num_instructor, Course.support == support)
            .distinct()
            .order_by(Registration.num_week)
        )
        return [int(week) for week in self.session.execute(stmt).scalars().all()]
