"""JSON payloads exchanged by the API.

Field names are camelCase on the wire (``numSkier``, ``typeSub``...) and
snake_case in Python; both spellings are accepted on input. The same
models read ORM instances for responses and build them for requests.
"""
from __future__ import annotations

from datetime import date
from typing import List, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from skistation.db import models
from skistation.domain.enums import Color, Support, TypeCourse, TypeSubscription


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


class SubscriptionSchema(CamelModel):
    num_sub: Optional[int] = None
    type_sub: Optional[TypeSubscription] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    price: Optional[float] = None

    def to_model(self, *, keep_id: bool = True) -> models.Subscription:
        return models.Subscription(
            num_sub=self.num_sub if keep_id else None,
            type_sub=self.type_sub,
            start_date=self.start_date,
            end_date=self.end_date,
            price=self.price,
        )


class PisteSchema(CamelModel):
    num_piste: Optional[int] = None
    name_piste: Optional[str] = None
    color: Optional[Color] = None
    length: Optional[int] = None
    slope: Optional[int] = None

    def to_model(self) -> models.Piste:
        return models.Piste(
            num_piste=self.num_piste,
            name_piste=self.name_piste,
            color=self.color,
            length=self.length,
            slope=self.slope,
        )


class CourseSchema(CamelModel):
    num_course: Optional[int] = None
    level: Optional[int] = None
    type_course: Optional[TypeCourse] = None
    support: Optional[Support] = None
    price: Optional[float] = None
    time_slot: Optional[int] = None

    def to_model(self) -> models.Course:
        return models.Course(
            num_course=self.num_course,
            level=self.level,
            type_course=self.type_course,
            support=self.support,
            price=self.price,
            time_slot=self.time_slot,
        )


class RegistrationSchema(CamelModel):
    """A registration as seen from its skier: the skier/course links are not serialized."""

    num_registration: Optional[int] = None
    num_week: Optional[int] = None

    def to_model(self, *, keep_id: bool = True) -> models.Registration:
        return models.Registration(
            num_registration=self.num_registration if keep_id else None,
            num_week=self.num_week if self.num_week is not None else 0,
        )


class InstructorSchema(CamelModel):
    num_instructor: Optional[int] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    date_of_hire: Optional[date] = None
    courses: List[CourseSchema] = []

    def to_model(self) -> models.Instructor:
        # Course ownership is set through addAndAssignToCourse, not by payload.
        return models.Instructor(
            num_instructor=self.num_instructor,
            first_name=self.first_name,
            last_name=self.last_name,
            date_of_hire=self.date_of_hire,
        )


class SkierSchema(CamelModel):
    num_skier: Optional[int] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    date_of_birth: Optional[date] = None
    city: Optional[str] = None
    subscription: Optional[SubscriptionSchema] = None
    registrations: List[RegistrationSchema] = []
    pistes: List[PisteSchema] = []

    def to_model(self) -> models.Skier:
        """Build a new skier; a nested subscription and registrations are created with it."""
        skier = models.Skier(
            num_skier=self.num_skier,
            first_name=self.first_name,
            last_name=self.last_name,
            date_of_birth=self.date_of_birth,
            city=self.city,
        )
        if self.subscription is not None:
            skier.subscription = self.subscription.to_model(keep_id=False)
        skier.registrations = [item.to_model(keep_id=False) for item in self.registrations]
        return skier
