"""SQLAlchemy models for the ski station.

Associations are declared on one side only: a skier points at its
subscription, registrations and pistes; an instructor owns its courses.
Reverse lookups go through the repositories.
"""
from __future__ import annotations

from sqlalchemy import (
    Column,
    Date,
    Enum,
    Float,
    ForeignKey,
    Integer,
    String,
    Table,
)
from sqlalchemy.orm import relationship

from skistation.domain.enums import Color, Support, TypeCourse, TypeSubscription

from .session import Base


skier_pistes = Table(
    "skier_pistes",
    Base.metadata,
    Column("skier_id", Integer, ForeignKey("skiers.num_skier", ondelete="CASCADE"), primary_key=True),
    Column("piste_id", Integer, ForeignKey("pistes.num_piste", ondelete="CASCADE"), primary_key=True),
)


class Subscription(Base):
    __tablename__ = "subscriptions"

    num_sub = Column(Integer, primary_key=True, autoincrement=True)
    type_sub = Column(Enum(TypeSubscription, name="type_subscription"), nullable=True)
    start_date = Column(Date, nullable=True)
    end_date = Column(Date, nullable=True)
    price = Column(Float, nullable=True)


class Piste(Base):
    __tablename__ = "pistes"

    num_piste = Column(Integer, primary_key=True, autoincrement=True)
    name_piste = Column(String(255), nullable=True)
    color = Column(Enum(Color, name="color"), nullable=True)
    length = Column(Integer, nullable=True)
    slope = Column(Integer, nullable=True)


class Instructor(Base):
    __tablename__ = "instructors"

    num_instructor = Column(Integer, primary_key=True, autoincrement=True)
    first_name = Column(String(255), nullable=True)
    last_name = Column(String(255), nullable=True)
    date_of_hire = Column(Date, nullable=True)

    courses = relationship("Course", lazy="selectin")


class Course(Base):
    __tablename__ = "courses"

    num_course = Column(Integer, primary_key=True, autoincrement=True)
    level = Column(Integer, nullable=True)
    type_course = Column(Enum(TypeCourse, name="type_course"), nullable=True)
    support = Column(Enum(Support, name="support"), nullable=True)
    price = Column(Float, nullable=True)
    time_slot = Column(Integer, nullable=True)
    instructor_id = Column(Integer, ForeignKey("instructors.num_instructor", ondelete="SET NULL"), nullable=True)


class Skier(Base):
    __tablename__ = "skiers"

    num_skier = Column(Integer, primary_key=True, autoincrement=True)
    first_name = Column(String(255), nullable=True)
    last_name = Column(String(255), nullable=True)
    date_of_birth = Column(Date, nullable=True)
    city = Column(String(255), nullable=True)
    subscription_id = Column(Integer, ForeignKey("subscriptions.num_sub", ondelete="SET NULL"), nullable=True)

    subscription = relationship("Subscription", lazy="joined")
    registrations = relationship("Registration", cascade="all,delete-orphan", lazy="selectin")
    pistes = relationship("Piste", secondary=skier_pistes, lazy="selectin")


class Registration(Base):
    __tablename__ = "registrations"

    num_registration = Column(Integer, primary_key=True, autoincrement=True)
    num_week = Column(Integer, nullable=False, default=0)
    skier_id = Column(Integer, ForeignKey("skiers.num_skier", ondelete="CASCADE"), nullable=True)
    course_id = Column(Integer, ForeignKey("courses.num_course", ondelete="SET NULL"), nullable=True)
