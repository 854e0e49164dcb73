"""Builders for unsaved model instances used across the tests."""
from __future__ import annotations

from datetime import date

from skistation.db import models
from skistation.domain.enums import Color, Support, TypeCourse, TypeSubscription


def make_subscription(type_sub=TypeSubscription.ANNUAL, start=date(2024, 1, 10), price=500.0):
    return models.Subscription(type_sub=type_sub, start_date=start, price=price)


def make_skier(first="John", last="Doe", city="Tunis", subscription=None):
    return models.Skier(
        first_name=first,
        last_name=last,
        date_of_birth=date(1990, 5, 15),
        city=city,
        subscription=subscription,
    )


def make_course(support=Support.SKI, type_course=TypeCourse.COLLECTIVE_CHILDREN, level=1, price=100.0):
    return models.Course(level=level, type_course=type_course, support=support, price=price, time_slot=6)


def make_piste(name="Blue Slope", color=Color.BLUE, length=1000, slope=15):
    return models.Piste(name_piste=name, color=color, length=length, slope=slope)
