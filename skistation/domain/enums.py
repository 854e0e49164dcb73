"""Enumerations shared by models, schemas and services.

Values equal names so they round-trip unchanged through JSON, query
strings and the database.
"""
from __future__ import annotations

from enum import Enum


class TypeSubscription(str, Enum):
    ANNUAL = "ANNUAL"
    MONTHLY = "MONTHLY"
    SEMESTRIEL = "SEMESTRIEL"


class TypeCourse(str, Enum):
    COLLECTIVE_CHILDREN = "COLLECTIVE_CHILDREN"
    COLLECTIVE_ADULT = "COLLECTIVE_ADULT"
    INDIVIDUAL = "INDIVIDUAL"


class Support(str, Enum):
    SKI = "SKI"
    SNOWBOARD = "SNOWBOARD"


class Color(str, Enum):
    GREEN = "GREEN"
    BLUE = "BLUE"
    RED = "RED"
    BLACK = "BLACK"
