"""
Persistence adapters.

One repository per entity, each bound to a SQLAlchemy session handed in
by the caller (a request-scoped session in the API, a test session in
the suite). Services depend on these classes rather than on the session.
"""

from .sql_repository import (
    CourseRepository,
    InstructorRepository,
    PisteRepository,
    RegistrationRepository,
    SkierRepository,
    SQLRepository,
    SubscriptionRepository,
)

__all__ = [
    "CourseRepository",
    "InstructorRepository",
    "PisteRepository",
    "RegistrationRepository",
    "SkierRepository",
    "SQLRepository",
    "SubscriptionRepository",
]
