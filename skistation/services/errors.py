"""Exceptions raised by the service layer."""
from __future__ import annotations


class SkiStationError(Exception):
    """Base exception for ski station use cases."""


class NotFoundError(SkiStationError):
    """Raised when an id used inside an operation matches no row."""

    entity = "Entity"

    def __init__(self, pk) -> None:
        super().__init__(f"{self.entity} {pk} not found")
        self.pk = pk


class SkierNotFoundError(NotFoundError):
    entity = "Skier"


class SubscriptionNotFoundError(NotFoundError):
    entity = "Subscription"


class PisteNotFoundError(NotFoundError):
    entity = "Piste"


class CourseNotFoundError(NotFoundError):
    entity = "Course"


class InstructorNotFoundError(NotFoundError):
    entity = "Instructor"


class RegistrationNotFoundError(NotFoundError):
    entity = "Registration"


class RegistrationError(SkiStationError):
    """Raised when a registration breaks an enrollment rule."""
