"""Subscription end-date rule."""
from __future__ import annotations

from datetime import date
from typing import Any

from dateutil.relativedelta import relativedelta

from skistation.domain.enums import TypeSubscription

SUBSCRIPTION_DURATIONS = {
    TypeSubscription.MONTHLY: relativedelta(months=1),
    TypeSubscription.SEMESTRIEL: relativedelta(months=6),
    TypeSubscription.ANNUAL: relativedelta(years=1),
}


class UnknownSubscriptionTypeError(ValueError):
    """Raised when an end date cannot be derived from a subscription."""


def compute_end_date(start_date: date, type_sub: TypeSubscription | str) -> date:
    """
    Return the day a subscription of ``type_sub`` starting on ``start_date`` ends.

    Month arithmetic clamps to the end of the target month, so a monthly
    subscription starting on January 31st ends on the last day of February.
    """
    if start_date is None:
        raise UnknownSubscriptionTypeError("Subscription has no start date")
    try:
        duration = SUBSCRIPTION_DURATIONS[TypeSubscription(type_sub)]
    except (KeyError, ValueError):
        raise UnknownSubscriptionTypeError(f"Unknown subscription type: {type_sub!r}") from None
    return start_date + duration


def apply_end_date(subscription: Any) -> Any:
    """Set ``subscription.end_date`` from its own start date and type."""
    subscription.end_date = compute_end_date(subscription.start_date, subscription.type_sub)
    return subscription
