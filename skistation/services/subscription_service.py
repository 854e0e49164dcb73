"""Subscription use cases."""
from __future__ import annotations

import logging
from datetime import date
from typing import Optional

from sqlalchemy.orm import Session

from skistation.db.models import Subscription
from skistation.domain.enums import TypeSubscription
from skistation.domain.subscriptions import apply_end_date
from skistation.repositories import SubscriptionRepository
from skistation.services.errors import SubscriptionNotFoundError

logger = logging.getLogger(__name__)

_UPDATABLE_FIELDS = ("type_sub", "start_date", "price")


class SubscriptionService:
    def __init__(self, subscriptions: SubscriptionRepository) -> None:
        self.subscriptions = subscriptions

    @classmethod
    def from_session(cls, session: Session) -> "SubscriptionService":
        return cls(SubscriptionRepository(session))

    def add_subscription(self, subscription: Subscription) -> Subscription:
        apply_end_date(subscription)
        saved = self.subscriptions.save(subscription)
        logger.info("Subscription %s added (%s until %s)", saved.num_sub, saved.type_sub, saved.end_date)
        return saved

    def update_subscription(self, subscription: Subscription) -> Subscription:
        current = self.subscriptions.find_by_id(subscription.num_sub)
        if current is None:
            logger.warning("Subscription %s not found", subscription.num_sub)
            raise SubscriptionNotFoundError(subscription.num_sub)
        for field in _UPDATABLE_FIELDS:
            setattr(current, field, getattr(subscription, field))
        apply_end_date(current)
        return self.subscriptions.save(current)

    def retrieve_subscription_by_id(self, num_sub: int) -> Optional[Subscription]:
        return self.subscriptions.find_by_id(num_sub)

    def get_subscription_by_type(self, type_sub: TypeSubscription) -> list[Subscription]:
        return self.subscriptions.find_by_type(type_sub)

    def retrieve_subscriptions_by_dates(self, start: date, end: date) -> list[Subscription]:
        return self.subscriptions.find_by_start_date_between(start, end)
