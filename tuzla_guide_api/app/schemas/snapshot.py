"""
Snapshot of the complete service state.

A ``GuideSnapshot`` holds copies of every record of the four stores and
both id counters.  It is produced by ``GuideStore.snapshot`` before a
controlled shutdown and fed back to ``GuideStore.restore`` after start.
"""

from typing import List

from pydantic import BaseModel, Field

from .attraction import Attraction
from .payment import PaymentTransaction
from .review import Review
from .user import UserProfile


class GuideSnapshot(BaseModel):
    attractions: List[Attraction] = Field(default_factory=list)
    reviews: List[Review] = Field(default_factory=list)
    user_profiles: List[UserProfile] = Field(default_factory=list)
    payment_transactions: List[PaymentTransaction] = Field(default_factory=list)
    next_attraction_id: int = 0
    next_review_id: int = 0
