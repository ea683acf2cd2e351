"""
In‑memory record stores.

``GuideStore`` owns the four keyed collections (attractions, reviews,
user profiles, payment transactions) and the two monotonic id counters.
Services obtain the process‑wide instance via ``get_store`` the same
way they obtain a database connection; nothing outside this module
holds a reference to the underlying dictionaries.  Records handed out
are always copies.

Every mutation runs under ``store.lock``.  Services that need a
read‑modify‑write spanning several stores (adding a review and
recomputing the rating) take the lock for the whole step so no other
operation observes a half‑updated state.
"""

import threading
from typing import Dict, List, Optional

from ..schemas.attraction import Attraction
from ..schemas.payment import PaymentTransaction
from ..schemas.review import Review
from ..schemas.snapshot import GuideSnapshot
from ..schemas.user import UserProfile


class GuideStore:
    """State of one service instance."""

    def __init__(self) -> None:
        self.lock = threading.RLock()
        self._attractions: Dict[int, Attraction] = {}
        self._reviews: Dict[int, Review] = {}
        self._profiles: Dict[str, UserProfile] = {}
        self._payments: Dict[str, PaymentTransaction] = {}
        self.next_attraction_id = 0
        self.next_review_id = 0

    # ------------------------------------------------------------------
    # Attractions
    # ------------------------------------------------------------------
    def attractions(self) -> List[Attraction]:
        with self.lock:
            return [a.model_copy(deep=True) for _, a in sorted(self._attractions.items())]

    def get_attraction(self, attraction_id: int) -> Optional[Attraction]:
        with self.lock:
            attraction = self._attractions.get(attraction_id)
            return attraction.model_copy(deep=True) if attraction else None

    def allocate_attraction_id(self) -> int:
        with self.lock:
            attraction_id = self.next_attraction_id
            self.next_attraction_id += 1
            return attraction_id

    def put_attraction(self, attraction: Attraction) -> None:
        with self.lock:
            self._attractions[attraction.id] = attraction.model_copy(deep=True)

    # ------------------------------------------------------------------
    # Reviews
    # ------------------------------------------------------------------
    def reviews_for(self, attraction_id: int) -> List[Review]:
        with self.lock:
            return [
                r.model_copy(deep=True)
                for _, r in sorted(self._reviews.items())
                if r.attraction_id == attraction_id
            ]

    def allocate_review_id(self) -> int:
        with self.lock:
            review_id = self.next_review_id
            self.next_review_id += 1
            return review_id

    def put_review(self, review: Review) -> None:
        with self.lock:
            self._reviews[review.id] = review.model_copy(deep=True)

    # ------------------------------------------------------------------
    # User profiles
    # ------------------------------------------------------------------
    def get_profile(self, principal: str) -> Optional[UserProfile]:
        with self.lock:
            profile = self._profiles.get(principal)
            return profile.model_copy(deep=True) if profile else None

    def put_profile(self, profile: UserProfile) -> None:
        with self.lock:
            self._profiles[profile.id] = profile.model_copy(deep=True)

    # ------------------------------------------------------------------
    # Payment transactions
    # ------------------------------------------------------------------
    def get_payment(self, transaction_id: str) -> Optional[PaymentTransaction]:
        with self.lock:
            payment = self._payments.get(transaction_id)
            return payment.model_copy(deep=True) if payment else None

    def has_payment(self, transaction_id: str) -> bool:
        return transaction_id in self._payments

    def put_payment(self, payment: PaymentTransaction) -> None:
        with self.lock:
            self._payments[payment.id] = payment.model_copy(deep=True)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def is_empty(self) -> bool:
        with self.lock:
            return not (
                self._attractions or self._reviews or self._profiles or self._payments
                or self.next_attraction_id or self.next_review_id
            )

    def counts(self) -> Dict[str, int]:
        with self.lock:
            return {
                "attractions": len(self._attractions),
                "reviews": len(self._reviews),
                "user_profiles": len(self._profiles),
                "payment_transactions": len(self._payments),
            }

    def snapshot(self) -> GuideSnapshot:
        """Return a copy of the full state, including both id counters."""
        with self.lock:
            return GuideSnapshot(
                attractions=[a.model_copy(deep=True) for _, a in sorted(self._attractions.items())],
                reviews=[r.model_copy(deep=True) for _, r in sorted(self._reviews.items())],
                user_profiles=[p.model_copy(deep=True) for _, p in sorted(self._profiles.items())],
                payment_transactions=[t.model_copy(deep=True) for _, t in sorted(self._payments.items())],
                next_attraction_id=self.next_attraction_id,
                next_review_id=self.next_review_id,
            )

    def restore(self, snapshot: GuideSnapshot) -> None:
        """Replace the full state with the content of ``snapshot``."""
        with self.lock:
            self._attractions = {a.id: a.model_copy(deep=True) for a in snapshot.attractions}
            self._reviews = {r.id: r.model_copy(deep=True) for r in snapshot.reviews}
            self._profiles = {p.id: p.model_copy(deep=True) for p in snapshot.user_profiles}
            self._payments = {t.id: t.model_copy(deep=True) for t in snapshot.payment_transactions}
            # Counters never move backwards, even for a hand‑edited snapshot.
            self.next_attraction_id = max(
                snapshot.next_attraction_id,
                max(self._attractions, default=-1) + 1,
            )
            self.next_review_id = max(
                snapshot.next_review_id,
                max(self._reviews, default=-1) + 1,
            )


_store = GuideStore()


def get_store() -> GuideStore:
    """Return the process‑wide store."""
    return _store


def reset_store() -> GuideStore:
    """Replace the process‑wide store with an empty one and return it."""
    global _store
    _store = GuideStore()
    return _store
