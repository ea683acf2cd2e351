"""
Business logic for reviews.

Reviews are appended, never edited or deleted.  Each successful
``add_review`` recomputes the reviewed attraction's rating from scratch
as the arithmetic mean of all of its review ratings and refreshes the
attraction's ``updated_at``.
"""

import logging
from datetime import datetime, timezone
from typing import List

from ..core.errors import NotFoundError, ValidationError
from ..core.store import get_store
from ..schemas.review import MAX_RATING, MIN_RATING, Review, ReviewCreate
from .persistence_service import PersistenceService


class ReviewService:
    """Service for attraction reviews and derived ratings."""

    @classmethod
    async def list_reviews(cls, attraction_id: int) -> List[Review]:
        """Return all reviews of an attraction (empty for unknown ids)."""
        return get_store().reviews_for(attraction_id)

    @classmethod
    async def add_review(cls, data: ReviewCreate, caller: str) -> int:
        """Store a review by ``caller`` and return its id.

        Raises ``ValidationError`` when the rating is outside 1–5 and
        ``NotFoundError`` when the attraction does not exist.  Both checks
        happen before anything is written.
        """
        logger = logging.getLogger(__name__)
        if not MIN_RATING <= data.rating <= MAX_RATING:
            raise ValidationError(
                f"Rating must be between {MIN_RATING} and {MAX_RATING}, got {data.rating}"
            )
        store = get_store()
        with store.lock:
            attraction = store.get_attraction(data.attraction_id)
            if attraction is None:
                raise NotFoundError(f"Attraction {data.attraction_id} not found")

            now = datetime.now(timezone.utc)
            review = Review(
                id=store.allocate_review_id(),
                attraction_id=data.attraction_id,
                user_id=caller,
                rating=data.rating,
                comment=data.comment,
                photos=list(data.photos),
                created_at=now,
            )
            store.put_review(review)

            # Full rescan rather than a running average.
            ratings = [r.rating for r in store.reviews_for(data.attraction_id)]
            attraction.rating = sum(ratings) / len(ratings)
            attraction.updated_at = now
            store.put_attraction(attraction)

            PersistenceService.after_write()
        logger.info(
            "Caller %s reviewed attraction %s (review %s, rating %s); new average %.2f",
            caller, data.attraction_id, review.id, data.rating, attraction.rating,
        )
        return review.id
