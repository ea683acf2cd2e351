"""
API endpoints for attraction reviews.

Submitting a review is attributed to the calling principal and updates
the attraction's average rating.  Reviews are listed per attraction
under ``/attractions/{id}/reviews``.
"""

from fastapi import APIRouter, Depends, HTTPException, status

from tuzla_guide_api.app.core.errors import NotFoundError, ValidationError
from tuzla_guide_api.app.core.security import get_current_caller
from tuzla_guide_api.app.schemas.review import ReviewCreate, ReviewCreated
from tuzla_guide_api.app.services.review_service import ReviewService


router = APIRouter()


@router.post(
    "/reviews",
    response_model=ReviewCreated,
    status_code=status.HTTP_201_CREATED,
    summary="Submit a review",
)
async def create_review(
    data: ReviewCreate,
    caller: str = Depends(get_current_caller),
) -> ReviewCreated:
    """Create a review and return its id.

    Returns 400 for a rating outside 1–5 and 404 for an unknown
    attraction.
    """
    try:
        review_id = await ReviewService.add_review(data, caller)
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return ReviewCreated(id=review_id)
