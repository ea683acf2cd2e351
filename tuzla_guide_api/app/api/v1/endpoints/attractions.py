"""
Attraction endpoints for API v1.

Read‑only catalog routes: listing, lookup, search and proximity
listing, plus the review listing of a single attraction.  None of these
routes require a caller identity.
"""

from typing import List, Optional

from fastapi import APIRouter, HTTPException, Query, status

from tuzla_guide_api.app.schemas.attraction import Attraction, AttractionWithDistance
from tuzla_guide_api.app.schemas.review import Review
from tuzla_guide_api.app.services.attraction_service import AttractionService
from tuzla_guide_api.app.services.review_service import ReviewService


router = APIRouter()


@router.get("/", response_model=List[Attraction])
async def list_attractions() -> List[Attraction]:
    """Return the whole catalog.  The order is not significant."""
    return await AttractionService.list_attractions()


@router.get("/search", response_model=List[Attraction])
async def search_attractions(
    query: str = Query("", description="Case-insensitive substring of name, description or a tag"),
    category: Optional[str] = Query(None, description="Exact category, e.g. museum"),
    language: Optional[str] = Query(None, description="Required supported language, e.g. de"),
    max_price: Optional[int] = Query(None, ge=0),
    min_rating: Optional[float] = Query(None, ge=0, le=5),
) -> List[Attraction]:
    """Search attractions; every supplied filter must hold."""
    return await AttractionService.search(
        query=query,
        category=category,
        language=language,
        max_price=max_price,
        min_rating=min_rating,
    )


@router.get("/nearby", response_model=List[AttractionWithDistance])
async def nearby_attractions(
    latitude: float = Query(..., ge=-90, le=90),
    longitude: float = Query(..., ge=-180, le=180),
    radius_km: Optional[float] = Query(None, gt=0),
) -> List[AttractionWithDistance]:
    """Attractions sorted by distance from the given point."""
    return await AttractionService.nearby(latitude, longitude, radius_km)


@router.get("/{attraction_id}", response_model=Attraction)
async def get_attraction(attraction_id: int) -> Attraction:
    attraction = await AttractionService.get_attraction(attraction_id)
    if attraction is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Attraction {attraction_id} not found",
        )
    return attraction


@router.get("/{attraction_id}/reviews", response_model=List[Review])
async def list_attraction_reviews(attraction_id: int) -> List[Review]:
    """Reviews of one attraction; an unknown id yields an empty list."""
    return await ReviewService.list_reviews(attraction_id)
