"""
Business logic for the attraction catalog.

Read‑only operations over the attraction store: listing, lookup by id,
substring/filter search and proximity listing.  None of these mutate
state; ratings are maintained by ``ReviewService``.
"""

import logging
import math
from typing import List, Optional

from ..core.store import get_store
from ..schemas.attraction import Attraction, AttractionWithDistance

logger = logging.getLogger(__name__)

EARTH_RADIUS_KM = 6371.0


def calculate_distance(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Great‑circle distance between two points in kilometres (haversine)."""
    d_lat = math.radians(lat2 - lat1)
    d_lon = math.radians(lon2 - lon1)
    a = (
        math.sin(d_lat / 2) ** 2
        + math.cos(math.radians(lat1)) * math.cos(math.radians(lat2)) * math.sin(d_lon / 2) ** 2
    )
    return EARTH_RADIUS_KM * 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))


def _matches_query(attraction: Attraction, query: str) -> bool:
    if not query:
        return True
    return (
        query in attraction.name.lower()
        or query in attraction.description.lower()
        or any(query in tag.lower() for tag in attraction.tags)
    )


class AttractionService:
    """Catalog and search over attractions."""

    @classmethod
    async def list_attractions(cls) -> List[Attraction]:
        """Return every attraction.  Callers must not rely on the order."""
        return get_store().attractions()

    @classmethod
    async def get_attraction(cls, attraction_id: int) -> Optional[Attraction]:
        """Return the attraction or ``None``; absence is not an error."""
        return get_store().get_attraction(attraction_id)

    @classmethod
    async def search(
        cls,
        query: str = "",
        category: Optional[str] = None,
        language: Optional[str] = None,
        max_price: Optional[int] = None,
        min_rating: Optional[float] = None,
    ) -> List[Attraction]:
        """Return attractions satisfying all supplied filters.

        - ``query`` – case‑insensitive substring of the name, the
          description or any tag.  Empty matches everything.
        - ``category`` – exact match.
        - ``language`` – must be one of the attraction's languages.
        - ``max_price`` / ``min_rating`` – inclusive bounds.

        A filter left as ``None`` is not applied.  There is no ranking.
        """
        needle = (query or "").lower()
        results: List[Attraction] = []
        for attraction in get_store().attractions():
            if not _matches_query(attraction, needle):
                continue
            if category is not None and attraction.category != category:
                continue
            if language is not None and language not in attraction.languages:
                continue
            if max_price is not None and attraction.price > max_price:
                continue
            if min_rating is not None and attraction.rating < min_rating:
                continue
            results.append(attraction)
        logger.debug(
            "Search query=%r category=%r language=%r matched %d attractions",
            query, category, language, len(results),
        )
        return results

    @classmethod
    async def nearby(
        cls,
        latitude: float,
        longitude: float,
        radius_km: Optional[float] = None,
    ) -> List[AttractionWithDistance]:
        """Return attractions with their distance from a point, nearest first.

        When ``radius_km`` is given, attractions farther away are left out.
        """
        results: List[AttractionWithDistance] = []
        for attraction in get_store().attractions():
            distance = calculate_distance(
                latitude, longitude,
                attraction.location.latitude, attraction.location.longitude,
            )
            if radius_km is not None and distance > radius_km:
                continue
            results.append(
                AttractionWithDistance(**attraction.model_dump(), distance_km=distance)
            )
        results.sort(key=lambda item: item.distance_km)
        return results
