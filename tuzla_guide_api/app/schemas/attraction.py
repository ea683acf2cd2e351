"""
Pydantic models for attractions.

An attraction is a point of interest with a location, descriptive
metadata, a price and a rating derived from its reviews.  Clients never
write attractions directly; they are seeded on first start and their
``rating``/``updated_at`` are maintained by the review service.
"""

from datetime import datetime
from typing import List

from pydantic import BaseModel, Field


# Known categories.  The set is open: unknown values are stored as is.
CATEGORIES = ("museum", "restaurant", "natural", "historical", "shopping", "other")


class Location(BaseModel):
    latitude: float = Field(..., examples=[44.5384])
    longitude: float = Field(..., examples=[18.6763])


class AttractionBase(BaseModel):
    name: str = Field(..., examples=["Pannonian Salt Lakes"])
    description: str = Field("", examples=["Salt water lakes in the city centre"])
    location: Location
    category: str = Field("other", examples=["natural"])
    image_url: str = Field("", description="Opaque image reference, resolved by the client")
    audio_url: str = Field("", description="Opaque audio guide reference, resolved by the client")
    price: int = Field(0, ge=0, description="Entry price in the smallest currency unit")
    languages: List[str] = Field(default_factory=list, examples=[["en", "bs"]])
    tags: List[str] = Field(default_factory=list, examples=[["lake", "swimming"]])


class Attraction(AttractionBase):
    """Schema for reading an attraction."""

    id: int
    rating: float = Field(0.0, description="Mean of all review ratings, or the seed value")
    created_at: datetime
    updated_at: datetime

    model_config = {
        "from_attributes": True,
    }


class AttractionWithDistance(Attraction):
    """Attraction annotated with its distance from a reference point."""

    distance_km: float

