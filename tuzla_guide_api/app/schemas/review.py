"""
Pydantic schemas for attraction reviews.

Reviews are immutable once created.  The rating range is checked by
``ReviewService`` rather than by the request schema so that an out of
range rating is reported as a validation failure of the operation
itself (HTTP 400) with a readable message.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator


MIN_RATING = 1
MAX_RATING = 5


class ReviewCreate(BaseModel):
    """Schema for submitting a review."""

    attraction_id: int = Field(..., description="Identifier of the reviewed attraction")
    rating: int = Field(..., description="Rating from 1 to 5")
    comment: str = Field("", description="Free text comment")
    photos: List[str] = Field(default_factory=list, description="Opaque photo references")

    @field_validator("comment", mode="before")
    @classmethod
    def strip_comment(cls, v: Optional[str]) -> str:
        """Trim surrounding whitespace; a missing comment becomes empty."""
        if v is None:
            return ""
        return v.strip()


class Review(BaseModel):
    """Schema for reading a review."""

    id: int
    attraction_id: int
    user_id: str
    rating: int
    comment: str
    photos: List[str] = Field(default_factory=list)
    created_at: datetime

    model_config = {
        "from_attributes": True,
    }


class ReviewCreated(BaseModel):
    id: int
