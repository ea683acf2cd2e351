"""
Pydantic models for user profiles.

A profile is keyed by the caller's principal; at most one profile
exists per principal.  Only ``username``, ``email`` and
``preferred_language`` are writable through the API.  No format
validation is applied to them.
"""

from datetime import datetime
from typing import List

from pydantic import BaseModel, Field


class UserProfileUpdate(BaseModel):
    """Schema for creating or updating the caller's profile."""

    username: str = Field(..., examples=["amra"])
    email: str = Field(..., examples=["amra@example.com"])
    preferred_language: str = Field("en", examples=["bs"])


class UserProfile(UserProfileUpdate):
    """Schema for reading a profile."""

    id: str = Field(..., description="Principal that owns the profile")
    visited_attractions: List[int] = Field(default_factory=list)
    favorite_attractions: List[int] = Field(default_factory=list)
    total_spent: int = 0
    created_at: datetime

    model_config = {
        "from_attributes": True,
    }
