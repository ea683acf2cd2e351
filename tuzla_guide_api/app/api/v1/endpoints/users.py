"""
Profile endpoints for API v1.

Both routes act on the profile of the calling principal; there is no
way to read or write somebody else's profile.
"""

from fastapi import APIRouter, Depends, HTTPException, status

from tuzla_guide_api.app.core.security import get_current_caller
from tuzla_guide_api.app.schemas.user import UserProfile, UserProfileUpdate
from tuzla_guide_api.app.services.user_service import UserService


router = APIRouter()


@router.get("/me", response_model=UserProfile)
async def read_profile(caller: str = Depends(get_current_caller)) -> UserProfile:
    """Return the caller's profile, or 404 if it was never created."""
    profile = await UserService.get_profile(caller)
    if profile is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Profile not found")
    return profile


@router.put("/me", status_code=status.HTTP_204_NO_CONTENT)
async def update_profile(
    data: UserProfileUpdate,
    caller: str = Depends(get_current_caller),
) -> None:
    """Create or update the caller's profile."""
    await UserService.update_profile(data, caller)
    return None
