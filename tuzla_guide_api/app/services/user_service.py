"""
Business logic for user profiles.

One profile per caller principal, created lazily by the first update.
Later updates only overwrite ``username``, ``email`` and
``preferred_language``; visited/favorite lists, total spend and the
creation time are preserved.
"""

import logging
from datetime import datetime, timezone
from typing import Optional

from ..core.store import get_store
from ..schemas.user import UserProfile, UserProfileUpdate
from .persistence_service import PersistenceService


class UserService:
    """Profile manager keyed by caller principal."""

    @classmethod
    async def get_profile(cls, caller: str) -> Optional[UserProfile]:
        return get_store().get_profile(caller)

    @classmethod
    async def update_profile(cls, data: UserProfileUpdate, caller: str) -> UserProfile:
        """Create or update the caller's profile and return it.

        No validation of the email or username format is performed; the
        operation always succeeds.
        """
        logger = logging.getLogger(__name__)
        store = get_store()
        with store.lock:
            profile = store.get_profile(caller)
            if profile is None:
                profile = UserProfile(
                    id=caller,
                    username=data.username,
                    email=data.email,
                    preferred_language=data.preferred_language,
                    visited_attractions=[],
                    favorite_attractions=[],
                    total_spent=0,
                    created_at=datetime.now(timezone.utc),
                )
                logger.info("Created profile for %s", caller)
            else:
                profile.username = data.username
                profile.email = data.email
                profile.preferred_language = data.preferred_language
                logger.info("Updated profile for %s", caller)
            store.put_profile(profile)
            PersistenceService.after_write()
        return profile
