"""
Information endpoint for API v1.

Returns the service name and version together with the number of
records held by each store.  Useful as a liveness probe and to verify
that a restart restored the expected data.
"""

from typing import Any, Dict

from fastapi import APIRouter

from tuzla_guide_api.app.core.config import settings
from tuzla_guide_api.app.core.store import get_store

router = APIRouter()


@router.get("/", response_model=Dict[str, Any])
async def get_info() -> Dict[str, Any]:
    store = get_store()
    return {
        "name": settings.project_name,
        "version": settings.api_version,
        "counts": store.counts(),
        "next_attraction_id": store.next_attraction_id,
        "next_review_id": store.next_review_id,
    }
