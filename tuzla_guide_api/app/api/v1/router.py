"""
Top‑level router for version 1 of the API.

This router aggregates the domain routers (attractions, reviews,
payments, users, info) under a unified prefix.
"""

from fastapi import APIRouter

from .endpoints import (
    attractions,
    reviews,
    payments,
    users,
    info,
)

router = APIRouter()

router.include_router(attractions.router, prefix="/attractions", tags=["attractions"])
# The reviews router defines its own "/reviews" path internally.
router.include_router(reviews.router, tags=["reviews"])
router.include_router(payments.router, prefix="/payments", tags=["payments"])
router.include_router(users.router, prefix="/users", tags=["users"])
router.include_router(info.router, prefix="/info", tags=["info"])
