"""
Endpoint subpackage for API v1.

Each module defines an APIRouter for one domain (attractions, reviews,
payments, users, info).  The routers are aggregated in ``router.py``.
"""
