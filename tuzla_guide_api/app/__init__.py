"""
Application package initializer.

This package contains the main entrypoint for the guide API and all of
its submodules.  The in‑memory record stores and their persistence live
in ``core``, business logic for each domain (attractions, reviews,
profiles, payments) lives in ``services`` and every domain exposes a
router defined in ``api/v1/endpoints``.
"""

from .main import app  # noqa: F401
