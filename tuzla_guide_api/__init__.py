"""
Top‑level package for the Tuzla Guide API.

This file makes ``tuzla_guide_api`` a Python package so that modules
within ``app`` can be imported using fully qualified names like
``tuzla_guide_api.app.main``.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
