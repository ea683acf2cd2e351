"""
Typed failures raised by the service layer.

All of them derive from ``ValueError`` so callers that only care about
"the operation was rejected" can keep catching ``ValueError``.  The
message is human readable and is returned verbatim as the HTTP
``detail``.
"""


class GuideError(ValueError):
    """Base class for rejected guide operations."""


class NotFoundError(GuideError):
    """A referenced attraction or payment transaction does not exist."""


class ValidationError(GuideError):
    """Input was well formed but outside the accepted range."""
