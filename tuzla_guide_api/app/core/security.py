"""
Caller identity for the guide API.

Every mutating operation and the profile read are attributed to the
principal of the remote caller.  The principal travels as the subject
(``sub``) of a bearer token.  Tokens are a lightweight JWT: HMAC‑SHA256
signatures over base64url encoded JSON, with an expiration timestamp
(``exp``) and signed with ``settings.secret_key``.

Requests without a token are served as the anonymous principal when
``settings.allow_anonymous`` is enabled.  All anonymous callers share
that one identity.
"""

import base64
import hashlib
import hmac
import json
import time
from typing import Dict, Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from .config import settings


# Textual form of the anonymous principal used by Internet Computer
# agents, so records of unauthenticated callers keep a stable key.
ANONYMOUS_PRINCIPAL = "2vxsx-fae"


def _b64_url_encode(data: bytes) -> str:
    """Base64‑url encode bytes without padding."""
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("utf-8")


def _b64_url_decode(data: str) -> bytes:
    """Decode base64‑url encoded string, adding padding if necessary."""
    padding = '=' * (-len(data) % 4)
    return base64.urlsafe_b64decode(data + padding)


def _sign(message: bytes, secret: str) -> bytes:
    return hmac.new(secret.encode("utf-8"), message, hashlib.sha256).digest()


def create_access_token(principal: str, expires_delta: Optional[int] = None) -> str:
    """Create a signed token identifying ``principal``.

    Parameters
    ----------
    principal : str
        Caller identity embedded as the ``sub`` claim.
    expires_delta : Optional[int]
        Lifetime of the token in seconds.  Defaults to
        ``settings.access_token_expire_minutes * 60``.

    Returns
    -------
    str
        A token of the form ``header.payload.signature``.
    """
    exp_seconds = expires_delta or settings.access_token_expire_minutes * 60
    claims = {"sub": principal, "exp": int(time.time()) + exp_seconds}
    header = {"alg": "HS256", "typ": "JWT"}
    header_b64 = _b64_url_encode(json.dumps(header, separators=(',', ':')).encode("utf-8"))
    payload_b64 = _b64_url_encode(json.dumps(claims, separators=(',', ':')).encode("utf-8"))
    signing_input = f"{header_b64}.{payload_b64}".encode("utf-8")
    signature_b64 = _b64_url_encode(_sign(signing_input, settings.secret_key))
    return f"{header_b64}.{payload_b64}.{signature_b64}"


def decode_access_token(token: str) -> Optional[Dict[str, object]]:
    """Verify a token and return its claims, or ``None`` if it is invalid.

    A token is invalid when it is malformed, its signature does not
    match or its ``exp`` claim lies in the past.
    """
    parts = token.split('.')
    if len(parts) != 3:
        return None
    header_b64, payload_b64, signature_b64 = parts
    signing_input = f"{header_b64}.{payload_b64}".encode("utf-8")
    try:
        actual_sig = _b64_url_decode(signature_b64)
        if not hmac.compare_digest(_sign(signing_input, settings.secret_key), actual_sig):
            return None
        data = json.loads(_b64_url_decode(payload_b64).decode("utf-8"))
    except (ValueError, UnicodeDecodeError):
        return None
    if not isinstance(data, dict) or not data.get("sub"):
        return None
    if data.get("exp") is None or int(data["exp"]) < int(time.time()):
        return None
    return data


security = HTTPBearer(auto_error=False)


def get_current_caller(credentials: HTTPAuthorizationCredentials = Depends(security)) -> str:
    """Dependency that resolves the principal of the remote caller.

    Without an ``Authorization`` header the anonymous principal is
    returned (or HTTP 401 raised when anonymous access is disabled).  An
    invalid or expired token always results in HTTP 401.
    """
    if credentials is None:
        if settings.allow_anonymous:
            return ANONYMOUS_PRINCIPAL
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )
    payload = decode_access_token(credentials.credentials)
    if not payload:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return str(payload["sub"])
