"""Tuzla Guide API client.

This module defines a simple client wrapper around the REST API served
by ``tuzla_guide_api``.  It uses the ``requests`` library internally and
is meant for front‑ends, bots and scripts that need the guide data
without talking HTTP themselves.

The client exposes one method per service operation:

* :meth:`get_attractions`, :meth:`get_attraction`,
  :meth:`search_attractions`, :meth:`nearby_attractions`
* :meth:`get_reviews`, :meth:`add_review`
* :meth:`create_payment`, :meth:`get_payment`,
  :meth:`update_payment_status`
* :meth:`get_user_profile`, :meth:`update_user_profile`

Every method returns a tuple ``(data, error)``.  On success ``error`` is
``None``; on failure ``data`` is empty/``None`` and ``error`` is a
dictionary with ``status_code`` and ``message``.  Lookups of a single
record return ``(None, None)`` when the record does not exist, mirroring
the service where absence is not a failure.

The distance helpers (:func:`calculate_distance`, the same haversine
the service uses for ``nearby``, and
:meth:`TuzlaGuideAPI.add_distance_to_attractions`) let a client sort
the catalog by the user's GPS position without an extra request.

Authentication is optional: initialise the client with
``token='<bearer token>'`` to act as a specific principal; otherwise
requests are made as the anonymous principal.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests

from tuzla_guide_api.app.services.attraction_service import calculate_distance


logger = logging.getLogger(__name__)

Error = Optional[Dict[str, Any]]


class TuzlaGuideAPI:
    """Client for interacting with the guide API."""

    def __init__(
        self,
        *,
        base_url: str,
        token: Optional[str] = None,
        session: Optional[requests.Session] = None,
        api_prefix: str = "/api/v1",
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the server, e.g. ``http://localhost:8000``.
            token: Optional bearer token identifying the caller.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            api_prefix: Path prefix of the versioned API.
        """
        self.base_url = base_url.rstrip("/") + api_prefix
        self.token = token
        self.session = session or requests.Session()

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, params: Dict[str, Any] | None = None,
        json_body: Any | None = None
    ) -> Tuple[Optional[Any], Error]:
        """Perform an HTTP request to the API.

        Returns:
            A tuple ``(data, error)``.  ``data`` contains the parsed JSON
            response on success (``None`` for empty bodies) and
            ``error`` is ``None``.  On failure ``data`` is ``None`` and
            ``error`` describes the issue.
        """
        url = f"{self.base_url}{path}"
        headers: Dict[str, str] = {}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        if params:
            params = {k: v for k, v in params.items() if v is not None}
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                params=params,
                json=json_body,
                headers=headers,
                timeout=15,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    message = err_json.get("detail") or err_json.get("message") or str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    def _get_optional(self, path: str) -> Tuple[Optional[Dict[str, Any]], Error]:
        """GET a single record, mapping 404 to ``(None, None)``."""
        data, error = self._request("GET", path)
        if error and error.get("status_code") == 404:
            return None, None
        return data, error

    # ------------------------------------------------------------------
    # Catalog
    # ------------------------------------------------------------------
    def get_attractions(self) -> Tuple[List[Dict[str, Any]], Error]:
        data, error = self._request("GET", "/attractions/")
        if error:
            return [], error
        return data or [], None

    def get_attraction(self, attraction_id: int) -> Tuple[Optional[Dict[str, Any]], Error]:
        return self._get_optional(f"/attractions/{attraction_id}")

    def search_attractions(
        self,
        query: str,
        *,
        category: Optional[str] = None,
        language: Optional[str] = None,
        max_price: Optional[int] = None,
        min_rating: Optional[float] = None,
    ) -> Tuple[List[Dict[str, Any]], Error]:
        """Search the catalog.  A category of ``"all"`` disables the category filter."""
        if category == "all":
            category = None
        data, error = self._request(
            "GET",
            "/attractions/search",
            params={
                "query": query,
                "category": category,
                "language": language,
                "max_price": max_price,
                "min_rating": min_rating,
            },
        )
        if error:
            return [], error
        return data or [], None

    def nearby_attractions(
        self, latitude: float, longitude: float, radius_km: Optional[float] = None
    ) -> Tuple[List[Dict[str, Any]], Error]:
        data, error = self._request(
            "GET",
            "/attractions/nearby",
            params={"latitude": latitude, "longitude": longitude, "radius_km": radius_km},
        )
        if error:
            return [], error
        return data or [], None

    @staticmethod
    def add_distance_to_attractions(
        attractions: List[Dict[str, Any]], latitude: float, longitude: float
    ) -> List[Dict[str, Any]]:
        """Return copies of ``attractions`` with a ``distance_km`` key added."""
        result = []
        for attraction in attractions:
            location = attraction.get("location") or {}
            item = dict(attraction)
            item["distance_km"] = calculate_distance(
                latitude, longitude, location.get("latitude", 0.0), location.get("longitude", 0.0)
            )
            result.append(item)
        return result

    # ------------------------------------------------------------------
    # Reviews
    # ------------------------------------------------------------------
    def get_reviews(self, attraction_id: int) -> Tuple[List[Dict[str, Any]], Error]:
        data, error = self._request("GET", f"/attractions/{attraction_id}/reviews")
        if error:
            return [], error
        return data or [], None

    def add_review(
        self, attraction_id: int, rating: int, comment: str = "", photos: Optional[List[str]] = None
    ) -> Tuple[Optional[int], Error]:
        """Submit a review and return the new review id."""
        data, error = self._request(
            "POST",
            "/reviews",
            json_body={
                "attraction_id": attraction_id,
                "rating": rating,
                "comment": comment,
                "photos": photos or [],
            },
        )
        if error:
            return None, error
        return data.get("id") if isinstance(data, dict) else None, None

    # ------------------------------------------------------------------
    # Payments
    # ------------------------------------------------------------------
    def create_payment(
        self, attraction_id: int, amount: int, currency: str, payment_method: str
    ) -> Tuple[Optional[Dict[str, Any]], Error]:
        return self._request(
            "POST",
            "/payments/",
            json_body={
                "attraction_id": attraction_id,
                "amount": amount,
                "currency": currency,
                "payment_method": payment_method,
            },
        )

    def get_payment(self, transaction_id: str) -> Tuple[Optional[Dict[str, Any]], Error]:
        return self._get_optional(f"/payments/{transaction_id}")

    def update_payment_status(self, transaction_id: str, status: str) -> Tuple[bool, Error]:
        _, error = self._request(
            "PUT", f"/payments/{transaction_id}/status", json_body={"status": status}
        )
        return error is None, error

    # ------------------------------------------------------------------
    # Profile
    # ------------------------------------------------------------------
    def get_user_profile(self) -> Tuple[Optional[Dict[str, Any]], Error]:
        return self._get_optional("/users/me")

    def update_user_profile(
        self, username: str, email: str, preferred_language: str
    ) -> Tuple[bool, Error]:
        _, error = self._request(
            "PUT",
            "/users/me",
            json_body={
                "username": username,
                "email": email,
                "preferred_language": preferred_language,
            },
        )
        return error is None, error
