"""Vehicle Catalog API client.

A thin wrapper around the ``/api/v1/vehicles`` routes built on the
``requests`` library.  It exposes one method per catalog operation:

* :meth:`list_vehicles` – list the catalog, optionally filtered by year, make or model.
* :meth:`get_vehicle` – fetch a single vehicle by its identifier.
* :meth:`create_vehicle` – add a vehicle.
* :meth:`update_vehicle` – change some fields of an existing vehicle.
* :meth:`delete_vehicle` – remove a vehicle.

Every method returns a ``(data, error)`` tuple.  On success ``error``
is ``None``; on failure ``data`` is empty and ``error`` is a dictionary
with the keys ``status_code``, ``message`` and ``kind`` (the error kind
reported by the server, e.g. ``IdConflict``).  Network problems are
logged and reported the same way instead of being raised, so callers
such as scripts can handle every outcome in one place.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

ApiError = Dict[str, Any]


class VehicleCatalogAPI:
    """Client for interacting with the vehicle catalog API."""

    def __init__(
        self,
        *,
        base_url: str,
        api_prefix: str = "/api/v1",
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the server, e.g. ``http://localhost:8000``.
            api_prefix: Path prefix of the versioned API.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per-request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/") + api_prefix
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helper
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, params: Dict[str, Any] | None = None,
        json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[ApiError]]:
        """Perform an HTTP request to the API.

        Returns:
            A tuple ``(data, error)``. ``data`` contains the parsed JSON
            response on success (``None`` for empty bodies) and
            ``error`` is ``None``.  On failure ``data`` is ``None``.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                params=params,
                json=json_body,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            return None, self._http_error(exc)
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc), "kind": None}

    @staticmethod
    def _http_error(exc: requests.HTTPError) -> ApiError:
        response = exc.response
        status = response.status_code if response is not None else None
        message = ""
        kind = None
        if response is not None:
            try:
                err_json = response.json()
            except ValueError:
                message = response.text
            else:
                if isinstance(err_json, dict):
                    message = str(err_json.get("detail") or err_json)
                    kind = err_json.get("kind")
                else:
                    message = str(err_json)
        if not message:
            message = str(exc)
        logger.error("API request failed (%s): %s", status, message)
        return {"status_code": status, "message": message, "kind": kind}

    # ------------------------------------------------------------------
    # Vehicle operations
    # ------------------------------------------------------------------
    def list_vehicles(
        self,
        *,
        year: Optional[int] = None,
        make: Optional[str] = None,
        model: Optional[str] = None,
    ) -> Tuple[List[Dict[str, Any]], Optional[ApiError]]:
        """Retrieve the catalog.

        Filters that are ``None`` are not sent.  Returns
        ``(vehicles, error)``; ``vehicles`` is empty on failure.
        """
        params = {
            key: value
            for key, value in (("year", year), ("make", make), ("model", model))
            if value is not None
        }
        data, error = self._request("GET", "/vehicles/", params=params or None)
        if error:
            return [], error
        return data or [], None

    def get_vehicle(self, vehicle_id: int) -> Tuple[Optional[Dict[str, Any]], Optional[ApiError]]:
        return self._request("GET", f"/vehicles/{vehicle_id}")

    def create_vehicle(self, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[ApiError]]:
        """Create a vehicle from ``payload`` (``id``, ``year``, ``make``, ``model``)."""
        return self._request("POST", "/vehicles/", json_body=payload)

    def update_vehicle(self, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[ApiError]]:
        """Update the vehicle identified by ``payload["id"]``.

        Only the keys present in ``payload`` are changed on the server.
        """
        return self._request("PUT", "/vehicles/", json_body=payload)

    def delete_vehicle(self, vehicle_id: int) -> Tuple[bool, Optional[ApiError]]:
        _, error = self._request("DELETE", f"/vehicles/{vehicle_id}")
        if error:
            return False, error
        return True, None
