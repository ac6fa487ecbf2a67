"""Product Pricing API client.

A thin wrapper around the REST API served by ``product_pricing_api``.
It uses the ``requests`` library and exposes one method per endpoint:

* :meth:`register` and :meth:`login` (the token returned by ``login``
  is remembered and sent on protected calls).
* :meth:`create_series`, :meth:`list_series`, :meth:`get_series`.
* :meth:`create_product`, :meth:`list_products`, :meth:`get_product`,
  :meth:`list_products_by_series`.

Every method returns a tuple ``(data, error)``.  On success ``error`` is
``None``; on failure ``data`` is ``None`` (or an empty list for
listings) and ``error`` is a dictionary with ``status_code`` and
``message``.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class PricingAPI:
    """Client for the product pricing API."""

    def __init__(
        self,
        *,
        base_url: str,
        token: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the server, e.g. ``http://localhost:8000``.
                The ``/api`` prefix is added by the client.
            token: Optional access token obtained earlier.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per‑request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.token = token
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, json_body: Any | None = None, auth: bool = False
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET`` or ``POST``).
            path: Path below ``/api`` (e.g. ``/products``).
            json_body: JSON body to send with the request.
            auth: Send the stored token in the ``Authorization`` header.
        Returns:
            A tuple ``(data, error)``.
        """
        url = f"{self.base_url}/api{path}"
        headers: Dict[str, str] = {}
        if auth and self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                json=json_body,
                headers=headers,
                timeout=self.timeout,
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
                except ValueError:
                    message = exc.response.text
                else:
                    if isinstance(err_json, dict):
                        message = err_json.get("detail") or err_json.get("message") or str(err_json)
                    else:
                        message = str(err_json)
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    def _list(self, path: str, *, auth: bool = False) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        data, error = self._request("GET", path, auth=auth)
        if error:
            return [], error
        if isinstance(data, list):
            return data, None
        return [], None

    # ------------------------------------------------------------------
    # Authentication
    # ------------------------------------------------------------------
    def register(self, username: str, password: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("POST", "/register", json_body={"username": username, "password": password})

    def login(self, username: str, password: str) -> Tuple[Optional[str], Optional[Error]]:
        """Log in and remember the returned token.

        Returns:
            A tuple ``(token, error)``.
        """
        data, error = self._request("POST", "/login", json_body={"username": username, "password": password})
        if error:
            return None, error
        self.token = (data or {}).get("token")
        return self.token, None

    # ------------------------------------------------------------------
    # Series
    # ------------------------------------------------------------------
    def create_series(self, name: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("POST", "/series", json_body={"name": name})

    def list_series(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._list("/series")

    def get_series(self, series_id: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", f"/series/{series_id}")

    # ------------------------------------------------------------------
    # Products
    # ------------------------------------------------------------------
    def create_product(self, series_id: str, **fields: Any) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Create a product in a series.

        ``fields`` uses the wire names (``sellingPrice``,
        ``purchasePrice``, ``capacity`` ...).
        """
        payload = dict(fields)
        payload["seriesId"] = series_id
        return self._request("POST", "/products", json_body=payload)

    def list_products(self, *, full: bool = False) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """List products.

        With ``full=True`` the protected listing (including cost fields)
        is requested with the stored token.
        """
        if full:
            return self._list("/products/full", auth=True)
        return self._list("/products")

    def get_product(self, product_id: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", f"/products/{product_id}")

    def list_products_by_series(self, series_id: str) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._list(f"/products/series/{series_id}")
