"""Product inventory API client.

This module provides two layers for talking to the inventory API:

* :class:`ProductAPI` – a thin wrapper around the five HTTP routes
  under ``/api/product``.  It uses the ``requests`` library and never
  raises on HTTP failures; every method returns a ``(data, error)``
  tuple instead.
* :class:`ProductCatalog` – the list state a user interface keeps on
  top of the API: the loaded products, the last error message, local
  search and sort, and simple form validation.  A failed call sets a
  generic, per‑operation error message and leaves the previously
  loaded list untouched.

Search and sort happen locally and never trigger a request.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

PRODUCT_PATH = "/api/product"

# Sort keys accepted by :meth:`ProductCatalog.visible`.  Names sort
# ascending; quantities and prices sort largest first.
SORT_KEYS = ("name", "quantity", "price")

Error = Dict[str, Any]


class ProductAPI:
    """Client for the product endpoints."""

    def __init__(
        self,
        *,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL for the API, e.g. ``http://localhost:8000``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helper
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PUT``, ``DELETE``).
            path: Path relative to :attr:`base_url`.
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)``. ``data`` contains the parsed JSON
            response on success (``None`` for empty bodies) and ``error``
            is ``None``. On failure, ``data`` is ``None`` and ``error`` is
            a dictionary with keys ``status_code`` and ``message``.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                json=json_body,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None and exc.response.content:
                try:
                    err_json = exc.response.json()
                    message = str(err_json.get("detail") or err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    # ------------------------------------------------------------------
    # Product operations
    # ------------------------------------------------------------------
    def list_products(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        data, error = self._request("GET", PRODUCT_PATH)
        if error:
            return [], error
        return data if isinstance(data, list) else [], None

    def get_product(self, product_id: int) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", f"{PRODUCT_PATH}/{product_id}")

    def create_product(self, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("POST", PRODUCT_PATH, json_body=payload)

    def update_product(
        self, product_id: int, payload: Dict[str, Any]
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("PUT", f"{PRODUCT_PATH}/{product_id}", json_body=payload)

    def delete_product(self, product_id: int) -> Tuple[bool, Optional[Error]]:
        """Delete a product.

        Returns:
            A tuple ``(success, error)``.
        """
        _, error = self._request("DELETE", f"{PRODUCT_PATH}/{product_id}")
        if error:
            return False, error
        return True, None


def validate_form(payload: Dict[str, Any]) -> Optional[str]:
    """Check a create/update payload before it is sent.

    Missing and ``None`` amounts are left for the server to reject.
    Returns the first problem as a user facing message, or ``None``.
    """
    if not str(payload.get("name") or "").strip():
        return "Product name is required"
    if (payload.get("quantity") or 0) < 0:
        return "Quantity cannot be negative"
    if (payload.get("price") or 0) < 0:
        return "Price cannot be negative"
    return None


class ProductCatalog:
    """Locally held product list backed by a :class:`ProductAPI`.

    Mutating operations reload the list on success.  On failure
    :attr:`error` is set and :attr:`products` keeps its previous value.
    """

    def __init__(self, api: ProductAPI) -> None:
        self.api = api
        self.products: List[Dict[str, Any]] = []
        self.error: Optional[str] = None

    def refresh(self) -> bool:
        products, error = self.api.list_products()
        if error:
            self.error = "Failed to load products. Please try again."
            return False
        self.products = products
        self.error = None
        return True

    def add(self, payload: Dict[str, Any]) -> bool:
        return self._submit(payload, None)

    def edit(self, product_id: int, payload: Dict[str, Any]) -> bool:
        return self._submit(payload, product_id)

    def remove(self, product_id: int) -> bool:
        _, error = self.api.delete_product(product_id)
        if error:
            self.error = "Failed to delete product. Please try again."
            return False
        self.error = None
        return self.refresh()

    def dismiss_error(self) -> None:
        self.error = None

    def _submit(self, payload: Dict[str, Any], product_id: Optional[int]) -> bool:
        problem = validate_form(payload)
        if problem:
            self.error = problem
            return False
        if product_id is None:
            _, error = self.api.create_product(payload)
            failure = "Failed to create product. Please try again."
        else:
            _, error = self.api.update_product(product_id, payload)
            failure = "Failed to update product. Please try again."
        if error:
            self.error = failure
            return False
        self.error = None
        return self.refresh()

    # ------------------------------------------------------------------
    # Local views
    # ------------------------------------------------------------------
    def visible(self, search: str = "", sort_by: str = "name") -> List[Dict[str, Any]]:
        """Filter by case‑insensitive name substring, then sort.

        Unknown ``sort_by`` values keep the loaded order.
        """
        needle = search.lower()
        rows = [p for p in self.products if needle in p["name"].lower()]
        if sort_by == "name":
            rows.sort(key=lambda p: p["name"].lower())
        elif sort_by in ("quantity", "price"):
            rows.sort(key=lambda p: p[sort_by], reverse=True)
        return rows

    def count(self) -> int:
        return len(self.products)

    def total_value(self) -> float:
        return sum(p["quantity"] * p["price"] for p in self.products)
