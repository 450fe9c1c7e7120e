"""Customer API client.

A thin wrapper around the Customer API's HTTP surface built on the
``requests`` library.  Every operation returns a ``(data, error)`` tuple:
on success ``error`` is ``None``; on failure ``data`` is ``None`` (or an
empty list / ``False``) and ``error`` is a dictionary with the keys
``status_code`` and ``message``.  Network problems never raise.

* :meth:`CustomerAPIClient.list_customers` – list all customers.
* :meth:`CustomerAPIClient.get_customer` – fetch one customer by id.
* :meth:`CustomerAPIClient.add_customer` – create a customer.
* :meth:`CustomerAPIClient.update_customer` – overwrite a customer.
* :meth:`CustomerAPIClient.delete_customer` – remove a customer.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class CustomerAPIClient:
    """Client for the ``/customer`` resource of the Customer API."""

    def __init__(
        self,
        *,
        base_url: str,
        api_prefix: str = "/api",
        timeout: float = 15,
        session: Optional[requests.Session] = None,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the server, e.g. ``http://localhost:8000``.
            api_prefix: Prefix the server mounts its routes under.  Must
                match the server's ``API_PREFIX`` setting.
            timeout: Timeout in seconds applied to every request.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
        """
        self.base_url = base_url.rstrip("/")
        self.resource_path = f"{api_prefix.rstrip('/')}/customer"
        self.timeout = timeout
        self.session = session or requests.Session()

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request and decode the JSON response.

        Returns:
            A tuple ``(data, error)``.  ``data`` is ``None`` for empty
            response bodies (e.g. ``204 No Content``).
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
            return None, self._http_error(exc)
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    @staticmethod
    def _http_error(exc: requests.HTTPError) -> Error:
        response = exc.response
        status = response.status_code if response is not None else None
        message = ""
        if response is not None:
            try:
                body = response.json()
            except ValueError:
                message = response.text
            else:
                if isinstance(body, dict):
                    message = body.get("detail") or str(body)
                else:
                    message = str(body)
        if not message:
            message = str(exc)
        logger.error("API request failed (%s): %s", status, message)
        return {"status_code": status, "message": message}

    @staticmethod
    def _body(first_name: Optional[str], last_name: Optional[str], revenue: float, customer_id: int = 0) -> Dict[str, Any]:
        return {"id": customer_id, "firstName": first_name, "lastName": last_name, "revenue": revenue}

    # ------------------------------------------------------------------
    # Customer operations
    # ------------------------------------------------------------------
    def list_customers(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        data, error = self._request("GET", self.resource_path)
        if error:
            return [], error
        return data if isinstance(data, list) else [], None

    def get_customer(self, customer_id: int) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Retrieve one customer.  An unknown id yields a 404 error."""
        return self._request("GET", f"{self.resource_path}/{customer_id}")

    def add_customer(
        self, first_name: Optional[str], last_name: Optional[str], revenue: float = 0
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("POST", self.resource_path, json_body=self._body(first_name, last_name, revenue))

    def update_customer(
        self, customer_id: int, first_name: Optional[str], last_name: Optional[str], revenue: float = 0
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        body = self._body(first_name, last_name, revenue, customer_id=customer_id)
        return self._request("PUT", self.resource_path, json_body=body)

    def delete_customer(self, customer_id: int) -> Tuple[bool, Optional[Error]]:
        """Delete a customer.

        Returns:
            ``(True, None)`` when the server acknowledged the request.
            The server also acknowledges ids it does not know.
        """
        _, error = self._request("DELETE", f"{self.resource_path}/{customer_id}")
        if error:
            return False, error
        return True, None
