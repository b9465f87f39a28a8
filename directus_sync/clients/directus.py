import json
from typing import Optional

import requests

from ..utils.logger import error


class DirectusError(Exception): pass

class ProductNotFoundError(DirectusError): pass

class DuplicateReferenceError(DirectusError): pass


class DirectusClient:
    """
    Thin REST client for a Directus items collection.

    Auth is either a static token or email/password, in which case the client
    logs in on first use and keeps the access token for its lifetime.
    Requests are sent once; failures are logged and re-raised to the caller.
    """

    def __init__(self, url: str, token: Optional[str] = None, email: Optional[str] = None,
                 password: Optional[str] = None, collection: str = "products",
                 session: Optional[requests.Session] = None, timeout: Optional[float] = None):
        self._base_url = url.rstrip("/")
        self._token = token
        self._email = email
        self._password = password
        self._collection = collection
        self._session = session or requests.Session()
        self._session.headers.update({"Content-Type": "application/json"})
        self._timeout = timeout

    # =========================================================
    # Transport
    # =========================================================

    def _items_url(self, pk: str | int | None = None) -> str:
        url = f"{self._base_url}/items/{self._collection}"
        return f"{url}/{pk}" if pk is not None else url

    def login(self) -> str:
        r = self._session.post(f"{self._base_url}/auth/login",
                               json={"email": self._email, "password": self._password},
                               timeout=self._timeout)
        r.raise_for_status()
        self._token = (r.json().get("data") or {}).get("access_token")
        if not self._token:
            raise DirectusError("Directus login returned no access token")
        return self._token

    def _auth_headers(self) -> dict:
        if not self._token and self._email:
            self.login()
        return {"Authorization": f"Bearer {self._token}"} if self._token else {}

    def _request(self, method: str, url: str, **kwargs):
        r = self._session.request(method, url, headers=self._auth_headers(),
                                  timeout=self._timeout, **kwargs)
        r.raise_for_status()
        if r.status_code == 204 or not r.content:
            return None
        return r.json().get("data")

    # =========================================================
    # Products
    # =========================================================

    def create_product(self, product_data: dict) -> dict:
        try:
            return self._request("POST", self._items_url(), json=product_data)
        except Exception as e:
            error(f"Error creating product in Directus: {e}")
            raise

    def update_product(self, medusa_product_id: str, product_data: dict) -> dict:
        try:
            item = self._single_by_reference(medusa_product_id)
            return self._request("PATCH", self._items_url(item["id"]), json=product_data)
        except Exception as e:
            error(f"Error updating product in Directus: {e}")
            raise

    def delete_product(self, medusa_product_id: str) -> None:
        try:
            item = self._single_by_reference(medusa_product_id)
            self._request("DELETE", self._items_url(item["id"]))
        except Exception as e:
            error(f"Error deleting product in Directus: {e}")
            raise

    def get_products_by_medusa_reference_id(self, medusa_product_id: str) -> list[dict]:
        params = {"filter": json.dumps({"medusa_reference_id": {"_eq": medusa_product_id}})}
        try:
            return self._request("GET", self._items_url(), params=params) or []
        except Exception as e:
            error(f"Error in finding product in Directus with same medusa reference ID: {e}")
            raise

    def get_product(self, pk: str | int) -> Optional[dict]:
        try:
            return self._request("GET", self._items_url(pk))
        except Exception as e:
            error(f"Error reading product {pk} from Directus: {e}")
            raise

    def _single_by_reference(self, medusa_product_id: str) -> dict:
        found = self.get_products_by_medusa_reference_id(medusa_product_id)
        if not found:
            raise ProductNotFoundError(f"No product found with medusa_reference_id: {medusa_product_id}")
        if len(found) > 1:
            ids = [p.get("id") for p in found]
            raise DuplicateReferenceError(
                f"{len(found)} products share medusa_reference_id {medusa_product_id}: {ids}"
            )
        return found[0]
