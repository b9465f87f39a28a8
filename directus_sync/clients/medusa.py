from typing import Optional

import requests

from ..utils.logger import error

PRODUCT_FIELDS = "*variants,*variants.prices,+metadata"


class MedusaClient:
    """Medusa admin API, authenticated with a secret API key."""

    def __init__(self, url: str, api_key: Optional[str] = None,
                 session: Optional[requests.Session] = None, timeout: Optional[float] = None):
        self._base_url = url.rstrip("/")
        self._session = session or requests.Session()
        self._session.headers.update({"Content-Type": "application/json"})
        if api_key:
            # secret keys go as the basic-auth username with an empty password
            self._session.auth = (api_key, "")
        self._timeout = timeout

    def _product_url(self, pid: str) -> str:
        return f"{self._base_url}/admin/products/{pid}"

    def retrieve_product(self, pid: str) -> dict:
        r = self._session.get(self._product_url(pid), params={"fields": PRODUCT_FIELDS},
                              timeout=self._timeout)
        r.raise_for_status()
        return r.json().get("product") or {}

    def update_product(self, pid: str, data: dict) -> dict:
        try:
            r = self._session.post(self._product_url(pid), json=data, timeout=self._timeout)
            r.raise_for_status()
        except Exception as e:
            error(f"Error updating product {pid} in Medusa: {e}")
            raise
        return r.json().get("product") or {}
