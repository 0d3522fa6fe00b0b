"""
HTTP client for the category backend.

Thin wrapper around a requests.Session exposing the four verbs the admin
panel uses. Every method returns the parsed JSON body; failures raise
ApiError with the server's ``message`` attached when the body carries one.
"""
import logging

import requests

from constants import API_BASE_URL, API_TOKEN, REQUEST_TIMEOUT
from errors import ApiError


class CategoryApiClient:
    """Client for the /category REST endpoints"""

    def __init__(self, base_url=API_BASE_URL, timeout=REQUEST_TIMEOUT,
                 token=API_TOKEN, session=None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({"Accept": "application/json"})
        if token:
            self.session.headers["Authorization"] = f"Bearer {token}"

    def _url(self, path):
        return f"{self.base_url}/{path.lstrip('/')}"

    def request(self, method, path, json=None):
        url = self._url(path)
        logging.debug(f"[API] {method.upper()} {url}")
        try:
            response = self.session.request(method, url, json=json, timeout=self.timeout)
        except requests.RequestException as e:
            raise ApiError(f"{method.upper()} {path} failed: {e}") from e

        body = _parse_body(response)
        if not response.ok:
            message = body.get("message") if isinstance(body, dict) else None
            raise ApiError(
                f"{method.upper()} {path} returned HTTP {response.status_code}",
                status_code=response.status_code,
                message=message,
            )
        return body

    def get(self, path):
        return self.request("get", path)

    def post(self, path, json=None):
        return self.request("post", path, json=json)

    def put(self, path, json=None):
        return self.request("put", path, json=json)

    def delete(self, path):
        return self.request("delete", path)

    def close(self):
        self.session.close()


def _parse_body(response):
    if not response.content:
        return {}
    try:
        return response.json()
    except ValueError:
        logging.warning(f"[API] Non-JSON response from {response.url}")
        return {}
