from __future__ import annotations

import logging
from typing import Any, Optional
from urllib.parse import quote, urlencode

import requests

from sfm.domain.errors import ApiError, ResponseParseError, TransportError

log = logging.getLogger("sfm.http")


class RestClient:
    """
    Thin JSON-over-HTTP helper shared by every screen.

    Paths are given as segments: ``client.get_json("venta", "cliente", 7)``.
    Each segment is percent-encoded on its own, so identifiers can never
    escape their path position.
    """

    def __init__(self, base_url: str, session: Optional[requests.Session] = None, timeout: float = 10.0):
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    def url(self, *segments: object, params: Optional[dict] = None) -> str:
        path = "/".join(quote(str(s), safe="") for s in segments)
        url = f"{self.base_url}/{path}" if path else self.base_url
        if params:
            url += "?" + urlencode(params)
        return url

    def request(self, method: str, *segments: object, payload: Any = None, params: Optional[dict] = None) -> requests.Response:
        url = self.url(*segments, params=params)
        kwargs: dict[str, Any] = {"timeout": self.timeout}
        if payload is not None:
            kwargs["json"] = payload

        try:
            r = self.session.request(method, url, **kwargs)
        except requests.RequestException as e:
            log.warning("http_transport_failed method=%s url=%s error=%s", method, url, e)
            raise TransportError(f"{method} {url} failed: {e}") from e

        if not r.ok:
            log.warning("http_request method=%s url=%s status=%s", method, url, r.status_code)
            raise ApiError(r.status_code, r.text)

        log.info("http_request method=%s url=%s status=%s", method, url, r.status_code)
        return r

    def get_json(self, *segments: object, params: Optional[dict] = None) -> Any:
        r = self.request("GET", *segments, params=params)
        try:
            return r.json()
        except ValueError as e:
            log.warning("http_bad_json url=%s error=%s", r.url, e)
            raise ResponseParseError(f"Response from {r.url} is not valid JSON.") from e

    def send_json(self, method: str, *segments: object, payload: Any) -> requests.Response:
        return self.request(method, *segments, payload=payload)

    def get_list(self, *segments: object, params: Optional[dict] = None) -> list[dict]:
        """GET a collection. Anything but a JSON array of objects is a parse error."""
        data = self.get_json(*segments, params=params)
        if not isinstance(data, list) or not all(isinstance(it, dict) for it in data):
            log.warning("http_bad_shape url=%s type=%s", self.url(*segments, params=params), type(data).__name__)
            raise ResponseParseError(f"Expected a JSON array of objects. Raw: {str(data)[:200]}")
        return data
