"""
HTTP transport for the exchange API: one JSON POST per command, no retries.
"""
import logging
from typing import Any

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry


class RequestHandler:
    def __init__(self, base_url: str, timeout: float | None = None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = requests.Session()
        # Exactly one attempt per call; failures surface to the dispatcher.
        self.retry = Retry(total=0, read=False, redirect=False, raise_on_status=False)
        self.adapter = HTTPAdapter(max_retries=self.retry)
        self.session.mount("https://", self.adapter)
        self.session.mount("http://", self.adapter)

    def auth_headers(self, token: str) -> dict:
        return {"Authorization": f"Bearer {token}"}

    def request_headers(self, token: str | None = None) -> dict:
        headers = {"Content-Type": "application/json"}
        if token:
            headers.update(self.auth_headers(token))
        return headers

    def post_json(self, path: str, token: str | None = None, json: Any = None) -> requests.Response:
        """
        POST ``json`` to base_url + path.
        path: command path with its leading slash, e.g. "/Accounts"
        returns the raw response; status and body are classified by the caller
        """
        url = f"{self.base_url}{path}"
        logging.debug(f"POST {url}")
        return self.session.post(url, headers=self.request_headers(token), json=json, timeout=self.timeout)

    def close(self):
        self.session.close()
