from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Optional

import requests

from ..core.exceptions import ApiError, AuthenticationError, AuthorizationError

_logger = logging.getLogger(__name__)

TokenProvider = Callable[[], Optional[str]]


@dataclass
class ApiConfig:
    base_url: str
    timeout: float = 10.0


def _server_message(response: requests.Response) -> Optional[str]:
    try:
        body = response.json()
    except ValueError:
        return None
    if isinstance(body, dict):
        return body.get("message") or body.get("error")
    return None


class ApiClient:
    """Singleton-like client for the REST backend.

    One `requests.Session` is shared; the bearer token is looked up per call
    through `token_provider` (the Flask session inside requests, the service
    token in CLI jobs).
    """

    _instance: Optional["ApiClient"] = None

    def __init__(
        self,
        config: ApiConfig,
        *,
        token_provider: Optional[TokenProvider] = None,
        session: Optional[requests.Session] = None,
    ):
        self._config = config
        self._token_provider = token_provider or (lambda: None)
        self._session = session or requests.Session()
        self._session.headers.update({"Accept": "application/json"})

    @classmethod
    def get_instance(cls, config: ApiConfig, **kwargs) -> "ApiClient":
        """Process-wide client.

        The first call's `config` and kwargs win; later calls get the same
        client and their arguments are ignored until `_instance` is reset.
        """
        if cls._instance is None:
            cls._instance = ApiClient(config, **kwargs)
        return cls._instance

    def _url(self, path: str) -> str:
        return f"{self._config.base_url.rstrip('/')}/{path.lstrip('/')}"

    def request(
        self,
        method: str,
        path: str,
        *,
        json: Any = None,
        params: Optional[dict] = None,
        data: Optional[dict] = None,
        files: Optional[dict] = None,
    ) -> dict:
        headers = {}
        token = self._token_provider()
        if token:
            headers["Authorization"] = f"Bearer {token}"

        try:
            response = self._session.request(
                method,
                self._url(path),
                json=json,
                params=params,
                data=data,
                files=files,
                headers=headers,
                timeout=self._config.timeout,
            )
        except requests.RequestException as e:
            _logger.error("API %s %s failed: %s", method, path, e)
            raise ApiError("Could not reach the server. Please try again.") from e

        if response.status_code >= 400:
            message = _server_message(response) or f"Request failed ({response.status_code})"
            _logger.warning("API %s %s -> %s: %s", method, path, response.status_code, message)
            if response.status_code == 401:
                raise AuthenticationError(message)
            if response.status_code == 403:
                raise AuthorizationError(message)
            raise ApiError(message, status_code=response.status_code)

        if not response.content:
            return {}
        try:
            body = response.json()
        except ValueError:
            raise ApiError("Invalid response from server", status_code=response.status_code)
        return body if isinstance(body, dict) else {"data": body}

    def get(self, path: str, *, params: Optional[dict] = None) -> dict:
        return self.request("GET", path, params=params)

    def post(self, path: str, json: Any = None, **kwargs) -> dict:
        return self.request("POST", path, json=json, **kwargs)

    def put(self, path: str, json: Any = None) -> dict:
        return self.request("PUT", path, json=json)

    def patch(self, path: str, json: Any = None) -> dict:
        return self.request("PATCH", path, json=json)

    def delete(self, path: str) -> dict:
        return self.request("DELETE", path)
