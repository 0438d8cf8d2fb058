"""
HTTP client for the remote users API.

Thin wrapper over a requests Session that returns a uniform
``ApiResponse(status, data, error)`` for every verb.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

import requests

import config

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """Raised when the users API cannot be reached or answers unusably."""
    
    def __init__(self, message: str, status: Optional[int] = None, detail: Any = None):
        self.message = message
        self.status = status
        self.detail = detail
        super().__init__(message)


@dataclass
class ApiResponse:
    """Result of an API call."""
    
    status: int
    data: Any = None
    error: Any = None
    
    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300 and self.error is None


class ApiClient:
    """Client for a JSON REST API rooted at ``base_url``."""
    
    def __init__(self, base_url: Optional[str] = None, api_key: Optional[str] = None,
                 timeout: Optional[float] = None, session: Optional[requests.Session] = None):
        self.base_url = (base_url or config.USERS_API_URL).rstrip("/")
        self.timeout = timeout if timeout is not None else config.USERS_API_TIMEOUT
        self.session = session or requests.Session()
        self.session.headers.update({"Content-type": "application/json"})
        api_key = api_key if api_key is not None else config.USERS_API_KEY
        if api_key:
            self.session.headers.update({"x-api-key": api_key})
    
    def url(self, path: str) -> str:
        if path.startswith(("http://", "https://")):
            return path
        return f"{self.base_url}/{path.lstrip('/')}"
    
    def get(self, path: str, params: Optional[Dict[str, Any]] = None) -> ApiResponse:
        """
        GET a resource.
        
        Raises:
            ApiError: If the request cannot be sent
        """
        try:
            response = self.session.get(self.url(path), params=params, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            logger.error(f"GET {path} failed: {e}")
            raise ApiError(f"Failed to connect to users API: {e}") from e
        return self._to_api_response(response)
    
    def post(self, path: str, data: Any) -> ApiResponse:
        return self._send("post", path, data)
    
    def put(self, path: str, data: Any) -> ApiResponse:
        return self._send("put", path, data)
    
    def delete(self, path: str) -> ApiResponse:
        return self._send("delete", path)
    
    def _send(self, method: str, path: str, data: Any = None) -> ApiResponse:
        # Write failures come back as a 500 response instead of raising
        try:
            response = self.session.request(
                method.upper(),
                self.url(path),
                json=data,
                timeout=self.timeout,
            )
        except requests.exceptions.RequestException as e:
            logger.error(f"{method.upper()} {path} failed: {e}")
            return ApiResponse(status=500, error=str(e) or "Unexpected error")
        return self._to_api_response(response)
    
    @staticmethod
    def _to_api_response(response: requests.Response) -> ApiResponse:
        body = None
        if response.content:
            try:
                body = response.json()
            except ValueError:
                body = response.text
        
        if response.ok:
            return ApiResponse(status=response.status_code, data=body)
        
        logger.warning(f"Users API answered {response.status_code} for {response.request.method} {response.url}")
        return ApiResponse(status=response.status_code, error=body or response.reason)
