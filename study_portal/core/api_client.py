"""
Backend REST client
Every backend endpoint answers with the envelope {success, message, data, statusCode}
"""
import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

import requests
from flask import current_app, session

logger = logging.getLogger(__name__)

HTTP_EXTENSION_KEY = 'portal_http'


@dataclass
class ApiResponse:
    """Unwrapped backend envelope"""
    success: bool
    message: str
    data: Any = None
    status_code: int = 200

    @classmethod
    def from_payload(cls, payload, status_code):
        if not isinstance(payload, dict):
            return cls(success=200 <= status_code < 300, message='', data=payload, status_code=status_code)
        return cls(
            success=bool(payload.get('success', 200 <= status_code < 300)),
            message=payload.get('message') or '',
            data=payload.get('data'),
            status_code=payload.get('statusCode') or status_code,
        )


class ApiError(Exception):
    """Raised when the backend answers with an error status or cannot be reached"""

    def __init__(self, message, status_code=None, payload=None, reachable=True):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.payload = payload or {}
        self.reachable = reachable

    def __str__(self):
        if self.status_code:
            return f'{self.message} (HTTP {self.status_code})'
        return self.message

    def backend_message(self, fallback):
        """The backend's own message, or fallback when it sent none"""
        if not self.reachable:
            return self.message
        return self.payload.get('message') or fallback

    @property
    def view_status(self):
        """Status to answer the browser with: client errors pass through, the rest is a bad gateway"""
        if self.status_code and 400 <= self.status_code < 500:
            return self.status_code
        return 503 if self.status_code == 503 else 502


class ApiClient:
    """Thin wrapper around a requests session bound to the backend base URL"""

    def __init__(self, base_url, http=None, token=None, timeout=10):
        self.base_url = base_url.rstrip('/')
        self.http = http or requests.Session()
        self.token = token
        self.timeout = timeout

    def url_for(self, path):
        return f"{self.base_url}/{path.lstrip('/')}"

    def _headers(self):
        headers = {'Accept': 'application/json'}
        if self.token:
            headers['Authorization'] = f'Bearer {self.token}'
        return headers

    @staticmethod
    def _clean_params(params):
        """Drop empty query parameters and trim string values"""
        if not params:
            return None
        cleaned = {}
        for key, value in params.items():
            if value is None:
                continue
            if isinstance(value, str):
                value = value.strip()
                if not value:
                    continue
            cleaned[key] = value
        return cleaned or None

    def request(self, method, path, params: Optional[Dict[str, Any]] = None, json=None) -> ApiResponse:
        """Send a request and unwrap the response envelope

        Raises ApiError for non-2xx answers and transport failures.
        """
        url = self.url_for(path)
        try:
            response = self.http.request(
                method,
                url,
                params=self._clean_params(params),
                json=json,
                headers=self._headers(),
                timeout=self.timeout,
            )
        except requests.exceptions.RequestException as e:
            logger.error(f"{method} {url} failed: {e}")
            raise ApiError('Unable to reach the server. Please try again later.',
                           status_code=503, reachable=False) from e

        payload = self._parse_body(response)

        if not 200 <= response.status_code < 300:
            message = payload.get('message') if isinstance(payload, dict) else None
            logger.warning(f"{method} {url} -> HTTP {response.status_code}: {message}")
            raise ApiError(
                message or f'Request failed with status {response.status_code}',
                status_code=response.status_code,
                payload=payload if isinstance(payload, dict) else None,
            )

        return ApiResponse.from_payload(payload, response.status_code)

    @staticmethod
    def _parse_body(response):
        if not response.content:
            return {}
        try:
            return response.json()
        except ValueError:
            return {}

    def get(self, path, params=None):
        return self.request('GET', path, params=params)

    def post(self, path, json=None, params=None):
        return self.request('POST', path, params=params, json=json)

    def put(self, path, json=None, params=None):
        return self.request('PUT', path, params=params, json=json)

    def patch(self, path, json=None, params=None):
        return self.request('PATCH', path, params=params, json=json)

    def delete(self, path, params=None):
        return self.request('DELETE', path, params=params)


def init_http(app, http=None):
    """Attach the shared requests session used for all backend calls"""
    app.extensions[HTTP_EXTENSION_KEY] = http or requests.Session()
    return app.extensions[HTTP_EXTENSION_KEY]


def current_client():
    """Build a client for the active request, carrying the session token if any"""
    return ApiClient(
        current_app.config['API_BASE_URL'],
        http=current_app.extensions.get(HTTP_EXTENSION_KEY),
        token=session.get('token'),
        timeout=current_app.config.get('API_TIMEOUT', 10),
    )
