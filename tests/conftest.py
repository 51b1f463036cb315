import base64
import json
import time
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

import pytest

from study_portal.core import pending_flows
from study_portal.portal_app import create_app

BASE_URL = 'http://backend.test/api'


def make_token(exp_offset=3600, **claims):
    """Unsigned JWT-shaped token; the portal only reads its payload"""
    def segment(data):
        raw = json.dumps(data).encode()
        return base64.urlsafe_b64encode(raw).decode().rstrip('=')

    payload = {'sub': 'user@example.com', 'exp': int(time.time()) + exp_offset}
    payload.update(claims)
    return f"{segment({'alg': 'HS256', 'typ': 'JWT'})}.{segment(payload)}.signature"


def envelope(data=None, message='OK', success=True, status=200):
    return {'success': success, 'message': message, 'data': data, 'statusCode': status}


class FakeResponse:
    def __init__(self, status_code=200, payload=None):
        self.status_code = status_code
        self._payload = payload
        self.content = b'' if payload is None else json.dumps(payload).encode()

    def json(self):
        return self._payload


@dataclass
class Call:
    method: str
    path: str
    params: Optional[Dict[str, Any]] = None
    json: Any = None
    headers: Dict[str, str] = field(default_factory=dict)


class FakeBackend:
    """Stands in for requests.Session, answering (method, path) with canned envelopes"""

    def __init__(self, base_url=BASE_URL):
        self.base_url = base_url
        self.routes = {}
        self.calls = []

    def ok(self, method, path, data=None, message='OK'):
        self.routes[(method, path)] = FakeResponse(200, envelope(data, message))

    def fail(self, method, path, status=400, message='Bad request'):
        self.routes[(method, path)] = FakeResponse(status, envelope(None, message, success=False, status=status))

    def refuse(self, method, path, message='Rejected'):
        """HTTP 200 whose envelope reports success false"""
        self.routes[(method, path)] = FakeResponse(200, envelope(None, message, success=False))

    def raise_on(self, method, path, exc):
        self.routes[(method, path)] = exc

    def request(self, method, url, params=None, json=None, headers=None, timeout=None):
        path = url[len(self.base_url):]
        self.calls.append(Call(method, path, params, json, dict(headers or {})))
        answer = self.routes.get((method, path))
        if answer is None:
            return FakeResponse(404, envelope(None, f'No route for {method} {path}', success=False, status=404))
        if isinstance(answer, Exception):
            raise answer
        return answer

    def called(self, method, path):
        return [call for call in self.calls if call.method == method and call.path == path]


@pytest.fixture
def backend():
    return FakeBackend()


@pytest.fixture
def app(backend):
    app = create_app('testing', http=backend)
    yield app
    pending_flows._entries.clear()


@pytest.fixture
def client(app):
    return app.test_client()


def user_payload(roles=None, **fields):
    user = {
        'id': 'u1',
        'email': 'asha@example.com',
        'username': 'asha',
        'roles': roles or ['USER'],
        'mobileNumber': '9876543210',
    }
    user.update(fields)
    return user


@pytest.fixture
def login(client):
    """Put a signed-in user into the test client's session"""
    def _login(roles=None, token=None):
        with client.session_transaction() as sess:
            sess['token'] = token or make_token()
            sess['user'] = user_payload(roles)
        return client
    return _login


def notification_messages(response, category=None):
    return [
        n['message'] for n in response.get_json()['notifications']
        if category is None or n['category'] == category
    ]
