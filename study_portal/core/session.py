"""
Browser session auth state and route guards
"""
import base64
import json
import logging
import time
from functools import wraps

from flask import jsonify, session

logger = logging.getLogger(__name__)

ADMIN_ROLE = 'ADMIN'


def store_login(token, user, remember=True):
    """Keep the issued token and user in the signed session cookie"""
    session.permanent = remember
    session['token'] = token
    session['user'] = user or {}


def logout():
    """Forget the token, the user and any half-finished auth flow"""
    for key in ('token', 'user', 'signin', 'signup', 'password_reset', 'otp_login'):
        session.pop(key, None)


def get_token():
    return session.get('token')


def get_current_user():
    return session.get('user')


def update_current_user(**fields):
    user = dict(session.get('user') or {})
    user.update(fields)
    session['user'] = user
    return user


def decode_token_payload(token):
    """Decode a JWT payload without verifying it (the backend verifies signatures)"""
    parts = token.split('.')
    if len(parts) < 2:
        raise ValueError('Malformed token')
    segment = parts[1]
    segment += '=' * (-len(segment) % 4)
    payload = json.loads(base64.urlsafe_b64decode(segment.encode()))
    if not isinstance(payload, dict):
        raise ValueError('Malformed token payload')
    return payload


def is_authenticated():
    """True while a well-formed, unexpired token is stored; clears the session otherwise"""
    token = get_token()
    if not token:
        return False
    try:
        payload = decode_token_payload(token)
    except (ValueError, UnicodeDecodeError) as e:
        logger.info(f"Discarding malformed session token: {e}")
        logout()
        return False

    exp = payload.get('exp')
    if exp is not None and (not isinstance(exp, (int, float)) or exp < time.time()):
        logger.info("Session token expired or carries a bad expiry, logging out")
        logout()
        return False
    return True


def is_admin():
    if not is_authenticated():
        return False
    user = get_current_user() or {}
    return ADMIN_ROLE in (user.get('roles') or [])


def _denied(message, status_code, redirect_to):
    return jsonify({'error': message, 'redirect': redirect_to}), status_code


def login_required(view):
    """Guard for pages that need a signed-in user"""
    @wraps(view)
    def wrapper(*args, **kwargs):
        if not is_authenticated():
            return _denied('Please sign in to continue', 401, '/signin')
        return view(*args, **kwargs)
    return wrapper


def admin_required(view):
    """Guard for the admin back office"""
    @wraps(view)
    def wrapper(*args, **kwargs):
        if not is_authenticated():
            return _denied('Please sign in to continue', 401, '/signin')
        if not is_admin():
            return _denied('Admin access required', 403, '/dashboard')
        return view(*args, **kwargs)
    return wrapper
