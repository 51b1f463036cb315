"""
Core services shared by all portal components
"""
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address

from .api_client import ApiClient, ApiError, ApiResponse, current_client, init_http
from .forms import load_form
from .notifications import (
    api_failure,
    failure,
    notify_error,
    notify_info,
    notify_success,
    render_view,
    respond,
    validation_error,
)
from .pending import PendingFlowStore
from .session import admin_required, login_required

# Global state - shared across all components
# Pending sign-ups and password resets, keyed by an id kept in the session
pending_flows = PendingFlowStore()

# Rate limiter, bound to the app in create_app; limits come from RATELIMIT_* config
limiter = Limiter(key_func=get_remote_address)

__all__ = [
    'ApiClient',
    'ApiError',
    'ApiResponse',
    'current_client',
    'init_http',
    'load_form',
    'api_failure',
    'failure',
    'notify_error',
    'notify_info',
    'notify_success',
    'render_view',
    'respond',
    'validation_error',
    'PendingFlowStore',
    'pending_flows',
    'limiter',
    'admin_required',
    'login_required',
]
