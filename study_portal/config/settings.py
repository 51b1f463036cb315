"""
Portal configuration settings
"""
import os
from datetime import timedelta


class PortalConfig:
    """Centralized configuration for the portal"""

    # Flask settings
    SECRET_KEY = os.environ.get('SECRET_KEY', 'your-secret-key-here-change-in-production')
    PERMANENT_SESSION_LIFETIME = timedelta(hours=8)
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SAMESITE = 'Lax'

    # Rate limiting
    RATELIMIT_ENABLED = True
    RATELIMIT_STORAGE_URI = os.environ.get('RATELIMIT_STORAGE_URI', 'memory://')
    RATELIMIT_DEFAULT = "100 per minute"
    RATELIMIT_OTP = "5 per minute"

    # Backend REST API
    API_BASE_URL = os.environ.get('API_BASE_URL', 'http://localhost:8080/api')
    API_TIMEOUT = float(os.environ.get('API_TIMEOUT', '10'))

    # Google Identity Services client used for "Sign in with Google"
    GOOGLE_CLIENT_ID = os.environ.get('GOOGLE_CLIENT_ID', '')

    # Sign-in / sign-up flows
    OTP_RESEND_COOLDOWN = 60          # seconds before an OTP may be resent
    PENDING_FLOW_TTL = 15 * 60        # seconds a pending sign-up or reset survives

    # UI settings
    DASHBOARD_PAGE_SIZE = 12
    MAX_PAGE_SIZE = 100
    CATALOG_DESCRIPTION_LIMIT = 120
    DESCRIPTION_PREVIEW_LIMIT = 200
    TRAINER_BIO_PREVIEW_LIMIT = 150

    COURSE_DIFFICULTIES = ['BEGINNER', 'INTERMEDIATE', 'ADVANCED']
    COURSE_LANGUAGES = ['ENGLISH', 'HINDI', 'TELUGU']
    COURSE_SORT_OPTIONS = ['latest', 'oldest', 'title-asc', 'title-desc']

    # Server
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
    HOST = os.environ.get('PORTAL_HOST', '0.0.0.0')
    PORT = int(os.environ.get('PORTAL_PORT', '4200'))


class TestingConfig(PortalConfig):
    """Configuration used by the test-suite"""

    TESTING = True
    SECRET_KEY = 'testing-secret'
    RATELIMIT_ENABLED = False
    API_BASE_URL = 'http://backend.test/api'
    GOOGLE_CLIENT_ID = 'test-client-id.apps.googleusercontent.com'


CONFIGS = {
    'default': PortalConfig,
    'testing': TestingConfig,
}


def get_config(name=None):
    """Resolve a configuration class by name (falls back to PORTAL_CONFIG, then default)"""
    name = name or os.environ.get('PORTAL_CONFIG', 'default')
    return CONFIGS.get(name, PortalConfig)
