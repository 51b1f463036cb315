"""
Auth Component
Sign-in with password and OTP, sign-up, Google sign-in and password reset
"""
from .routes import auth_bp, init_auth
from .service import AuthFlowService

__all__ = ['auth_bp', 'init_auth', 'AuthFlowService']
