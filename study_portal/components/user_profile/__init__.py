"""
User Profile Component
"""
from .routes import init_user_profile, user_profile_bp
from .service import UserProfileService

__all__ = ['user_profile_bp', 'init_user_profile', 'UserProfileService']
