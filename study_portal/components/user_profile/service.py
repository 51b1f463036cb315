"""
User Profile Service
"""
import logging

from study_portal.components import SIGNED_IN, register_component
from study_portal.core import ApiError, failure, notify_success
from study_portal.core.session import update_current_user
from study_portal.services import UserService

logger = logging.getLogger(__name__)


def role_badge(role):
    return 'role-badge-admin' if role == 'ADMIN' else 'role-badge-user'


def profile_view(profile):
    if profile is None:
        return {'profile': None, 'roleBadges': {}}
    return {
        'profile': profile.to_view(),
        'roleBadges': {role: role_badge(role) for role in profile.roles},
    }


@register_component('user_profile', access=SIGNED_IN)
class UserProfileService:
    """Service for the profile screen"""

    def __init__(self, users=None):
        self.users = users or UserService()

    def get_profile(self):
        try:
            response, profile = self.users.get_profile()
        except ApiError as e:
            logger.error(f"Error loading profile: {e}")
            return failure('Failed to load profile', e.view_status, **profile_view(None))
        if profile is None:
            return failure(response.message or 'Failed to load profile', 400, **profile_view(None))
        return profile_view(profile)

    def update_profile(self, form):
        payload = {'username': form.username}
        if form.mobile_number:
            payload['mobileNumber'] = form.mobile_number

        try:
            response, profile = self.users.update_profile(payload)
        except ApiError as e:
            logger.error(f"Error updating profile: {e}")
            return failure(e.backend_message('Failed to update profile'), e.view_status)
        if not response.success:
            return failure(response.message or 'Failed to update profile', 400)

        notify_success('Profile updated successfully')
        if profile is not None:
            update_current_user(username=profile.username)
        return profile_view(profile)

    def change_password(self, form):
        payload = {'currentPassword': form.current_password, 'newPassword': form.new_password}
        try:
            response, _ = self.users.update_profile(payload)
        except ApiError as e:
            logger.error(f"Error changing password: {e}")
            return failure(e.backend_message('Failed to change password'), e.view_status)
        if not response.success:
            return failure(response.message or 'Failed to change password', 400)

        notify_success('Password changed successfully')
        return {'passwordChanged': True}
