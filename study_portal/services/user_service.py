"""
User profile resource (/api/user)
"""
from study_portal.models import UserProfile

from .base import ResourceService


class UserService(ResourceService):
    base_path = 'user'

    def get_profile(self):
        response = self.client.get(self.path('profile'))
        return response, _profile_or_none(response)

    def update_profile(self, payload):
        """Username / mobile number, or current + new password"""
        response = self.client.put(self.path('profile'), json=payload)
        return response, _profile_or_none(response)


def _profile_or_none(response):
    return UserProfile.model_validate(response.data) if response.success and response.data else None
