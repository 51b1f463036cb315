"""
Shared base for backend resource services
"""
from study_portal.core.api_client import current_client


class ResourceService:
    """A backend resource rooted at a fixed path

    Without an explicit client, each call uses the client of the active request
    so the signed-in user's token travels with it.
    """

    base_path = ''

    def __init__(self, client=None):
        self._client = client

    @property
    def client(self):
        return self._client or current_client()

    def path(self, *parts):
        return '/'.join([self.base_path.strip('/')] + [str(part).strip('/') for part in parts])
