"""
Admin statistics resource (/api/admin)
"""
from study_portal.models import AdminDashboardStats

from .base import ResourceService


class AdminService(ResourceService):
    base_path = 'admin'

    def get_stats(self):
        response = self.client.get(self.path('stats'))
        stats = AdminDashboardStats.model_validate(response.data) if response.success and response.data else None
        return response, stats
